"""Feature-level fixtures for command framework tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from infrastructure.commands.consumer import TokenConsumer
from infrastructure.commands.registry import CommandRegistry
from infrastructure.commands.resolver import CommandResolver


@pytest.fixture
def mock_response_channel():
    """Mock ResponseChannel for CommandContext.

    Returns:
        MagicMock with async send_message and send_ephemeral methods
    """
    channel = MagicMock()
    channel.send_message = AsyncMock()
    channel.send_ephemeral = AsyncMock()
    return channel


@pytest.fixture
def ctx(command_context_factory, mock_response_channel):
    """Default invocation context with a mock responder and empty resolver."""
    return command_context_factory(responder=mock_response_channel)


@pytest.fixture
def registry():
    """Empty command registry."""
    return CommandRegistry("test")


@pytest.fixture
def token_consumer():
    """TokenConsumer instance."""
    return TokenConsumer()


@pytest.fixture
def resolver(registry):
    """CommandResolver bound to the ``registry`` fixture."""
    return CommandResolver(registry)
