"""Shared fixtures for the whole test suite."""

import pytest

from infrastructure.commands.registry import CommandRegistry
from tests.factories.commands import (
    make_command,
    make_command_context,
    make_entity_resolver,
    make_execution,
)


@pytest.fixture
def command_factory():
    """Factory for Command instances (see tests.factories.commands.make_command)."""
    return make_command


@pytest.fixture
def execution_factory():
    """Factory for Execution instances."""
    return make_execution


@pytest.fixture
def entity_resolver_factory():
    """Factory for dictionary-backed entity resolvers."""
    return make_entity_resolver


@pytest.fixture
def command_context_factory():
    """Factory for CommandContext instances."""
    return make_command_context


@pytest.fixture
def command_registry_factory():
    """Factory for CommandRegistry instances.

    Returns:
        Callable that creates a CommandRegistry with a namespace
    """

    def _factory(namespace: str = "test"):
        return CommandRegistry(namespace)

    return _factory
