"""Invocation context binding for structured logging.

Binds invocation-scoped metadata (correlation id, invoking user, channel,
guild, command name) to every log entry emitted while a command is being
resolved and executed.

Usage:
    from infrastructure.logging import bind_invocation_context

    with bind_invocation_context(user_id="123", command="ping"):
        logger.info("command_invoked")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_invocation_context(
    correlation_id: Optional[str] = None,
    user_id: Optional[str] = None,
    channel_id: Optional[str] = None,
    guild_id: Optional[str] = None,
    command: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind invocation-scoped context to all logs within the context manager.

    Args:
        correlation_id: Unique invocation identifier. Auto-generated if not provided.
        user_id: Platform ID of the invoking user.
        channel_id: Platform ID of the channel the invocation came from.
        guild_id: Platform ID of the guild, None for direct messages.
        command: Command name token as typed by the user.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars for the block.
    """
    context: dict[str, Any] = {}

    context["correlation_id"] = correlation_id or str(uuid.uuid4())

    if user_id is not None:
        context["user_id"] = user_id

    if channel_id is not None:
        context["channel_id"] = channel_id

    if guild_id is not None:
        context["guild_id"] = guild_id

    if command is not None:
        context["command"] = command

    context.update(extra_context)

    tokens = structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        # Restores values bound by an enclosing invocation, if any
        structlog.contextvars.reset_contextvars(**tokens)


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context.

    Returns:
        The correlation ID if set, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")
