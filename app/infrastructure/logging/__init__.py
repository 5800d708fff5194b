"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
for the bot using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_invocation_context(): Context manager for invocation-scoped logging
    - get_correlation_id(): Get current correlation ID from context

Example:
    from infrastructure.logging import (
        configure_logging,
        get_module_logger,
        bind_invocation_context,
    )

    # At startup
    configure_logging()

    # In a module
    logger = get_module_logger()
    logger.info("module_initialized")

    # Around a command invocation
    with bind_invocation_context(user_id="1234", command="ping"):
        logger.info("command_invoked")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_invocation_context,
    get_correlation_id,
)

__all__ = [
    # Setup
    "configure_logging",
    "get_module_logger",
    # Context
    "bind_invocation_context",
    "get_correlation_id",
]
