"""Custom exceptions for the command system.

Conversion failures are not exceptions: argument types return
``ConversionError`` values that flow back through the token consumer and
resolver. The exceptions below cover lookup failures, overload failures and
schema registration problems.
"""

from typing import Optional


class CommandError(Exception):
    """Base exception for all command-related errors.

    Example:
        try:
            await dispatcher.handle_text(text, ctx)
        except CommandError as e:
            logger.error("command_error", error=str(e))
    """

    pass


class CommandNotFoundError(CommandError):
    """Raised when no registered name or alias matches the invoked name.

    Example:
        >>> await resolver.resolve("nope", [], ctx)
        Traceback (most recent call last):
        ...
        CommandNotFoundError: Could not find command: nope
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Could not find command: {name}")


class NoMatchingOverloadError(CommandError):
    """Raised when every execution of a command failed to convert the input.

    Attributes:
        command: Name of the command that was found
        error: The most informative per-slot error message, taken from the
            execution that progressed furthest before failing
    """

    def __init__(self, command: str, error: str):
        self.command = command
        self.error = error
        super().__init__(error)


class DuplicateCommandError(CommandError):
    """Raised when a name or alias is already taken in the registry.

    Example:
        >>> registry.register(make_command("ping"))
        >>> registry.register(make_command("ping"))
        Traceback (most recent call last):
        ...
        DuplicateCommandError: 'ping' is already registered in default
    """

    pass


class RegistrationError(CommandError):
    """Raised by platform clients when an application command push is rejected.

    Attributes:
        guild_id: Guild the push targeted, None for the global batch
    """

    def __init__(self, message: str, guild_id: Optional[str] = None):
        self.guild_id = guild_id
        super().__init__(message)
