"""Command registry for registration and lookup."""

from dataclasses import replace
from typing import Callable, Dict, Iterable, List, Optional

from infrastructure.logging import get_module_logger
from infrastructure.commands.arguments.base import ArgumentType
from infrastructure.commands.exceptions import DuplicateCommandError
from infrastructure.commands.models import Command, CommandScope, Execution

logger = get_module_logger()


class CommandRegistry:
    """Registry mapping command names and aliases to commands.

    Lookups are case-insensitive and exact (no prefix or fuzzy matching).
    Commands are listed in registration order. Registration happens once at
    startup; the registry is read-only while commands are being dispatched.

    Attributes:
        namespace: Name of the registry, used in logs

    Example:
        registry = CommandRegistry("utility")

        @registry.command(name="remind", args=[DurationArg(), EveryArg("Reminder")])
        async def remind(ctx, duration, text):
            ...

        # A second declaration under the same name adds an overload
        @registry.command(name="remind", args=[EveryArg("Reminder")])
        async def remind_default(ctx, text):
            ...
    """

    def __init__(self, namespace: str = "default"):
        """Initialize registry.

        Args:
            namespace: Registry name for logging
        """
        self.namespace = namespace
        self._commands: Dict[str, Command] = {}
        self._lookup: Dict[str, str] = {}

    def register(self, command: Command) -> Command:
        """Register a fully built command.

        Args:
            command: Command to register

        Returns:
            The registered command

        Raises:
            DuplicateCommandError: If the name or an alias is already taken
        """
        self._check_available(command.names)
        self._commands[command.name] = command
        for key in command.names:
            self._lookup[key] = command.name
        logger.debug(
            "registered command",
            namespace=self.namespace,
            name=command.name,
            aliases=sorted(command.aliases),
            executions=len(command.executions),
        )
        return command

    def command(
        self,
        name: str,
        args: Optional[Iterable[ArgumentType]] = None,
        aliases: Optional[Iterable[str]] = None,
        category: str = "",
        description: str = "",
        required_permission: Optional[str] = None,
        scope: CommandScope = CommandScope.TEXT,
        display_name: Optional[str] = None,
    ) -> Callable:
        """Decorator to register a handler as a command execution.

        The first declaration of a name creates the command; later ones with
        the same name append overloads (tried in declaration order) and may
        add aliases. Metadata of the first declaration is kept.

        Args:
            name: Command name
            args: Argument slots, in order
            aliases: Alternative names
            category: Grouping for listings
            description: Human-readable description
            required_permission: Permission value passed through to the schema
            scope: TEXT, GLOBAL or GUILD
            display_name: Context-menu name

        Returns:
            Decorator function that registers the handler
        """

        def decorator(handler: Callable) -> Callable:
            execution = Execution(arguments=tuple(args or ()), handler=handler)
            existing = self.get_command(name)

            if existing is None or existing.name != name.lower():
                self.register(
                    Command(
                        name=name,
                        executions=(execution,),
                        aliases=frozenset(aliases or ()),
                        category=category,
                        description=description,
                        required_permission=required_permission,
                        scope=scope,
                        display_name=display_name,
                    )
                )
                return handler

            if scope is not existing.scope:
                raise ValueError(
                    f"Overload of '{existing.name}' declares scope {scope.value}, "
                    f"expected {existing.scope.value}"
                )

            new_aliases = frozenset(a.lower() for a in aliases or ()) - existing.aliases
            self._check_available(new_aliases)
            updated = existing.with_execution(execution)
            if new_aliases:
                updated = replace(updated, aliases=updated.aliases | new_aliases)
                for alias in new_aliases:
                    self._lookup[alias] = updated.name

            self._commands[updated.name] = updated
            logger.debug(
                "registered overload",
                namespace=self.namespace,
                name=updated.name,
                signature=execution.signature,
            )
            return handler

        return decorator

    def get_command(self, name: str) -> Optional[Command]:
        """Get command by name or alias, ignoring case.

        Args:
            name: Command name or alias

        Returns:
            Command object or None if not found
        """
        canonical = self._lookup.get(name.lower())
        if canonical is None:
            return None
        return self._commands[canonical]

    def list_commands(self) -> List[Command]:
        """Get all registered commands in registration order."""
        return list(self._commands.values())

    def __contains__(self, name: str) -> bool:
        return self.get_command(name) is not None

    def __len__(self) -> int:
        return len(self._commands)

    def _check_available(self, names: Iterable[str]) -> None:
        for key in names:
            if key in self._lookup:
                raise DuplicateCommandError(
                    f"'{key}' is already registered in {self.namespace}"
                )
