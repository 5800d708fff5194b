"""Command framework data models."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, FrozenSet, Optional, Tuple

from infrastructure.commands.arguments.base import ArgumentType


class CommandScope(Enum):
    """Where a command is exposed.

    TEXT commands are only reachable through prefixed chat messages. GLOBAL
    and GUILD commands are additionally projected to application command
    schemas, registered once for all guilds or per guild respectively.
    """

    TEXT = "text"
    GLOBAL = "global"
    GUILD = "guild"


@dataclass(frozen=True)
class Execution:
    """One overload of a command.

    Attributes:
        arguments: Argument slots in the order they consume input
        handler: Callable invoked as ``handler(ctx, *values)``; may be async

    Example:
        Execution(
            arguments=(DurationArg(), EveryArg("Reminder")),
            handler=remind,
        )
    """

    arguments: Tuple[ArgumentType, ...]
    handler: Callable[..., Any]

    @property
    def signature(self) -> str:
        """Human-readable slot list, e.g. ``(Duration, Word)``."""
        return "(" + ", ".join(arg.name for arg in self.arguments) + ")"


@dataclass(frozen=True)
class Command:
    """Command definition.

    Attributes:
        name: Canonical name, lower-cased
        executions: Overloads tried in declared order
        aliases: Alternative names, lower-cased
        category: Grouping used when listing commands
        description: Human-readable description
        required_permission: Opaque permission value passed through to the
            platform schema (e.g. a permission bitset string)
        scope: Where the command is exposed
        display_name: Name used for context-menu commands; defaults to name

    Example:
        Command(
            name="remind",
            executions=(Execution((DurationArg(), WordArg()), remind),),
            aliases=frozenset({"reminder"}),
            category="utility",
        )
    """

    name: str
    executions: Tuple[Execution, ...] = ()
    aliases: FrozenSet[str] = field(default_factory=frozenset)
    category: str = ""
    description: str = ""
    required_permission: Optional[str] = None
    scope: CommandScope = CommandScope.TEXT
    display_name: Optional[str] = None

    def __post_init__(self):
        """Normalize names to lower case."""
        if not self.name or not self.name.strip():
            raise ValueError("Command name must not be blank")
        if any(ch.isspace() for ch in self.name):
            raise ValueError(f"Command name must not contain whitespace: {self.name!r}")
        object.__setattr__(self, "name", self.name.lower())
        object.__setattr__(
            self, "aliases", frozenset(alias.lower() for alias in self.aliases)
        )

    @property
    def names(self) -> FrozenSet[str]:
        """Canonical name plus aliases."""
        return frozenset({self.name}) | self.aliases

    @property
    def app_name(self) -> str:
        """Name shown for context-menu commands."""
        return self.display_name or self.name

    @property
    def is_application_command(self) -> bool:
        """Whether the command is projected to the platform schema."""
        return self.scope is not CommandScope.TEXT

    def with_execution(self, execution: Execution) -> "Command":
        """Return a copy of this command with one more overload."""
        return replace(self, executions=self.executions + (execution,))
