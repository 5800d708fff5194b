"""Argument conversion protocol.

Every argument type converts the next unconsumed token(s) of an invocation
into a typed value. Conversions report how many leading tokens they used and
never raise for bad input; they return a ``ConversionError`` instead.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    List,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypeVar,
    Union,
)

if TYPE_CHECKING:
    from infrastructure.commands.context import CommandContext
    from infrastructure.commands.arguments.either import EitherArg
    from infrastructure.commands.arguments.wrappers import (
        AutocompleteArg,
        DescribedArg,
        OptionalArg,
    )

T = TypeVar("T")


class ConsumptionType(Enum):
    """How many tokens a conversion may consume."""

    SINGLE = "single"
    MULTIPLE = "multiple"


@dataclass(frozen=True)
class ConversionSuccess(Generic[T]):
    """Successful conversion.

    Attributes:
        value: Converted value
        consumed: Number of leading tokens used (zero for fallbacks and
            types that read from elsewhere, such as attachments)
    """

    value: T
    consumed: int = 1

    def __post_init__(self):
        if self.consumed < 0:
            raise ValueError(f"consumed must be >= 0, got {self.consumed}")


@dataclass(frozen=True)
class ConversionError:
    """Failed conversion.

    Attributes:
        message: Human-readable message shown to the invoking user
        details: Underlying messages kept for logs (e.g. both branch errors of
            an alternation); never shown to users
    """

    message: str
    details: Tuple[str, ...] = ()


ConversionResult = Union[ConversionSuccess[T], ConversionError]


class ArgumentType(ABC, Generic[T]):
    """Base class for all argument types.

    Subclasses set ``consumption_type`` and implement ``convert``. The
    ``current`` token is ``None`` once the input is exhausted; ``remaining``
    always starts with ``current`` and must not be mutated.

    Example:
        class UpperArg(ArgumentType[str]):
            default_name = "Upper"

            async def convert(self, current, remaining, context):
                if current is None:
                    return ConversionError("Expected a word")
                return ConversionSuccess(current.upper())
    """

    default_name: str = "Argument"
    consumption_type: ConsumptionType = ConsumptionType.SINGLE

    def __init__(self, name: Optional[str] = None, description: str = ""):
        self.name = name if name else self.default_name
        self.description = description

    @abstractmethod
    async def convert(
        self,
        current: Optional[str],
        remaining: Sequence[str],
        context: "CommandContext",
    ) -> ConversionResult:
        """Convert the token(s) at the cursor.

        Args:
            current: Next unconsumed token, None when input is exhausted
            remaining: All unconsumed tokens, starting with ``current``
            context: Invocation context (registry, entity resolver, tokens)

        Returns:
            ConversionSuccess with the number of consumed tokens, or
            ConversionError describing why the input was rejected
        """
        raise NotImplementedError()

    def generate_examples(self, context: "CommandContext") -> List[str]:
        """Example inputs for documentation and help; may be empty."""
        return []

    @property
    def effective_type(self) -> "ArgumentType":
        """Innermost undecorated argument type."""
        return self

    def contains_type(self, kind: Type["ArgumentType"]) -> bool:
        """Check whether this argument or any wrapper around it is a ``kind``."""
        return isinstance(self, kind)

    def optional(self, default: Union[Any, Callable[["CommandContext"], Any]] = None) -> "OptionalArg":
        """Fall back to ``default`` instead of failing."""
        from infrastructure.commands.arguments.wrappers import OptionalArg

        return OptionalArg(self, default)

    def autocomplete(self, suggest: Optional[Callable[..., Any]] = None) -> "AutocompleteArg":
        """Advertise live suggestions for this option."""
        from infrastructure.commands.arguments.wrappers import AutocompleteArg

        return AutocompleteArg(self, suggest)

    def describe(self, name: Optional[str] = None, description: Optional[str] = None) -> "DescribedArg":
        """Rename or redescribe this argument without changing conversion."""
        from infrastructure.commands.arguments.wrappers import DescribedArg

        return DescribedArg(self, name=name, description=description)

    def __or__(self, other: "ArgumentType") -> "EitherArg":
        from infrastructure.commands.arguments.either import EitherArg

        return EitherArg(self, other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


def missing_argument(argument: ArgumentType) -> ConversionError:
    """Error used when a slot needs a token but the input is exhausted."""
    return ConversionError(f"Missing argument: {argument.name}")
