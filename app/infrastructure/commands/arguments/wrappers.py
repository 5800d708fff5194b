"""Decorations that wrap another argument type.

A wrapper holds the inner argument and adds one behavior or tag. Chains are
queried with ``contains_type`` (is a decoration present anywhere in the
chain) and ``effective_type`` (the innermost undecorated type), which the
schema projector uses to build option descriptors.
"""

from typing import TYPE_CHECKING, Any, Callable, List, Optional, Sequence, Type

from infrastructure.commands.arguments.base import (
    ArgumentType,
    ConversionResult,
    ConversionSuccess,
)

if TYPE_CHECKING:
    from infrastructure.commands.context import CommandContext


class WrappedArgument(ArgumentType):
    """Base class for decorations; delegates everything to ``inner``."""

    def __init__(
        self,
        inner: ArgumentType,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ):
        self.inner = inner
        super().__init__(
            name or inner.name,
            inner.description if description is None else description,
        )
        self.consumption_type = inner.consumption_type

    async def convert(
        self,
        current: Optional[str],
        remaining: Sequence[str],
        context: "CommandContext",
    ) -> ConversionResult:
        return await self.inner.convert(current, remaining, context)

    def generate_examples(self, context: "CommandContext") -> List[str]:
        return self.inner.generate_examples(context)

    @property
    def effective_type(self) -> ArgumentType:
        return self.inner.effective_type

    def contains_type(self, kind: Type[ArgumentType]) -> bool:
        return isinstance(self, kind) or self.inner.contains_type(kind)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inner!r})"


class OptionalArg(WrappedArgument):
    """Turn a failed (or missing) conversion into a default value.

    The fallback consumes no tokens. ``default`` may be a callable taking the
    invocation context, evaluated only when the fallback is used.

    Example:
        count = IntegerArg("Count").optional(1)
        channel = ChannelArg().optional(lambda ctx: ctx.channel_id)
    """

    def __init__(
        self,
        inner: ArgumentType,
        default: Any = None,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ):
        super().__init__(inner, name=name, description=description)
        self.default = default

    def resolve_default(self, context: "CommandContext") -> Any:
        """Evaluate the configured default for this invocation."""
        if callable(self.default):
            return self.default(context)
        return self.default

    async def convert(
        self,
        current: Optional[str],
        remaining: Sequence[str],
        context: "CommandContext",
    ) -> ConversionResult:
        result = await self.inner.convert(current, remaining, context)
        if isinstance(result, ConversionSuccess):
            return result
        return ConversionSuccess(self.resolve_default(context), consumed=0)


class AutocompleteArg(WrappedArgument):
    """Mark an option as offering live suggestions.

    Conversion is unchanged. ``suggest`` is called by the dispatcher's
    autocomplete entry point with ``(context, partial_input)`` and returns the
    suggestions; serving them to the platform happens outside this package.
    """

    def __init__(
        self,
        inner: ArgumentType,
        suggest: Optional[Callable[..., Any]] = None,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ):
        super().__init__(inner, name=name, description=description)
        self.suggest = suggest


class DescribedArg(WrappedArgument):
    """Rename or redescribe an argument."""

    pass


def find_wrapper(argument: ArgumentType, kind: Type[ArgumentType]) -> Optional[ArgumentType]:
    """Return the outermost ``kind`` in the wrapper chain, or None."""
    current: Optional[ArgumentType] = argument
    while current is not None:
        if isinstance(current, kind):
            return current
        current = current.inner if isinstance(current, WrappedArgument) else None
    return None
