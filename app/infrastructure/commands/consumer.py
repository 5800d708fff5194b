"""Greedy left-to-right token consumption."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List, Optional, Sequence

from infrastructure.commands.arguments.base import ArgumentType, ConversionError

if TYPE_CHECKING:
    from infrastructure.commands.context import CommandContext


@dataclass
class ConsumptionResult:
    """Outcome of running one execution's slots over the input.

    Attributes:
        values: Converted values, one per converted slot
        consumed: Tokens consumed before finishing or failing
        converted: Number of slots that converted successfully
        error: First conversion error, None when every slot converted
    """

    values: List[Any] = field(default_factory=list)
    consumed: int = 0
    converted: int = 0
    error: Optional[ConversionError] = None

    @property
    def is_success(self) -> bool:
        """True when every slot converted."""
        return self.error is None


class TokenConsumer:
    """Convert tokens slot by slot, advancing a cursor.

    Each slot receives the token at the cursor and every token from the
    cursor onward, and the cursor moves by the number of tokens the slot
    reports as consumed. The first failing slot aborts the attempt. Slots are
    awaited strictly in order.
    """

    async def consume(
        self,
        arguments: Sequence[ArgumentType],
        tokens: Sequence[str],
        context: "CommandContext",
    ) -> ConsumptionResult:
        """Run ``arguments`` over ``tokens``.

        Args:
            arguments: Argument slots of one execution
            tokens: Input tokens after the command name
            context: Invocation context

        Returns:
            ConsumptionResult describing values and progress

        Raises:
            ValueError: If an argument type reports consuming more tokens than
                were available (a broken argument implementation)
        """
        tokens = tuple(tokens)
        result = ConsumptionResult()

        for argument in arguments:
            remaining = tokens[result.consumed:]
            current = remaining[0] if remaining else None

            conversion = await argument.convert(current, remaining, context)
            if isinstance(conversion, ConversionError):
                result.error = conversion
                return result

            if conversion.consumed > len(remaining):
                raise ValueError(
                    f"{type(argument).__name__} consumed {conversion.consumed} "
                    f"tokens but only {len(remaining)} were available"
                )

            result.values.append(conversion.value)
            result.consumed += conversion.consumed
            result.converted += 1

        return result
