"""Alternation combinator: accept one of two argument types."""

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, List, Optional, Sequence, TypeVar, Union

from infrastructure.commands.arguments.base import (
    ArgumentType,
    ConsumptionType,
    ConversionError,
    ConversionResult,
    ConversionSuccess,
)

if TYPE_CHECKING:
    from infrastructure.commands.context import CommandContext

L = TypeVar("L")
R = TypeVar("R")

EITHER_ERROR = "Could not match input with either expected argument."
EXAMPLE_PLACEHOLDER = "<Example>"


@dataclass(frozen=True)
class Left(Generic[L]):
    """Value produced by the left branch."""

    value: L


@dataclass(frozen=True)
class Right(Generic[R]):
    """Value produced by the right branch."""

    value: R


Either = Union[Left[L], Right[R]]


class EitherArg(ArgumentType[Either]):
    """Accept the left argument type or the right one. Left is tried first.

    Both failing yields a single generic error; the branch messages are kept
    in ``ConversionError.details`` for logging.

    Example:
        target = EitherArg(UserArg(), WordArg())
        # or: UserArg() | WordArg()
    """

    consumption_type = ConsumptionType.MULTIPLE

    def __init__(
        self,
        left: ArgumentType,
        right: ArgumentType,
        name: Optional[str] = None,
        description: str = "",
    ):
        self.left = left
        self.right = right
        super().__init__(name or f"{left.name} | {right.name}", description)

    async def convert(
        self,
        current: Optional[str],
        remaining: Sequence[str],
        context: "CommandContext",
    ) -> ConversionResult:
        left_result = await self.left.convert(current, remaining, context)
        if isinstance(left_result, ConversionSuccess):
            return ConversionSuccess(Left(left_result.value), left_result.consumed)

        right_result = await self.right.convert(current, remaining, context)
        if isinstance(right_result, ConversionSuccess):
            return ConversionSuccess(Right(right_result.value), right_result.consumed)

        return ConversionError(
            EITHER_ERROR,
            details=(left_result.message, right_result.message),
        )

    def generate_examples(self, context: "CommandContext") -> List[str]:
        left_examples = self.left.generate_examples(context)
        right_examples = self.right.generate_examples(context)

        left_example = random.choice(left_examples) if left_examples else EXAMPLE_PLACEHOLDER
        right_example = random.choice(right_examples) if right_examples else EXAMPLE_PLACEHOLDER

        return [f"{left_example} | {right_example}"]
