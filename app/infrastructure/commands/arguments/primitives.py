"""Built-in primitive argument types."""

import math
import re
from datetime import timedelta
from typing import TYPE_CHECKING, Any, List, Optional, Sequence

from infrastructure.commands.arguments.base import (
    ArgumentType,
    ConsumptionType,
    ConversionError,
    ConversionResult,
    ConversionSuccess,
    missing_argument,
)

if TYPE_CHECKING:
    from infrastructure.commands.context import CommandContext


class WordArg(ArgumentType[str]):
    """A single whitespace-delimited word."""

    default_name = "Word"

    async def convert(self, current, remaining, context) -> ConversionResult:
        if current is None:
            return missing_argument(self)
        return ConversionSuccess(current)

    def generate_examples(self, context) -> List[str]:
        return ["exampleWord", "123", "bob"]


class EveryArg(ArgumentType[str]):
    """All remaining tokens joined by single spaces."""

    default_name = "Text"
    consumption_type = ConsumptionType.MULTIPLE

    async def convert(self, current, remaining, context) -> ConversionResult:
        if current is None or not remaining:
            return missing_argument(self)
        return ConversionSuccess(" ".join(remaining), consumed=len(remaining))

    def generate_examples(self, context) -> List[str]:
        return ["A sample sentence."]


class IntegerArg(ArgumentType[int]):
    """A whole number."""

    default_name = "Integer"

    async def convert(self, current, remaining, context) -> ConversionResult:
        if current is None:
            return missing_argument(self)
        try:
            return ConversionSuccess(int(current))
        except ValueError:
            return ConversionError(f"Invalid integer: {current}")

    def generate_examples(self, context) -> List[str]:
        return ["0", "5", "42"]


class DoubleArg(ArgumentType[float]):
    """A finite floating-point number."""

    default_name = "Double"

    async def convert(self, current, remaining, context) -> ConversionResult:
        if current is None:
            return missing_argument(self)
        try:
            value = float(current)
        except ValueError:
            return ConversionError(f"Invalid number: {current}")
        if not math.isfinite(value):
            return ConversionError(f"Invalid number: {current}")
        return ConversionSuccess(value)

    def generate_examples(self, context) -> List[str]:
        return ["2.5", "0.75", "10"]


class BooleanArg(ArgumentType[bool]):
    """One of two literals, matched case-insensitively."""

    default_name = "Boolean"

    def __init__(
        self,
        name: Optional[str] = None,
        description: str = "",
        truthy: str = "true",
        falsy: str = "false",
    ):
        super().__init__(name, description)
        if truthy.lower() == falsy.lower():
            raise ValueError("truthy and falsy values must differ")
        self.truthy = truthy
        self.falsy = falsy

    async def convert(self, current, remaining, context) -> ConversionResult:
        if current is None:
            return missing_argument(self)
        lowered = current.lower()
        if lowered == self.truthy.lower():
            return ConversionSuccess(True)
        if lowered == self.falsy.lower():
            return ConversionSuccess(False)
        return ConversionError(f"Expected {self.truthy} or {self.falsy}, got: {current}")

    def generate_examples(self, context) -> List[str]:
        return [self.truthy, self.falsy]


_DURATION_UNITS = {
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
    "w": "weeks",
}
_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)([smhdw])")
_DURATION_FULL = re.compile(r"(?:\d+(?:\.\d+)?[smhdw])+")


class DurationArg(ArgumentType[timedelta]):
    """A positive duration such as ``10m``, ``2h`` or ``1h30m``.

    Units: s, m, h, d, w (case-insensitive).
    """

    default_name = "Duration"

    async def convert(self, current, remaining, context) -> ConversionResult:
        if current is None:
            return missing_argument(self)

        text = current.lower()
        if not _DURATION_FULL.fullmatch(text):
            return ConversionError(f"Invalid duration: {current}")

        duration = timedelta()
        try:
            for amount, unit in _DURATION_PART.findall(text):
                duration += timedelta(**{_DURATION_UNITS[unit]: float(amount)})
        except (OverflowError, ValueError):
            return ConversionError(f"Invalid duration: {current}")

        if duration <= timedelta():
            return ConversionError(f"Duration must be greater than zero: {current}")
        return ConversionSuccess(duration)

    def generate_examples(self, context) -> List[str]:
        return ["10m", "2h", "1d12h"]


class ChoiceArg(ArgumentType[Any]):
    """Restrict input to a fixed set of literal choices.

    A token matches a choice when it equals ``str(choice)``. Matching is exact
    by default; ``ignore_case=True`` compares case-insensitively. The
    configured choice object (not the raw token) is returned.

    Example:
        unit = ChoiceArg("Unit", "celsius", "fahrenheit")
        size = ChoiceArg("Size", 8, 16, 32)  # returns the int
    """

    default_name = "Choice"

    def __init__(
        self,
        name: Optional[str] = None,
        *choices: Any,
        description: str = "",
        ignore_case: bool = False,
    ):
        super().__init__(name, description)
        if not choices:
            raise ValueError("ChoiceArg requires at least one choice")
        self.choices = tuple(choices)
        self.ignore_case = ignore_case

    def _matches(self, token: str, choice: Any) -> bool:
        if self.ignore_case:
            return str(choice).lower() == token.lower()
        return str(choice) == token

    async def convert(self, current, remaining, context) -> ConversionResult:
        if current is None:
            return missing_argument(self)
        for choice in self.choices:
            if self._matches(current, choice):
                return ConversionSuccess(choice)
        options = ", ".join(str(c) for c in self.choices)
        return ConversionError(f"Invalid choice: {current}. Choose from: {options}")

    def generate_examples(self, context) -> List[str]:
        return [str(c) for c in self.choices]


class CommandArg(ArgumentType):
    """The name or alias of a registered command."""

    default_name = "Command"

    async def convert(
        self,
        current: Optional[str],
        remaining: Sequence[str],
        context: "CommandContext",
    ) -> ConversionResult:
        if current is None:
            return missing_argument(self)
        command = context.registry.get_command(current) if context.registry else None
        if command is None:
            return ConversionError(f"Couldn't find command: {current}")
        return ConversionSuccess(command)

    def generate_examples(self, context) -> List[str]:
        if context.registry is None:
            return ["help", "ping"]
        return [command.name for command in context.registry.list_commands()]
