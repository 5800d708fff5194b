"""Argument types and combinators.

Conversion protocol:
    ArgumentType, ConsumptionType, ConversionSuccess, ConversionError

Combinators:
    EitherArg (``a | b``), OptionalArg (``a.optional(default)``),
    AutocompleteArg (``a.autocomplete(suggest)``), DescribedArg, ChoiceArg

Built-in types:
    WordArg, EveryArg, IntegerArg, DoubleArg, BooleanArg, DurationArg,
    CommandArg, UserArg, RoleArg, ChannelArg, MessageArg, AttachmentArg
"""

from infrastructure.commands.arguments.base import (
    ArgumentType,
    ConsumptionType,
    ConversionError,
    ConversionResult,
    ConversionSuccess,
)
from infrastructure.commands.arguments.either import Either, EitherArg, Left, Right
from infrastructure.commands.arguments.wrappers import (
    AutocompleteArg,
    DescribedArg,
    OptionalArg,
    WrappedArgument,
)
from infrastructure.commands.arguments.primitives import (
    BooleanArg,
    ChoiceArg,
    CommandArg,
    DoubleArg,
    DurationArg,
    EveryArg,
    IntegerArg,
    WordArg,
)
from infrastructure.commands.arguments.entities import (
    AttachmentArg,
    ChannelArg,
    MessageArg,
    RoleArg,
    UserArg,
)

__all__ = [
    # Protocol
    "ArgumentType",
    "ConsumptionType",
    "ConversionError",
    "ConversionResult",
    "ConversionSuccess",
    # Combinators
    "Either",
    "EitherArg",
    "Left",
    "Right",
    "AutocompleteArg",
    "DescribedArg",
    "OptionalArg",
    "WrappedArgument",
    "ChoiceArg",
    # Primitives
    "BooleanArg",
    "CommandArg",
    "DoubleArg",
    "DurationArg",
    "EveryArg",
    "IntegerArg",
    "WordArg",
    # Entities
    "AttachmentArg",
    "ChannelArg",
    "MessageArg",
    "RoleArg",
    "UserArg",
]
