"""Command framework: typed argument conversion and command resolution.

This framework provides:
- Argument types and combinators that convert tokens into typed values
- CommandRegistry: Register commands and their overloads
- CommandResolver: Pick the overload that accepts an invocation
- CommandDispatcher: Text, interaction and autocomplete entry points
- SchemaProjector / SchemaRegistrar: Publish application command schemas

Example:
    from infrastructure.commands import (
        CommandRegistry, CommandDispatcher, DurationArg, EveryArg
    )

    registry = CommandRegistry("utility")

    @registry.command(
        name="remind",
        description="Remind yourself of something",
        args=[DurationArg(), EveryArg("Reminder")],
    )
    async def remind(ctx, duration, text):
        await ctx.respond(f"I'll remind you in {duration}: {text}")

    dispatcher = CommandDispatcher(registry)
    await dispatcher.handle_text("!remind 10m stretch", ctx)
"""

from infrastructure.commands.arguments import (
    ArgumentType,
    AttachmentArg,
    AutocompleteArg,
    BooleanArg,
    ChannelArg,
    ChoiceArg,
    CommandArg,
    ConsumptionType,
    ConversionError,
    ConversionResult,
    ConversionSuccess,
    DescribedArg,
    DoubleArg,
    DurationArg,
    Either,
    EitherArg,
    EveryArg,
    IntegerArg,
    Left,
    MessageArg,
    OptionalArg,
    Right,
    RoleArg,
    UserArg,
    WordArg,
    WrappedArgument,
)
from infrastructure.commands.models import Command, CommandScope, Execution
from infrastructure.commands.context import CommandContext, EntityResolver, ResponseChannel
from infrastructure.commands.exceptions import (
    CommandError,
    CommandNotFoundError,
    DuplicateCommandError,
    NoMatchingOverloadError,
    RegistrationError,
)
from infrastructure.commands.registry import CommandRegistry
from infrastructure.commands.consumer import ConsumptionResult, TokenConsumer
from infrastructure.commands.resolver import CommandResolver, Resolution
from infrastructure.commands.dispatcher import CommandDispatcher

__all__ = [
    # Arguments
    "ArgumentType",
    "AttachmentArg",
    "AutocompleteArg",
    "BooleanArg",
    "ChannelArg",
    "ChoiceArg",
    "CommandArg",
    "ConsumptionType",
    "ConversionError",
    "ConversionResult",
    "ConversionSuccess",
    "DescribedArg",
    "DoubleArg",
    "DurationArg",
    "Either",
    "EitherArg",
    "EveryArg",
    "IntegerArg",
    "Left",
    "MessageArg",
    "OptionalArg",
    "Right",
    "RoleArg",
    "UserArg",
    "WordArg",
    "WrappedArgument",
    # Models
    "Command",
    "CommandScope",
    "Execution",
    # Core
    "CommandContext",
    "EntityResolver",
    "ResponseChannel",
    "CommandRegistry",
    "TokenConsumer",
    "ConsumptionResult",
    "CommandResolver",
    "Resolution",
    "CommandDispatcher",
    # Errors
    "CommandError",
    "CommandNotFoundError",
    "DuplicateCommandError",
    "NoMatchingOverloadError",
    "RegistrationError",
]

# Schema imports are available but not exported by default. Import directly:
# from infrastructure.commands.schema import SchemaProjector, SchemaRegistrar
