"""Application command schema projection and registration."""

from infrastructure.commands.schema.models import (
    ApplicationCommandSchema,
    CommandSchema,
    ContextMenuSchema,
    ContextMenuType,
    OptionChoice,
    OptionKind,
    OptionSchema,
)
from infrastructure.commands.schema.projector import SchemaProjector, to_payload
from infrastructure.commands.schema.registration import (
    ApplicationCommandClient,
    GuildRef,
    RegistrationReport,
    SchemaRegistrar,
)

__all__ = [
    "ApplicationCommandSchema",
    "CommandSchema",
    "ContextMenuSchema",
    "ContextMenuType",
    "OptionChoice",
    "OptionKind",
    "OptionSchema",
    "SchemaProjector",
    "to_payload",
    "ApplicationCommandClient",
    "GuildRef",
    "RegistrationReport",
    "SchemaRegistrar",
]
