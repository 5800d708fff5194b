"""Application command schema payload models.

These models are the literal payload the platform's application command API
expects. Serialize with ``model_dump(by_alias=True, exclude_none=True)``.
"""

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class OptionKind(str, Enum):
    """External option types."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    USER = "user"
    ROLE = "role"
    CHANNEL = "channel"
    ATTACHMENT = "attachment"


class ContextMenuType(str, Enum):
    """Targets of a context-menu command."""

    USER = "user"
    MESSAGE = "message"


class OptionChoice(BaseModel):
    """One allowed literal of a restricted-choice option."""

    name: str
    value: str


class OptionSchema(BaseModel):
    """Descriptor for one command option.

    ``autocomplete`` is only set for kinds that support it; ``choices`` only
    for restricted-choice options.
    """

    name: str
    description: str
    kind: OptionKind
    required: bool = True
    autocomplete: Optional[bool] = None
    choices: Optional[List[OptionChoice]] = None


class ApplicationCommandSchema(BaseModel):
    """Named-option (slash) command descriptor."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    options: List[OptionSchema] = Field(default_factory=list)
    default_permission: Optional[str] = Field(default=None, alias="defaultPermission")


class ContextMenuSchema(BaseModel):
    """Context-menu command descriptor, keyed by display name."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    type: ContextMenuType
    default_permission: Optional[str] = Field(default=None, alias="defaultPermission")


CommandSchema = Union[ApplicationCommandSchema, ContextMenuSchema]
