"""Commands feature settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class CommandsSettings(FeatureSettings):
    """Configuration for text command dispatch and application command schemas.

    Environment Variables:
        COMMAND_PREFIX: Prefix that marks a chat message as a text command
        NO_DESCRIPTION_PLACEHOLDER: Description used for commands and options
            declared without one (the platform rejects blank descriptions)
        REGISTER_APPLICATION_COMMANDS: Push slash/context-menu schemas on startup

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if message.startswith(settings.commands.prefix):
            ...
        ```
    """

    prefix: str = Field(
        default="!",
        alias="COMMAND_PREFIX",
        description="Prefix that marks a chat message as a text command",
    )
    no_description_placeholder: str = Field(
        default="<No Description>",
        alias="NO_DESCRIPTION_PLACEHOLDER",
        description="Fallback description for commands and options",
    )
    register_application_commands: bool = Field(
        default=True,
        alias="REGISTER_APPLICATION_COMMANDS",
        description="Push application command schemas to the platform",
    )

    @field_validator("prefix", mode="before")
    @classmethod
    def _validate_prefix(cls, v: object) -> object:
        """Reject prefixes that would collide with whitespace tokenization."""
        if isinstance(v, str):
            if not v:
                raise ValueError("COMMAND_PREFIX must not be empty")
            if any(ch.isspace() for ch in v):
                raise ValueError("COMMAND_PREFIX must not contain whitespace")
        return v

    @field_validator("no_description_placeholder", mode="before")
    @classmethod
    def _validate_placeholder(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            raise ValueError("NO_DESCRIPTION_PLACEHOLDER must not be blank")
        return v
