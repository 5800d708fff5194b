"""Push application command schemas to the platform.

Global commands are pushed in one batch first; guild commands are then
pushed to every guild the bot is in, one guild at a time. A rejected push for
one guild is logged and skipped so the remaining guilds still get their
commands.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from infrastructure.logging import get_module_logger
from infrastructure.commands.exceptions import RegistrationError
from infrastructure.commands.models import CommandScope
from infrastructure.commands.registry import CommandRegistry
from infrastructure.commands.schema.projector import SchemaProjector, to_payload

logger = get_module_logger()


@dataclass(frozen=True)
class GuildRef:
    """Guild identity as reported by the platform client."""

    id: str
    name: str = ""


class ApplicationCommandClient(Protocol):
    """Platform API used to publish application commands.

    Implementations raise ``RegistrationError`` when the platform rejects a
    push; any other exception is treated as a fault and propagates.
    """

    async def list_guilds(self) -> List[GuildRef]:
        """Guilds the bot is a member of."""
        ...  # pylint: disable=unnecessary-ellipsis

    async def overwrite_global_commands(self, payload: List[dict]) -> None:
        """Replace all global application commands."""
        ...  # pylint: disable=unnecessary-ellipsis

    async def overwrite_guild_commands(self, guild_id: str, payload: List[dict]) -> None:
        """Replace all application commands of one guild."""
        ...  # pylint: disable=unnecessary-ellipsis


@dataclass
class RegistrationReport:
    """Outcome of a registration run.

    Attributes:
        global_commands: Number of global schemas pushed
        guild_commands: Number of schemas pushed to each guild
        registered_guilds: Guild ids whose push succeeded
        failed_guilds: Guild ids whose push was rejected
    """

    global_commands: int = 0
    guild_commands: int = 0
    registered_guilds: List[str] = field(default_factory=list)
    failed_guilds: List[str] = field(default_factory=list)


class SchemaRegistrar:
    """Register a registry's application commands with the platform.

    Example:
        registrar = SchemaRegistrar(client, get_schema_projector())
        report = await registrar.register(registry)
    """

    def __init__(
        self,
        client: ApplicationCommandClient,
        projector: Optional[SchemaProjector] = None,
        enabled: Optional[bool] = None,
    ):
        self.client = client
        self.projector = projector or SchemaProjector()
        if enabled is None:
            from infrastructure.services import get_settings

            enabled = get_settings().commands.register_application_commands
        self.enabled = enabled

    async def register(self, registry: CommandRegistry) -> RegistrationReport:
        """Push global commands, then guild commands guild by guild.

        Nothing is pushed when registration is disabled; the returned report
        is then empty.

        Raises:
            RegistrationError: If the global batch is rejected
        """
        if not self.enabled:
            logger.info("application_command_registration_disabled")
            return RegistrationReport()

        commands = registry.list_commands()
        global_payload = to_payload(
            self.projector.project_commands(
                [c for c in commands if c.scope is CommandScope.GLOBAL]
            )
        )
        guild_payload = to_payload(
            self.projector.project_commands(
                [c for c in commands if c.scope is CommandScope.GUILD]
            )
        )

        report = RegistrationReport(
            global_commands=len(global_payload),
            guild_commands=len(guild_payload),
        )

        await self.client.overwrite_global_commands(global_payload)
        logger.info("global_commands_registered", count=len(global_payload))

        if not guild_payload:
            return report

        for guild in await self.client.list_guilds():
            try:
                await self.client.overwrite_guild_commands(guild.id, guild_payload)
            except RegistrationError as e:
                logger.warning(
                    "guild_registration_failed",
                    guild_id=guild.id,
                    guild_name=guild.name,
                    error=str(e),
                )
                report.failed_guilds.append(guild.id)
                continue
            report.registered_guilds.append(guild.id)
            logger.info(
                "guild_commands_registered",
                guild_id=guild.id,
                guild_name=guild.name,
                count=len(guild_payload),
            )

        return report
