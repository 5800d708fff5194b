"""Command invocation context - platform agnostic."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Protocol
from uuid import uuid4

from infrastructure.logging import get_correlation_id, get_module_logger

if TYPE_CHECKING:
    from infrastructure.commands.registry import CommandRegistry

logger = get_module_logger()


class EntityResolver(Protocol):
    """Lookups used by entity argument types.

    Each method returns the platform object, or None when the id does not
    resolve. Transport failures should raise; they abort the invocation.
    """

    async def fetch_user(self, user_id: str) -> Optional[Any]:
        """Resolve a user by id."""
        ...  # pylint: disable=unnecessary-ellipsis

    async def fetch_role(self, guild_id: str, role_id: str) -> Optional[Any]:
        """Resolve a role of a guild by id."""
        ...  # pylint: disable=unnecessary-ellipsis

    async def fetch_channel(self, channel_id: str) -> Optional[Any]:
        """Resolve a channel by id."""
        ...  # pylint: disable=unnecessary-ellipsis

    async def fetch_message(self, channel_id: str, message_id: str) -> Optional[Any]:
        """Resolve a message of a channel by id."""
        ...  # pylint: disable=unnecessary-ellipsis


class ResponseChannel(Protocol):
    """Protocol for platform-specific response channels."""

    async def send_message(self, text: str, **kwargs) -> None:
        """Send message to the invoking channel."""
        ...  # pylint: disable=unnecessary-ellipsis

    async def send_ephemeral(self, text: str, **kwargs) -> None:
        """Send ephemeral message (visible only to the invoking user)."""
        ...  # pylint: disable=unnecessary-ellipsis


@dataclass
class CommandContext:
    """Platform-agnostic command invocation context.

    Attributes:
        platform: Platform name (discord, api)
        user_id: Platform ID of the invoking user
        channel_id: Platform ID of the channel the invocation came from
        guild_id: Platform ID of the guild, None for direct messages
        registry: Command registry, used by CommandArg lookups
        resolver: Entity lookups for user/role/channel/message arguments
        tokens: Raw tokens of the invocation, after the command name
        attachments: Files attached to the invoking message
        metadata: Platform-specific metadata (e.g. raw gateway payload)
        correlation_id: Invocation identifier used in logs; defaults to the
            id already bound to the logging context, else a new uuid4

    Example:
        async def ping(ctx: CommandContext):
            await ctx.respond("pong")
    """

    platform: str
    user_id: str
    channel_id: Optional[str] = None
    guild_id: Optional[str] = None
    registry: Optional["CommandRegistry"] = None
    resolver: Optional[EntityResolver] = None
    tokens: List[str] = field(default_factory=list)
    attachments: List[Any] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    correlation_id: Optional[str] = None

    # Injected by the platform adapter
    _responder: Optional[ResponseChannel] = field(default=None)

    def __post_init__(self):
        """Initialize defaults."""
        if self.metadata is None:
            self.metadata = {}
        if self.correlation_id is None:
            self.correlation_id = get_correlation_id() or str(uuid4())

    async def respond(self, text: str, **kwargs) -> None:
        """Send response message to the invoking channel.

        Args:
            text: Message text
            **kwargs: Platform-specific options
        """
        if self._responder is None:
            logger.warning("respond called without responder set", text=text)
            return
        await self._responder.send_message(text, **kwargs)

    async def respond_ephemeral(self, text: str, **kwargs) -> None:
        """Send ephemeral message (visible only to the invoking user).

        Args:
            text: Message text
            **kwargs: Platform-specific options
        """
        if self._responder is None:
            logger.warning("respond_ephemeral called without responder set", text=text)
            return
        await self._responder.send_ephemeral(text, **kwargs)

    async def respond_error(self, text: str, **kwargs) -> None:
        """Send an error message to the invoking user only."""
        await self.respond_ephemeral(text, **kwargs)

    def set_responder(self, responder: ResponseChannel) -> None:
        """Set the response channel."""
        self._responder = responder
