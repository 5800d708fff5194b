"""Platform entity argument types.

Entity arguments accept a mention (``<@123>``, ``<@&123>``, ``<#123>``), a
raw snowflake id, or for messages a message link, and resolve it through the
context's ``EntityResolver``. Identifiers that do not resolve fail the
conversion.
"""

import re
from typing import TYPE_CHECKING, List, Optional, Pattern

from infrastructure.commands.arguments.base import (
    ArgumentType,
    ConversionError,
    ConversionResult,
    ConversionSuccess,
    missing_argument,
)

if TYPE_CHECKING:
    from infrastructure.commands.context import CommandContext

SNOWFLAKE = re.compile(r"\d{1,20}")
USER_MENTION = re.compile(r"<@!?(\d{1,20})>")
ROLE_MENTION = re.compile(r"<@&(\d{1,20})>")
CHANNEL_MENTION = re.compile(r"<#(\d{1,20})>")
MESSAGE_LINK = re.compile(
    r"https://(?:(?:ptb|canary)\.)?discord(?:app)?\.com/channels/(\d{1,20}|@me)/(\d{1,20})/(\d{1,20})"
)


def parse_snowflake(token: str, mention: Optional[Pattern[str]] = None) -> Optional[str]:
    """Extract an id from a mention or a raw snowflake token.

    Args:
        token: Raw token typed by the user
        mention: Mention pattern with the id in its first group

    Returns:
        The id as a string, or None when the token is neither form
    """
    if mention is not None:
        match = mention.fullmatch(token)
        if match:
            return match.group(1)
    if SNOWFLAKE.fullmatch(token):
        return token
    return None


class UserArg(ArgumentType):
    """A user, by mention or id."""

    default_name = "User"

    async def convert(self, current, remaining, context: "CommandContext") -> ConversionResult:
        if current is None:
            return missing_argument(self)
        user_id = parse_snowflake(current, USER_MENTION)
        if user_id is None:
            return ConversionError(f"Invalid user: {current}")
        user = await context.resolver.fetch_user(user_id)
        if user is None:
            return ConversionError(f"Could not resolve user: {current}")
        return ConversionSuccess(user)

    def generate_examples(self, context) -> List[str]:
        return [f"<@{context.user_id}>"] if context.user_id else []


class RoleArg(ArgumentType):
    """A role of the current guild, by mention or id."""

    default_name = "Role"

    async def convert(self, current, remaining, context: "CommandContext") -> ConversionResult:
        if current is None:
            return missing_argument(self)
        if context.guild_id is None:
            return ConversionError("Roles can only be used inside a guild")
        role_id = parse_snowflake(current, ROLE_MENTION)
        if role_id is None:
            return ConversionError(f"Invalid role: {current}")
        role = await context.resolver.fetch_role(context.guild_id, role_id)
        if role is None:
            return ConversionError(f"Could not resolve role: {current}")
        return ConversionSuccess(role)


class ChannelArg(ArgumentType):
    """A channel, by mention or id."""

    default_name = "Channel"

    async def convert(self, current, remaining, context: "CommandContext") -> ConversionResult:
        if current is None:
            return missing_argument(self)
        channel_id = parse_snowflake(current, CHANNEL_MENTION)
        if channel_id is None:
            return ConversionError(f"Invalid channel: {current}")
        channel = await context.resolver.fetch_channel(channel_id)
        if channel is None:
            return ConversionError(f"Could not resolve channel: {current}")
        return ConversionSuccess(channel)

    def generate_examples(self, context) -> List[str]:
        return [f"<#{context.channel_id}>"] if context.channel_id else []


class MessageArg(ArgumentType):
    """A message, by link or by id within the invoking channel."""

    default_name = "Message"

    async def convert(self, current, remaining, context: "CommandContext") -> ConversionResult:
        if current is None:
            return missing_argument(self)

        link = MESSAGE_LINK.fullmatch(current)
        if link:
            channel_id, message_id = link.group(2), link.group(3)
        elif SNOWFLAKE.fullmatch(current) and context.channel_id:
            channel_id, message_id = context.channel_id, current
        else:
            return ConversionError(f"Invalid message: {current}")

        message = await context.resolver.fetch_message(channel_id, message_id)
        if message is None:
            return ConversionError(f"Could not resolve message: {current}")
        return ConversionSuccess(message)


class AttachmentArg(ArgumentType):
    """A file attached to the invoking message.

    Reads from ``context.attachments`` instead of the token stream, so it
    consumes no tokens.
    """

    default_name = "File"

    def __init__(self, name: Optional[str] = None, description: str = "", index: int = 0):
        super().__init__(name, description)
        self.index = index

    async def convert(self, current, remaining, context: "CommandContext") -> ConversionResult:
        if len(context.attachments) <= self.index:
            return ConversionError("No attachment provided")
        return ConversionSuccess(context.attachments[self.index], consumed=0)
