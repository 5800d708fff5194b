"""Dispatch entry points for text messages and platform interactions."""

import inspect
from typing import Any, List, Mapping, Optional

from infrastructure.logging import bind_invocation_context, get_module_logger
from infrastructure.commands.arguments.wrappers import AutocompleteArg, find_wrapper
from infrastructure.commands.context import CommandContext
from infrastructure.commands.exceptions import (
    CommandNotFoundError,
    NoMatchingOverloadError,
)
from infrastructure.commands.registry import CommandRegistry
from infrastructure.commands.resolver import CommandResolver, Resolution

logger = get_module_logger()

GENERIC_FAILURE = "Something went wrong while running this command."


class CommandDispatcher:
    """Turn incoming messages and interactions into handler calls.

    Text messages go through prefix detection, whitespace tokenization and
    overload resolution; interactions carry named, already-typed option
    values and skip tokenization. Both end in the same handler contract.
    User mistakes (unknown command, bad arguments) are reported back to the
    invoking user; unexpected faults are logged and reported generically so
    that one broken invocation never stops the bot.

    Example:
        dispatcher = CommandDispatcher(registry, prefix="!")
        await dispatcher.handle_text("!remind 10m stretch", ctx)
    """

    def __init__(
        self,
        registry: CommandRegistry,
        resolver: Optional[CommandResolver] = None,
        prefix: Optional[str] = None,
    ):
        self.registry = registry
        self.resolver = resolver or CommandResolver(registry)
        if prefix is None:
            from infrastructure.services import get_settings

            prefix = get_settings().commands.prefix
        self.prefix = prefix

    def tokenize(self, text: str) -> List[str]:
        """Split text on runs of whitespace."""
        return text.split()

    async def handle_text(self, text: str, context: CommandContext) -> bool:
        """Handle a chat message.

        Args:
            text: Raw message content
            context: Invocation context; ``tokens`` is filled in here

        Returns:
            True if the message was a command invocation, False otherwise
        """
        if not text.startswith(self.prefix):
            return False

        tokens = self.tokenize(text[len(self.prefix):])
        if not tokens:
            return False

        name, arguments = tokens[0], tokens[1:]
        context.tokens = arguments

        with bind_invocation_context(
            correlation_id=context.correlation_id,
            user_id=context.user_id,
            channel_id=context.channel_id,
            guild_id=context.guild_id,
            command=name,
            source="text",
        ):
            try:
                resolution = await self.resolver.resolve(name, arguments, context)
            except (CommandNotFoundError, NoMatchingOverloadError) as e:
                await context.respond_error(str(e))
                return True
            except Exception:  # pylint: disable=broad-except
                logger.exception("command_resolution_failed", command=name)
                await context.respond_error(GENERIC_FAILURE)
                return True

            await self._invoke(resolution, context)
            return True

    async def handle_interaction(
        self,
        command_name: str,
        options: Mapping[str, Any],
        context: CommandContext,
    ) -> None:
        """Handle a slash or context-menu interaction.

        Args:
            command_name: Invoked command name
            options: Option values keyed by option name, already typed by
                the platform
            context: Invocation context
        """
        with bind_invocation_context(
            correlation_id=context.correlation_id,
            user_id=context.user_id,
            channel_id=context.channel_id,
            guild_id=context.guild_id,
            command=command_name,
            source="interaction",
        ):
            try:
                resolution = await self.resolver.resolve_options(
                    command_name, options, context
                )
            except (CommandNotFoundError, NoMatchingOverloadError) as e:
                await context.respond_error(str(e))
                return
            except Exception:  # pylint: disable=broad-except
                logger.exception("command_resolution_failed", command=command_name)
                await context.respond_error(GENERIC_FAILURE)
                return

            await self._invoke(resolution, context)

    async def handle_autocomplete(
        self,
        command_name: str,
        option_name: str,
        partial: str,
        context: CommandContext,
    ) -> List[Any]:
        """Collect suggestions for an autocomplete-enabled option.

        Returns:
            Suggestions from the option's ``suggest`` callable, or an empty
            list when the command or option is unknown, has no callable, or
            the callable fails
        """
        command = self.registry.get_command(command_name)
        if command is None:
            return []

        for execution in command.executions:
            for argument in execution.arguments:
                if argument.name.lower() != option_name.lower():
                    continue
                tagged = find_wrapper(argument, AutocompleteArg)
                if tagged is None or tagged.suggest is None:
                    continue
                try:
                    suggestions = tagged.suggest(context, partial)
                    if inspect.isawaitable(suggestions):
                        suggestions = await suggestions
                    return list(suggestions)
                except Exception:  # pylint: disable=broad-except
                    logger.exception(
                        "autocomplete_failed",
                        command=command.name,
                        option=option_name,
                    )
                    return []

        return []

    async def _invoke(self, resolution: Resolution, context: CommandContext) -> None:
        try:
            await self.resolver.invoke(resolution, context)
        except Exception:  # pylint: disable=broad-except
            logger.exception(
                "command_handler_failed",
                command=resolution.command.name,
                signature=resolution.execution.signature,
            )
            await context.respond_error(GENERIC_FAILURE)
            return
        logger.info(
            "command_executed",
            command=resolution.command.name,
            signature=resolution.execution.signature,
        )
