"""Unit tests for CommandDispatcher."""

from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from infrastructure.commands.arguments import (
    DurationArg,
    EveryArg,
    IntegerArg,
    WordArg,
)
from infrastructure.commands.dispatcher import GENERIC_FAILURE, CommandDispatcher


@pytest.fixture
def dispatcher(registry):
    """Dispatcher with a ``!`` prefix over the ``registry`` fixture."""
    return CommandDispatcher(registry, prefix="!")


@pytest.mark.unit
class TestHandleText:
    """Tests for CommandDispatcher.handle_text."""

    @pytest.mark.asyncio
    async def test_runs_matching_command(self, registry, dispatcher, ctx):
        handler = AsyncMock()
        registry.command(name="remind", args=[DurationArg(), EveryArg("Reminder")])(
            handler
        )

        handled = await dispatcher.handle_text("!remind 10m stretch", ctx)

        assert handled is True
        assert ctx.tokens == ["10m", "stretch"]
        handler.assert_awaited_once_with(ctx, timedelta(minutes=10), "stretch")

    @pytest.mark.asyncio
    async def test_collapses_whitespace(self, registry, dispatcher, ctx):
        handler = MagicMock()
        registry.command(name="say", args=[WordArg(), WordArg()])(handler)

        await dispatcher.handle_text("!say   a \t b  ", ctx)

        handler.assert_called_once_with(ctx, "a", "b")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["hello", "", "!", "!   ", "?ping"])
    async def test_ignores_non_invocations(self, dispatcher, ctx, text):
        assert await dispatcher.handle_text(text, ctx) is False
        ctx._responder.send_ephemeral.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_command_reports_error(self, dispatcher, ctx):
        handled = await dispatcher.handle_text("!nope", ctx)

        assert handled is True
        ctx._responder.send_ephemeral.assert_awaited_once_with(
            "Could not find command: nope"
        )

    @pytest.mark.asyncio
    async def test_conversion_error_reports_best_message(
        self, registry, dispatcher, ctx
    ):
        handler = MagicMock()
        registry.command(name="roll", args=[IntegerArg()])(handler)

        await dispatcher.handle_text("!roll six", ctx)

        handler.assert_not_called()
        ctx._responder.send_ephemeral.assert_awaited_once_with("Invalid integer: six")

    @pytest.mark.asyncio
    async def test_handler_failure_is_contained(self, registry, dispatcher, ctx):
        registry.command(name="boom")(AsyncMock(side_effect=RuntimeError("kaboom")))

        handled = await dispatcher.handle_text("!boom", ctx)

        assert handled is True
        ctx._responder.send_ephemeral.assert_awaited_once_with(GENERIC_FAILURE)

    @pytest.mark.asyncio
    async def test_resolver_fault_is_contained(self, registry, ctx):
        resolver = MagicMock()
        resolver.resolve = AsyncMock(side_effect=RuntimeError("lookup down"))
        dispatcher = CommandDispatcher(registry, resolver=resolver, prefix="!")

        handled = await dispatcher.handle_text("!anything", ctx)

        assert handled is True
        ctx._responder.send_ephemeral.assert_awaited_once_with(GENERIC_FAILURE)

    @pytest.mark.asyncio
    async def test_out_of_range_duration_reports_conversion_error(
        self, registry, dispatcher, ctx
    ):
        handler = AsyncMock()
        registry.command(name="remind", args=[DurationArg(), EveryArg("Reminder")])(
            handler
        )

        await dispatcher.handle_text("!remind 99999999999w stretch", ctx)

        handler.assert_not_awaited()
        ctx._responder.send_ephemeral.assert_awaited_once_with(
            "Invalid duration: 99999999999w"
        )

    @pytest.mark.asyncio
    async def test_multi_character_prefix(self, registry, ctx):
        handler = MagicMock()
        registry.command(name="ping")(handler)
        dispatcher = CommandDispatcher(registry, prefix="bot.")

        assert await dispatcher.handle_text("bot.PING", ctx) is True
        handler.assert_called_once_with(ctx)


@pytest.mark.unit
class TestDispatcherSettings:
    """Tests for prefix configuration."""

    def test_prefix_defaults_to_settings(self, registry):
        settings = MagicMock()
        settings.commands.prefix = "$"

        with patch("infrastructure.services.get_settings", return_value=settings):
            dispatcher = CommandDispatcher(registry)

        assert dispatcher.prefix == "$"


@pytest.mark.unit
class TestHandleInteraction:
    """Tests for CommandDispatcher.handle_interaction."""

    @pytest.mark.asyncio
    async def test_runs_handler_with_option_values(self, registry, dispatcher, ctx):
        handler = AsyncMock()
        registry.command(
            name="roll", args=[IntegerArg("Sides"), IntegerArg("Count").optional(1)]
        )(handler)

        await dispatcher.handle_interaction("roll", {"sides": 20}, ctx)

        handler.assert_awaited_once_with(ctx, 20, 1)

    @pytest.mark.asyncio
    async def test_unknown_command_reports_error(self, dispatcher, ctx):
        await dispatcher.handle_interaction("nope", {}, ctx)

        ctx._responder.send_ephemeral.assert_awaited_once_with(
            "Could not find command: nope"
        )

    @pytest.mark.asyncio
    async def test_handler_failure_is_contained(self, registry, dispatcher, ctx):
        registry.command(name="boom")(MagicMock(side_effect=ValueError("bad")))

        await dispatcher.handle_interaction("boom", {}, ctx)

        ctx._responder.send_ephemeral.assert_awaited_once_with(GENERIC_FAILURE)

    @pytest.mark.asyncio
    async def test_failing_lazy_default_is_contained(self, registry, dispatcher, ctx):
        def broken_default(c):
            raise RuntimeError("lookup broke")

        handler = AsyncMock()
        registry.command(name="greet", args=[WordArg("Who").optional(broken_default)])(
            handler
        )

        await dispatcher.handle_interaction("greet", {}, ctx)

        handler.assert_not_awaited()
        ctx._responder.send_ephemeral.assert_awaited_once_with(GENERIC_FAILURE)


@pytest.mark.unit
class TestHandleAutocomplete:
    """Tests for CommandDispatcher.handle_autocomplete."""

    @pytest.mark.asyncio
    async def test_sync_suggest(self, registry, dispatcher, ctx):
        fruits = ["apple", "apricot", "banana"]
        registry.command(
            name="eat",
            args=[
                WordArg("Fruit").autocomplete(
                    lambda c, partial: [f for f in fruits if f.startswith(partial)]
                )
            ],
        )(MagicMock())

        suggestions = await dispatcher.handle_autocomplete("eat", "fruit", "ap", ctx)

        assert suggestions == ["apple", "apricot"]

    @pytest.mark.asyncio
    async def test_async_suggest(self, registry, dispatcher, ctx):
        suggest = AsyncMock(return_value=("one", "two"))
        registry.command(name="pick", args=[WordArg("Item").autocomplete(suggest)])(
            MagicMock()
        )

        suggestions = await dispatcher.handle_autocomplete("pick", "Item", "", ctx)

        assert suggestions == ["one", "two"]
        suggest.assert_awaited_once_with(ctx, "")

    @pytest.mark.asyncio
    async def test_failing_suggest_returns_no_suggestions(
        self, registry, dispatcher, ctx
    ):
        suggest = AsyncMock(side_effect=RuntimeError("search down"))
        registry.command(name="pick", args=[WordArg("Item").autocomplete(suggest)])(
            MagicMock()
        )

        assert await dispatcher.handle_autocomplete("pick", "item", "a", ctx) == []

    @pytest.mark.asyncio
    async def test_unknown_command_or_option(self, registry, dispatcher, ctx):
        registry.command(name="pick", args=[WordArg("Item")])(MagicMock())

        assert await dispatcher.handle_autocomplete("nope", "item", "", ctx) == []
        assert await dispatcher.handle_autocomplete("pick", "item", "", ctx) == []
        assert await dispatcher.handle_autocomplete("pick", "other", "", ctx) == []
