"""Unit tests for primitive argument types."""

from datetime import timedelta

import pytest

from infrastructure.commands.arguments.base import (
    ConsumptionType,
    ConversionError,
    ConversionSuccess,
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


async def convert(argument, tokens, ctx):
    tokens = list(tokens)
    return await argument.convert(tokens[0] if tokens else None, tokens, ctx)


@pytest.mark.unit
class TestWordArg:
    """Tests for WordArg."""

    @pytest.mark.asyncio
    async def test_converts_single_token(self, ctx):
        result = await convert(WordArg(), ["hello", "world"], ctx)
        assert result == ConversionSuccess("hello", 1)

    @pytest.mark.asyncio
    async def test_missing_token_is_error(self, ctx):
        result = await convert(WordArg("Target"), [], ctx)
        assert isinstance(result, ConversionError)
        assert "Target" in result.message

    def test_default_name_and_consumption(self):
        arg = WordArg()
        assert arg.name == "Word"
        assert arg.consumption_type is ConsumptionType.SINGLE

    def test_examples_not_empty(self, ctx):
        assert WordArg().generate_examples(ctx)


@pytest.mark.unit
class TestEveryArg:
    """Tests for EveryArg."""

    @pytest.mark.asyncio
    async def test_consumes_all_remaining_tokens(self, ctx):
        result = await convert(EveryArg(), ["take", "a", "break"], ctx)
        assert result == ConversionSuccess("take a break", 3)

    @pytest.mark.asyncio
    async def test_empty_input_is_error(self, ctx):
        result = await convert(EveryArg(), [], ctx)
        assert isinstance(result, ConversionError)

    def test_is_multiple(self):
        assert EveryArg().consumption_type is ConsumptionType.MULTIPLE


@pytest.mark.unit
class TestNumericArgs:
    """Tests for IntegerArg and DoubleArg."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token,expected", [("42", 42), ("-7", -7), ("0", 0)])
    async def test_integer_valid(self, ctx, token, expected):
        result = await convert(IntegerArg(), [token], ctx)
        assert result == ConversionSuccess(expected, 1)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", ["4.2", "abc", "1e3"])
    async def test_integer_invalid(self, ctx, token):
        result = await convert(IntegerArg(), [token], ctx)
        assert isinstance(result, ConversionError)
        assert token in result.message

    @pytest.mark.asyncio
    async def test_double_valid(self, ctx):
        result = await convert(DoubleArg(), ["2.5"], ctx)
        assert result == ConversionSuccess(2.5, 1)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", ["nan", "inf", "two"])
    async def test_double_rejects_non_finite_and_text(self, ctx, token):
        result = await convert(DoubleArg(), [token], ctx)
        assert isinstance(result, ConversionError)


@pytest.mark.unit
class TestBooleanArg:
    """Tests for BooleanArg."""

    @pytest.mark.asyncio
    async def test_default_literals_case_insensitive(self, ctx):
        assert (await convert(BooleanArg(), ["TRUE"], ctx)).value is True
        assert (await convert(BooleanArg(), ["false"], ctx)).value is False

    @pytest.mark.asyncio
    async def test_custom_literals(self, ctx):
        arg = BooleanArg(truthy="on", falsy="off")
        assert (await convert(arg, ["on"], ctx)).value is True
        result = await convert(arg, ["true"], ctx)
        assert isinstance(result, ConversionError)

    def test_identical_literals_rejected(self):
        with pytest.raises(ValueError):
            BooleanArg(truthy="yes", falsy="YES")


@pytest.mark.unit
class TestDurationArg:
    """Tests for DurationArg."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "token,expected",
        [
            ("10m", timedelta(minutes=10)),
            ("30s", timedelta(seconds=30)),
            ("2h", timedelta(hours=2)),
            ("1h30m", timedelta(hours=1, minutes=30)),
            ("1W", timedelta(weeks=1)),
            ("1.5d", timedelta(days=1, hours=12)),
        ],
    )
    async def test_valid_durations(self, ctx, token, expected):
        result = await convert(DurationArg(), [token], ctx)
        assert result == ConversionSuccess(expected, 1)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "token", ["10", "m", "10x", "0m", "10m5", "99999999999w"]
    )
    async def test_invalid_durations(self, ctx, token):
        result = await convert(DurationArg(), [token], ctx)
        assert isinstance(result, ConversionError)


@pytest.mark.unit
class TestChoiceArg:
    """Tests for ChoiceArg."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", ["red", "green", "blue"])
    async def test_every_configured_literal_matches(self, ctx, token):
        arg = ChoiceArg("Color", "red", "green", "blue")
        result = await convert(arg, [token], ctx)
        assert result == ConversionSuccess(token, 1)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", ["purple", "Red", "re"])
    async def test_non_matching_token_fails(self, ctx, token):
        arg = ChoiceArg("Color", "red", "green", "blue")
        result = await convert(arg, [token], ctx)
        assert isinstance(result, ConversionError)
        assert "red, green, blue" in result.message

    @pytest.mark.asyncio
    async def test_ignore_case_returns_configured_literal(self, ctx):
        arg = ChoiceArg("Color", "red", "green", ignore_case=True)
        result = await convert(arg, ["RED"], ctx)
        assert result == ConversionSuccess("red", 1)

    @pytest.mark.asyncio
    async def test_non_string_choices_return_configured_object(self, ctx):
        arg = ChoiceArg("Size", 8, 16, 32)
        result = await convert(arg, ["16"], ctx)
        assert result.value == 16
        assert isinstance(result.value, int)

    def test_requires_choices(self):
        with pytest.raises(ValueError):
            ChoiceArg("Empty")


@pytest.mark.unit
class TestCommandArg:
    """Tests for CommandArg."""

    @pytest.mark.asyncio
    async def test_resolves_registered_command(
        self, command_context_factory, registry, command_factory
    ):
        ping = registry.register(command_factory(name="ping", aliases=["p"]))
        ctx = command_context_factory(registry=registry)

        result = await convert(CommandArg(), ["P"], ctx)

        assert result == ConversionSuccess(ping, 1)

    @pytest.mark.asyncio
    async def test_unknown_command_is_error(self, command_context_factory, registry):
        ctx = command_context_factory(registry=registry)
        result = await convert(CommandArg(), ["nope"], ctx)
        assert result == ConversionError("Couldn't find command: nope")

    def test_examples_list_registered_commands(
        self, command_context_factory, registry, command_factory
    ):
        registry.register(command_factory(name="ping"))
        registry.register(command_factory(name="help"))
        ctx = command_context_factory(registry=registry)

        assert CommandArg().generate_examples(ctx) == ["ping", "help"]
