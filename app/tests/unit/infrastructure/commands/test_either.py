"""Unit tests for the alternation combinator."""

from unittest.mock import patch

import pytest

from infrastructure.commands.arguments.base import (
    ConsumptionType,
    ConversionError,
    ConversionSuccess,
)
from infrastructure.commands.arguments.either import (
    EITHER_ERROR,
    EitherArg,
    Left,
    Right,
)
from infrastructure.commands.arguments.primitives import (
    EveryArg,
    IntegerArg,
    WordArg,
)


async def convert(argument, tokens, ctx):
    tokens = list(tokens)
    return await argument.convert(tokens[0] if tokens else None, tokens, ctx)


@pytest.mark.unit
class TestEitherArgConversion:
    """Tests for EitherArg.convert."""

    @pytest.mark.asyncio
    async def test_left_wins_when_both_match(self, ctx):
        arg = EitherArg(IntegerArg(), WordArg())
        result = await convert(arg, ["5"], ctx)
        assert result == ConversionSuccess(Left(5), 1)

    @pytest.mark.asyncio
    async def test_falls_back_to_right(self, ctx):
        arg = EitherArg(IntegerArg(), WordArg())
        result = await convert(arg, ["five"], ctx)
        assert result == ConversionSuccess(Right("five"), 1)

    @pytest.mark.asyncio
    async def test_right_branch_consumption_is_propagated(self, ctx):
        arg = EitherArg(IntegerArg(), EveryArg())
        result = await convert(arg, ["a", "b", "c"], ctx)
        assert result == ConversionSuccess(Right("a b c"), 3)

    @pytest.mark.asyncio
    async def test_right_not_tried_when_left_matches(self, ctx):
        right = IntegerArg()
        with patch.object(right, "convert") as right_convert:
            result = await convert(EitherArg(WordArg(), right), ["7"], ctx)
        right_convert.assert_not_called()
        assert isinstance(result.value, Left)

    @pytest.mark.asyncio
    async def test_both_failing_gives_generic_error_with_details(self, ctx):
        arg = EitherArg(IntegerArg(), IntegerArg())
        result = await convert(arg, ["x"], ctx)
        assert isinstance(result, ConversionError)
        assert result.message == EITHER_ERROR
        assert result.details == ("Invalid integer: x", "Invalid integer: x")

    @pytest.mark.asyncio
    async def test_or_operator_builds_either(self, ctx):
        arg = IntegerArg() | WordArg()
        assert isinstance(arg, EitherArg)
        assert (await convert(arg, ["hi"], ctx)).value == Right("hi")


@pytest.mark.unit
class TestEitherArgMetadata:
    """Tests for EitherArg naming, consumption and examples."""

    def test_is_always_multiple(self):
        arg = EitherArg(IntegerArg(), WordArg())
        assert arg.consumption_type is ConsumptionType.MULTIPLE

    def test_default_name_joins_branch_names(self):
        assert EitherArg(IntegerArg(), WordArg()).name == "Integer | Word"

    def test_explicit_name(self):
        assert EitherArg(IntegerArg(), WordArg(), name="Target").name == "Target"

    def test_examples_join_one_from_each_side(self, ctx):
        arg = EitherArg(IntegerArg(), WordArg())
        [example] = arg.generate_examples(ctx)
        left, right = example.split(" | ")
        assert left in IntegerArg().generate_examples(ctx)
        assert right in WordArg().generate_examples(ctx)

    def test_examples_use_placeholder_for_empty_side(self, ctx):
        class NoExamples(WordArg):
            def generate_examples(self, context):
                return []

        arg = EitherArg(NoExamples(), NoExamples())
        assert arg.generate_examples(ctx) == ["<Example> | <Example>"]
