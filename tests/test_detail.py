import pytest

import gurgle
from gurgle.detail import (
    Formatter,
    Language,
    MarkdownFormatter,
    format_node,
    format_roll,
)
from gurgle.expr import PostProcessor
from gurgle.roll import DiceRoll


@pytest.fixture
def rolled(request, max_rng):
    return gurgle.evaluate(gurgle.compile(request.param), max_rng)


@pytest.mark.parametrize(
    "rolled,expected",
    [
        ("5", "5"),
        ("3d6+1", "(6+6+6) + 1 = 19"),
        ("2d6max", "Max(6, 6) = 6"),
        ("(1d4+1)*2", "((4) + 1) * 2 = 10"),
        ("10>=10", "10, target is >=10, success"),
        ("1d20<5", "(20) = 20, target is <5, failed"),
        ("2d6==12", "(6+6) = 12, target is =12, success"),
    ],
    indirect=["rolled"],
)
def test_format_roll_english(rolled, expected):
    assert format_roll(rolled) == expected


@pytest.mark.parametrize(
    "rolled,expected",
    [
        ("2d6avg>20", "平均(6, 6) = 6，目标 >20，失败"),
        ("3d4min+1<=5", "最小(4, 4, 4) + 1 = 5，目标 <=5，成功"),
    ],
    indirect=["rolled"],
)
def test_format_roll_chinese(rolled, expected):
    assert format_roll(rolled, Formatter(Language.ZH)) == expected


@pytest.mark.parametrize("rolled", ["1+1"], indirect=True)
def test_format_roll_markdown(rolled):
    assert format_roll(rolled, MarkdownFormatter()) == "1 + 1 = **2**"


def test_formatters_are_independent():
    dice = DiceRoll([1, 3], PostProcessor.MAX)
    assert format_node(dice, Formatter(Language.ZH)) == "最大(1, 3)"
    assert format_node(dice, Formatter(Language.EN)) == "Max(1, 3)"
    assert format_node(dice) == "Max(1, 3)"


def test_format_unknown_node():
    with pytest.raises(TypeError):
        format_node(object())
