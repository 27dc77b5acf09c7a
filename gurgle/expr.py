import enum
import random
import typing

from .roll import DiceRoll, NumberRoll, ParenthesesRoll, RollNode, TreeRoll

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


def saturate(value: int) -> int:
    return max(I64_MIN, min(I64_MAX, value))


class PostProcessor(enum.Enum):
    """How the points of one round of dice roll collapse into a single number.

    `3d6` sums the three points, `3d6max` keeps the largest one,
    `3d6min` the smallest one, and `3d6avg` their average rounded down.
    """

    SUM = "sum"
    AVG = "avg"
    MAX = "max"
    MIN = "min"

    @classmethod
    def from_keyword(cls, keyword: str) -> "PostProcessor":
        return cls(keyword.lower())

    def reduce(self, points: typing.Sequence[int]) -> int:
        if self is PostProcessor.SUM:
            result = sum(points)
        elif self is PostProcessor.AVG:
            result = sum(points) // len(points)
        elif self is PostProcessor.MAX:
            result = max(points)
        else:
            result = min(points)
        return saturate(result)


class Operator(enum.Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"

    @property
    def binding_power(self) -> int:
        return 2 if self is Operator.MUL else 1

    def apply(self, lhs: int, rhs: int) -> int:
        if self is Operator.ADD:
            result = lhs + rhs
        elif self is Operator.SUB:
            result = lhs - rhs
        else:
            result = lhs * rhs
        return saturate(result)


class Expression:
    def roll(self, rng=None) -> RollNode:
        raise NotImplementedError


class Number(Expression):
    def __init__(self, value: int) -> None:
        self.value = value

    def roll(self, rng=None) -> NumberRoll:
        return NumberRoll(self.value)

    def __repr__(self) -> str:
        return str(self.value)


class Dice(Expression):
    """Rule of one round of dice roll: roll a `sides` sided dice `times` times."""

    def __init__(
        self,
        times: int,
        sides: int,
        post_processor: PostProcessor = PostProcessor.SUM,
    ) -> None:
        self.times = times
        self.sides = sides
        self.post_processor = post_processor

    def roll(self, rng=None) -> DiceRoll:
        if rng is None:
            rng = random
        points = [rng.randint(1, self.sides) for _ in range(self.times)]
        return DiceRoll(points, self.post_processor)

    def __repr__(self) -> str:
        suffix = "" if self.post_processor is PostProcessor.SUM else self.post_processor.value
        return "%sd%s%s" % (self.times, self.sides, suffix)


class Parentheses(Expression):
    def __init__(self, inner: Expression) -> None:
        self.inner = inner

    def roll(self, rng=None) -> ParenthesesRoll:
        return ParenthesesRoll(self.inner.roll(rng))

    def __repr__(self) -> str:
        return "(%s)" % self.inner


class BinaryOp(Expression):
    def __init__(self, lhs: Expression, op: Operator, rhs: Expression) -> None:
        self.lhs = lhs
        self.op = op
        self.rhs = rhs

    def roll(self, rng=None) -> TreeRoll:
        return TreeRoll(self.lhs.roll(rng), self.op, self.rhs.roll(rng))

    def __repr__(self) -> str:
        return "%s %s %s" % (self.lhs, self.op.value, self.rhs)
