import typing

if typing.TYPE_CHECKING:
    from .checker import Checker
    from .expr import Operator, PostProcessor


class RollNode:
    """A node of an evaluated expression.

    The value of a node is computed on first read and cached, so reading it
    again never recomputes it. Computing is deterministic once dice points
    are rolled, so two readers racing on the first read store the same int.
    """

    _value: typing.Optional[int] = None

    def compute(self) -> int:
        raise NotImplementedError

    def value(self) -> int:
        if self._value is None:
            self._value = self.compute()
        return self._value


class NumberRoll(RollNode):
    def __init__(self, value: int) -> None:
        self._value = value

    def compute(self) -> int:
        return typing.cast(int, self._value)

    def __repr__(self) -> str:
        return str(self._value)


class DiceRoll(RollNode):
    def __init__(
        self, points: typing.Iterable[int], post_processor: "PostProcessor"
    ) -> None:
        self._points = tuple(points)
        self._post_processor = post_processor

    def points(self) -> typing.Tuple[int, ...]:
        return self._points

    def post_processor(self) -> "PostProcessor":
        return self._post_processor

    def __len__(self) -> int:
        return len(self._points)

    def compute(self) -> int:
        return self._post_processor.reduce(self._points)

    def __repr__(self) -> str:
        return "%s%s" % (self._post_processor.value, list(self._points))


class ParenthesesRoll(RollNode):
    def __init__(self, inner: RollNode) -> None:
        self.inner = inner

    def compute(self) -> int:
        return self.inner.value()

    def __repr__(self) -> str:
        return "(%r)" % (self.inner,)


class TreeRoll(RollNode):
    def __init__(self, lhs: RollNode, op: "Operator", rhs: RollNode) -> None:
        self.lhs = lhs
        self.op = op
        self.rhs = rhs

    def compute(self) -> int:
        return self.op.apply(self.lhs.value(), self.rhs.value())

    def __repr__(self) -> str:
        return "%r %s %r" % (self.lhs, self.op.value, self.rhs)


class GurgleRoll:
    """Result of one evaluation of a compiled expression."""

    def __init__(self, expr: RollNode, checker: "typing.Optional[Checker]") -> None:
        self._expr = expr
        self._checker = checker

    def expr(self) -> RollNode:
        return self._expr

    def checker(self) -> "typing.Optional[Checker]":
        return self._checker

    def value(self) -> int:
        return self._expr.value()

    def passed(self) -> typing.Optional[bool]:
        if self._checker is None:
            return None
        return self._checker.check(self.value())

    def __repr__(self) -> str:
        return "GurgleRoll(%r = %s)" % (self._expr, self.value())
