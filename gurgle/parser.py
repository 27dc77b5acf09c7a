import logging
import os
import typing

import lark

from .checker import Checker, Compare
from .command import Gurgle
from .config import DEFAULT_CONFIG, Config
from .errors import InvalidNumber, InvalidSyntax, NestingTooDeep
from .expr import (
    I64_MAX,
    I64_MIN,
    BinaryOp,
    Dice,
    Expression,
    Number,
    Operator,
    Parentheses,
    PostProcessor,
)
from .limits import LimitTracker

logger = logging.getLogger(__name__)


def _parse_int(token: lark.Token) -> int:
    try:
        value = int(token)
    except ValueError:
        raise InvalidNumber(str(token))
    if not I64_MIN <= value <= I64_MAX:
        raise InvalidNumber(str(token))
    return value


@lark.v_args(inline=True)
class _GurgleBuilder(lark.Transformer):
    """Builds a `Gurgle` out of a parse tree, enforcing limits on the way.

    Children are transformed before their parents, left to right, so the
    limit tracker sees items in source order, nested parentheses included.
    """

    def __init__(self, config: Config) -> None:
        super().__init__()
        self.limits = LimitTracker(config)

    def number(self, token: lark.Token) -> Number:
        value = _parse_int(token)
        self.limits.check_number(value)
        self.limits.increment_item_count()
        return Number(value)

    def dice(
        self,
        times_token: lark.Token,
        sides_token: lark.Token,
        reduction: typing.Optional[lark.Token] = None,
    ) -> Dice:
        times = _parse_int(times_token)
        sides = _parse_int(sides_token)
        self.limits.check_dice(times, sides)
        self.limits.increment_item_count()
        self.limits.increment_roll_times(times)
        if reduction is None:
            return Dice(times, sides)
        return Dice(times, sides, PostProcessor.from_keyword(reduction))

    def parentheses(self, inner: Expression) -> Parentheses:
        return Parentheses(inner)

    def item(self, inner: Expression) -> Expression:
        if not isinstance(inner, Expression):
            raise RuntimeError("expected an item, got %r" % (inner,))
        return inner

    def operator(self, token: lark.Token) -> Operator:
        return Operator(str(token))

    def expr(self, *children) -> Expression:
        result, pos = self._climb(children, 0, 1)
        if pos != len(children):
            raise RuntimeError("dangling syntax nodes: %r" % (children[pos:],))
        return result

    def _climb(
        self, children: typing.Sequence, pos: int, min_binding_power: int
    ) -> typing.Tuple[Expression, int]:
        if pos >= len(children) or not isinstance(children[pos], Expression):
            raise RuntimeError("expected an item at position %s of %r" % (pos, children))
        lhs = children[pos]
        pos += 1

        while pos < len(children):
            op = children[pos]
            if not isinstance(op, Operator):
                raise RuntimeError("expected an operator, got %r" % (op,))
            if op.binding_power < min_binding_power:
                break
            # all operators are left associative
            rhs, pos = self._climb(children, pos + 1, op.binding_power + 1)
            lhs = BinaryOp(lhs, op, rhs)

        return lhs, pos

    def checker(self, compare: lark.Token, target_token: lark.Token) -> Checker:
        target = _parse_int(target_token)
        self.limits.check_number(target)
        return Checker(Compare.from_symbol(str(compare)), target)

    def command(
        self, expr: Expression, checker: typing.Optional[Checker] = None
    ) -> Gurgle:
        return Gurgle(expr, checker)


_grammar_file = os.path.join(os.path.dirname(__file__), "gurgle.lark")
with open(_grammar_file) as _file:
    _grammar = lark.Lark(_file, parser="lalr", start="command")


def parse(text: str) -> lark.Tree:
    try:
        return _grammar.parse(text)
    except lark.exceptions.UnexpectedInput as e:
        raise InvalidSyntax(str(e))


def build(tree: lark.Tree, config: typing.Optional[Config] = None) -> Gurgle:
    try:
        return _GurgleBuilder(config or DEFAULT_CONFIG).transform(tree)
    except lark.exceptions.VisitError as e:
        raise e.orig_exc


def compile(text: str, config: typing.Optional[Config] = None) -> Gurgle:
    try:
        result = build(parse(text), config)
    except RecursionError:
        raise NestingTooDeep()
    logger.debug("compiled %r as %r", text, result)
    return result
