import logging
import typing

from .checker import Checker
from .expr import Expression
from .roll import GurgleRoll

logger = logging.getLogger(__name__)


class Gurgle:
    """A compiled gurgle command: an expression and an optional checker.

    A compiled command is never modified, and can be rolled any number of
    times. Every roll produces a new, independent `GurgleRoll`.
    """

    def __init__(self, expr: Expression, checker: typing.Optional[Checker] = None):
        self.expr = expr
        self.checker = checker

    def roll(self, rng=None) -> GurgleRoll:
        result = GurgleRoll(self.expr.roll(rng), self.checker)
        logger.debug("rolled %r: %r", self, result)
        return result

    def __repr__(self) -> str:
        if self.checker is None:
            return str(self.expr)
        return "%s %s" % (self.expr, self.checker)
