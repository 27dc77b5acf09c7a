"""Roll dice using TRPG-like syntax, e.g. `3d6max + 2d4 * 2 + 1 >= 15`."""

from .checker import Checker, Compare
from .command import Gurgle
from .config import DEFAULT_CONFIG, Config, load_config
from .errors import (
    CompileError,
    ConfigError,
    InvalidNumber,
    InvalidSyntax,
    LimitError,
    NestingTooDeep,
    NonPositiveDiceSpec,
    NumberOutOfRange,
    TooManyItems,
    TooManyRollTimes,
    TooManySides,
)
from .expr import Operator, PostProcessor
from .parser import compile
from .roll import GurgleRoll


def evaluate(gurgle: Gurgle, rng=None) -> GurgleRoll:
    return gurgle.roll(rng)


__all__ = [
    "Checker",
    "Compare",
    "CompileError",
    "Config",
    "ConfigError",
    "DEFAULT_CONFIG",
    "Gurgle",
    "GurgleRoll",
    "InvalidNumber",
    "InvalidSyntax",
    "LimitError",
    "NestingTooDeep",
    "NonPositiveDiceSpec",
    "NumberOutOfRange",
    "Operator",
    "PostProcessor",
    "TooManyItems",
    "TooManyRollTimes",
    "TooManySides",
    "compile",
    "evaluate",
    "load_config",
]
