class CompileError(ValueError):
    message = "failed to compile dice expression"

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(self.message + (": %s" % detail if detail else ""))


class InvalidSyntax(CompileError):
    message = "invalid gurgle syntax"


class InvalidNumber(CompileError):
    message = "command contains invalid number"


class NonPositiveDiceSpec(CompileError):
    message = "dice roll times and sides must be positive"


class LimitError(CompileError):
    pass


class TooManyItems(LimitError):
    message = "items count limit exceeded"


class TooManySides(LimitError):
    message = "dice sides count limit exceeded"


class TooManyRollTimes(LimitError):
    message = "dice roll times limit exceeded"


class NumberOutOfRange(LimitError):
    message = "number item out of range"


class NestingTooDeep(LimitError):
    message = "expression is nested too deeply"


class ConfigError(ValueError):
    pass
