import enum


class Compare(enum.Enum):
    GTE = ">="
    GT = ">"
    LTE = "<="
    LT = "<"
    EQ = "="

    @classmethod
    def from_symbol(cls, symbol: str) -> "Compare":
        if symbol == "==":
            return cls.EQ
        return cls(symbol)


class Checker:
    """Decides whether a roll result is a success.

    In `3d6 > 10`, `>` is the compare and `10` is the target: the roll passes
    when the sum of the three dice is greater than 10.
    """

    def __init__(self, compare: Compare, target: int) -> None:
        self.compare = compare
        self.target = target

    def check(self, value: int) -> bool:
        if self.compare is Compare.GTE:
            return value >= self.target
        elif self.compare is Compare.GT:
            return value > self.target
        elif self.compare is Compare.LTE:
            return value <= self.target
        elif self.compare is Compare.LT:
            return value < self.target
        else:
            return value == self.target

    def __repr__(self) -> str:
        return "%s%s" % (self.compare.value, self.target)
