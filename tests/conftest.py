import pytest


class MaxRng:
    """Always rolls the highest face, and counts how often it was asked."""

    def __init__(self) -> None:
        self.calls = 0

    def randint(self, a: int, b: int) -> int:
        self.calls += 1
        return b


class MinRng(MaxRng):
    def randint(self, a: int, b: int) -> int:
        self.calls += 1
        return a


@pytest.fixture
def max_rng():
    return MaxRng()


@pytest.fixture
def min_rng():
    return MinRng()
