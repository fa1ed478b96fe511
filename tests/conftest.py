import pytest

from engine.game import GuessingGameEngine


class FixedRng:
    """randint() always answers the same number (clamped into range)."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return max(a, min(b, self.value))


@pytest.fixture
def fixed_engine():
    def make(target: int) -> GuessingGameEngine:
        return GuessingGameEngine(FixedRng(target))

    return make
