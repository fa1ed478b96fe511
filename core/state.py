"""
core.state
Core domain data models (UI independent).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from .levels import LevelConfig


# History hints. "higher"/"lower" name the way the player has to go next.
HINT_CORRECT = "correct"
HINT_HIGHER = "higher"
HINT_LOWER = "lower"
HINT_EXHAUSTED = "exhausted"

ALLOWED_HINTS = {HINT_CORRECT, HINT_HIGHER, HINT_LOWER, HINT_EXHAUSTED}

# Outcome kinds returned by the engine.
KIND_INACTIVE = "inactive"
KIND_INVALID = "invalid"
KIND_OUT_OF_RANGE = "out_of_range"
KIND_MISS = "miss"
KIND_WON = "won"
KIND_LOST = "lost"

TERMINAL_KINDS = {KIND_WON, KIND_LOST}

SEVERITY_INFO = "info"
SEVERITY_WARNING = "warning"
SEVERITY_ERROR = "error"
SEVERITY_SUCCESS = "success"

START_FEEDBACK = "Make your first guess!"


@dataclass(frozen=True)
class GuessHistoryEntry:
    guess: int
    hint: str

    def __post_init__(self) -> None:
        if self.hint not in ALLOWED_HINTS:
            raise ValueError(f"unknown hint: {self.hint!r}")


@dataclass(frozen=True)
class GameSession:
    """One play-through.

    Replaced (never mutated) on each transition; the engine holds the current one.
    `target` is fixed once drawn.
    """
    level: Optional[LevelConfig] = None
    target: Optional[int] = None
    attempts_used: int = 0
    active: bool = False
    history: Tuple[GuessHistoryEntry, ...] = field(default_factory=tuple)

    @property
    def attempts_left(self) -> Optional[int]:
        if self.level is None:
            return None
        return self.level.max_attempts - self.attempts_used


@dataclass
class ScoreLedger:
    """Running total; outlives sessions, only grows until reset."""
    total_score: int = 0

    def add(self, points: int) -> int:
        if points < 0:
            raise ValueError("score ledger only accepts non-negative points")
        self.total_score += int(points)
        return self.total_score

    def reset(self) -> None:
        self.total_score = 0


@dataclass(frozen=True)
class SessionSnapshot:
    level: str
    level_name: str
    min: int
    max: int
    attempts_used: int
    attempts_left: int
    max_attempts: int
    total_score: int
    feedback: str = START_FEEDBACK
    severity: str = SEVERITY_INFO
    input_value: str = ""


@dataclass(frozen=True)
class GuessOutcome:
    kind: str
    message: Optional[str] = None
    guess: Optional[int] = None
    direction: Optional[str] = None
    attempts_used: int = 0
    attempts_left: Optional[int] = None
    severity: Optional[str] = None
    score_earned: int = 0
    bonus_earned: bool = False
    target: Optional[int] = None

    @property
    def is_terminal(self) -> bool:
        return self.kind in TERMINAL_KINDS


@dataclass(frozen=True)
class Scoreboard:
    total_score: int
    level_name: str = "-"
    attempts_left: Union[int, str] = "-"
