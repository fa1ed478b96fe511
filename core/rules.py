"""
core.rules
Game rules (pure functions):
- target draw
- range check
- win scoring with speed bonus
- miss direction / severity
"""

from __future__ import annotations

from typing import Any, Tuple

from .levels import LevelConfig
from .state import HINT_HIGHER, HINT_LOWER, SEVERITY_INFO, SEVERITY_WARNING

WARNING_ATTEMPTS_LEFT = 2


def draw_target(level: LevelConfig, rng: Any) -> int:
    """Uniform integer in [min, max]. `rng` only needs randint()."""
    value = int(rng.randint(level.min, level.max))
    if not level.min <= value <= level.max:
        raise ValueError(f"rng returned {value} outside {level.min}..{level.max}")
    return value


def in_range(level: LevelConfig, value: int) -> bool:
    return level.min <= value <= level.max


def score_for_win(level: LevelConfig, attempts_used: int) -> Tuple[int, bool]:
    """Return (score_earned, bonus_earned)."""
    if attempts_used <= level.bonus_threshold:
        return level.base_score + level.bonus_score, True
    return level.base_score, False


def direction_for(guess: int, target: int) -> str:
    # guess below target -> player must go higher
    return HINT_HIGHER if guess < target else HINT_LOWER


def severity_for_miss(attempts_left: int) -> str:
    return SEVERITY_WARNING if attempts_left <= WARNING_ATTEMPTS_LEFT else SEVERITY_INFO
