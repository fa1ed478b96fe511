"""
core.levels
Difficulty level presets.

Kept in core so balancing lives in one place, but UI can still display labels.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class LevelConfig:
    key: str
    name: str
    min: int
    max: int
    max_attempts: int
    bonus_threshold: int   # wins at or under this many attempts earn the bonus
    base_score: int
    bonus_score: int


def validate_level(cfg: LevelConfig) -> None:
    if cfg.min > cfg.max:
        raise ValueError(f"level {cfg.key}: min must be <= max")
    if cfg.max_attempts < 1:
        raise ValueError(f"level {cfg.key}: max_attempts must be >= 1")
    if not 1 <= cfg.bonus_threshold <= cfg.max_attempts:
        raise ValueError(f"level {cfg.key}: bonus_threshold must be in 1..max_attempts")
    if cfg.base_score < 0 or cfg.bonus_score < 0:
        raise ValueError(f"level {cfg.key}: scores must be >= 0")


LEVELS: Mapping[str, LevelConfig] = MappingProxyType({
    "easy": LevelConfig(
        key="easy",
        name="Easy",
        min=1,
        max=50,
        max_attempts=10,
        bonus_threshold=5,
        base_score=10,
        bonus_score=5,
    ),
    "medium": LevelConfig(
        key="medium",
        name="Medium",
        min=1,
        max=75,
        max_attempts=7,
        bonus_threshold=4,
        base_score=10,
        bonus_score=5,
    ),
    "hard": LevelConfig(
        key="hard",
        name="Hard",
        min=1,
        max=100,
        max_attempts=5,
        bonus_threshold=3,
        base_score=10,
        bonus_score=5,
    ),
})

for _cfg in LEVELS.values():
    validate_level(_cfg)


def get_level(key: str) -> LevelConfig:
    try:
        return LEVELS[key]
    except KeyError:
        raise ValueError(f"Unknown level: {key!r}") from None
