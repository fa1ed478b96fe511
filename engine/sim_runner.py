"""engine.sim_runner

Headless runner for quick sanity checks.

Plays complete games against a seeded engine with a bisecting player, so it
stays deterministic and CI-friendly.

Run:
  python -m engine.sim_runner
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from core.levels import LevelConfig, get_level
from core.state import HINT_HIGHER, KIND_LOST, KIND_MISS, KIND_WON, GuessOutcome

from .game import GuessingGameEngine


@dataclass
class BisectPlayer:
    """Halves the remaining range after each miss."""

    level: LevelConfig
    lo: int = field(init=False)
    hi: int = field(init=False)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.lo = self.level.min
        self.hi = self.level.max

    def next_guess(self) -> int:
        return (self.lo + self.hi) // 2

    def observe(self, guess: int, outcome: GuessOutcome) -> None:
        if outcome.kind != KIND_MISS:
            return
        if outcome.direction == HINT_HIGHER:
            self.lo = guess + 1
        else:
            self.hi = guess - 1


def play_one(engine: GuessingGameEngine, level_key: str, player: Optional[BisectPlayer] = None) -> GuessOutcome:
    engine.start_game(level_key)
    player = player or BisectPlayer(get_level(level_key))
    player.reset()
    while True:
        guess = player.next_guess()
        outcome = engine.submit_guess(guess)
        player.observe(guess, outcome)
        if outcome.is_terminal:
            return outcome


def run_headless_games(level_key: str = "easy", games: int = 10, seed: int = 123) -> Dict[str, Any]:
    """Run a deterministic batch and return summary."""
    engine = GuessingGameEngine(seed=seed)
    player = BisectPlayer(get_level(level_key))
    outcomes: List[GuessOutcome] = []

    for _ in range(games):
        outcome = play_one(engine, level_key, player)
        cfg = get_level(level_key)

        # invariants
        assert engine.session.attempts_used <= cfg.max_attempts
        assert not engine.active
        if outcome.kind == KIND_LOST:
            assert engine.session.attempts_used == cfg.max_attempts

        outcomes.append(outcome)

    return {
        "level": level_key,
        "games": games,
        "wins": sum(1 for o in outcomes if o.kind == KIND_WON),
        "losses": sum(1 for o in outcomes if o.kind == KIND_LOST),
        "bonuses": sum(1 for o in outcomes if o.bonus_earned),
        "total_score": engine.total_score,
        "outcomes": outcomes,
    }


if __name__ == "__main__":
    for key in ("easy", "medium", "hard"):
        summary = run_headless_games(key, games=20)
        print(
            f"OK: {key}: {summary['wins']} won / {summary['losses']} lost, "
            f"{summary['bonuses']} bonus, total score {summary['total_score']}"
        )
