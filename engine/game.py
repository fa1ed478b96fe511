"""engine.game

Guessing game flow (headless).

Responsibilities:
- Start a session for a level (draw target, reset counters)
- Validate + evaluate guesses, award score on a win
- Expose derived scoreboard / snapshot values for the host

This layer is UI-agnostic. It never blocks or schedules work; hosts decide
presentation timing.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional, Tuple

from core.levels import LevelConfig, get_level
from core.parsing import parse_guess
from core.rng import make_rng
from core.rules import direction_for, draw_target, in_range, score_for_win, severity_for_miss
from core.state import (
    HINT_CORRECT,
    HINT_EXHAUSTED,
    KIND_INACTIVE,
    KIND_INVALID,
    KIND_LOST,
    KIND_MISS,
    KIND_OUT_OF_RANGE,
    KIND_WON,
    GameSession,
    GuessHistoryEntry,
    GuessOutcome,
    Scoreboard,
    ScoreLedger,
    SessionSnapshot,
)

logger = logging.getLogger(__name__)

INVALID_MESSAGE = "Please enter a valid number!"


def out_of_range_message(level: LevelConfig) -> str:
    return f"Number must be between {level.min} and {level.max}!"


class GuessingGameEngine:
    """Owns one GameSession and one ScoreLedger."""

    def __init__(self, rng: Any = None, *, seed: Optional[int] = None, ledger: Optional[ScoreLedger] = None) -> None:
        self._rng = rng if rng is not None else make_rng(seed)
        self._ledger = ledger if ledger is not None else ScoreLedger()
        self._session = GameSession()

    # -------------------------
    # Queries
    # -------------------------

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def active(self) -> bool:
        return self._session.active

    @property
    def level(self) -> Optional[LevelConfig]:
        return self._session.level

    @property
    def history(self) -> Tuple[GuessHistoryEntry, ...]:
        return self._session.history

    @property
    def total_score(self) -> int:
        return self._ledger.total_score

    def scoreboard(self) -> Scoreboard:
        s = self._session
        if s.level is None:
            return Scoreboard(total_score=self.total_score)
        return Scoreboard(total_score=self.total_score, level_name=s.level.name, attempts_left=int(s.attempts_left))

    def snapshot(self) -> SessionSnapshot:
        s = self._session
        if s.level is None:
            raise ValueError("no level selected")
        return SessionSnapshot(
            level=s.level.key,
            level_name=s.level.name,
            min=s.level.min,
            max=s.level.max,
            attempts_used=s.attempts_used,
            attempts_left=int(s.attempts_left),
            max_attempts=s.level.max_attempts,
            total_score=self.total_score,
        )

    # -------------------------
    # Operations
    # -------------------------

    def start_game(self, level: str) -> SessionSnapshot:
        cfg = get_level(level)
        target = draw_target(cfg, self._rng)
        self._session = GameSession(level=cfg, target=target, attempts_used=0, active=True, history=())
        logger.info("game started: level=%s range=%d..%d", cfg.key, cfg.min, cfg.max)
        logger.debug("secret number: %d", target)
        return self.snapshot()

    def submit_guess(self, raw: Any) -> GuessOutcome:
        s = self._session
        if not s.active or s.level is None or s.target is None:
            return GuessOutcome(kind=KIND_INACTIVE, attempts_used=s.attempts_used)

        cfg = s.level

        # 1) parse
        guess = parse_guess(raw)
        if guess is None:
            return GuessOutcome(
                kind=KIND_INVALID,
                message=INVALID_MESSAGE,
                attempts_used=s.attempts_used,
                attempts_left=s.attempts_left,
            )

        # 2) range
        if not in_range(cfg, guess):
            return GuessOutcome(
                kind=KIND_OUT_OF_RANGE,
                message=out_of_range_message(cfg),
                guess=guess,
                attempts_used=s.attempts_used,
                attempts_left=s.attempts_left,
            )

        # 3) the attempt counts from here on
        used = s.attempts_used + 1

        # 4) win
        if guess == s.target:
            score, bonus = score_for_win(cfg, used)
            self._ledger.add(score)
            self._session = replace(
                s,
                attempts_used=used,
                active=False,
                history=(*s.history, GuessHistoryEntry(guess=s.target, hint=HINT_CORRECT)),
            )
            logger.info("game won: level=%s attempts=%d score=%d bonus=%s", cfg.key, used, score, bonus)
            return GuessOutcome(
                kind=KIND_WON,
                guess=guess,
                attempts_used=used,
                attempts_left=cfg.max_attempts - used,
                score_earned=score,
                bonus_earned=bonus,
                target=s.target,
            )

        # 5) miss
        left = cfg.max_attempts - used
        if left == 0:
            self._session = replace(
                s,
                attempts_used=used,
                active=False,
                history=(*s.history, GuessHistoryEntry(guess=guess, hint=HINT_EXHAUSTED)),
            )
            logger.info("game lost: level=%s attempts=%d target=%d", cfg.key, used, s.target)
            return GuessOutcome(
                kind=KIND_LOST,
                guess=guess,
                attempts_used=used,
                attempts_left=0,
                target=s.target,
            )

        direction = direction_for(guess, s.target)
        self._session = replace(
            s,
            attempts_used=used,
            history=(*s.history, GuessHistoryEntry(guess=guess, hint=direction)),
        )
        return GuessOutcome(
            kind=KIND_MISS,
            guess=guess,
            direction=direction,
            attempts_used=used,
            attempts_left=left,
            severity=severity_for_miss(left),
        )

    def reset_score(self) -> None:
        """Unconditional; confirmation is the caller's job."""
        self._ledger.reset()
        logger.info("total score reset")

    def change_level(self) -> None:
        self._session = GameSession()
        logger.info("level cleared")
