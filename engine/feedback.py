"""engine.feedback

Outcome -> presentation mapping shared by every host.

Pure functions only: texts, chips, result screen fields, screen routing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.state import (
    HINT_CORRECT,
    HINT_EXHAUSTED,
    HINT_HIGHER,
    HINT_LOWER,
    KIND_INVALID,
    KIND_LOST,
    KIND_MISS,
    KIND_OUT_OF_RANGE,
    KIND_WON,
    SEVERITY_ERROR,
    SEVERITY_INFO,
    SEVERITY_SUCCESS,
    START_FEEDBACK,
    GuessHistoryEntry,
    GuessOutcome,
)

SCREEN_LEVEL = "level"
SCREEN_GAME = "game"
SCREEN_RESULT = "result"

RESTART_PROMPT = "Are you sure you want to restart? Your progress will be lost."
RESET_SCORE_PROMPT = "Are you sure you want to reset your total score?"

HINT_SYMBOLS = {
    HINT_CORRECT: "✓",
    HINT_HIGHER: "↑",
    HINT_LOWER: "↓",
    HINT_EXHAUSTED: "✗",
}


@dataclass(frozen=True)
class Feedback:
    text: str
    severity: str


@dataclass(frozen=True)
class ResultView:
    won: bool
    icon: str
    title: str
    message: str
    score_line: str
    target: Optional[int]
    attempts: int
    highlight: bool


def _plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


def start_feedback() -> Feedback:
    return Feedback(START_FEEDBACK, SEVERITY_INFO)


def feedback_for(outcome: GuessOutcome) -> Optional[Feedback]:
    """Feedback line for an outcome; None when nothing should change."""
    if outcome.kind in (KIND_INVALID, KIND_OUT_OF_RANGE):
        return Feedback(str(outcome.message), SEVERITY_ERROR)

    if outcome.kind == KIND_WON:
        text = f"🎉 Correct! You guessed it in {_plural(outcome.attempts_used, 'attempt')}!"
        if outcome.bonus_earned:
            text += " Bonus score earned! 🌟"
        return Feedback(text, SEVERITY_SUCCESS)

    if outcome.kind == KIND_LOST:
        return Feedback(f"❌ Game Over! The number was {outcome.target}", SEVERITY_ERROR)

    if outcome.kind == KIND_MISS:
        # the word describes the guess, the arrow the way to go
        comparison = "lower" if outcome.direction == HINT_HIGHER else "higher"
        left = int(outcome.attempts_left or 0)
        return Feedback(
            f"Your guess ({outcome.guess}) is {comparison} than the number! {_plural(left, 'attempt')} remaining",
            str(outcome.severity or SEVERITY_INFO),
        )

    return None


def hint_chip(entry: GuessHistoryEntry) -> str:
    return f"{entry.guess} {HINT_SYMBOLS.get(entry.hint, '?')}"


def result_view(outcome: GuessOutcome) -> ResultView:
    if outcome.kind == KIND_WON:
        if outcome.bonus_earned:
            message = "Amazing! You guessed the number quickly and earned a bonus!"
        else:
            message = "You guessed the number correctly!"
        return ResultView(
            won=True,
            icon="🎉",
            title="Congratulations!",
            message=message,
            score_line=f"+{outcome.score_earned}",
            target=outcome.target,
            attempts=outcome.attempts_used,
            highlight=True,
        )
    if outcome.kind == KIND_LOST:
        return ResultView(
            won=False,
            icon="😢",
            title="Game Over",
            message="Don't give up! Try again to improve your score.",
            score_line="+0",
            target=outcome.target,
            attempts=outcome.attempts_used,
            highlight=False,
        )
    raise ValueError(f"no result screen for outcome kind {outcome.kind!r}")
