import pytest

from core.state import (
    HINT_CORRECT,
    HINT_EXHAUSTED,
    HINT_HIGHER,
    HINT_LOWER,
    KIND_INACTIVE,
    KIND_MISS,
    SEVERITY_ERROR,
    SEVERITY_INFO,
    SEVERITY_SUCCESS,
    SEVERITY_WARNING,
    GuessHistoryEntry,
    GuessOutcome,
)
from engine.feedback import (
    feedback_for,
    hint_chip,
    result_view,
    start_feedback,
)


def test_start_feedback():
    fb = start_feedback()
    assert (fb.text, fb.severity) == ("Make your first guess!", SEVERITY_INFO)


def test_miss_feedback_wording(fixed_engine):
    engine = fixed_engine(25)
    engine.start_game("easy")

    low = feedback_for(engine.submit_guess(10))
    high = feedback_for(engine.submit_guess(40))

    assert low.text == "Your guess (10) is lower than the number! 9 attempts remaining"
    assert low.severity == SEVERITY_INFO
    assert high.text == "Your guess (40) is higher than the number! 8 attempts remaining"


def test_miss_feedback_singular_and_warning():
    outcome = GuessOutcome(kind=KIND_MISS, guess=80, direction=HINT_LOWER, attempts_left=1, severity=SEVERITY_WARNING)

    fb = feedback_for(outcome)

    assert fb.text == "Your guess (80) is higher than the number! 1 attempt remaining"
    assert fb.severity == SEVERITY_WARNING


def test_validation_feedback(fixed_engine):
    engine = fixed_engine(25)
    engine.start_game("hard")

    invalid = feedback_for(engine.submit_guess("x"))
    out = feedback_for(engine.submit_guess(101))

    assert (invalid.text, invalid.severity) == ("Please enter a valid number!", SEVERITY_ERROR)
    assert (out.text, out.severity) == ("Number must be between 1 and 100!", SEVERITY_ERROR)


def test_won_feedback_and_result(fixed_engine):
    engine = fixed_engine(25)
    engine.start_game("easy")

    outcome = engine.submit_guess(25)
    fb = feedback_for(outcome)
    view = result_view(outcome)

    assert fb.text == "🎉 Correct! You guessed it in 1 attempt! Bonus score earned! 🌟"
    assert fb.severity == SEVERITY_SUCCESS
    assert view.won and view.highlight
    assert view.title == "Congratulations!"
    assert view.message == "Amazing! You guessed the number quickly and earned a bonus!"
    assert view.score_line == "+15"
    assert (view.target, view.attempts) == (25, 1)


def test_won_without_bonus(fixed_engine):
    engine = fixed_engine(50)
    engine.start_game("hard")
    for g in (1, 2, 3):
        engine.submit_guess(g)

    outcome = engine.submit_guess(50)

    assert feedback_for(outcome).text == "🎉 Correct! You guessed it in 4 attempts!"
    assert result_view(outcome).message == "You guessed the number correctly!"
    assert result_view(outcome).score_line == "+10"


def test_lost_feedback_and_result(fixed_engine):
    engine = fixed_engine(7)
    engine.start_game("hard")
    for g in (1, 2, 3, 4):
        assert not engine.submit_guess(g).is_terminal

    outcome = engine.submit_guess(5)
    view = result_view(outcome)

    assert feedback_for(outcome).text == "❌ Game Over! The number was 7"
    assert (view.icon, view.title, view.score_line) == ("😢", "Game Over", "+0")
    assert view.message == "Don't give up! Try again to improve your score."
    assert not view.highlight


def test_inactive_has_no_feedback_or_result():
    outcome = GuessOutcome(kind=KIND_INACTIVE)
    assert feedback_for(outcome) is None
    with pytest.raises(ValueError):
        result_view(outcome)


@pytest.mark.parametrize(
    "hint, chip",
    [(HINT_CORRECT, "25 ✓"), (HINT_HIGHER, "25 ↑"), (HINT_LOWER, "25 ↓"), (HINT_EXHAUSTED, "25 ✗")],
)
def test_hint_chips(hint, chip):
    assert hint_chip(GuessHistoryEntry(25, hint)) == chip
