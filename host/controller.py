"""host.controller

Thin adapter between the engine and the collaborators.

Principles:
- Engine decides, controller forwards.
- Declined confirmations never reach the engine.
"""

from __future__ import annotations

from typing import Optional

from core.state import KIND_INACTIVE, KIND_WON, GuessOutcome, SessionSnapshot
from engine.feedback import (
    RESET_SCORE_PROMPT,
    RESTART_PROMPT,
    SCREEN_GAME,
    SCREEN_LEVEL,
    feedback_for,
    hint_chip,
    result_view,
    start_feedback,
)
from engine.game import GuessingGameEngine

from .base import AudioNotifier, ConfirmationPrompt, Renderer


class GameController:
    def __init__(
        self,
        engine: GuessingGameEngine,
        renderer: Renderer,
        audio: AudioNotifier,
        confirm: ConfirmationPrompt,
    ) -> None:
        self.engine = engine
        self.renderer = renderer
        self.audio = audio
        self.confirm = confirm

    def _render_history(self) -> None:
        entries = list(self.engine.history)
        self.renderer.show_history([hint_chip(e) for e in entries], entries)

    def select_level(self, level_key: str) -> SessionSnapshot:
        snapshot = self.engine.start_game(level_key)
        self.renderer.show_snapshot(snapshot)
        self.renderer.show_scoreboard(self.engine.scoreboard())
        self.renderer.show_feedback(start_feedback())
        self._render_history()
        self.renderer.show_screen(SCREEN_GAME)
        return snapshot

    def guess(self, raw: object) -> GuessOutcome:
        outcome = self.engine.submit_guess(raw)
        if outcome.kind == KIND_INACTIVE:
            return outcome

        fb = feedback_for(outcome)
        if fb is not None:
            self.renderer.show_feedback(fb)
        self._render_history()
        self.renderer.show_scoreboard(self.engine.scoreboard())

        if outcome.kind == KIND_WON:
            self.audio.play_victory()
        if outcome.is_terminal:
            self.renderer.schedule_result(result_view(outcome))
        return outcome

    def play_again(self) -> Optional[SessionSnapshot]:
        level = self.engine.level
        if level is None:
            return None
        return self.select_level(level.key)

    def restart(self) -> Optional[SessionSnapshot]:
        """Mid-game restart of the same level."""
        level = self.engine.level
        if level is None:
            return None
        if not self.confirm.ask(RESTART_PROMPT):
            return None
        return self.select_level(level.key)

    def reset_score(self) -> bool:
        if not self.confirm.ask(RESET_SCORE_PROMPT):
            return False
        self.engine.reset_score()
        self.renderer.show_scoreboard(self.engine.scoreboard())
        return True

    def change_level(self) -> None:
        self.engine.change_level()
        self.renderer.show_scoreboard(self.engine.scoreboard())
        self.renderer.show_screen(SCREEN_LEVEL)
