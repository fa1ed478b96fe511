"""host.base

Collaborator interfaces.

The engine never calls these; host.controller.GameController does, passing
engine values (snapshots, outcomes) to the renderer.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from core.state import GuessHistoryEntry, Scoreboard, SessionSnapshot
from engine.feedback import Feedback, ResultView

from .preferences import Preferences


class Renderer(Protocol):
    def show_screen(self, screen: str) -> None: ...

    def show_snapshot(self, snapshot: SessionSnapshot) -> None: ...

    def show_feedback(self, feedback: Feedback) -> None: ...

    def show_history(self, chips: Sequence[str], entries: Sequence[GuessHistoryEntry]) -> None: ...

    def show_scoreboard(self, scoreboard: Scoreboard) -> None: ...

    def schedule_result(self, view: ResultView) -> None:
        """Show the result screen; timing is up to the renderer."""
        ...


class AudioNotifier(Protocol):
    """Must swallow playback failures."""

    def play_victory(self) -> None: ...

    def play_music(self, volume: float) -> None: ...

    def stop_music(self) -> None: ...


class PreferenceStore(Protocol):
    def load(self) -> Preferences: ...

    def save(self, prefs: Preferences) -> None: ...


class ConfirmationPrompt(Protocol):
    def ask(self, message: str) -> bool: ...
