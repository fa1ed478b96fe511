"""host.audio

Audio notifiers.

Browsers may refuse to autoplay until the player interacts with the page, and
the sound files may simply be missing. Either way the game goes on: failures
are logged at INFO and swallowed.

Sounds are drawn as a small HTML <audio> element so the volume can be set
(st.audio has no volume control).
"""

from __future__ import annotations

import base64
import logging
import mimetypes
import os
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

Player = Callable[..., Any]

VICTORY_SOUND = os.path.join("public", "mixkit-game-level-completed-2059.wav")
BACKGROUND_MUSIC = os.path.join("public", "background-music.wav")


def audio_html(data: bytes, *, volume: float, loop: bool, mime: str = "audio/wav") -> str:
    vol = max(0.0, min(1.0, float(volume)))
    b64 = base64.b64encode(data).decode("ascii")
    loop_attr = " loop" if loop else ""
    return (
        f'<audio id="sfx" autoplay{loop_attr}>'
        f'<source src="data:{mime};base64,{b64}" type="{mime}"></audio>'
        "<script>"
        'const a = document.getElementById("sfx");'
        f"a.volume = {vol:.2f};"
        "a.play().catch(() => {});"
        "</script>"
    )


def _streamlit_player(path: str, *, volume: float, loop: bool) -> Any:
    import streamlit.components.v1 as components  # only needed inside a running app

    with open(path, "rb") as fh:
        data = fh.read()
    mime = mimetypes.guess_type(path)[0] or "audio/wav"
    return components.html(audio_html(data, volume=volume, loop=loop, mime=mime), height=0)


class StreamlitAudioNotifier:
    def __init__(
        self,
        victory_path: str = VICTORY_SOUND,
        music_path: str = BACKGROUND_MUSIC,
        player: Optional[Player] = None,
    ) -> None:
        self.victory_path = victory_path
        self.music_path = music_path
        self._player: Player = player or _streamlit_player
        self.music_on = False
        self.victory_armed = False

    def _play(self, path: str, **kwargs: Any) -> bool:
        if not os.path.exists(path):
            logger.info("Could not play sound: %s not found", path)
            return False
        try:
            self._player(path, **kwargs)
        except Exception as e:
            logger.info("Could not play sound: %s", e)
            return False
        return True

    def play_victory(self) -> None:
        # the winning click reruns the script; the result screen draws the cue
        self.victory_armed = True

    def render_victory(self) -> None:
        """Draw the cue on every run of the result screen.

        Same element on each rerun, so the browser keeps playing it.
        """
        if self.victory_armed:
            self._play(self.victory_path, volume=1.0, loop=False)

    def disarm_victory(self) -> None:
        self.victory_armed = False

    def play_music(self, volume: float) -> None:
        if volume <= 0:
            self.music_on = False
            return
        self.music_on = self._play(self.music_path, volume=volume, loop=True)

    def stop_music(self) -> None:
        self.music_on = False


class SilentAudioNotifier:
    """No-op notifier for headless runs and tests."""

    def __init__(self) -> None:
        self.victories = 0
        self.music_on = False

    def play_victory(self) -> None:
        self.victories += 1

    def play_music(self, volume: float) -> None:
        self.music_on = volume > 0

    def stop_music(self) -> None:
        self.music_on = False
