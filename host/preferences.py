"""host.preferences

Player preferences (music volume, mute flag, color theme) and their stores.

Stores never raise: a broken or missing file means defaults, a failed write is
logged and dropped.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, replace
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

THEMES = ("dark", "light")


@dataclass(frozen=True)
class Preferences:
    volume: float = 0.5      # 0..1
    muted: bool = False
    theme: str = "dark"


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def prefs_from_mapping(d: Mapping[str, Any]) -> Preferences:
    """Bridge helper for stored dicts; bad fields fall back to defaults."""
    base = Preferences()
    try:
        volume = _clamp(float(d.get("volume", base.volume)), 0.0, 1.0)
    except (TypeError, ValueError):
        volume = base.volume
    muted = d.get("muted", base.muted)
    if isinstance(muted, str):
        muted = muted.strip().lower() == "true"
    theme = str(d.get("theme", base.theme))
    return Preferences(
        volume=volume,
        muted=bool(muted),
        theme=theme if theme in THEMES else base.theme,
    )


def adjust_volume(prefs: Preferences, percent: float) -> Preferences:
    """Slider value (0..100) -> prefs. Zero volume means muted."""
    volume = _clamp(float(percent), 0.0, 100.0) / 100.0
    return replace(prefs, volume=volume, muted=volume == 0.0)


def toggle_mute(prefs: Preferences) -> Preferences:
    return replace(prefs, muted=not prefs.muted)


def toggle_theme(prefs: Preferences) -> Preferences:
    return replace(prefs, theme="light" if prefs.theme == "dark" else "dark")


def effective_volume(prefs: Preferences) -> float:
    return 0.0 if prefs.muted else prefs.volume


class InMemoryPreferenceStore:
    def __init__(self, prefs: Optional[Preferences] = None) -> None:
        self._prefs = prefs or Preferences()

    def load(self) -> Preferences:
        return self._prefs

    def save(self, prefs: Preferences) -> None:
        self._prefs = prefs


class JsonFilePreferenceStore:
    """One JSON object per file."""

    def __init__(self, path: str) -> None:
        self.path = path

    def load(self) -> Preferences:
        if not os.path.exists(self.path):
            return Preferences()
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as e:
            logger.warning("could not read preferences from %s: %s", self.path, e)
            return Preferences()
        if not isinstance(data, dict):
            logger.warning("ignoring preferences in %s: not an object", self.path)
            return Preferences()
        return prefs_from_mapping(data)

    def save(self, prefs: Preferences) -> None:
        try:
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as fh:
                json.dump(asdict(prefs), fh, ensure_ascii=False, indent=2, sort_keys=True)
        except OSError as e:
            logger.warning("could not save preferences to %s: %s", self.path, e)
