"""engine.config

Engine/host configuration passed from the UI (or built from env).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PREFS_PATH = os.path.join(os.path.expanduser("~"), ".number_guess", "prefs.json")


@dataclass(frozen=True)
class EngineConfig:
    seed: Optional[int] = None
    result_delay_seconds: float = 1.5
    prefs_path: str = DEFAULT_PREFS_PATH
    log_level: str = "INFO"


def _int_or_none(env: Mapping[str, str], name: str) -> Optional[int]:
    raw = str(env.get(name, "") or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _float_or(env: Mapping[str, str], name: str, default: float) -> float:
    raw = str(env.get(name, "") or "").strip()
    if not raw:
        return float(default)
    try:
        val = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if val < 0:
        raise ValueError(f"{name} must be >= 0")
    return val


def config_from_env(env: Optional[Mapping[str, str]] = None) -> EngineConfig:
    env = os.environ if env is None else env
    return EngineConfig(
        seed=_int_or_none(env, "NUMBER_GUESS_SEED"),
        result_delay_seconds=_float_or(env, "NUMBER_GUESS_RESULT_DELAY", 1.5),
        prefs_path=str(env.get("NUMBER_GUESS_PREFS_PATH") or DEFAULT_PREFS_PATH),
        log_level=str(env.get("NUMBER_GUESS_LOG_LEVEL") or "INFO").upper(),
    )
