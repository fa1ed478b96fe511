"""Number Guess (Streamlit)

Principles:
- UI only renders + triggers.
- Game rules live in core/engine (pure Python, no Streamlit).
- One engine per browser session, kept in st.session_state.

Entry point: streamlit run app.py
"""

from __future__ import annotations

import logging
import os
import time
from typing import Any, Dict, Optional, Sequence

import streamlit as st

from core.levels import LEVELS
from core.state import (
    SEVERITY_ERROR,
    SEVERITY_SUCCESS,
    SEVERITY_WARNING,
    GuessHistoryEntry,
    Scoreboard,
    SessionSnapshot,
)
from engine.config import EngineConfig, config_from_env
from engine.feedback import SCREEN_GAME, SCREEN_LEVEL, SCREEN_RESULT, Feedback, ResultView
from engine.game import GuessingGameEngine
from host.audio import StreamlitAudioNotifier
from host.controller import GameController
from host.preferences import (
    JsonFilePreferenceStore,
    Preferences,
    adjust_volume,
    effective_volume,
    toggle_mute,
    toggle_theme,
)

APP_TITLE = "Number Guess"
APP_SUBTITLE = "Pick a level, find the secret number, score a bonus for being quick."
APP_VERSION = "1.0.0"

logger = logging.getLogger("number_guess.app")

st.set_page_config(page_title=APP_TITLE, page_icon="🎯", layout="centered", initial_sidebar_state="expanded")

CSS = """
<style>
.block-container {padding-top: 2.6rem; padding-bottom: 2rem;}
.card {
  border: 1px solid rgba(127,127,127,0.20);
  border-radius: 16px;
  padding: 14px 16px;
  background: rgba(127,127,127,0.05);
}
.chip {
  display: inline-block;
  padding: 2px 12px;
  margin: 0 6px 6px 0;
  border-radius: 999px;
  border: 1px solid rgba(127,127,127,0.30);
  font-size: 14px;
}
.result-icon {font-size: 64px; text-align: center;}
.highlight {color: #f5b342; font-weight: 700;}
.small {font-size: 13px; opacity:.75;}
</style>
"""

LIGHT_CSS = """
<style>
.stApp {background-color: #f7f7fb; color: #1d1d28;}
section[data-testid="stSidebar"] {background-color: #ececf4;}
</style>
"""


# =========================
# Config
# =========================


def _secrets() -> Dict[str, Any]:
    # Streamlit Cloud: st.secrets; locally there may be no secrets file at all
    try:
        return {k: st.secrets[k] for k in st.secrets.keys()}
    except Exception as e:
        logger.debug("no secrets available: %s", e)
        return {}


def _get_config() -> EngineConfig:
    env: Dict[str, str] = dict(os.environ)
    for k, v in _secrets().items():
        if str(k).startswith("NUMBER_GUESS_"):
            env[str(k)] = str(v)
    return config_from_env(env)


# =========================
# Collaborators
# =========================


class StreamlitRenderer:
    """Stores view state in session_state; pages read it back on rerun."""

    def show_screen(self, screen: str) -> None:
        st.session_state.screen = screen

    def show_snapshot(self, snapshot: SessionSnapshot) -> None:
        ss = st.session_state
        ss.snapshot = snapshot
        ss.result = None
        ss.result_due_at = None

    def show_feedback(self, feedback: Feedback) -> None:
        st.session_state.feedback = feedback

    def show_history(self, chips: Sequence[str], entries: Sequence[GuessHistoryEntry]) -> None:
        st.session_state.chips = list(chips)

    def show_scoreboard(self, scoreboard: Scoreboard) -> None:
        st.session_state.scoreboard = scoreboard

    def schedule_result(self, view: ResultView) -> None:
        ss = st.session_state
        ss.result = view
        ss.result_due_at = time.time() + float(ss.config.result_delay_seconds)


class StreamlitConfirmation:
    """Two-step confirm: first ask parks the question, the Yes button answers it."""

    def ask(self, message: str) -> bool:
        ss = st.session_state
        if ss.get("confirmed") == message:
            ss.confirmed = None
            return True
        ss.pending_confirm = message
        return False


def _controller() -> GameController:
    return st.session_state.controller


# =========================
# Session State
# =========================


def _ensure_state() -> None:
    ss = st.session_state
    if "config" not in ss:
        ss.config = _get_config()
        logging.basicConfig(level=getattr(logging, ss.config.log_level, logging.INFO))
    if "engine" not in ss:
        ss.engine = GuessingGameEngine(seed=ss.config.seed)
    if "audio" not in ss:
        ss.audio = StreamlitAudioNotifier()
    if "controller" not in ss:
        ss.controller = GameController(ss.engine, StreamlitRenderer(), ss.audio, StreamlitConfirmation())
    if "prefs_store" not in ss:
        ss.prefs_store = JsonFilePreferenceStore(ss.config.prefs_path)
    if "prefs" not in ss:
        ss.prefs = ss.prefs_store.load()

    if "screen" not in ss:
        ss.screen = SCREEN_LEVEL
    if "snapshot" not in ss:
        ss.snapshot = None
    if "feedback" not in ss:
        ss.feedback = None
    if "chips" not in ss:
        ss.chips = []
    if "scoreboard" not in ss:
        ss.scoreboard = ss.engine.scoreboard()
    if "result" not in ss:
        ss.result = None
    if "result_due_at" not in ss:
        ss.result_due_at = None

    if "pending_confirm" not in ss:
        ss.pending_confirm = None
    if "pending_action" not in ss:
        ss.pending_action = None
    if "confirmed" not in ss:
        ss.confirmed = None


def _set_prefs(prefs: Preferences) -> None:
    ss = st.session_state
    ss.prefs = prefs
    ss.prefs_store.save(prefs)


# =========================
# Actions
# =========================


def _run_action(action: str) -> None:
    ctl = _controller()
    if action == "restart":
        ctl.restart()
    elif action == "reset_score":
        ctl.reset_score()
    else:
        raise ValueError(f"Unknown action: {action}")


def _request(action: str) -> None:
    ss = st.session_state
    ss.pending_action = action
    _run_action(action)
    st.rerun()


def _answer_pending(yes: bool) -> None:
    ss = st.session_state
    action, message = ss.pending_action, ss.pending_confirm
    ss.pending_action = None
    ss.pending_confirm = None
    if yes and action and message:
        ss.confirmed = message
        _run_action(action)
    st.rerun()


# =========================
# UI Pages
# =========================


def render_pending_confirm() -> None:
    ss = st.session_state
    if not ss.pending_confirm:
        return
    st.warning(ss.pending_confirm)
    c1, c2 = st.columns(2)
    with c1:
        if st.button("Yes", key="confirm_yes", use_container_width=True):
            _answer_pending(True)
    with c2:
        if st.button("No", key="confirm_no", use_container_width=True):
            _answer_pending(False)


def page_levels() -> None:
    st.title(APP_TITLE)
    st.caption(APP_SUBTITLE)
    st.markdown("### Choose your level")

    cols = st.columns(len(LEVELS))
    for col, cfg in zip(cols, LEVELS.values()):
        with col:
            st.markdown("<div class='card'>", unsafe_allow_html=True)
            st.markdown(f"#### {cfg.name}")
            st.markdown(
                f"Range **{cfg.min}–{cfg.max}**  \n"
                f"**{cfg.max_attempts}** attempts  \n"
                f"<span class='small'>Bonus within {cfg.bonus_threshold} attempts</span>",
                unsafe_allow_html=True,
            )
            if st.button(f"Play {cfg.name}", key=f"level_{cfg.key}", use_container_width=True):
                _controller().select_level(cfg.key)
                st.rerun()
            st.markdown("</div>", unsafe_allow_html=True)


def _show_feedback(fb: Optional[Feedback]) -> None:
    if fb is None:
        return
    if fb.severity == SEVERITY_ERROR:
        st.error(fb.text)
    elif fb.severity == SEVERITY_WARNING:
        st.warning(fb.text)
    elif fb.severity == SEVERITY_SUCCESS:
        st.success(fb.text)
    else:
        st.info(fb.text)


def page_game() -> None:
    ss = st.session_state
    snap: SessionSnapshot = ss.snapshot
    engine: GuessingGameEngine = ss.engine

    st.title(f"{APP_TITLE} · {snap.level_name}")
    a, b = st.columns(2)
    a.metric("Range", f"{snap.min} – {snap.max}")
    b.metric("Attempts", f"{engine.session.attempts_used} / {snap.max_attempts}")

    _show_feedback(ss.feedback)

    if ss.chips:
        st.markdown(" ".join(f"<span class='chip'>{c}</span>" for c in ss.chips), unsafe_allow_html=True)

    # deferred result screen (host policy)
    if ss.result is not None and ss.result_due_at is not None:
        wait = float(ss.result_due_at) - time.time()
        if wait > 0:
            time.sleep(wait)
        ss.result_due_at = None
        ss.screen = SCREEN_RESULT
        st.rerun()

    with st.form("guess_form", clear_on_submit=True):
        raw = st.text_input(f"Your guess ({snap.min}–{snap.max})", value="", disabled=not engine.active)
        submitted = st.form_submit_button("Guess", disabled=not engine.active, use_container_width=True)
    if submitted:
        _controller().guess(raw)
        st.rerun()

    c1, c2 = st.columns(2)
    with c1:
        if st.button("🔄 Restart", key="restart", use_container_width=True):
            _request("restart")
    with c2:
        if st.button("Change level", key="change_level_game", use_container_width=True):
            _controller().change_level()
            st.rerun()


def page_result() -> None:
    ss = st.session_state
    view: ResultView = ss.result

    st.markdown(f"<div class='result-icon'>{view.icon}</div>", unsafe_allow_html=True)
    ss.audio.render_victory()
    st.markdown(f"## {view.title}")
    st.markdown(view.message)

    a, b, c = st.columns(3)
    a.metric("The number was", str(view.target))
    b.metric("Attempts", str(view.attempts))
    c.metric("Score", view.score_line)
    if view.highlight:
        st.markdown(f"<span class='highlight'>{view.score_line} points added</span>", unsafe_allow_html=True)

    c1, c2 = st.columns(2)
    with c1:
        if st.button("Play again", key="play_again", use_container_width=True):
            _controller().play_again()
            st.rerun()
    with c2:
        if st.button("Change level", key="change_level_result", use_container_width=True):
            _controller().change_level()
            st.rerun()


# =========================
# Sidebar
# =========================


def sidebar() -> None:
    ss = st.session_state
    board: Scoreboard = ss.scoreboard
    prefs: Preferences = ss.prefs

    st.sidebar.markdown(f"**{APP_TITLE}**  ")
    st.sidebar.markdown(f"v{APP_VERSION}")
    st.sidebar.markdown("---")

    st.sidebar.metric("Total score", board.total_score)
    c1, c2 = st.sidebar.columns(2)
    c1.metric("Level", board.level_name)
    c2.metric("Attempts left", str(board.attempts_left))
    if st.sidebar.button("Reset score", use_container_width=True):
        _request("reset_score")

    st.sidebar.markdown("---")

    theme_label = "☀️ Light theme" if prefs.theme == "dark" else "🌙 Dark theme"
    if st.sidebar.button(theme_label, use_container_width=True):
        _set_prefs(toggle_theme(prefs))
        st.rerun()

    percent = st.sidebar.slider("🎵 Music volume", min_value=0, max_value=100, value=int(round(prefs.volume * 100)), step=1)
    if percent != int(round(prefs.volume * 100)):
        _set_prefs(adjust_volume(prefs, percent))
        prefs = ss.prefs
    muted = st.sidebar.toggle("Mute", value=prefs.muted)
    if muted != prefs.muted:
        _set_prefs(toggle_mute(prefs))
        prefs = ss.prefs

    vol = effective_volume(prefs)
    if vol > 0:
        with st.sidebar:
            ss.audio.play_music(vol)
    else:
        ss.audio.stop_music()


# =========================
# Main
# =========================


def main() -> None:
    _ensure_state()

    ss = st.session_state
    st.markdown(CSS, unsafe_allow_html=True)
    if ss.prefs.theme == "light":
        st.markdown(LIGHT_CSS, unsafe_allow_html=True)

    sidebar()
    if ss.result is None:
        ss.audio.disarm_victory()
    render_pending_confirm()

    if ss.screen == SCREEN_GAME and ss.snapshot is not None:
        page_game()
    elif ss.screen == SCREEN_RESULT and ss.result is not None:
        page_result()
    else:
        page_levels()


if __name__ == "__main__":
    main()
