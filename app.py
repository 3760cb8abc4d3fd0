"""
app.py
======
Streamlit web UI for Manor Mystery.

Responsibilities:
  - Configure and render the Streamlit page.
  - Keep one ManorGame per browser session in st.session_state.
  - Render the current room, the collected clues and the exits.
  - Collect the accusation and render the verdict.

This file contains only UI logic. The controller lives in game_engine.py,
the case in case_data.py and all text formatting in ui_helpers.py.

Run with:
    streamlit run app.py
"""

from __future__ import annotations

import logging

import streamlit as st
from dotenv import load_dotenv

# Load .env before the config is read so MANOR_* overrides apply.
load_dotenv()

from config import load_game_config, log_level

logging.basicConfig(
    level=log_level(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("manor_mystery.app")

from game_engine import EXIT, LEFT, RIGHT, ManorGame, new_game
from ui_helpers import build_css, judgment_lines, move_notice


# ============================================================
# PAGE CONFIGURATION
# ============================================================

st.set_page_config(page_title="Manor Mystery", page_icon="🕵️", layout="centered")
st.markdown(f"<style>{build_css()}</style>", unsafe_allow_html=True)


# ============================================================
# SESSION STATE
# ============================================================

def init_session_state() -> None:
    """Create the game and the event log on first run."""
    if "game" not in st.session_state:
        st.session_state.game    = new_game(load_game_config())
        st.session_state.notices = []


def reset_game() -> None:
    """Release the current game and start the case over."""
    old: ManorGame = st.session_state.game
    old.close()
    st.session_state.game    = new_game(old.config)
    st.session_state.notices = []
    logger.info("New case started from the web UI.")


def _apply(command: str) -> None:
    game: ManorGame = st.session_state.game
    result = game.move(command)
    if result.collected is not None:
        st.session_state.notices.append(f"🔎 Clue found in {result.room.name}: {result.collected}")
    notice = move_notice(result.reason, result.command)
    if notice:
        st.session_state.notices.append(notice)


# ============================================================
# COMPONENTS
# ============================================================

def render_sidebar(game: ManorGame) -> None:
    """Collected clues, in order, plus the new-case button."""
    st.sidebar.markdown("### 🗂️ Collected clues")
    clues = game.collected_clues()
    if clues:
        for clue in clues:
            st.sidebar.markdown(f"- {clue}")
    else:
        st.sidebar.markdown("*Nothing yet.*")
    st.sidebar.markdown("---")
    st.sidebar.markdown(
        f"**Clues needed for a conviction:** {game.config.accusation_threshold}"
    )
    if st.sidebar.button("🔄 NEW CASE", use_container_width=True):
        reset_game()
        st.rerun()


def render_room(game: ManorGame) -> None:
    """Current room card, last notices and the movement buttons."""
    room = game.current_room
    st.markdown(
        f"<div class='room-card'><h3>📍 {room.name}</h3></div>",
        unsafe_allow_html=True,
    )
    first = game.last_move
    if first.command is None and first.collected is not None:
        st.markdown(
            f"<p class='clue-found'>[!] CLUE FOUND: {first.collected}</p>",
            unsafe_allow_html=True,
        )
    for notice in st.session_state.notices[-3:]:
        st.caption(notice)

    directions = game.available_directions()
    col_left, col_right, col_exit = st.columns(3)
    with col_left:
        if st.button(
            f"⬅️ {directions.get(LEFT, 'No path')}",
            disabled=LEFT not in directions,
            use_container_width=True,
        ):
            _apply(LEFT)
            st.rerun()
    with col_right:
        if st.button(
            f"➡️ {directions.get(RIGHT, 'No path')}",
            disabled=RIGHT not in directions,
            use_container_width=True,
        ):
            _apply(RIGHT)
            st.rerun()
    with col_exit:
        if st.button("⚖️ Exit and accuse", type="primary", use_container_width=True):
            _apply(EXIT)
            st.rerun()


def render_judgment(game: ManorGame) -> None:
    """Clue listing and the accusation form; an empty inventory loses at once."""
    clues = game.begin_judgment()
    st.markdown("\n\n".join(
        line for line in judgment_lines(clues, game.directory.suspects()) if line
    ))
    if not clues:
        game.judge(None)
        st.rerun()
        return

    accused = st.text_input("Who do you accuse?", key="accusation")
    if st.button("🔨 I ACCUSE…", type="primary", disabled=not accused.strip()):
        game.judge(accused)
        st.rerun()


def render_verdict(game: ManorGame) -> None:
    verdict = game.verdict
    if verdict is None:
        return
    if verdict.outcome == "case_lost":
        st.markdown(
            "<p class='verdict-failed'>CASE LOST: no evidence</p>",
            unsafe_allow_html=True,
        )
        return
    css_class = "verdict-solved" if verdict.solved else "verdict-failed"
    label     = "CASE CLOSED" if verdict.solved else "CASE FILED AWAY"
    st.markdown(f"<p class='{css_class}'>{label}</p>", unsafe_allow_html=True)
    st.markdown(
        f"**{verdict.match_count}** clue(s) point to **{verdict.accused}** "
        f"(needed: {verdict.threshold})."
    )


# ============================================================
# MAIN
# ============================================================

def main() -> None:
    init_session_state()
    game: ManorGame = st.session_state.game

    st.markdown("<h1 class='main-header'>🕵️ MANOR MYSTERY</h1>", unsafe_allow_html=True)
    render_sidebar(game)

    if game.is_exploring:
        render_room(game)
    elif game.verdict is None:
        render_judgment(game)
    else:
        render_verdict(game)


if __name__ == "__main__":
    main()
