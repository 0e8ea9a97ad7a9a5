from __future__ import annotations

import logging
import os
import streamlit as st

from dotenv import load_dotenv
load_dotenv(override=False)  # Load .env into process env

logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING").upper())

# --- Core game imports ---
from src.core.dictionary import WordfreqDictionary
from src.core.rules import Rejected
from src.core.session import GameSession
from src.core.wordlist import DEFAULT_START_WORDS, StartWordList, StartWordsUnavailable

# --- Generative AI services ---
from src.services.hints import llm_hint             # AI hint (with local fallback)
from src.services.llm_picker import LLMRootWordSource  # AI root picker (with fallback)


# =======================================
# Session-state helpers & game management
# =======================================

def _make_session() -> GameSession:
    """Build a GameSession wired to the configured start words and dictionary."""
    local = StartWordList(
        os.getenv("START_WORDS_PATH", str(DEFAULT_START_WORDS)),
        fallback=os.getenv("FALLBACK_ROOT_WORD", "silkworm"),
    )
    return GameSession(source=LLMRootWordSource(local), oracle=WordfreqDictionary())


def _reset_round_state() -> None:
    st.session_state["last_error"] = None
    st.session_state["ai_hint"] = None
    st.session_state["hint_loading"] = False


def _start_new_game() -> None:
    """Start a new game; records where the root word came from and clears per-round flags."""
    game: GameSession = st.session_state["game"]
    game.reset()
    st.session_state["word_source"] = getattr(game.source, "last_source", "unknown")
    _reset_round_state()


def _ensure_game() -> GameSession:
    """Ensure there is an active GameSession in session state; create one if missing."""
    if "game" not in st.session_state or not isinstance(st.session_state["game"], GameSession):
        st.session_state["game"] = _make_session()
    st.session_state.setdefault("word_source", "unknown")
    st.session_state.setdefault("last_error", None)
    st.session_state.setdefault("ai_hint", None)
    st.session_state.setdefault("hint_loading", False)
    if not st.session_state["game"].is_active:
        _start_new_game()
    return st.session_state["game"]


def _submit(raw: str) -> None:
    result = st.session_state["game"].submit(raw)
    if isinstance(result, Rejected):
        # Empty input is ignored silently
        st.session_state["last_error"] = None if result.reason == "empty" else result
    else:
        st.session_state["last_error"] = None
        st.session_state["ai_hint"] = None


# =========
# The App
# =========

def main() -> None:
    st.set_page_config(page_title="WordScramble", page_icon="🔤", layout="centered")

    try:
        game = _ensure_game()
    except StartWordsUnavailable as e:
        st.error(f"Could not start a game: {e}")
        st.stop()

    # ---- Sidebar ----
    with st.sidebar:
        st.header("Game")
        if st.button("🔁 New word?", use_container_width=True):
            _start_new_game()
            st.rerun()

        source = st.session_state.get("word_source", "unknown")
        if source == "llm":
            st.markdown("**Root word**: 🧠 LLM-picked")
        elif source == "local":
            st.markdown("**Root word**: 📚 Start-word list")
        else:
            st.markdown("**Root word**: ❔ Unknown")

        # Debug env
        with st.expander("Debug (env)"):
            st.write("OFFLINE_MODE:", os.getenv("OFFLINE_MODE"))
            st.write("Has OPENAI_API_KEY:", bool(os.getenv("OPENAI_API_KEY")))
            st.write("MODEL_NAME:", os.getenv("MODEL_NAME"))
            st.write("START_WORDS_PATH:", os.getenv("START_WORDS_PATH"))

    # ---- Score ----
    st.subheader(f"Your score for {game.root_word} is {game.score}")
    st.title(game.root_word)

    # ---- Move input ----
    with st.form("word_form", clear_on_submit=True):
        word_inp = st.text_input("Enter your word", max_chars=24)
        if st.form_submit_button("Submit"):
            _submit(word_inp)
            st.rerun()

    err = st.session_state.get("last_error")
    if err:
        st.error(f"**{err.title}**  \n{err.message}")

    # ---- Found words ----
    for w in game.used_words:
        st.markdown(f"`{len(w)}` &nbsp; {w}")

    # ---- Hint section ----
    with st.expander("Need a hint?"):
        if st.button("✨ Generate Hint", disabled=st.session_state["hint_loading"]):
            st.session_state["hint_loading"] = True
            with st.spinner("Thinking..."):
                st.session_state["ai_hint"] = llm_hint(
                    game.root_word,
                    used=game.used_words,
                    vocabulary=game.oracle.vocabulary(game.language),
                )
            st.session_state["hint_loading"] = False
            st.rerun()
        st.info(st.session_state["ai_hint"] or "No hint yet.")

    st.divider()
    st.caption(
        "Words must use the root's letters, be at least four letters long, and be real English words. "
        "Longer than five letters scores 2 points; otherwise 1."
    )


if __name__ == "__main__":
    main()
