# frontend/layout.py

import streamlit as st

from .env_setup import (
    ENV_PATH,
    has_usable_key,
    read_text,
    save_env_from_example,
)

APP_NAME = "FileFlow"

THEME_CSS = """
<style>
@import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap');

* {
    font-family: 'Inter', system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif;
}

[data-testid="stAppViewContainer"] {
    background:
        radial-gradient(circle at top left, #1f2937 0, transparent 55%),
        radial-gradient(circle at bottom right, #020617 0, transparent 60%),
        #020617;
    color: #e5e7eb;
}

.brand {
    display: flex;
    align-items: center;
    gap: 0.6rem;
    font-size: 1.6rem;
    font-weight: 700;
    padding-bottom: 0.8rem;
    border-bottom: 1px solid rgba(148,163,184,0.25);
    margin-bottom: 1.4rem;
}

.section-label {
    font-size: 0.78rem;
    text-transform: uppercase;
    color: #6b7280;
    margin-bottom: 0.55rem;
    letter-spacing: 0.12em;
}

.card {
    background: rgba(15,23,42,0.96);
    border-radius: 1.15rem;
    padding: 1.2rem 1.25rem 1.3rem;
    border: 1px solid rgba(148,163,184,0.25);
    box-shadow: 0 18px 40px rgba(0,0,0,0.45);
}

.pill {
    font-size: 0.8rem;
    padding: 0.2rem 0.75rem;
    border-radius: 999px;
    background: rgba(15,23,42,0.95);
    border: 1px solid rgba(148,163,184,0.4);
    color: #d1d5db;
    display: inline-flex;
    align-items: center;
    margin: 0 0.35rem 0.35rem 0;
}

.row-label {
    color: #9ca3af;
}

.product-name {
    font-weight: 600;
    white-space: nowrap;
    overflow: hidden;
    text-overflow: ellipsis;
}

.product-price {
    font-size: 1.1rem;
    font-weight: 700;
    color: #4ade80;
}

div.stButton > button {
    border-radius: 999px;
    padding: 0.4rem 1.4rem;
    border: 1px solid rgba(56,189,248,0.6);
    background: radial-gradient(circle at top left, #38bdf8, #0ea5e9);
    color: #0b1220;
    font-weight: 600;
    font-size: 0.86rem;
}

[data-testid="stAlert"] {
    border-radius: 0.9rem;
    border-width: 1px;
}
</style>
"""


def apply_theme(page_title: str) -> None:
    st.set_page_config(page_title=f"{page_title} · {APP_NAME}", layout="wide")
    st.markdown(THEME_CSS, unsafe_allow_html=True)


def render_header() -> None:
    st.markdown(f'<div class="brand">💎 {APP_NAME}</div>', unsafe_allow_html=True)


def require_api_key() -> None:
    """
    Block the page until .env holds a usable GEMINI_API_KEY.
    """
    env_contents = read_text(ENV_PATH)
    if has_usable_key(env_contents):
        return

    st.markdown("<h2 style='text-align:center;'>Gemini API Key required</h2>", unsafe_allow_html=True)
    st.markdown(
        """
        <div style="max-width:820px;margin-left:auto;margin-right:auto;">
        <p>
        The analysis backend needs a valid <code>GEMINI_API_KEY</code> in <code>.env</code>.
        Paste your key below and <code>.env</code> will be created from <code>.env.example</code>,
        replacing only the <code>GEMINI_API_KEY</code> value. Restart the backend afterwards.
        </p>
        </div>
        """,
        unsafe_allow_html=True,
    )

    key_input = st.text_input("Enter your Gemini API Key", type="password", key="gemini_input")

    c1, c2 = st.columns([1, 1])
    with c1:
        if st.button("Save & Continue"):
            if not key_input or not key_input.strip():
                st.error("API key cannot be empty.")
            else:
                try:
                    save_env_from_example(key_input.strip())
                except (OSError, RuntimeError) as e:
                    st.error(f"Failed to save key: {e}")
                else:
                    st.success("Saved! The app will reload now.")
                    st.rerun()
    with c2:
        if st.button("I already have .env (re-check)"):
            if has_usable_key(read_text(ENV_PATH)):
                st.rerun()
            else:
                st.warning("No valid key detected in .env. Please paste your key.")

    st.stop()
