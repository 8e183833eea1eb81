import streamlit as st

from frontend.api_client import ANALYSIS_MODE
from frontend.layout import APP_NAME, apply_theme, render_header, require_api_key

apply_theme("Home")
require_api_key()
render_header()

if ANALYSIS_MODE == "jewelry":
    tagline = (
        "Upload a photo of a ring, necklace or bracelet and our AI gemologist will grade "
        "its material, purity and stones, score its quality and find similar pieces online."
    )
    cta = "Grade Your First Piece"
else:
    tagline = (
        "Seamlessly organize your files by letting our AI generate smart, relevant "
        "metadata for you."
    )
    cta = "Upload Your First File"

left, right = st.columns([0.55, 0.45])
with left:
    st.markdown("# Unlock Your Content's Potential.")
    st.markdown(f"Welcome to **{APP_NAME}**. {tagline}")
    st.write("")
    if st.button(f"{cta} →"):
        st.switch_page("pages/upload.py")

with right:
    st.markdown(
        """
        <div class="card">
            <div class="section-label">How it works</div>
            <p>1. Drop a file on the upload page.</p>
            <p>2. Gemini analyzes it against a fixed, validated schema.</p>
            <p>3. Read the report. Nothing is kept after your browser session ends.</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
