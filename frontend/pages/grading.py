import html

import streamlit as st

from frontend.handoff import clear_grade, load_grade
from frontend.layout import apply_theme, render_header
from frontend.report import CAROUSEL_START_KEY, ReportContractError, build_grade_report
from frontend.scratch import StreamlitSessionScratch

apply_theme("Grading Report")
render_header()

scratch = StreamlitSessionScratch(st.session_state)
loaded = load_grade(scratch)
if loaded is None:
    # Nothing was handed over (direct visit or lost session): back to the start.
    st.switch_page("pages/upload.py")

result, preview_url = loaded


def grade_another():
    clear_grade(scratch)
    st.session_state.pop(CAROUSEL_START_KEY, None)
    if "capture" in st.session_state:
        st.session_state.capture.reset()


if st.button("← Grade Another", on_click=grade_another):
    st.switch_page("pages/upload.py")

try:
    report = build_grade_report(result)
except ReportContractError as e:
    st.error(f"The grading result could not be displayed: {e}")
    st.stop()

left, right = st.columns([0.6, 0.4])

# Score and material first: they only depend on validated fields.
with right:
    st.markdown("#### ⭐ Overall Quality Score")
    st.progress(report.score_fraction, text=report.score_text)

    st.markdown("#### ⚖️ Material & Purity")
    for label, value in report.material_rows:
        row_label, row_value = st.columns([0.5, 0.5])
        row_label.markdown(f'<span class="row-label">{html.escape(label)}:</span>', unsafe_allow_html=True)
        row_value.markdown(f"**{value}**")

    if report.gemstone_rows:
        st.markdown("#### 💎 Gemstone Analysis")
        st.table(report.gemstone_rows)

with left:
    # The browser decodes the data URI; a broken image never stops the report.
    st.image(preview_url, caption="Graded Jewelry", use_container_width=True)

    st.markdown("#### ℹ️ AI Gemologist's Analysis")
    st.write(report.analysis)

# ---------- SIMILAR PRODUCTS ----------
carousel = report.carousel
if carousel:
    st.markdown("---")
    st.markdown("<h3 style='text-align:center;'>🔍 Similar Products Found Online</h3>", unsafe_allow_html=True)

    start = st.session_state.get(CAROUSEL_START_KEY, 0)
    if start >= len(carousel.items):
        start = 0

    def move(delta: int):
        st.session_state[CAROUSEL_START_KEY] = carousel.step(start, delta)

    at_start = not carousel.loop and carousel.step(start, -1) == start
    at_end = not carousel.loop and carousel.step(start, 1) == start

    prev_col, cards_col, next_col = st.columns([0.06, 0.88, 0.06])
    with prev_col:
        st.button("‹", key="carousel_prev", on_click=move, args=(-1,), disabled=at_start)
    with next_col:
        st.button("›", key="carousel_next", on_click=move, args=(1,), disabled=at_end)
    with cards_col:
        for col, card in zip(st.columns(carousel.page_size), carousel.visible(start)):
            with col:
                if card.image_url:
                    st.image(card.image_url, use_container_width=True)
                st.markdown(f'<div class="product-name">{html.escape(card.name)}</div>', unsafe_allow_html=True)
                price_col, link_col = st.columns([0.5, 0.5])
                price_col.markdown(f'<span class="product-price">{html.escape(card.price)}</span>', unsafe_allow_html=True)
                link_col.link_button("View", card.url)
