import html

import streamlit as st

from frontend.api_client import ANALYSIS_MODE, request_analysis
from frontend.capture import MAX_ADVERTISED_MB, CaptureState, FileReadError, UploadedFile
from frontend.handoff import HandoffError, clear_grade, store_grade
from frontend.layout import apply_theme, render_header, require_api_key
from frontend.report import CAROUSEL_START_KEY, ReportContractError, build_metadata_view
from frontend.scratch import StreamlitSessionScratch

JEWELRY = ANALYSIS_MODE == "jewelry"
IMAGE_TYPES = ["png", "jpg", "jpeg", "webp", "gif"]
PENDING_TOAST_KEY = "pending_toast"

apply_theme("Upload")
require_api_key()
render_header()

# ---------- STATE ----------
if "capture" not in st.session_state:
    st.session_state.capture = CaptureState()

state: CaptureState = st.session_state.capture
scratch = StreamlitSessionScratch(st.session_state)

pending_toast = st.session_state.pop(PENDING_TOAST_KEY, None)
if pending_toast:
    st.toast(pending_toast, icon="⚠️")


def start_over():
    state.reset()
    clear_grade(scratch)


def on_pick():
    uploaded = st.session_state.get(state.picker_key)
    if uploaded is None:
        # Cleared from the picker's own "x" button.
        state.reset()
        return
    try:
        state.select(UploadedFile.from_upload(uploaded))
    except FileReadError as e:
        state.reset()
        state.error = str(e)


# ---------- HEADER ----------
if JEWELRY:
    st.markdown("## Grade Your Jewelry")
    st.caption("Drop a photo below and our AI gemologist will prepare a grading report.")
else:
    st.markdown("## Upload Your Content")
    st.caption("Drop a file below and watch as our AI suggests a fitting description and relevant tags.")

error_slot = st.empty()

# ---------- CAPTURE ----------
st.file_uploader(
    "Click to upload or drag and drop",
    type=IMAGE_TYPES if JEWELRY else None,
    key=state.picker_key,
    on_change=on_pick,
    disabled=state.busy,
)
st.caption(f"{'Images' if JEWELRY else 'Any file type'} (max {MAX_ADVERTISED_MB}MB)")

# ---------- RESULT (metadata mode renders in place) ----------
if state.result and not JEWELRY:
    try:
        view = build_metadata_view(state.result)
    except ReportContractError as e:
        state.result = None
        state.error = str(e)
    else:
        head_left, head_right = st.columns([0.7, 0.3])
        with head_left:
            st.markdown("### Analysis Complete")
        with head_right:
            st.button("↻ Start Over", key="start_over", on_click=start_over)

        st.markdown('<div class="section-label">Suggested Description</div>', unsafe_allow_html=True)
        st.text_area("Suggested Description", value=view.description, height=120, disabled=True,
                     label_visibility="collapsed")

        st.markdown('<div class="section-label">Suggested Tags</div>', unsafe_allow_html=True)
        badges = "".join(f'<span class="pill">{html.escape(tag)}</span>' for tag in view.tags)
        st.markdown(f"<div>{badges}</div>", unsafe_allow_html=True)

# ---------- PREVIEW + SUBMIT ----------
elif state.file is not None:
    st.markdown('<div class="card">', unsafe_allow_html=True)
    thumb, info, actions = st.columns([0.15, 0.55, 0.3])
    with thumb:
        if state.preview_url:
            st.image(state.preview_url, width=64)
        else:
            st.markdown("<div style='font-size:2.4rem;'>📄</div>", unsafe_allow_html=True)
    with info:
        st.markdown(f"**{state.file.name}**")
        st.caption(state.file.size_label)
    with actions:
        # begin() runs as a click callback, so both buttons are already drawn disabled
        # for the whole run that performs the analysis.
        st.button("✕ Remove file", key="remove", on_click=start_over, disabled=state.busy)
        st.button("↻ Grade" if JEWELRY else "↻ Generate", key="submit",
                  on_click=state.begin, disabled=state.busy)
    st.markdown("</div>", unsafe_allow_html=True)

    if state.busy:
        with st.spinner("Analyzing with Gemini…"):
            succeeded = state.complete(request_analysis)

        if succeeded and JEWELRY:
            try:
                store_grade(scratch, state.result, state.preview_url or state.data_uri)
            except HandoffError as e:
                state.result = None
                state.error = str(e)
            else:
                st.session_state.pop(CAROUSEL_START_KEY, None)
                st.switch_page("pages/grading.py")

        if state.error:
            st.session_state[PENDING_TOAST_KEY] = state.error
        st.rerun()

if state.error:
    error_slot.error(f"**Generation Failed**\n\n{state.error}")
