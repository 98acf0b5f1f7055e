"""Encode Checkr: show a string under every codec at once."""

import streamlit as st

from state import init_session_state
from ui.result_cards import result_grid
from utils.backend_interface import (
    get_charset_mode_description,
    get_charset_modes,
    get_modes,
    transcode_text,
)
from utils.shared_styles import (
    render_nav_pills,
    render_page_footer,
    render_page_header,
    render_page_styles,
)

st.set_page_config(
    page_title="Encode Checkr",
    layout="wide",
    initial_sidebar_state="collapsed",
)

init_session_state()

render_page_styles()
render_page_header(
    "Encode Checkr",
    "A simple app to check what an encoded string might be, or to encode a string into multiple formats.",
)
render_nav_pills("checker")


with st.sidebar:
    st.markdown("## Settings")

    charset_mode = st.radio(
        "Charset behaviour",
        options=get_charset_modes(),
        index=0,
        format_func=str.title,
    )
    st.info(get_charset_mode_description(charset_mode))

    include_variants = st.checkbox(
        "Show alternate decode paths",
        value=False,
        help="Adds the hex-digit decode path of the Base32 codec in decode mode",
    )


col1, col2, col3 = st.columns([1, 2, 1])
with col2:
    st.text_input(
        "Source text",
        key="source_text",
        placeholder="Enter a string to encode or decode",
        label_visibility="collapsed",
    )
    st.radio(
        "Mode",
        options=get_modes(),
        key="mode",
        horizontal=True,
        format_func=str.title,
        label_visibility="collapsed",
    )

rows = transcode_text(
    st.session_state.source_text,
    mode=st.session_state.mode,
    charset_mode=charset_mode,
    include_variants=include_variants,
)
result_grid(rows, columns=4)

render_page_footer()
