"""Session state helpers for Streamlit pages."""

import streamlit as st

from utils.backend_interface import get_default_mode


def init_session_state() -> None:
    if "source_text" not in st.session_state:
        st.session_state.source_text = ""
    if "mode" not in st.session_state:
        st.session_state.mode = get_default_mode()
