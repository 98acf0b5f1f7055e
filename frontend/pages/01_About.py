import streamlit as st

from state import init_session_state
from utils.backend_interface import get_codec_labels
from utils.shared_styles import (
    render_page_styles,
    render_nav_pills,
    render_page_header,
    render_page_footer,
)

st.set_page_config(
    page_title="About | Encode Checkr",
    layout="wide",
    initial_sidebar_state="collapsed",
)

init_session_state()

render_page_styles()
render_page_header(
    "About",
    "What each codec does and how failures are shown.",
)
render_nav_pills("about")

st.markdown(
    """
Type a string on the main page and pick **Encode** or **Decode**. Every codec runs on the same
input; a codec that cannot handle it shows `Error: ...` in its own card while the others keep working.

### Codecs

- **Base64**: standard base64 of the input read as bytes (characters up to U+00FF).
- **Base32**: URL-safe base64 without padding (`-` and `_` instead of `+` and `/`).
- **Hex (Base 16)**: every character of the base64 form as two hex digits.
- **Binary**: every character of the base64 form as eight binary digits.
- **ASCII**: base64 of the UTF-16 code units, two bytes each, low byte first. Works for any text.
- **Charset codecs** (iso-8859-2, windows-874): in *literal* mode encode shows the UTF-8 bytes and
  decode re-reads those bytes with the charset; in *raw* mode the text is encoded with the charset
  itself, one character per byte.
"""
)

st.markdown("**Display order**")
st.code("\n".join(get_codec_labels()), language=None)

render_page_footer()
