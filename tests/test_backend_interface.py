import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "frontend"))
sys.path.insert(0, str(PROJECT_ROOT))

from utils.backend_interface import (
    get_charset_mode_description,
    get_charset_modes,
    get_codec_labels,
    get_default_mode,
    get_modes,
    transcode_text,
)


def test_transcode_text_rows():
    rows = transcode_text("Hello", mode="encode")

    assert rows[0] == {"label": "Base64", "result": "SGVsbG8=", "ok": True}
    assert [row["label"] for row in rows] == get_codec_labels()


def test_transcode_text_reports_errors_inline():
    rows = {row["label"]: row for row in transcode_text("!!!", mode="decode")}

    assert rows["Base64"]["ok"] is False
    assert rows["Base64"]["result"].startswith("Error:")
    assert rows["iso-8859-2"] == {"label": "iso-8859-2", "result": "!!!", "ok": True}


def test_transcode_text_empty_input():
    for mode in get_modes():
        rows = transcode_text("", mode=mode, include_variants=True)
        assert all(row["result"] == "" and row["ok"] for row in rows)


def test_transcode_text_variants():
    rows = transcode_text("SGVsbG8", mode="decode", include_variants=True)

    assert "Base32 (hex decode)" in [row["label"] for row in rows]


def test_widget_options():
    assert get_modes() == ["encode", "decode"]
    assert get_default_mode() == "encode"
    assert get_charset_modes() == ["literal", "raw"]
    assert "UTF-8" in get_charset_mode_description("literal")
    assert get_charset_mode_description("other") == "Unknown charset mode"
