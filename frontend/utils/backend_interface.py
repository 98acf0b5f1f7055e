"""
Backend interface for connecting the Streamlit frontend to the transcoding pipeline
"""

import sys
from pathlib import Path
from typing import Any, Dict, List

# Add the project root to the path to import encode_checkr modules
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from encode_checkr.encoding_schemes.charset import CHARSET_MODES
from encode_checkr.pipeline.config import Mode, TranscodeConfig
from encode_checkr.pipeline.runner import codecs_for_config, transcode_with_config


def transcode_text(
    text: str,
    mode: str = "encode",
    charset_mode: str = "literal",
    include_variants: bool = False,
) -> List[Dict[str, Any]]:
    """
    Run the text through every codec.

    Args:
        text: Source string, may be empty
        mode: "encode" or "decode"
        charset_mode: "literal" or "raw" behaviour of the charset codecs
        include_variants: Add rows for alternate decode paths

    Returns:
        One {"label", "result", "ok"} dict per codec, in registry order
    """
    cfg = TranscodeConfig(
        mode=mode,
        charset_mode=charset_mode,
        include_variants=include_variants,
    )
    return [
        {
            "label": row.label,
            "result": row.result.display,
            "ok": row.result.ok,
        }
        for row in transcode_with_config(text, cfg)
    ]


def get_codec_labels(charset_mode: str = "literal") -> List[str]:
    """Get codec labels in display order"""
    cfg = TranscodeConfig(charset_mode=charset_mode)
    return [codec.label for codec in codecs_for_config(cfg)]


def get_default_mode() -> str:
    return Mode.parse(TranscodeConfig().mode).value


def get_modes() -> List[str]:
    """Get available transcoding modes"""
    return [mode.value for mode in Mode]


def get_charset_modes() -> List[str]:
    """Get available charset behaviours"""
    return list(CHARSET_MODES)


def get_charset_mode_description(charset_mode: str) -> str:
    charset_mode = charset_mode.lower()
    if charset_mode == "literal":
        return "Charset codecs re-read the UTF-8 bytes of the input (not a round-trip)"
    if charset_mode == "raw":
        return "Charset codecs treat each character as one byte of the charset"
    return "Unknown charset mode"
