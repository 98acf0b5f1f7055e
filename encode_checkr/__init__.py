"""Encode Checkr: view a string under many text/byte encodings at once."""

from encode_checkr.encoding_schemes import CODECS, Codec, build_registry, get_codec
from encode_checkr.pipeline import (
    Failure,
    Mode,
    Success,
    TranscodeConfig,
    TranscodeRow,
    safe_invoke,
    transcode,
    transcode_all,
    try_func,
)

__version__ = "0.1.0"

__all__ = [
    "CODECS",
    "Codec",
    "build_registry",
    "get_codec",
    "Failure",
    "Mode",
    "Success",
    "TranscodeConfig",
    "TranscodeRow",
    "safe_invoke",
    "transcode",
    "transcode_all",
    "try_func",
]
