from encode_checkr.encoding_schemes.registry import (
    CODECS,
    DEFAULT_CHARSETS,
    Codec,
    build_registry,
    get_codec,
)

__all__ = [
    "CODECS",
    "DEFAULT_CHARSETS",
    "Codec",
    "build_registry",
    "get_codec",
]
