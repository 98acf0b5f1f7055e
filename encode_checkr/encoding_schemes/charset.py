"""
Charset transcoding codecs (iso-8859-2, windows-874, ...).

Two behaviours are provided:

- literal: `encode` shows the UTF-8 bytes of the text as comma-separated
  decimal values, `decode` re-reads those UTF-8 bytes with the named charset.
  This mirrors a browser TextEncoder/TextDecoder pairing and is *not* a
  round-trip.
- raw: `encode` encodes the text with the named charset and shows one
  character per byte, `decode` reads every character as one byte of that
  charset. Round-trips for text representable in the charset.

Labels are WHATWG encoding names. Unknown labels only fail when used.
"""

import codecs
from functools import partial
from typing import Callable, Dict, Tuple

# WHATWG labels Python does not know under the same name.
WHATWG_ALIASES: Dict[str, str] = {
    "windows-874": "cp874",
    "dos-874": "cp874",
    "iso-8859-11": "cp874",
    "tis-620": "cp874",
    "x-mac-cyrillic": "mac-cyrillic",
}

CHARSET_MODES = ("literal", "raw")


def resolve_charset(label: str) -> str:
    """Map a charset label to a Python codec name, raising LookupError if unknown."""
    name = WHATWG_ALIASES.get(label.strip().lower(), label.strip())
    return codecs.lookup(name).name


def utf8_byte_view(value: str) -> str:
    return ",".join(str(byte) for byte in value.encode("utf-8"))


def literal_decode(value: str, charset: str) -> str:
    return value.encode("utf-8").decode(resolve_charset(charset), errors="replace")


def raw_encode(value: str, charset: str) -> str:
    return value.encode(resolve_charset(charset)).decode("latin-1")


def raw_decode(value: str, charset: str) -> str:
    try:
        raw = value.encode("latin-1")
    except UnicodeEncodeError as exc:
        raise ValueError(
            f"Character {value[exc.start]!r} at position {exc.start} is not a byte value"
        ) from None
    return raw.decode(resolve_charset(charset), errors="replace")


def charset_operations(
    charset: str,
    charset_mode: str = "literal",
) -> Tuple[Callable[[str], str], Callable[[str], str]]:
    """Return the (encode, decode) pair for `charset` in the given mode."""
    charset_mode = charset_mode.lower()
    if charset_mode == "literal":
        return utf8_byte_view, partial(literal_decode, charset=charset)
    if charset_mode == "raw":
        return partial(raw_encode, charset=charset), partial(raw_decode, charset=charset)
    raise ValueError(f"Unsupported charset mode: {charset_mode}")
