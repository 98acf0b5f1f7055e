"""
Base64-derived codecs operating on byte strings.

A byte string is a `str` whose characters are all in range 0-255, one
character per byte. `btoa`/`atob` follow the browser functions of the same
name, so every codec here accepts and returns plain text.
"""

import base64

from encode_checkr.utils.bits_bytes_utils import (
    bytes_to_digit_groups,
    digit_groups_to_bytes,
    pack,
    unpack,
)

ASCII_WHITESPACE = " \t\n\f\r"

_TO_URL_SAFE = str.maketrans({"+": "-", "/": "_"})
_FROM_URL_SAFE = str.maketrans({"-": "+", "_": "/"})


def btoa(value: str) -> str:
    """Base64-encode a byte string."""
    try:
        raw = value.encode("latin-1")
    except UnicodeEncodeError as exc:
        raise ValueError(
            f"Character {value[exc.start]!r} at position {exc.start} "
            "is outside of the Latin1 range"
        ) from None
    return base64.b64encode(raw).decode("ascii")


def atob(value: str) -> str:
    """
    Base64-decode into a byte string.

    Whitespace is ignored and missing padding is tolerated.
    """
    data = "".join(ch for ch in value if ch not in ASCII_WHITESPACE)
    if len(data) % 4 == 1:
        raise ValueError("The string to be decoded is not correctly encoded.")
    data += "=" * (-len(data) % 4)
    return base64.b64decode(data, validate=True).decode("latin-1")


def base64_encode(value: str) -> str:
    return btoa(value)


def base64_decode(value: str) -> str:
    return atob(value)


def url_safe_encode(value: str) -> str:
    """Base64 without padding, `+`/`/` replaced by `-`/`_`."""
    return btoa(value).replace("=", "").translate(_TO_URL_SAFE)


def url_safe_decode(value: str) -> str:
    return atob(value.translate(_FROM_URL_SAFE))


def url_safe_hex_decode(value: str) -> str:
    """
    Alternate decode path of the URL-safe codec.

    Every character is read as a single hex digit and turned into the
    character with that code before base64 decoding.
    """
    digits = value.translate(_FROM_URL_SAFE)
    chars = []
    for pos, ch in enumerate(digits):
        try:
            chars.append(chr(int(ch, 16)))
        except ValueError:
            raise ValueError(f"Invalid hex digit {ch!r} at position {pos}") from None
    return atob("".join(chars))


def _digits_encode(value: str, base: int) -> str:
    return bytes_to_digit_groups(btoa(value).encode("ascii"), base=base)


def _digits_decode(value: str, base: int) -> str:
    return atob(digit_groups_to_bytes(value, base=base).decode("latin-1"))


def hex_encode(value: str) -> str:
    """Two lowercase hex digits per character of the base64 form."""
    return _digits_encode(value, base=16)


def hex_decode(value: str) -> str:
    return _digits_decode(value, base=16)


def binary_encode(value: str) -> str:
    """Eight binary digits per character of the base64 form."""
    return _digits_encode(value, base=2)


def binary_decode(value: str) -> str:
    return _digits_decode(value, base=2)


def ascii_encode(value: str) -> str:
    """Base64 of the UTF-16 code units, two bytes each, low byte first."""
    return btoa(pack(value))


def ascii_decode(value: str) -> str:
    return unpack(atob(value))
