"""
Codec registry to keep transcoding wiring simple.

Each codec is an immutable label plus a pair of encode/decode functions.
The registry is an ordered tuple; position defines display order.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Tuple

from encode_checkr.encoding_schemes import base64_family as b64
from encode_checkr.encoding_schemes.charset import charset_operations


EncodeFn = Callable[[str], str]
DecodeFn = Callable[[str], str]

DEFAULT_CHARSETS: Tuple[str, ...] = ("iso-8859-2", "windows-874")


@dataclass(frozen=True)
class Codec:
    """
    A named encode/decode pair.

    `hex_decode` is an extra decode path only the URL-safe codec carries.
    """
    label: str
    encode: EncodeFn
    decode: DecodeFn
    hex_decode: Optional[DecodeFn] = None


BASE64_FAMILY: Tuple[Codec, ...] = (
    Codec("Base64", b64.base64_encode, b64.base64_decode),
    Codec(
        "Base32",
        b64.url_safe_encode,
        b64.url_safe_decode,
        hex_decode=b64.url_safe_hex_decode,
    ),
    Codec("Hex (Base 16)", b64.hex_encode, b64.hex_decode),
    Codec("Binary", b64.binary_encode, b64.binary_decode),
    Codec("ASCII", b64.ascii_encode, b64.ascii_decode),
)


def build_registry(
    charsets: Sequence[str] = DEFAULT_CHARSETS,
    charset_mode: str = "literal",
) -> Tuple[Codec, ...]:
    """
    Build the ordered codec tuple: the base64 family, then one codec per charset.

    Charset names are not checked here; an unknown one fails when invoked.
    """
    charset_codecs = []
    for charset in charsets:
        encode, decode = charset_operations(charset, charset_mode)
        charset_codecs.append(Codec(charset, encode, decode))

    codecs = BASE64_FAMILY + tuple(charset_codecs)
    labels = [codec.label.lower() for codec in codecs]
    if len(set(labels)) != len(labels):
        raise ValueError(f"Duplicate codec labels: {[codec.label for codec in codecs]}")
    return codecs


CODECS: Tuple[Codec, ...] = build_registry()

_BY_LABEL: Dict[str, Codec] = {codec.label.lower(): codec for codec in CODECS}


def get_codec(label: str) -> Codec:
    """Look up a default-registry codec by label (case-insensitive)."""
    try:
        return _BY_LABEL[label.lower()]
    except KeyError:
        raise KeyError(f"Unknown codec: {label}") from None
