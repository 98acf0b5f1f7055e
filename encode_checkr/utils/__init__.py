"""Utility helpers shared across codec components."""

from encode_checkr.utils.bits_bytes_utils import (
    bitstring_to_bytes,
    bytes_to_bitstring,
    bytes_to_digit_groups,
    digit_groups_to_bytes,
    pack,
    unpack,
)

__all__ = [
    "bitstring_to_bytes",
    "bytes_to_bitstring",
    "bytes_to_digit_groups",
    "digit_groups_to_bytes",
    "pack",
    "unpack",

]
