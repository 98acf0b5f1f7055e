from typing import Dict, Tuple

# base -> (digits per byte, allowed digits)
DIGIT_GROUPS: Dict[int, Tuple[int, str]] = {
    2: (8, "01"),
    16: (2, "0123456789abcdefABCDEF"),
}


def bytes_to_bitstring(data: bytes) -> str:
    """Convert bytes -> bitstring (8 bits per byte)."""
    return "".join(f"{byte:08b}" for byte in data)


def bitstring_to_bytes(bits: str) -> bytes:
    """
    Convert bitstring -> bytes.

    Length must be a multiple of 8.
    """
    return digit_groups_to_bytes(bits, base=2)


def bytes_to_digit_groups(data: bytes, base: int) -> str:
    """Render each byte as a fixed-width group of base-2 or base-16 digits."""
    if base == 2:
        return bytes_to_bitstring(data)
    if base == 16:
        return data.hex()
    raise ValueError(f"Unsupported digit base: {base}")


def digit_groups_to_bytes(text: str, base: int) -> bytes:
    """
    Parse fixed-width digit groups back into bytes.

    Every group must consist of valid digits for `base`.
    """
    if base not in DIGIT_GROUPS:
        raise ValueError(f"Unsupported digit base: {base}")
    width, digits = DIGIT_GROUPS[base]
    if len(text) % width != 0:
        raise ValueError(
            f"Base-{base} string length must be multiple of {width}, got {len(text)}"
        )
    out = bytearray()
    for i in range(0, len(text), width):
        group = text[i:i + width]
        if any(ch not in digits for ch in group):
            raise ValueError(f"Invalid base-{base} group '{group}' at position {i}")
        out.append(int(group, base))
    return bytes(out)


def pack(value: str) -> str:
    """
    Split every UTF-16 code unit of `value` into two byte-range characters.

    Low byte first. For text in the Basic Multilingual Plane the result is
    exactly twice as long as the input.
    """
    return value.encode("utf-16-le", "surrogatepass").decode("latin-1")


def unpack(value: str) -> str:
    """
    Reverse `pack`: join every pair of byte-range characters into one code unit.
    """
    if len(value) % 2 != 0:
        raise ValueError(f"Packed string length must be even, got {len(value)}")
    try:
        raw = value.encode("latin-1")
    except UnicodeEncodeError as exc:
        raise ValueError(
            f"Packed string contains non-byte character {value[exc.start]!r} "
            f"at position {exc.start}"
        ) from None
    return raw.decode("utf-16-le", "surrogatepass")
