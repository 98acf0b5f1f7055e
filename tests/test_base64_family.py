import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from encode_checkr.encoding_schemes import base64_family as b64


ROUNDTRIP_PAIRS = [
    (b64.base64_encode, b64.base64_decode),
    (b64.url_safe_encode, b64.url_safe_decode),
    (b64.hex_encode, b64.hex_decode),
    (b64.binary_encode, b64.binary_decode),
    (b64.ascii_encode, b64.ascii_decode),
]


def test_base64_hello():
    assert b64.base64_encode("Hello") == "SGVsbG8="
    assert b64.base64_decode("SGVsbG8=") == "Hello"


def test_base64_decode_tolerates_missing_padding_and_whitespace():
    assert b64.base64_decode("SGVs bG8") == "Hello"
    assert b64.base64_decode("SGVsbG8=\n") == "Hello"


def test_base64_decode_rejects_garbage():
    with pytest.raises(ValueError):
        b64.base64_decode("!!!")


def test_base64_decode_rejects_bad_length():
    with pytest.raises(ValueError, match="not correctly encoded"):
        b64.base64_decode("SGVsb")


def test_btoa_rejects_characters_above_latin1():
    with pytest.raises(ValueError, match="Latin1"):
        b64.base64_encode("€")


def test_url_safe_strips_padding_and_remaps():
    assert b64.url_safe_encode("Hello") == "SGVsbG8"
    # 0xfb 0xff encodes to "+/8=" in standard base64
    assert b64.base64_encode("\xfb\xff") == "+/8="
    assert b64.url_safe_encode("\xfb\xff") == "-_8"
    assert b64.url_safe_decode("-_8") == "\xfb\xff"


def test_url_safe_hex_decode_is_not_the_primary_decode():
    assert b64.url_safe_hex_decode("") == ""
    with pytest.raises(ValueError):
        b64.url_safe_hex_decode("SGVsbG8")


def test_hex_encode_uses_two_digits_per_character():
    assert b64.hex_encode("Hello") == "534756736247383d"
    assert b64.hex_decode("534756736247383d") == "Hello"
    assert b64.hex_decode("534756736247383D") == "Hello"


def test_hex_decode_errors():
    with pytest.raises(ValueError, match="Invalid base-16 group"):
        b64.hex_decode("53zz")
    with pytest.raises(ValueError, match="multiple of 2"):
        b64.hex_decode("534")
    # valid hex, but "!!!" is not base64
    with pytest.raises(ValueError):
        b64.hex_decode("212121")


def test_binary_encode_uses_eight_digits_per_character():
    encoded = b64.binary_encode("Hi")
    # btoa("Hi") == "SGk="
    assert encoded == "01010011" "01000111" "01101011" "00111101"
    assert b64.binary_decode(encoded) == "Hi"


def test_binary_decode_rejects_non_binary_digits():
    with pytest.raises(ValueError, match="Invalid base-2 group"):
        b64.binary_decode("01010012")


def test_ascii_codec_handles_any_bmp_text():
    text = "Grüße, สวัสดี €"
    encoded = b64.ascii_encode(text)

    assert b64.ascii_decode(encoded) == text


def test_ascii_encode_known_value():
    # "A" packs to "A\x00"
    assert b64.ascii_encode("A") == "QQA="


def test_ascii_decode_rejects_odd_byte_count():
    # "QQ==" decodes to a single byte
    with pytest.raises(ValueError, match="even"):
        b64.ascii_decode("QQ==")


@pytest.mark.parametrize("encode, decode", ROUNDTRIP_PAIRS)
@pytest.mark.parametrize("text", ["", "a", "Hello, World!", "ab?>~", "café \xff"])
def test_roundtrip(encode, decode, text):
    assert decode(encode(text)) == text


@pytest.mark.parametrize("encode, decode", ROUNDTRIP_PAIRS)
def test_empty_input_is_identity(encode, decode):
    assert encode("") == ""
    assert decode("") == ""


if __name__ == "__main__":
    print("Running base64 family tests directly...")
    test_base64_hello()
    test_url_safe_strips_padding_and_remaps()
    test_hex_encode_uses_two_digits_per_character()
    test_binary_encode_uses_eight_digits_per_character()
    test_ascii_codec_handles_any_bmp_text()
    print("Base64 family tests completed.")
