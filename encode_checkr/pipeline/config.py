from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from encode_checkr.encoding_schemes.registry import DEFAULT_CHARSETS


class Mode(Enum):
    ENCODE = "encode"
    DECODE = "decode"

    @classmethod
    def parse(cls, value: "Mode | str") -> "Mode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unsupported mode: {value}") from None


@dataclass
class TranscodeConfig:
    """
    Configuration for the transcoding pipeline.
    """
    mode: str = "encode"
    charsets: Tuple[str, ...] = DEFAULT_CHARSETS
    # "literal" re-reads UTF-8 bytes with the charset, "raw" treats each
    # character as one byte of the charset.
    charset_mode: str = "literal"
    include_variants: bool = False
