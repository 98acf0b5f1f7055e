from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from encode_checkr.encoding_schemes.registry import (
    CODECS,
    DEFAULT_CHARSETS,
    Codec,
    build_registry,
)
from encode_checkr.pipeline.config import Mode, TranscodeConfig
from encode_checkr.pipeline.invocation import InvocationResult, safe_invoke


@dataclass(frozen=True)
class TranscodeRow:
    label: str
    result: InvocationResult


def codecs_for_config(cfg: Optional[TranscodeConfig] = None) -> Tuple[Codec, ...]:
    """
    Registry for `cfg`; the shared default registry when nothing is customised.
    """
    if cfg is None:
        return CODECS
    if tuple(cfg.charsets) == DEFAULT_CHARSETS and cfg.charset_mode.lower() == "literal":
        return CODECS
    return build_registry(cfg.charsets, cfg.charset_mode)


def transcode(codec: Codec, value: str, mode: "Mode | str") -> InvocationResult:
    """
    Dispatch to the codec operation selected by `mode`.
    """
    mode = Mode.parse(mode)
    if mode is Mode.ENCODE:
        return safe_invoke(codec.encode, value)
    return safe_invoke(codec.decode, value)


def transcode_all(
    value: str,
    mode: "Mode | str",
    codecs: Optional[Sequence[Codec]] = None,
    include_variants: bool = False,
) -> List[TranscodeRow]:
    """
    Run `value` through every codec in registry order.

    With `include_variants`, codecs carrying a hex decode path add a
    "<label> (hex decode)" row after their own row in decode mode.
    """
    mode = Mode.parse(mode)
    if codecs is None:
        codecs = CODECS

    rows: List[TranscodeRow] = []
    for codec in codecs:
        rows.append(TranscodeRow(codec.label, transcode(codec, value, mode)))
        if include_variants and mode is Mode.DECODE and codec.hex_decode is not None:
            rows.append(
                TranscodeRow(f"{codec.label} (hex decode)", safe_invoke(codec.hex_decode, value))
            )
    return rows


def transcode_with_config(value: str, cfg: TranscodeConfig) -> List[TranscodeRow]:
    return transcode_all(
        value,
        cfg.mode,
        codecs=codecs_for_config(cfg),
        include_variants=cfg.include_variants,
    )
