from encode_checkr.pipeline.config import Mode, TranscodeConfig
from encode_checkr.pipeline.invocation import Failure, Success, safe_invoke, try_func
from encode_checkr.pipeline.runner import (
    TranscodeRow,
    codecs_for_config,
    transcode,
    transcode_all,
    transcode_with_config,
)


__all__ = [
    "Mode",
    "TranscodeConfig",
    "Failure",
    "Success",
    "safe_invoke",
    "try_func",
    "TranscodeRow",
    "codecs_for_config",
    "transcode",
    "transcode_all",
    "transcode_with_config",
]
