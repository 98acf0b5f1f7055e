"""
Safe invocation of codec operations.

One codec failing must never affect the others, so every call is wrapped and
any exception is turned into a `Failure` value.
"""

import os
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Union

# Debug logging controlled by environment variable CODEC_DEBUG
_DEBUG = os.environ.get("CODEC_DEBUG", "").lower() in {"1", "true", "yes"}


def _dbg(msg: str) -> None:
    if _DEBUG:
        print(f"[codec] {msg}", file=sys.stderr)


@dataclass(frozen=True)
class Success:
    text: str

    @property
    def ok(self) -> bool:
        return True

    @property
    def display(self) -> str:
        return self.text


@dataclass(frozen=True)
class Failure:
    message: str

    @property
    def ok(self) -> bool:
        return False

    @property
    def display(self) -> str:
        return f"Error: {self.message}"


InvocationResult = Union[Success, Failure]


def safe_invoke(
    operation: Optional[Callable[[str], str]],
    value: str,
) -> InvocationResult:
    """
    Call `operation(value)` and capture the outcome.

    A missing operation yields an empty success.
    """
    if operation is None:
        return Success("")
    try:
        result = operation(value)
    except Exception as exc:
        message = str(exc) or type(exc).__name__
        _dbg(f"{getattr(operation, '__name__', operation)!s} failed: {message}")
        return Failure(message)
    return Success(str(result))


def try_func(operation: Optional[Callable[[str], str]], value: str) -> str:
    """Like `safe_invoke`, but always returns the display string."""
    return safe_invoke(operation, value).display
