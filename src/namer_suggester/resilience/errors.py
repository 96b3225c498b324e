"""Error classification for provider failure diagnostics.

Classifies exceptions raised inside an AI provider call so the
debug log says what kind of failure was absorbed:
- transport (network errors, 429) and server (5xx) failures
- timeouts of the HTTP request or the CLI subprocess
- client failures (bad key, 4xx)
- malformed payloads (missing fields, invalid JSON)
"""

from __future__ import annotations

import asyncio
import json
import subprocess
from enum import Enum


class ErrorClass(Enum):
    TRANSIENT = "transient"  # 429, network errors — retryable
    SERVER = "server"  # 500, 502, 503 — retryable
    TIMEOUT = "timeout"  # deadline exceeded — retryable with backoff
    CLIENT = "client"  # 400, 401, 403 — do NOT retry
    MALFORMED = "malformed"  # unexpected payload shape — do NOT retry
    UNKNOWN = "unknown"  # unclassified — do NOT retry


def _status_code(error: BaseException) -> int | None:
    """Read a status code from the error or its attached response."""
    status_code = getattr(error, "status_code", None)
    if isinstance(status_code, int):
        return status_code
    response = getattr(error, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return status_code
    return None


def classify_error(error: BaseException) -> ErrorClass:
    """Classify an error to determine handling strategy.

    Checks structured attributes first (status_code on litellm
    exceptions, response.status_code on httpx), falls back to
    exception types and then string matching for untyped exceptions.
    """
    status_code = _status_code(error)
    if status_code is not None:
        if status_code == 429:
            return ErrorClass.TRANSIENT
        if 400 <= status_code < 500:
            return ErrorClass.CLIENT
        if 500 <= status_code < 600:
            return ErrorClass.SERVER

    if isinstance(
        error,
        (TimeoutError, asyncio.TimeoutError, subprocess.TimeoutExpired),
    ):
        return ErrorClass.TIMEOUT

    if isinstance(
        error,
        (json.JSONDecodeError, KeyError, IndexError, TypeError, AttributeError),
    ):
        return ErrorClass.MALFORMED

    if isinstance(error, ConnectionError):
        return ErrorClass.TRANSIENT

    msg = str(error).lower()

    if "timeout" in msg or "timed out" in msg:
        return ErrorClass.TIMEOUT
    if "429" in msg or "rate limit" in msg or "rate_limit" in msg:
        return ErrorClass.TRANSIENT
    if any(code in msg for code in ("500", "502", "503", "504")):
        return ErrorClass.SERVER
    if "econnrefused" in msg or "connection" in msg:
        return ErrorClass.TRANSIENT
    if any(code in msg for code in ("400", "401", "403", "404")):
        return ErrorClass.CLIENT

    return ErrorClass.UNKNOWN


_RETRYABLE = frozenset({
    ErrorClass.TRANSIENT,
    ErrorClass.SERVER,
    ErrorClass.TIMEOUT,
})


def is_retryable(error: BaseException) -> bool:
    """Return True if the error category supports retry."""
    return classify_error(error) in _RETRYABLE
