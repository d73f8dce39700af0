"""Map HTTP statuses and arbitrary exceptions to :class:`ErrorCode` values."""
from __future__ import annotations

import asyncio
from typing import Dict, Optional

import httpx

from .error_code import ErrorCode
from .exceptions import AccessError

STATUS_CODES: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
    529: ErrorCode.UNAVAILABLE,  # Anthropic "overloaded"
}

_TIMEOUT_TYPES = (TimeoutError, asyncio.TimeoutError, httpx.TimeoutException)


def classify_status(status_code: int) -> ErrorCode:
    """Code for an HTTP error status; unlisted 5xx map to ``SERVER_ERROR``."""
    code = STATUS_CODES.get(status_code)
    if code is not None:
        return code
    return ErrorCode.SERVER_ERROR if 500 <= status_code < 600 else ErrorCode.UNKNOWN


def status_of(exc: BaseException) -> Optional[int]:
    """HTTP status carried by ``exc`` as ``status_code``, ``status`` or ``response.status_code``."""
    candidates = (
        getattr(exc, "status_code", None),
        getattr(exc, "status", None),
        getattr(getattr(exc, "response", None), "status_code", None),
    )
    for value in candidates:
        if isinstance(value, int) and not isinstance(value, bool) and 100 <= value < 600:
            return value
    return None


def classify_exception(exc: BaseException) -> ErrorCode:
    """Best-effort code for ``exc``.

    Package errors keep their own code, timeouts map to ``TIMEOUT``, anything
    exposing an HTTP status is classified by that status, the rest is
    ``UNKNOWN``.
    """
    if isinstance(exc, AccessError):
        return exc.code
    if isinstance(exc, _TIMEOUT_TYPES):
        return ErrorCode.TIMEOUT
    status = status_of(exc)
    if status is None:
        return ErrorCode.UNKNOWN
    return classify_status(status)


__all__ = ["classify_status", "classify_exception", "status_of", "STATUS_CODES"]
