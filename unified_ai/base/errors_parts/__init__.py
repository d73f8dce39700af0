"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `unified_ai.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .exceptions import (
    AccessError,
    ApiError,
    CommunicationError,
    LogicError,
    ServiceError,
    UnexpectedResponseError,
)
from .classification import classify_exception, classify_status

__all__ = [
    "ErrorCode",
    "AccessError",
    "LogicError",
    "ServiceError",
    "ApiError",
    "CommunicationError",
    "UnexpectedResponseError",
    "classify_exception",
    "classify_status",
]
