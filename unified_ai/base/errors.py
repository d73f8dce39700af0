"""Unified error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``unified_ai.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.exceptions import (
    AccessError,
    ApiError,
    CommunicationError,
    LogicError,
    ServiceError,
    UnexpectedResponseError,
)
from .errors_parts.classification import classify_exception, classify_status

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
