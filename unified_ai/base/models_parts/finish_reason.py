"""Canonical finish reason enumeration."""
from __future__ import annotations

from enum import Enum


class FinishReason(str, Enum):
    """Why generation stopped, normalized across providers."""

    COMPLETE = "complete"
    TOKEN_LIMIT = "token_limit"
    CONTENT_FILTERED = "content_filtered"
    TOOL_CALL = "tool_call"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"


__all__ = ["FinishReason"]
