"""Timeout configuration for HTTP transport.

This module centralizes the timeout values used by the default transport so no
numeric literals are scattered across provider modules.

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use only. Supported environment variables (all optional):
        UNIFIED_AI_CONNECT_TIMEOUT
        UNIFIED_AI_REQUEST_TIMEOUT

Invalid or non-positive overrides are ignored and the defaults kept.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

CONNECT_TIMEOUT_ENV = "UNIFIED_AI_CONNECT_TIMEOUT"
REQUEST_TIMEOUT_ENV = "UNIFIED_AI_REQUEST_TIMEOUT"


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        connect_timeout_seconds: Time allowed to establish a connection.
        request_timeout_seconds: Overall budget for a single request; never
            lower than the connect timeout.
    """

    connect_timeout_seconds: float = 10.0
    request_timeout_seconds: float = 60.0


_CACHED: Optional[TimeoutConfig] = None


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def get_timeout_config() -> TimeoutConfig:
    """Return the cached timeout configuration, reading env overrides once."""
    global _CACHED
    if _CACHED is not None:
        return _CACHED
    defaults = TimeoutConfig()
    connect = _env_float(CONNECT_TIMEOUT_ENV) or defaults.connect_timeout_seconds
    request = _env_float(REQUEST_TIMEOUT_ENV) or defaults.request_timeout_seconds
    _CACHED = TimeoutConfig(
        connect_timeout_seconds=connect,
        request_timeout_seconds=max(connect, request),
    )
    return _CACHED


def reset_timeout_config() -> None:
    """Drop the cached configuration so the next call re-reads the environment."""
    global _CACHED
    _CACHED = None


__all__ = ["TimeoutConfig", "get_timeout_config", "reset_timeout_config"]
