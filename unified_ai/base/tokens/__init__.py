"""Token usage helpers."""

from .extraction import build_usage, coerce_int

__all__ = ["build_usage", "coerce_int"]
