"""Timestamp parsing for batch status payloads.

Both helpers return an aware UTC ``datetime`` or ``None``; malformed input
never raises.
"""
from __future__ import annotations

import re
from contextlib import suppress
from datetime import datetime, timezone
from typing import Any, Optional

_FRACTION = re.compile(r"\.(\d+)")


def parse_epoch(raw: Any) -> Optional[datetime]:
    """Parse a Unix epoch value (seconds) into a UTC ``datetime``.

    Booleans, non-numeric strings, non-finite and out-of-range values yield
    ``None``.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    with suppress(ValueError, TypeError, OverflowError, OSError):
        return datetime.fromtimestamp(float(raw), tz=timezone.utc)
    return None


def parse_iso8601(raw: Any) -> Optional[datetime]:
    """Parse an ISO-8601 string into a UTC ``datetime``.

    A trailing ``Z`` is accepted and fractional seconds longer than
    microsecond precision are truncated. Naive values are assumed UTC.
    """
    if not isinstance(raw, str) or not raw.strip():
        return None
    text = raw.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    with suppress(ValueError, TypeError):
        dt = datetime.fromisoformat(text)
        return dt.astimezone(timezone.utc) if dt.tzinfo else dt.replace(tzinfo=timezone.utc)
    return None


__all__ = ["parse_epoch", "parse_iso8601"]
