"""Safe navigation over decoded JSON values.

Provider responses are decoded JSON of unknown shape. ``dig`` walks a path of
keys and indexes and returns ``None`` instead of raising when any step is
missing or has the wrong type.
"""
from __future__ import annotations

from typing import Any, Mapping, Sequence


def dig(obj: Any, *path: Any) -> Any:
    """Return the value at ``path`` inside ``obj`` or ``None``.

    String path elements index mappings; integer elements index lists.

    Examples:
        >>> dig({"a": [{"b": 1}]}, "a", 0, "b")
        1
        >>> dig({"a": None}, "a", "b") is None
        True
    """
    current = obj
    for key in path:
        if isinstance(key, int) and not isinstance(key, bool):
            if not isinstance(current, Sequence) or isinstance(current, (str, bytes)):
                return None
            if key >= len(current) or key < -len(current):
                return None
            current = current[key]
        else:
            if not isinstance(current, Mapping):
                return None
            current = current.get(key)
        if current is None:
            return None
    return current


def dig_str(obj: Any, *path: Any) -> str | None:
    """Like :func:`dig` but only returns string values."""
    value = dig(obj, *path)
    return value if isinstance(value, str) else None


def dig_list(obj: Any, *path: Any) -> list:
    """Like :func:`dig` but returns an empty list unless the value is a list."""
    value = dig(obj, *path)
    return value if isinstance(value, list) else []


__all__ = ["dig", "dig_str", "dig_list"]
