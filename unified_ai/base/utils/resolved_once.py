"""Lazily computed, memoized value cell."""
from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class ResolvedOnce(Generic[T]):
    """Compute a value on first access and return the cached value afterwards.

    The factory runs at most once per successful resolution. When it raises,
    the cell stays unresolved and the exception propagates, so a later call
    may try again.
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._value: Optional[T] = None
        self._resolved = False

    @property
    def resolved(self) -> bool:
        return self._resolved

    def get(self) -> T:
        if not self._resolved:
            self._value = self._factory()
            self._resolved = True
        return self._value  # type: ignore[return-value]


__all__ = ["ResolvedOnce"]
