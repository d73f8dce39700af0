"""HTTP response value returned by transports."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional


@dataclass(frozen=True)
class HttpResponse:
    """Result of a single HTTP exchange.

    Attributes:
        status_code: HTTP status code.
        data: Decoded JSON value when the body was JSON, otherwise the raw
            body text.
        header_map: Header values keyed by lowercased name.
    """

    status_code: int
    data: Any = None
    header_map: Mapping[str, List[str]] = field(default_factory=dict)

    @classmethod
    def build(cls, status_code: int, data: Any = None, headers: Optional[Mapping[str, Any]] = None) -> "HttpResponse":
        """Create a response normalizing header names and values to lists."""
        normalized: Dict[str, List[str]] = {}
        for name, value in (headers or {}).items():
            values = value if isinstance(value, (list, tuple)) else [value]
            normalized.setdefault(name.lower(), []).extend(str(v) for v in values)
        return cls(status_code=status_code, data=data, header_map=normalized)

    def header(self, name: str) -> Optional[str]:
        """Return the first value of the named header, if any."""
        values = self.header_map.get(name.lower())
        return values[0] if values else None

    def headers(self, name: str) -> List[str]:
        """Return all values of the named header."""
        return list(self.header_map.get(name.lower(), []))


__all__ = ["HttpResponse"]
