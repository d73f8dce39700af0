"""Context fields attached to every structured log event."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Provider, model and batch identifiers for one logging scope.

    ``extra`` holds ad-hoc fields; ``None`` values are omitted from
    :meth:`to_dict`.
    """

    provider: Optional[str] = None
    model: Optional[str] = None
    batch_id: Optional[str] = None
    custom_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        out = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "extra"}
        out.update(self.extra)
        return {k: v for k, v in out.items() if v is not None}


__all__ = ["LogContext"]
