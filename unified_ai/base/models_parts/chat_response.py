"""
ChatResponse DTO representing a normalized provider response.

``text`` is ``None`` (never ``""``) when the provider returned no textual
content, e.g. on a safety refusal. ``raw`` holds the decoded response body and
is excluded from :meth:`ChatResponse.to_dict` so large payloads are not logged
by accident.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .finish_reason import FinishReason
from .usage import Usage


@dataclass(frozen=True)
class ChatResponse:
    """Provider-agnostic result of a single chat completion call.

    Attributes:
        text: Concatenated text content, or ``None``.
        finish_reason: Canonical finish reason.
        usage: Token usage, or ``None`` when the provider sent no usage block.
        raw_finish_reason: Provider's own stop/finish code.
        raw: Decoded provider response body.
    """

    text: Optional[str]
    finish_reason: FinishReason = FinishReason.UNKNOWN
    usage: Optional[Usage] = None
    raw_finish_reason: Any = None
    raw: Any = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary excluding the raw body."""
        return {
            "text": self.text,
            "finish_reason": self.finish_reason.value,
            "usage": self.usage.to_dict() if self.usage else None,
            "raw_finish_reason": self.raw_finish_reason,
        }


__all__ = ["ChatResponse"]
