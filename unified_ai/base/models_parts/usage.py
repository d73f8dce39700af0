"""
Usage DTO describing token accounting for one provider call.

Counts that a provider does not report stay ``None``; they are never
zero-filled. ``raw`` keeps the provider's usage block as received.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Usage:
    """Token usage reported by a provider.

    Attributes:
        input_tokens: Prompt side tokens.
        output_tokens: Completion side tokens.
        reasoning_tokens: Tokens spent on hidden reasoning, when reported.
        raw: Provider usage mapping as received.
    """

    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None
    reasoning_tokens: Optional[int] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Optional[int]]:
        """Return counts only, suitable for structured logs."""
        return {
            "input": self.input_tokens,
            "output": self.output_tokens,
            "reasoning": self.reasoning_tokens,
        }


__all__ = ["Usage"]
