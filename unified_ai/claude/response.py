"""Claude Messages API response normalizer.

Text blocks are joined with newlines in document order. Thinking blocks are
included inline as ``[Thinking: ...]`` annotations. Tool-use and other block
kinds contribute no text.
"""

from __future__ import annotations

from typing import Any, Dict, List

from ..base.models import ChatResponse, FinishReason
from ..base.tokens import build_usage
from ..base.utils.mapping import dig, dig_list

FINISH_REASONS: Dict[str, FinishReason] = {
    "end_turn": FinishReason.COMPLETE,
    "stop_sequence": FinishReason.COMPLETE,
    "max_tokens": FinishReason.TOKEN_LIMIT,
    "tool_use": FinishReason.TOOL_CALL,
    "content_filtered": FinishReason.CONTENT_FILTERED,
    "refusal": FinishReason.CONTENT_FILTERED,
    "pause_turn": FinishReason.UNKNOWN,
}


def extract_text(data: Any) -> str | None:
    parts: List[str] = []
    for block in dig_list(data, "content"):
        if not isinstance(block, dict):
            continue
        kind = block.get("type")
        if kind == "text" and isinstance(block.get("text"), str):
            parts.append(block["text"])
        elif kind == "thinking":
            thought = block.get("thinking", block.get("text", ""))
            parts.append(f"[Thinking: {thought if isinstance(thought, str) else ''}]")
    text = "\n".join(parts)
    return text or None


def parse_response(data: Any) -> ChatResponse:
    """Map a raw Claude response body to :class:`ChatResponse`."""
    raw_reason = dig(data, "stop_reason")
    reason = (
        FINISH_REASONS.get(raw_reason, FinishReason.UNKNOWN)
        if isinstance(raw_reason, str)
        else FinishReason.UNKNOWN
    )
    usage = build_usage(
        dig(data, "usage"),
        input_keys=("input_tokens",),
        output_keys=("output_tokens",),
        reasoning_keys=("reasoning_tokens",),
    )
    return ChatResponse(
        text=extract_text(data),
        finish_reason=reason,
        usage=usage,
        raw_finish_reason=raw_reason,
        raw=data,
    )


__all__ = ["parse_response", "extract_text", "FINISH_REASONS"]
