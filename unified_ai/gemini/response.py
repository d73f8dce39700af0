"""Gemini ``generateContent`` response normalizer."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..base.models import ChatResponse, FinishReason
from ..base.tokens import build_usage
from ..base.utils.mapping import dig, dig_list, dig_str

FINISH_REASONS: Dict[str, FinishReason] = {
    "STOP": FinishReason.COMPLETE,
    "MAX_TOKENS": FinishReason.TOKEN_LIMIT,
    "SAFETY": FinishReason.CONTENT_FILTERED,
    "RECITATION": FinishReason.CONTENT_FILTERED,
    "TOOL_CALLS": FinishReason.TOOL_CALL,
}


def extract_text(data: Any) -> Optional[str]:
    """Join the first candidate's text parts; ``None`` when the prompt was blocked."""
    if dig(data, "promptFeedback", "blockReason") is not None:
        return None
    parts: List[str] = [
        part["text"]
        for part in dig_list(data, "candidates", 0, "content", "parts")
        if isinstance(part, dict) and isinstance(part.get("text"), str)
    ]
    if parts:
        return "\n".join(parts) or None
    return dig_str(data, "candidates", 0, "text") or None


def parse_response(data: Any) -> ChatResponse:
    """Map a raw Gemini response body to :class:`ChatResponse`."""
    raw_reason = dig(data, "candidates", 0, "finishReason")
    reason = (
        FINISH_REASONS.get(raw_reason, FinishReason.UNKNOWN)
        if isinstance(raw_reason, str)
        else FinishReason.UNKNOWN
    )
    usage = build_usage(
        dig(data, "usageMetadata"),
        input_keys=("promptTokenCount",),
        output_keys=("candidatesTokenCount",),
        reasoning_keys=("thoughtsTokenCount",),
    )
    return ChatResponse(
        text=extract_text(data),
        finish_reason=reason,
        usage=usage,
        raw_finish_reason=raw_reason,
        raw=data,
    )


__all__ = ["parse_response", "extract_text", "FINISH_REASONS"]
