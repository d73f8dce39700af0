"""Grok chat-completions response normalizer."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..base.models import ChatResponse, FinishReason
from ..base.openai_style_parts import extract_choice_text, extract_finish_reason, has_refusal
from ..base.tokens import build_usage
from ..base.utils.mapping import dig

FINISH_REASONS: Dict[Optional[str], FinishReason] = {
    None: FinishReason.COMPLETE,
    "stop": FinishReason.COMPLETE,
    "length": FinishReason.TOKEN_LIMIT,
    "tool_calls": FinishReason.TOOL_CALL,
    "content_filter": FinishReason.CONTENT_FILTERED,
}


def parse_response(data: Any) -> ChatResponse:
    """Map a raw Grok response body to :class:`ChatResponse`.

    A refusal without any text is reported as ``CONTENT_FILTERED`` regardless
    of the finish code.
    """
    text = extract_choice_text(data)
    raw_reason = extract_finish_reason(data)
    if text is None and has_refusal(data):
        reason = FinishReason.CONTENT_FILTERED
    elif raw_reason is None or isinstance(raw_reason, str):
        reason = FINISH_REASONS.get(raw_reason, FinishReason.UNKNOWN)
    else:
        reason = FinishReason.UNKNOWN
    usage = build_usage(
        dig(data, "usage"),
        input_keys=("prompt_tokens",),
        output_keys=("completion_tokens",),
        reasoning_keys=(("completion_tokens_details", "reasoning_tokens"),),
    )
    return ChatResponse(
        text=text,
        finish_reason=reason,
        usage=usage,
        raw_finish_reason=raw_reason,
        raw=data,
    )


__all__ = ["parse_response", "FINISH_REASONS"]
