"""DeepSeek chat-completions response normalizer.

Unlike Grok, a missing finish code maps to ``UNKNOWN``.
"""

from __future__ import annotations

from typing import Any, Dict

from ..base.models import ChatResponse, FinishReason
from ..base.openai_style_parts import extract_choice_text, extract_finish_reason
from ..base.tokens import build_usage
from ..base.utils.mapping import dig

FINISH_REASONS: Dict[str, FinishReason] = {
    "stop": FinishReason.COMPLETE,
    "length": FinishReason.TOKEN_LIMIT,
    "content_filter": FinishReason.CONTENT_FILTERED,
    "tool_calls": FinishReason.TOOL_CALL,
    "insufficient_system_resource": FinishReason.UNKNOWN,
}


def parse_response(data: Any) -> ChatResponse:
    """Map a raw DeepSeek response body to :class:`ChatResponse`."""
    raw_reason = extract_finish_reason(data)
    reason = (
        FINISH_REASONS.get(raw_reason, FinishReason.UNKNOWN)
        if isinstance(raw_reason, str)
        else FinishReason.UNKNOWN
    )
    usage = build_usage(
        dig(data, "usage"),
        input_keys=("prompt_tokens", "input_tokens"),
        output_keys=("completion_tokens", "output_tokens"),
        reasoning_keys=("reasoning_tokens", ("completion_tokens_details", "reasoning_tokens")),
    )
    return ChatResponse(
        text=extract_choice_text(data),
        finish_reason=reason,
        usage=usage,
        raw_finish_reason=raw_reason,
        raw=data,
    )


__all__ = ["parse_response", "FINISH_REASONS"]
