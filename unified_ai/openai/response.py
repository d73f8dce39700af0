"""OpenAI Responses API normalizer.

Only ``message`` output items contribute text; their ``output_text`` blocks
are joined with newlines. A response flagged ``blocked`` has no text. The
finish code is ``incomplete_details.reason``; its absence means the response
completed normally.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..base.models import ChatResponse, FinishReason
from ..base.tokens import build_usage
from ..base.utils.mapping import dig, dig_list

FINISH_REASONS: Dict[Optional[str], FinishReason] = {
    None: FinishReason.COMPLETE,
    "stop": FinishReason.COMPLETE,
    "length": FinishReason.TOKEN_LIMIT,
    "max_output_tokens": FinishReason.TOKEN_LIMIT,
    "content_filter": FinishReason.CONTENT_FILTERED,
    "tool_calls": FinishReason.TOOL_CALL,
}


def output_text_blocks(body: Any) -> List[str]:
    """Return the ``output_text`` strings of all ``message`` output items."""
    texts: List[str] = []
    for item in dig_list(body, "output"):
        if not isinstance(item, dict) or item.get("type") != "message":
            continue
        for block in dig_list(item, "content"):
            if isinstance(block, dict) and block.get("type") == "output_text" and isinstance(block.get("text"), str):
                texts.append(block["text"])
    return texts


def parse_response(data: Any) -> ChatResponse:
    """Map a raw OpenAI response body to :class:`ChatResponse`."""
    text: Optional[str] = None
    if dig(data, "blocked") is not True:
        text = "\n".join(output_text_blocks(data)) or None
    raw_reason = dig(data, "incomplete_details", "reason")
    if raw_reason is None or isinstance(raw_reason, str):
        reason = FINISH_REASONS.get(raw_reason, FinishReason.UNKNOWN)
    else:
        reason = FinishReason.UNKNOWN
    usage = build_usage(
        dig(data, "usage"),
        input_keys=("input_tokens",),
        output_keys=("output_tokens",),
        reasoning_keys=("reasoning_tokens", ("output_tokens_details", "reasoning_tokens")),
    )
    return ChatResponse(
        text=text,
        finish_reason=reason,
        usage=usage,
        raw_finish_reason=raw_reason,
        raw=data,
    )


__all__ = ["parse_response", "output_text_blocks", "FINISH_REASONS"]
