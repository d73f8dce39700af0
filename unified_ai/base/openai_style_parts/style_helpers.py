"""Helpers shared by OpenAI-compatible chat-completions normalizers."""

from __future__ import annotations

from typing import Any, Optional

from ..utils.mapping import dig


def extract_choice_text(data: Any) -> Optional[str]:
    """Return ``choices[0].message.content`` or ``None`` when empty or absent."""
    content = dig(data, "choices", 0, "message", "content")
    if isinstance(content, str) and content != "":
        return content
    return None


def extract_finish_reason(data: Any) -> Any:
    """Return the raw ``choices[0].finish_reason`` value."""
    return dig(data, "choices", 0, "finish_reason")


def has_refusal(data: Any) -> bool:
    """True when the first choice carries a non-empty ``refusal``."""
    refusal = dig(data, "choices", 0, "message", "refusal")
    return bool(refusal)


__all__ = ["extract_choice_text", "extract_finish_reason", "has_refusal"]
