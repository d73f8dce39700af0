"""Token usage extraction helpers.

Converts provider-specific usage blocks into the canonical :class:`Usage`
DTO. Extraction is best-effort: invalid or negative counts become ``None`` and
a missing usage block yields ``None`` rather than a zero-filled record.

Field names per provider
------------------------
Claude:    ``input_tokens`` / ``output_tokens`` / ``reasoning_tokens``
OpenAI:    ``input_tokens`` / ``output_tokens`` /
           ``reasoning_tokens`` or ``output_tokens_details.reasoning_tokens``
Gemini:    ``promptTokenCount`` / ``candidatesTokenCount`` / ``thoughtsTokenCount``
Grok:      ``prompt_tokens`` / ``completion_tokens`` /
           ``completion_tokens_details.reasoning_tokens``
DeepSeek:  as Grok, with ``input_tokens`` / ``output_tokens`` fallbacks
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from ..models import Usage
from ..utils.mapping import dig

KeyPath = Union[str, Tuple[str, ...]]


def coerce_int(value: Any) -> Optional[int]:
    """Coerce arbitrary value to a non-negative ``int`` or ``None``.

    Args:
        value: Arbitrary candidate value (may be ``None`` or numeric string).

    Returns:
        int | None: Integer if coercion succeeds and value is >= 0; otherwise ``None``.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        iv = int(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return iv if iv >= 0 else None


def _first_int(block: Mapping[str, Any], paths: Sequence[KeyPath]) -> Optional[int]:
    for path in paths:
        keys = (path,) if isinstance(path, str) else path
        value = coerce_int(dig(block, *keys))
        if value is not None:
            return value
    return None


def build_usage(
    block: Any,
    *,
    input_keys: Sequence[KeyPath],
    output_keys: Sequence[KeyPath],
    reasoning_keys: Sequence[KeyPath] = (),
) -> Optional[Usage]:
    """Map a provider usage block into :class:`Usage`.

    Args:
        block: The provider's usage mapping (any other value yields ``None``).
        input_keys: Candidate keys or nested key paths for prompt tokens, in
            priority order.
        output_keys: Candidate keys or key paths for completion tokens.
        reasoning_keys: Candidate keys or key paths for reasoning tokens.
    """
    if not isinstance(block, Mapping):
        return None
    return Usage(
        input_tokens=_first_int(block, input_keys),
        output_tokens=_first_int(block, output_keys),
        reasoning_tokens=_first_int(block, reasoning_keys),
        raw=dict(block),
    )


__all__ = ["build_usage", "coerce_int"]
