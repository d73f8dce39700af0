"""Helpers shared by embedding clients."""

from __future__ import annotations

import logging
from typing import List, Sequence

from .errors import LogicError
from .logging import LogContext, log_event


def validate_input(texts: Sequence[str], provider: str) -> List[str]:
    """Return ``texts`` as a list, rejecting empty input and empty strings.

    Raises:
        LogicError: ``texts`` is empty or contains a non-string or ``""``.
    """
    if isinstance(texts, str):
        texts = [texts]
    items = list(texts)
    if not items:
        raise LogicError("Input cannot be empty", provider=provider)
    for text in items:
        if not isinstance(text, str) or text == "":
            raise LogicError("All input elements must be non-empty strings", provider=provider)
    return items


def warn_count_mismatch(logger: logging.Logger, ctx: LogContext, returned: int, expected: int) -> None:
    """Log a warning when fewer or more vectors came back than inputs were sent."""
    if returned == expected:
        return
    log_event(
        logger,
        "embeddings.mismatch",
        ctx,
        level=logging.WARNING,
        returned=returned,
        expected=expected,
        message=(
            f"Number of returned embeddings ({returned}) does not match the "
            f"number of inputs ({expected})"
        ),
    )


__all__ = ["validate_input", "warn_count_mismatch"]
