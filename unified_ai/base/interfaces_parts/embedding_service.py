"""EmbeddingService Protocol (single-class module)."""

from __future__ import annotations

from typing import List, Protocol, Sequence, runtime_checkable

from ..models import Vector


@runtime_checkable
class EmbeddingService(Protocol):
    """A provider client able to embed text.

    One :class:`Vector` is returned per input string, in input order.
    """

    def calculate_embeddings(self, model: str, input: Sequence[str]) -> List[Vector]:  # noqa: A002
        ...
