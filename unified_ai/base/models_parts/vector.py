"""
Vector DTO returned by embedding calls.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Tuple

from ..errors import LogicError


@dataclass(frozen=True)
class Vector:
    """An embedding vector.

    Attributes:
        values: Embedding components in provider order.
    """

    values: Tuple[float, ...]

    @classmethod
    def of(cls, values: Iterable[float]) -> "Vector":
        return cls(tuple(float(v) for v in values))

    @property
    def dimensions(self) -> int:
        return len(self.values)

    def cosine_similarity(self, other: "Vector") -> float:
        """Return the cosine similarity with ``other``.

        Raises:
            LogicError: When dimensions differ or either vector has zero norm.
        """
        if self.dimensions != other.dimensions:
            raise LogicError(
                f"Vector dimensions differ: {self.dimensions} != {other.dimensions}"
            )
        dot = sum(a * b for a, b in zip(self.values, other.values))
        norm_a = math.sqrt(sum(a * a for a in self.values))
        norm_b = math.sqrt(sum(b * b for b in other.values))
        if norm_a == 0 or norm_b == 0:
            raise LogicError("Cosine similarity is undefined for a zero vector")
        return dot / (norm_a * norm_b)

    def __len__(self) -> int:
        return len(self.values)


__all__ = ["Vector"]
