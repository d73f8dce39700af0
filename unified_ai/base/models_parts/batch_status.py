"""Canonical batch job status."""
from __future__ import annotations

from enum import Enum


class BatchStatus(str, Enum):
    """Provider batch state folded into four buckets.

    ``OTHER`` covers any state string a provider reports that is not mapped.
    """

    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"
    OTHER = "other"


__all__ = ["BatchStatus"]
