"""BatchService Protocol (single-class module)."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..batch import Batch, BatchResponse


@runtime_checkable
class BatchService(Protocol):
    """A provider client exposing an asynchronous batch API.

    Batch handles are snapshots; re-retrieve a batch to observe progress.
    """

    def create_batch(self) -> "Batch":
        ...

    def list_batches(self, limit: int | None = None) -> List["BatchResponse"]:
        ...

    def retrieve_batch(self, batch_id: str) -> "BatchResponse":
        ...

    def cancel_batch(self, batch_id: str) -> bool:
        """Request cancellation; True when the provider reports a cancel state."""
        ...
