"""Claude Message Batches: inline submission and result parsing.

Status is read from ``processing_status``. ``canceling`` is still in
progress: the job ends as ``ended`` with partial results, so it is not
reported as failed.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from ..base.batch import Batch, BatchResponse
from ..base.models import BatchStatus
from ..base.tokens import coerce_int
from ..base.utils.mapping import dig, dig_list
from ..base.utils.timestamps import parse_iso8601

BATCHES_ENDPOINT = "v1/messages/batches"

# Result types reported as failures; ``succeeded`` carries a message.
_FAILED_RESULT_TYPES = ("errored", "canceled", "expired")


class ClaudeBatch(Batch):
    def _submit(self, payloads: Dict[str, Dict[str, Any]]) -> "ClaudeBatchResponse":
        requests = [{"custom_id": cid, "params": params} for cid, params in payloads.items()]
        data = self._provider.call_api(BATCHES_ENDPOINT, {"requests": requests})
        return ClaudeBatchResponse(self._provider, data)


class ClaudeBatchResponse(BatchResponse):
    STATUS_FIELD = "processing_status"
    STATUS_MAP = {
        "in_progress": BatchStatus.IN_PROGRESS,
        "canceling": BatchStatus.IN_PROGRESS,
        "ended": BatchStatus.COMPLETED,
    }

    def _result_location(self) -> Optional[str]:
        url = self._data.get("results_url")
        return url if isinstance(url, str) and url else None

    def _line_error(self, entry: Dict[str, Any]) -> Optional[str]:
        kind = dig(entry, "result", "type")
        if kind not in _FAILED_RESULT_TYPES:
            return None
        error = dig(entry, "result", "error")
        # Result lines nest the API error envelope: {"type": "error", "error": {...}}
        if isinstance(dig(error, "error"), dict):
            error = error["error"]
        if not isinstance(error, dict):
            return f": request {kind}"
        message = error.get("message") or "Unknown error"
        suffix = f" (type: {error['type']})" if error.get("type") else ""
        return f": {message}{suffix}"

    def _line_text(self, entry: Dict[str, Any]) -> Optional[str]:
        if dig(entry, "result", "type") != "succeeded":
            return None
        parts: List[str] = [
            block["text"]
            for block in dig_list(entry, "result", "message", "content")
            if isinstance(block, dict) and block.get("type") == "text" and isinstance(block.get("text"), str)
        ]
        return "".join(parts).strip() or None

    def get_error(self) -> Optional[str]:
        counts = self._data.get("request_counts")
        issues: List[str] = []
        errored = coerce_int(dig(counts, "errored"))
        expired = coerce_int(dig(counts, "expired"))
        canceled = coerce_int(dig(counts, "canceled"))
        if errored:
            issues.append(f"{errored} requests encountered errors")
        if expired:
            issues.append(f"{expired} requests expired")
        if canceled:
            issues.append(f"{canceled} requests were canceled")
        return "Batch encountered issues: " + ", ".join(issues) if issues else None

    def get_created_at(self) -> Optional[datetime]:
        return parse_iso8601(self._data.get("created_at"))

    def get_completed_at(self) -> Optional[datetime]:
        return parse_iso8601(self._data.get("ended_at"))


__all__ = ["ClaudeBatch", "ClaudeBatchResponse", "BATCHES_ENDPOINT"]
