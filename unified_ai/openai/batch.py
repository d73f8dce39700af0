"""OpenAI Batch API: JSONL upload, submission and result parsing."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from ..base.batch import Batch, BatchResponse
from ..base.http.transport import encode_json
from ..base.models import BatchStatus
from ..base.tokens import coerce_int
from ..base.utils.mapping import dig, dig_list
from ..base.utils.timestamps import parse_epoch
from ..config.defaults import OPENAI_BATCH_ENDPOINT
from .response import output_text_blocks

BATCHES_ENDPOINT = "batches"
BATCH_INPUT_FILE_NAME = "batch_requests.jsonl"
BATCH_INPUT_MIME_TYPE = "text/jsonl"

_COMPLETION_FIELDS = ("completed_at", "failed_at", "expired_at", "cancelled_at")


class OpenAIBatch(Batch):
    """Batch uploaded as a JSONL file and run against ``/v1/responses``."""

    def __init__(self, provider: Any) -> None:
        super().__init__(provider)
        self._metadata: Optional[Dict[str, Any]] = None

    def set_metadata(self, metadata: Mapping[str, Any]) -> "OpenAIBatch":
        self._metadata = dict(metadata)
        return self

    def build_document(self, payloads: Dict[str, Dict[str, Any]]) -> str:
        """Serialize payloads into the batch input JSONL document."""
        lines = [
            encode_json({"custom_id": cid, "method": "POST", "url": OPENAI_BATCH_ENDPOINT, "body": body})
            for cid, body in payloads.items()
        ]
        return "\n".join(lines) + "\n"

    def _submit(self, payloads: Dict[str, Dict[str, Any]]) -> "OpenAIBatchResponse":
        file_id = self._provider.upload_content(
            self.build_document(payloads),
            BATCH_INPUT_FILE_NAME,
            "batch",
            BATCH_INPUT_MIME_TYPE,
        )
        request: Dict[str, Any] = {
            "input_file_id": file_id,
            "endpoint": OPENAI_BATCH_ENDPOINT,
            "completion_window": self._provider.completion_window,
        }
        if self._metadata is not None:
            request["metadata"] = self._metadata
        data = self._provider.call_api(BATCHES_ENDPOINT, request)
        return OpenAIBatchResponse(self._provider, data)


class OpenAIBatchResponse(BatchResponse):
    STATUS_FIELD = "status"
    STATUS_MAP = {
        "validating": BatchStatus.IN_PROGRESS,
        "in_progress": BatchStatus.IN_PROGRESS,
        "finalizing": BatchStatus.IN_PROGRESS,
        "completed": BatchStatus.COMPLETED,
        "cancelling": BatchStatus.FAILED,
        "failed": BatchStatus.FAILED,
        "expired": BatchStatus.FAILED,
        "cancelled": BatchStatus.FAILED,
    }

    def _result_location(self) -> Optional[str]:
        file_id = self._data.get("output_file_id")
        if not isinstance(file_id, str) or not file_id:
            return None
        return f"files/{file_id}/content"

    def _line_error(self, entry: Dict[str, Any]) -> Optional[str]:
        status = dig(entry, "response", "status_code")
        if status is not None and status != 200:
            message = dig(entry, "response", "body", "error", "message")
            return f": {message}" if isinstance(message, str) else f": HTTP {status}"
        error = entry.get("error")
        if error is None or status == 200:
            return None
        message = dig(error, "message")
        return f": {message}" if isinstance(message, str) else ""

    def _line_text(self, entry: Dict[str, Any]) -> Optional[str]:
        if dig(entry, "response", "status_code") != 200:
            return None
        return "".join(output_text_blocks(dig(entry, "response", "body"))).strip() or None

    def get_error(self) -> Optional[str]:
        messages: List[str] = [
            item["message"]
            for item in dig_list(self._data, "errors", "data")
            if isinstance(item, dict) and isinstance(item.get("message"), str)
        ]
        if messages:
            return "Batch errors: " + ", ".join(messages)
        failed = coerce_int(dig(self._data, "request_counts", "failed"))
        if failed:
            return f"Batch encountered issues: {failed} requests failed"
        return None

    def get_created_at(self) -> Optional[datetime]:
        return parse_epoch(self._data.get("created_at"))

    def get_completed_at(self) -> Optional[datetime]:
        for field in _COMPLETION_FIELDS:
            parsed = parse_epoch(self._data.get(field))
            if parsed is not None:
                return parsed
        return None


__all__ = ["OpenAIBatch", "OpenAIBatchResponse", "BATCHES_ENDPOINT"]
