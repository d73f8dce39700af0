"""Batch job and batch handle bases.

Lifecycle
---------
1. :class:`Batch` collects chat sessions keyed by a caller-assigned custom id
   and is consumed once by :meth:`Batch.submit`.
2. ``submit`` returns a :class:`BatchResponse` wrapping the provider's status
   payload. The handle never polls; callers re-retrieve the batch through the
   provider client to observe progress.
3. Once the status is ``COMPLETED`` and the payload names a result location,
   :meth:`BatchResponse.get_messages` downloads the line-delimited result
   document once and memoizes the parsed messages.

Result parsing is lenient: blank lines and lines without a custom id are
skipped, failed or malformed lines are logged as warnings. Nothing in the
parsing path raises.
"""
from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from .errors import LogicError, UnexpectedResponseError
from .logging import log_event
from .models import BatchStatus, Message, Role
from .utils.resolved_once import ResolvedOnce

if TYPE_CHECKING:
    from .chat import Chat


class Batch(ABC):
    """Accumulates named chat sessions for a single bulk submission."""

    def __init__(self, provider: Any) -> None:
        self._provider = provider
        self._chats: Dict[str, "Chat"] = {}
        self._submitted = False

    def add_chat(self, model: str, custom_id: str) -> "Chat":
        """Create a chat session registered under ``custom_id``.

        Raises:
            LogicError: ``custom_id`` is empty or already used in this batch.
        """
        if not custom_id:
            raise LogicError("Custom ID must be a non-empty string", provider=self._provider.provider_name)
        if custom_id in self._chats:
            raise LogicError(
                f"Chat with custom ID '{custom_id}' already exists in this batch",
                provider=self._provider.provider_name,
            )
        chat = self._provider.create_chat(model)
        self._chats[custom_id] = chat
        return chat

    def get_chats(self) -> Dict[str, "Chat"]:
        return dict(self._chats)

    def submit(self) -> "BatchResponse":
        """Submit every registered chat as one provider batch job.

        Raises:
            LogicError: The batch is empty, was already submitted, or one of
                the chats has an empty history. Raised before any request.
        """
        if self._submitted:
            raise LogicError("Batch has already been submitted", provider=self._provider.provider_name)
        if not self._chats:
            raise LogicError("Cannot submit an empty batch", provider=self._provider.provider_name)
        payloads = {custom_id: chat.build_payload() for custom_id, chat in self._chats.items()}
        response = self._submit(payloads)
        self._submitted = True
        log_event(
            self._provider.logger,
            "batch.submit",
            self._provider.log_context(batch_id=response.id),
            requests=len(payloads),
            status=response.get_status().value,
        )
        return response

    @abstractmethod
    def _submit(self, payloads: Dict[str, Dict[str, Any]]) -> "BatchResponse":
        """Send the provider-specific bulk request for the built payloads."""


class BatchResponse(ABC):
    """Snapshot of a provider batch job.

    Subclasses declare ``STATUS_FIELD`` and ``STATUS_MAP`` and implement the
    result location, line interpretation, error summary and timestamps.
    """

    STATUS_FIELD = "status"
    STATUS_MAP: Mapping[str, BatchStatus] = {}

    def __init__(self, provider: Any, data: Mapping[str, Any]) -> None:
        batch_id = data.get("id") if isinstance(data, Mapping) else None
        if not isinstance(batch_id, str) or not batch_id:
            raise UnexpectedResponseError(
                "Batch response does not contain an id",
                provider=provider.provider_name,
            )
        self._provider = provider
        self._data: Dict[str, Any] = dict(data)
        self._messages: ResolvedOnce[Dict[str, Message]] = ResolvedOnce(self._load_messages)

    @property
    def id(self) -> str:
        return self._data["id"]

    @property
    def raw(self) -> Dict[str, Any]:
        return self._data

    def get_status(self) -> BatchStatus:
        raw = self._data.get(self.STATUS_FIELD)
        if not isinstance(raw, str):
            return BatchStatus.OTHER
        return self.STATUS_MAP.get(raw, BatchStatus.OTHER)

    def get_messages(self) -> Optional[Dict[str, Message]]:
        """Return result messages keyed by custom id.

        Returns ``None`` until the batch is completed and a result location is
        known. The result document is fetched on the first successful call
        only.
        """
        if not self._messages.resolved:
            if self.get_status() is not BatchStatus.COMPLETED or self._result_location() is None:
                return None
        return dict(self._messages.get())

    def _load_messages(self) -> Dict[str, Message]:
        location = self._result_location()
        body = self._provider.call_api(location, is_json=False)
        messages = self._parse_results(body)
        log_event(
            self._provider.logger,
            "batch.results",
            self._provider.log_context(batch_id=self.id),
            messages=len(messages),
        )
        return messages

    def _parse_results(self, document: str) -> Dict[str, Message]:
        results: Dict[str, Message] = {}
        for line_no, line in enumerate(document.splitlines(), start=1):
            line = line.strip()
            if not line:
                continue
            try:
                entry = json.loads(line)
            except ValueError:
                entry = None
            if not isinstance(entry, dict):
                self._warn("batch.result.malformed", line=line_no)
                continue
            custom_id = entry.get("custom_id")
            if not isinstance(custom_id, str) or not custom_id:
                continue
            error = self._line_error(entry)
            if error is not None:
                self._warn(
                    "batch.result.error",
                    custom_id=custom_id,
                    message=f"Error in request '{custom_id}'{error}",
                )
                continue
            text = self._line_text(entry)
            if text:
                results[custom_id] = Message(text=text, role=Role.MODEL)
        return results

    def _warn(self, event: str, custom_id: Optional[str] = None, **fields: Any) -> None:
        log_event(
            self._provider.logger,
            event,
            self._provider.log_context(batch_id=self.id, custom_id=custom_id),
            level=logging.WARNING,
            **fields,
        )

    @abstractmethod
    def _result_location(self) -> Optional[str]:
        """Endpoint or absolute URL of the result document, if known."""

    @abstractmethod
    def _line_error(self, entry: Dict[str, Any]) -> Optional[str]:
        """Describe a failed result line (``": message"`` style suffix) or ``None``."""

    @abstractmethod
    def _line_text(self, entry: Dict[str, Any]) -> Optional[str]:
        """Extract the trimmed response text of a successful result line."""

    @abstractmethod
    def get_error(self) -> Optional[str]:
        """Human-readable summary of batch-level failures, or ``None``."""

    @abstractmethod
    def get_created_at(self) -> Optional[datetime]:
        """Creation time, or ``None`` when absent or malformed."""

    @abstractmethod
    def get_completed_at(self) -> Optional[datetime]:
        """Completion time, or ``None`` when absent or malformed."""


__all__ = ["Batch", "BatchResponse"]
