"""Chat session base.

A :class:`Chat` holds the ordered message history, the system instruction and
the merged generation options of one conversation with one model. Provider
subclasses implement :meth:`Chat.build_payload` (history to request body) and
:meth:`Chat._generate_response` (request body to :class:`ChatResponse`).

``send_message`` is atomic with respect to the history: the history is
snapshotted before the call and restored if anything raises, including the
optionally appended user message.

Sessions are not thread-safe; do not call ``send_message`` concurrently on
one instance.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional

from .errors import AccessError, LogicError
from .logging import LogContext, normalized_log_event
from .models import ChatResponse, Message, Role

if TYPE_CHECKING:
    from .provider import BaseProvider


class Chat(ABC):
    """Abstract chat session bound to a provider client and a model."""

    def __init__(self, provider: "BaseProvider", model: str) -> None:
        self._provider = provider
        self.model = model
        self._messages: List[Message] = []
        self._system_instruction: Optional[str] = None
        self._options: Dict[str, Any] = {}

    @property
    def provider(self) -> "BaseProvider":
        return self._provider

    def set_system_instruction(self, instruction: Optional[str]) -> "Chat":
        """Replace the instruction sent with every subsequent call."""
        self._system_instruction = instruction
        return self

    def get_system_instruction(self) -> Optional[str]:
        return self._system_instruction

    def get_options(self) -> Dict[str, Any]:
        return dict(self._options)

    def _merge_options(self, **options: Any) -> "Chat":
        """Merge options into the persistent set; ``None`` values are no-ops."""
        self._options.update({k: v for k, v in options.items() if v is not None})
        return self

    def add_message(self, text: str, role: Role = Role.USER) -> Message:
        """Append a message without calling the provider."""
        message = Message(text=text, role=role)
        self._messages.append(message)
        return message

    def get_messages(self) -> List[Message]:
        return list(self._messages)

    @contextmanager
    def _history_transaction(self) -> Iterator[None]:
        snapshot = list(self._messages)
        try:
            yield
        except BaseException:
            self._messages = snapshot
            raise

    def send_message(self, text: Optional[str] = None) -> ChatResponse:
        """Send the conversation to the provider and record the reply.

        Parameters:
            text: Optional user message appended before sending.

        Returns:
            The normalized :class:`ChatResponse`. Its text is appended to the
            history as a model message unless it is ``None``.

        Raises:
            LogicError: The history is empty.
            ServiceError: The provider call failed; the history is unchanged.
        """
        ctx = LogContext(provider=self._provider.provider_name, model=self.model)
        logger = self._provider.logger
        try:
            with self._history_transaction():
                if text is not None:
                    self.add_message(text, Role.USER)
                payload = self.build_payload()
                normalized_log_event(
                    logger, "chat.start", ctx, phase="start", messages=len(self._messages)
                )
                response = self._generate_response(payload)
                if response.text is not None:
                    self._messages.append(Message(text=response.text, role=Role.MODEL))
        except AccessError as exc:
            normalized_log_event(
                logger,
                "chat.error",
                ctx,
                phase="error",
                error_code=exc.code.value,
                level=logging.WARNING,
                error=exc.message,
            )
            raise
        normalized_log_event(
            logger,
            "chat.end",
            ctx,
            phase="end",
            tokens=response.usage.to_dict() if response.usage else None,
            finish_reason=response.finish_reason.value,
        )
        return response

    def _require_history(self) -> List[Message]:
        if not self._messages:
            raise LogicError(
                "Cannot send a request with an empty message history",
                provider=self._provider.provider_name,
            )
        return list(self._messages)

    @abstractmethod
    def build_payload(self) -> Dict[str, Any]:
        """Serialize the history, instruction and options into a request body.

        Raises:
            LogicError: The history is empty.
        """

    @abstractmethod
    def _generate_response(self, payload: Dict[str, Any]) -> ChatResponse:
        """Dispatch ``payload`` and normalize the provider response."""


__all__ = ["Chat"]
