"""Claude chat session."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

from ..base.chat import Chat
from ..base.models import ChatResponse, Role
from .response import parse_response

if TYPE_CHECKING:
    from .client import ClaudeProvider

MESSAGES_ENDPOINT = "v1/messages"


class ClaudeChat(Chat):
    """Chat on the Messages API.

    The payload always carries ``system`` (empty string when unset) and
    ``max_tokens`` (the configured default unless set via options).
    """

    _provider: "ClaudeProvider"

    def set_options(
        self,
        *,
        max_tokens: Optional[int] = None,
        stop_sequences: Optional[List[str]] = None,
        temperature: Optional[float] = None,
        top_k: Optional[int] = None,
        top_p: Optional[float] = None,
    ) -> "ClaudeChat":
        self._merge_options(
            max_tokens=max_tokens,
            stop_sequences=stop_sequences,
            temperature=temperature,
            top_k=top_k,
            top_p=top_p,
        )
        return self

    def build_payload(self) -> Dict[str, Any]:
        history = self._require_history()
        messages = [
            {"role": "assistant" if m.role is Role.MODEL else "user", "content": m.text}
            for m in history
        ]
        return {
            "model": self.model,
            "messages": messages,
            "system": self._system_instruction or "",
            "max_tokens": self._provider.default_max_tokens,
            **self._options,
        }

    def _generate_response(self, payload: Dict[str, Any]) -> ChatResponse:
        return parse_response(self._provider.call_api(MESSAGES_ENDPOINT, payload))


__all__ = ["ClaudeChat", "MESSAGES_ENDPOINT"]
