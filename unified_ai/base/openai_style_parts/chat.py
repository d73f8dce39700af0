"""Chat session for OpenAI-compatible ``chat/completions`` APIs."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..chat import Chat
from ..models import ChatResponse, Role

CHAT_COMPLETIONS_ENDPOINT = "chat/completions"


class OpenAIStyleChat(Chat):
    """Chat serialized as ``{model, messages, **options}``.

    The system instruction becomes a leading ``system`` message; model
    messages use the ``assistant`` role.
    """

    def set_options(
        self,
        *,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        top_p: Optional[float] = None,
        stop: Optional[List[str]] = None,
        frequency_penalty: Optional[float] = None,
        presence_penalty: Optional[float] = None,
        seed: Optional[int] = None,
    ) -> "OpenAIStyleChat":
        self._merge_options(
            max_tokens=max_tokens,
            temperature=temperature,
            top_p=top_p,
            stop=stop,
            frequency_penalty=frequency_penalty,
            presence_penalty=presence_penalty,
            seed=seed,
        )
        return self

    def build_payload(self) -> Dict[str, Any]:
        history = self._require_history()
        messages: List[Dict[str, str]] = []
        if self._system_instruction:
            messages.append({"role": "system", "content": self._system_instruction})
        for message in history:
            role = "assistant" if message.role is Role.MODEL else "user"
            messages.append({"role": role, "content": message.text})
        return {"model": self.model, "messages": messages, **self._options}

    def _generate_response(self, payload: Dict[str, Any]) -> ChatResponse:
        data = self._provider.call_api(CHAT_COMPLETIONS_ENDPOINT, payload)
        return self._provider.parse_response(data)


__all__ = ["OpenAIStyleChat", "CHAT_COMPLETIONS_ENDPOINT"]
