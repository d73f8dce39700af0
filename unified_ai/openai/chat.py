"""OpenAI chat session on the Responses API."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..base.chat import Chat
from ..base.models import ChatResponse, Role
from .response import parse_response

RESPONSES_ENDPOINT = "responses"


class OpenAIChat(Chat):
    """Chat serialized as ``{model, input, instructions?, **options}``."""

    def set_options(
        self,
        *,
        max_output_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        top_p: Optional[float] = None,
        truncation: Optional[str] = None,
        metadata: Optional[Mapping[str, Any]] = None,
        parallel_tool_calls: Optional[bool] = None,
        previous_response_id: Optional[str] = None,
        reasoning: Optional[Mapping[str, Any]] = None,
        store: Optional[bool] = None,
        text: Optional[Mapping[str, Any]] = None,
        include: Optional[List[str]] = None,
        tools: Optional[List[Mapping[str, Any]]] = None,
    ) -> "OpenAIChat":
        self._merge_options(
            max_output_tokens=max_output_tokens,
            temperature=temperature,
            top_p=top_p,
            truncation=truncation,
            metadata=dict(metadata) if metadata is not None else None,
            parallel_tool_calls=parallel_tool_calls,
            previous_response_id=previous_response_id,
            reasoning=dict(reasoning) if reasoning is not None else None,
            store=store,
            text=dict(text) if text is not None else None,
            include=include,
            tools=tools,
        )
        return self

    def build_payload(self) -> Dict[str, Any]:
        history = self._require_history()
        payload: Dict[str, Any] = {
            "model": self.model,
            "input": [
                {"role": "assistant" if m.role is Role.MODEL else "user", "content": m.text}
                for m in history
            ],
        }
        if self._system_instruction:
            payload["instructions"] = self._system_instruction
        payload.update(self._options)
        return payload

    def _generate_response(self, payload: Dict[str, Any]) -> ChatResponse:
        return parse_response(self._provider.call_api(RESPONSES_ENDPOINT, payload))


__all__ = ["OpenAIChat", "RESPONSES_ENDPOINT"]
