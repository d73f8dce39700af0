"""Gemini chat session on ``models/{model}:generateContent``."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..base.chat import Chat
from ..base.models import ChatResponse, Role
from .response import parse_response

# Option name -> generationConfig field.
_GENERATION_FIELDS = {
    "max_output_tokens": "maxOutputTokens",
    "temperature": "temperature",
    "top_k": "topK",
    "top_p": "topP",
    "stop_sequences": "stopSequences",
    "response_mime_type": "responseMimeType",
}


class GeminiChat(Chat):
    """Chat serialized as ``{contents, systemInstruction?, generationConfig?, safetySettings?}``."""

    def set_options(
        self,
        *,
        max_output_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        top_k: Optional[int] = None,
        top_p: Optional[float] = None,
        stop_sequences: Optional[List[str]] = None,
        response_mime_type: Optional[str] = None,
        safety_settings: Optional[List[Mapping[str, Any]]] = None,
    ) -> "GeminiChat":
        self._merge_options(
            max_output_tokens=max_output_tokens,
            temperature=temperature,
            top_k=top_k,
            top_p=top_p,
            stop_sequences=stop_sequences,
            response_mime_type=response_mime_type,
            safety_settings=safety_settings,
        )
        return self

    def build_payload(self) -> Dict[str, Any]:
        history = self._require_history()
        payload: Dict[str, Any] = {
            "contents": [
                {"role": "model" if m.role is Role.MODEL else "user", "parts": [{"text": m.text}]}
                for m in history
            ]
        }
        if self._system_instruction:
            payload["systemInstruction"] = {"parts": [{"text": self._system_instruction}]}
        generation = {
            field: self._options[name] for name, field in _GENERATION_FIELDS.items() if name in self._options
        }
        if generation:
            payload["generationConfig"] = generation
        if "safety_settings" in self._options:
            payload["safetySettings"] = [dict(s) for s in self._options["safety_settings"]]
        return payload

    def _generate_response(self, payload: Dict[str, Any]) -> ChatResponse:
        data = self._provider.call_api(f"models/{self.model}:generateContent", payload)
        return parse_response(data)


__all__ = ["GeminiChat"]
