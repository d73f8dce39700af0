"""BaseOpenAIStyleProvider: shared client for OpenAI-compatible providers.

Subclasses set ``provider_name``/``display_name``, optionally ``chat_class``,
and implement :meth:`parse_response` with their finish-reason and usage
conventions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Type

from ..models import ChatResponse
from ..provider import BaseProvider
from .chat import OpenAIStyleChat


class BaseOpenAIStyleProvider(BaseProvider, ABC):
    """Bearer-authenticated client exposing chat sessions only."""

    chat_class: Type[OpenAIStyleChat] = OpenAIStyleChat

    def _auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self._api_key}"}

    def create_chat(self, model: str) -> OpenAIStyleChat:
        return self.chat_class(self, model)

    @abstractmethod
    def parse_response(self, data: Any) -> ChatResponse:
        """Normalize a decoded ``chat/completions`` response body."""


__all__ = ["BaseOpenAIStyleProvider"]
