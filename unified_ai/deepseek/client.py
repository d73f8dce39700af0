"""DeepSeekProvider: DeepSeek chat-completions client."""

from __future__ import annotations

from typing import Any

from ..base.models import ChatResponse
from ..base.openai_style_parts import BaseOpenAIStyleProvider
from .response import parse_response


class DeepSeekProvider(BaseOpenAIStyleProvider):
    provider_name = "deepseek"
    display_name = "DeepSeek"

    def parse_response(self, data: Any) -> ChatResponse:
        return parse_response(data)


__all__ = ["DeepSeekProvider"]
