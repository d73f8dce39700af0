"""GrokProvider: xAI chat-completions client."""

from __future__ import annotations

from typing import Any, Optional

from ..base.models import ChatResponse
from ..base.openai_style_parts import BaseOpenAIStyleProvider, OpenAIStyleChat
from .response import parse_response


class GrokChat(OpenAIStyleChat):
    """Grok chat; additionally accepts ``reasoning_effort``."""

    def set_options(  # type: ignore[override]
        self,
        *,
        reasoning_effort: Optional[str] = None,
        **options: Any,
    ) -> "GrokChat":
        super().set_options(**options)
        self._merge_options(reasoning_effort=reasoning_effort)
        return self


class GrokProvider(BaseOpenAIStyleProvider):
    provider_name = "grok"
    display_name = "Grok"
    chat_class = GrokChat

    def parse_response(self, data: Any) -> ChatResponse:
        return parse_response(data)


__all__ = ["GrokProvider", "GrokChat"]
