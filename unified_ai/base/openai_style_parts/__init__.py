"""Shared building blocks for OpenAI-compatible chat-completions providers."""

from .base import BaseOpenAIStyleProvider
from .chat import CHAT_COMPLETIONS_ENDPOINT, OpenAIStyleChat
from .style_helpers import extract_choice_text, extract_finish_reason, has_refusal

__all__ = [
    "BaseOpenAIStyleProvider",
    "OpenAIStyleChat",
    "CHAT_COMPLETIONS_ENDPOINT",
    "extract_choice_text",
    "extract_finish_reason",
    "has_refusal",
]
