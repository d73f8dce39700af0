"""Gemini (Google) provider package."""

from .chat import GeminiChat
from .client import GeminiProvider

__all__ = ["GeminiProvider", "GeminiChat"]
