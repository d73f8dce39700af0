"""Grok (xAI) provider package."""

from .client import GrokChat, GrokProvider

__all__ = ["GrokProvider", "GrokChat"]
