"""Claude (Anthropic) provider package."""

from .batch import ClaudeBatch, ClaudeBatchResponse
from .chat import ClaudeChat
from .client import ClaudeProvider

__all__ = ["ClaudeProvider", "ClaudeChat", "ClaudeBatch", "ClaudeBatchResponse"]
