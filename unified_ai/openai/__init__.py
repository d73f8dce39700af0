"""OpenAI provider package."""

from .batch import OpenAIBatch, OpenAIBatchResponse
from .chat import OpenAIChat
from .client import OpenAIProvider

__all__ = ["OpenAIProvider", "OpenAIChat", "OpenAIBatch", "OpenAIBatchResponse"]
