"""Interfaces parts package: one Protocol per module."""

from .batch_service import BatchService
from .chat_service import ChatService
from .embedding_service import EmbeddingService

__all__ = ["ChatService", "BatchService", "EmbeddingService"]
