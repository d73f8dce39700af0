"""Service Protocols public surface.

Re-exports the single-class modules under ``unified_ai.base.interfaces_parts``.
Providers implement whichever services their API offers:

============  ===========  ============  ================
Provider      ChatService  BatchService  EmbeddingService
============  ===========  ============  ================
claude        yes          yes           no
openai        yes          yes           yes
gemini        yes          no            yes
grok          yes          no            no
deepseek      yes          no            no
============  ===========  ============  ================
"""

from .interfaces_parts.batch_service import BatchService
from .interfaces_parts.chat_service import ChatService
from .interfaces_parts.embedding_service import EmbeddingService

__all__ = ["ChatService", "BatchService", "EmbeddingService"]
