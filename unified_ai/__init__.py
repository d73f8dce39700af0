"""unified_ai: one client abstraction over several conversational-AI HTTP APIs.

Quick start::

    import unified_ai

    client = unified_ai.create("claude", api_key="...")
    chat = client.create_chat("claude-sonnet-4-0")
    response = chat.send_message("Hello")
    print(response.text, response.finish_reason)
"""

from typing import Any

from .base.errors import (
    AccessError,
    ApiError,
    CommunicationError,
    ErrorCode,
    LogicError,
    ServiceError,
    UnexpectedResponseError,
)
from .base.factory import ProviderFactory, UnknownProviderError
from .base.http import FormData, HttpResponse, HttpxTransport, Transport
from .base.interfaces import BatchService, ChatService, EmbeddingService
from .base.logging import configure_logger, get_logger
from .base.models import BatchStatus, ChatResponse, FinishReason, Message, Role, Usage, Vector

__version__ = "0.1.0"


def create(provider: str, **kwargs: Any) -> Any:
    """Create a provider client by canonical name; see :class:`ProviderFactory`."""
    return ProviderFactory.create(provider, **kwargs)


__all__ = [
    "__version__",
    "create",
    "ProviderFactory",
    "UnknownProviderError",
    "AccessError",
    "ApiError",
    "CommunicationError",
    "ErrorCode",
    "LogicError",
    "ServiceError",
    "UnexpectedResponseError",
    "FormData",
    "HttpResponse",
    "HttpxTransport",
    "Transport",
    "BatchService",
    "ChatService",
    "EmbeddingService",
    "configure_logger",
    "get_logger",
    "BatchStatus",
    "ChatResponse",
    "FinishReason",
    "Message",
    "Role",
    "Usage",
    "Vector",
]
