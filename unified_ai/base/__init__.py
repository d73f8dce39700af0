"""Provider-agnostic base layer: errors, logging, models, transport, sessions."""

from .errors import (
    AccessError,
    ApiError,
    CommunicationError,
    ErrorCode,
    LogicError,
    ServiceError,
    UnexpectedResponseError,
)
from .models import BatchStatus, ChatResponse, FinishReason, Message, Role, Usage, Vector

__all__ = [
    "AccessError",
    "ApiError",
    "CommunicationError",
    "ErrorCode",
    "LogicError",
    "ServiceError",
    "UnexpectedResponseError",
    "BatchStatus",
    "ChatResponse",
    "FinishReason",
    "Message",
    "Role",
    "Usage",
    "Vector",
]
