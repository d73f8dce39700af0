"""Models parts package: one-class-per-file DTOs re-exported by ``base.models``."""

from .batch_status import BatchStatus
from .chat_response import ChatResponse
from .finish_reason import FinishReason
from .message import Message, Role
from .usage import Usage
from .vector import Vector

__all__ = [
    "BatchStatus",
    "ChatResponse",
    "FinishReason",
    "Message",
    "Role",
    "Usage",
    "Vector",
]
