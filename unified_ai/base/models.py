"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``unified_ai.base.models_parts`` to keep a single stable import path.
"""

from .models_parts.batch_status import BatchStatus
from .models_parts.chat_response import ChatResponse
from .models_parts.finish_reason import FinishReason
from .models_parts.message import Message, Role
from .models_parts.usage import Usage
from .models_parts.vector import Vector

__all__ = [
    "BatchStatus",
    "ChatResponse",
    "FinishReason",
    "Message",
    "Role",
    "Usage",
    "Vector",
]
