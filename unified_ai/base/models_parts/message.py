"""
Message DTO used by chat sessions.

Defines the `Message` value and the `Role` enumeration. Provider modules map
`Role` onto their own vocabulary (``assistant`` for Claude and OpenAI style
APIs, ``model`` for Gemini) when building request payloads.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Author of a chat message."""

    USER = "user"
    MODEL = "model"


@dataclass(frozen=True)
class Message:
    """A single chat message; immutable once created.

    Attributes:
        text: Message content.
        role: The author, either ``Role.USER`` or ``Role.MODEL``.
    """

    text: str
    role: Role = Role.USER


__all__ = ["Message", "Role"]
