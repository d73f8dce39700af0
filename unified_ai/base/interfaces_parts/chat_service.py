"""ChatService Protocol (single-class module)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..chat import Chat


@runtime_checkable
class ChatService(Protocol):
    """A provider client able to open chat sessions."""

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"claude"``."""
        ...

    def create_chat(self, model: str) -> "Chat":
        """Return a new, empty chat session for ``model``."""
        ...
