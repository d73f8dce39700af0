"""Multipart form payload for file uploads."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Optional

from ..errors import LogicError

DEFAULT_MIME_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class FormItem:
    """A single form entry: plain value, in-memory file or file on disk."""

    value: Optional[str] = None
    content: Optional[str | bytes] = None
    path: Optional[str] = None
    name: Optional[str] = None
    mime: Optional[str] = None

    @property
    def is_file(self) -> bool:
        return self.value is None

    def read(self) -> bytes:
        """Return the file body for file items."""
        if self.content is not None:
            return self.content.encode("utf-8") if isinstance(self.content, str) else self.content
        if self.path is None:
            return b""
        with open(self.path, "rb") as fh:
            return fh.read()


class FormData:
    """Builder for ``multipart/form-data`` request bodies."""

    def __init__(self) -> None:
        self._items: Dict[str, FormItem] = {}

    def add_field(self, field: str, value: str) -> "FormData":
        self._items[field] = FormItem(value=value)
        return self

    def add_file(
        self,
        field: str,
        file_path: str,
        file_name: Optional[str] = None,
        mime_type: Optional[str] = None,
    ) -> "FormData":
        """Attach a file from disk; it is read when the request is sent."""
        if not os.path.isfile(file_path) or not os.access(file_path, os.R_OK):
            raise LogicError(f"File not found or not readable: {file_path}")
        self._items[field] = FormItem(
            path=file_path,
            name=file_name or os.path.basename(file_path),
            mime=mime_type,
        )
        return self

    def add_file_content(
        self,
        field: str,
        content: str | bytes,
        file_name: str,
        mime_type: Optional[str] = None,
    ) -> "FormData":
        self._items[field] = FormItem(content=content, name=file_name, mime=mime_type)
        return self

    @property
    def items(self) -> Dict[str, FormItem]:
        return dict(self._items)


__all__ = ["FormData", "FormItem", "DEFAULT_MIME_TYPE"]
