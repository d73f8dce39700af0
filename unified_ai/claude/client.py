"""ClaudeProvider: Anthropic Messages and Message Batches client.

Authentication uses the ``x-api-key`` header together with an
``Anthropic-Version`` header (configurable via ``set_options``).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

from ..base.provider import BaseProvider
from ..base.utils.mapping import dig_list
from .batch import BATCHES_ENDPOINT, ClaudeBatch, ClaudeBatchResponse
from .chat import ClaudeChat

_CANCEL_STATES = ("canceling",)


class ClaudeProvider(BaseProvider):
    provider_name = "claude"
    display_name = "Claude"

    def __init__(self, api_key: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(api_key, **kwargs)
        self._api_version: str = self._config["api_version"]
        self.default_max_tokens: int = int(self._config["max_tokens"])

    @property
    def api_version(self) -> str:
        return self._api_version

    def set_options(  # type: ignore[override]
        self,
        *,
        custom_base_url: Optional[str] = None,
        api_version: Optional[str] = None,
    ) -> "ClaudeProvider":
        super().set_options(custom_base_url=custom_base_url)
        if api_version is not None:
            self._api_version = api_version
        return self

    def _auth_headers(self) -> Dict[str, str]:
        return {"Anthropic-Version": self._api_version, "x-api-key": self._api_key}

    def create_chat(self, model: str) -> ClaudeChat:
        return ClaudeChat(self, model)

    def create_batch(self) -> ClaudeBatch:
        return ClaudeBatch(self)

    def list_batches(
        self,
        limit: Optional[int] = None,
        before_id: Optional[str] = None,
        after_id: Optional[str] = None,
    ) -> List[ClaudeBatchResponse]:
        """List batches, most recent first."""
        query = {k: v for k, v in {"limit": limit, "before_id": before_id, "after_id": after_id}.items() if v is not None}
        endpoint = BATCHES_ENDPOINT
        if query:
            endpoint += "?" + urlencode(query)
        data = self.call_api(endpoint, method="GET")
        return [ClaudeBatchResponse(self, item) for item in dig_list(data, "data") if isinstance(item, dict)]

    def retrieve_batch(self, batch_id: str) -> ClaudeBatchResponse:
        data = self.call_api(f"{BATCHES_ENDPOINT}/{batch_id}", method="GET")
        return ClaudeBatchResponse(self, data)

    def cancel_batch(self, batch_id: str) -> bool:
        data = self.call_api(f"{BATCHES_ENDPOINT}/{batch_id}/cancel", method="POST")
        return data.get("processing_status") in _CANCEL_STATES


__all__ = ["ClaudeProvider"]
