"""OpenAIProvider: Responses, Embeddings, Files and Batch API client."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import urlencode

from ..base.embeddings import validate_input, warn_count_mismatch
from ..base.errors import UnexpectedResponseError
from ..base.http.form_data import FormData
from ..base.logging import log_event
from ..base.models import Vector
from ..base.provider import BaseProvider
from ..base.utils.mapping import dig_list
from .batch import BATCHES_ENDPOINT, OpenAIBatch, OpenAIBatchResponse
from .chat import OpenAIChat

EMBEDDINGS_ENDPOINT = "embeddings"
FILES_ENDPOINT = "files"

_CANCEL_STATES = ("cancelling", "cancelled")


class OpenAIProvider(BaseProvider):
    """Client for the OpenAI REST API.

    ``organization`` sets the ``OpenAI-Organization`` header; it may also come
    from configuration.
    """

    provider_name = "openai"
    display_name = "OpenAI"

    def __init__(self, api_key: Optional[str] = None, *, organization: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(api_key, **kwargs)
        self._organization: Optional[str] = organization or self._config.get("organization")
        self.completion_window: str = self._config["completion_window"]

    @property
    def organization(self) -> Optional[str]:
        return self._organization

    def set_options(  # type: ignore[override]
        self,
        *,
        custom_base_url: Optional[str] = None,
        organization_id: Optional[str] = None,
    ) -> "OpenAIProvider":
        super().set_options(custom_base_url=custom_base_url)
        if organization_id is not None:
            self._organization = organization_id
        return self

    def _auth_headers(self) -> Dict[str, str]:
        headers = {"Authorization": f"Bearer {self._api_key}"}
        if self._organization:
            headers["OpenAI-Organization"] = self._organization
        return headers

    def create_chat(self, model: str) -> OpenAIChat:
        return OpenAIChat(self, model)

    def calculate_embeddings(
        self,
        model: str,
        input: Sequence[str],  # noqa: A002
        dimensions: Optional[int] = None,
    ) -> List[Vector]:
        """Embed each input string.

        Results are re-ordered by the ``index`` the API reports. Items that
        carry an error are logged and skipped, so fewer vectors than inputs
        may be returned; that case is logged as well.
        """
        texts = validate_input(input, self.provider_name)
        ctx = self.log_context(model=model)
        payload: Dict[str, Any] = {"model": model, "input": texts}
        if dimensions is not None:
            if "text-embedding-3" not in model:
                log_event(
                    self._logger,
                    "embeddings.dimensions_unsupported",
                    ctx,
                    level=logging.WARNING,
                    message="The 'dimensions' parameter is only supported for text-embedding-3 models",
                )
            payload["dimensions"] = dimensions

        data = self.call_api(EMBEDDINGS_ENDPOINT, payload)
        items = [item for item in dig_list(data, "data") if isinstance(item, dict)]
        items.sort(key=lambda item: item["index"] if isinstance(item.get("index"), int) else len(texts))

        vectors: List[Vector] = []
        for item in items:
            values = item.get("embedding")
            if isinstance(values, list):
                vectors.append(Vector.of(values))
            elif item.get("error") is not None:
                error = item["error"]
                log_event(
                    self._logger,
                    "embeddings.item_error",
                    ctx,
                    level=logging.WARNING,
                    index=item.get("index"),
                    message=(error.get("message") if isinstance(error, dict) else None) or "Unknown error",
                )
        warn_count_mismatch(self._logger, ctx, len(vectors), len(texts))
        return vectors

    def upload_content(
        self,
        content: str | bytes,
        file_name: str,
        purpose: str,
        mime_type: Optional[str] = None,
    ) -> str:
        """Upload ``content`` to the Files API and return the file id.

        Raises:
            UnexpectedResponseError: The response carries no file id.
        """
        form = FormData().add_field("purpose", purpose).add_file_content("file", content, file_name, mime_type)
        data = self.call_api(FILES_ENDPOINT, form)
        file_id = data.get("id")
        if not isinstance(file_id, str) or not file_id:
            raise UnexpectedResponseError(
                "File upload response does not contain a file id",
                provider=self.provider_name,
            )
        return file_id

    def create_batch(self) -> OpenAIBatch:
        return OpenAIBatch(self)

    def list_batches(self, limit: Optional[int] = None, after: Optional[str] = None) -> List[OpenAIBatchResponse]:
        query = {k: v for k, v in {"limit": limit, "after": after}.items() if v is not None}
        endpoint = BATCHES_ENDPOINT + ("?" + urlencode(query) if query else "")
        data = self.call_api(endpoint, method="GET")
        return [OpenAIBatchResponse(self, item) for item in dig_list(data, "data") if isinstance(item, dict)]

    def retrieve_batch(self, batch_id: str) -> OpenAIBatchResponse:
        return OpenAIBatchResponse(self, self.call_api(f"{BATCHES_ENDPOINT}/{batch_id}", method="GET"))

    def cancel_batch(self, batch_id: str) -> bool:
        data = self.call_api(f"{BATCHES_ENDPOINT}/{batch_id}/cancel", method="POST")
        return data.get("status") in _CANCEL_STATES


__all__ = ["OpenAIProvider"]
