"""GeminiProvider: Gemini ``generateContent`` and embeddings client.

The API key travels as the ``key`` query parameter rather than a header.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import urlencode

from ..base.embeddings import validate_input, warn_count_mismatch
from ..base.models import Vector
from ..base.provider import BaseProvider
from ..base.utils.mapping import dig_list
from .chat import GeminiChat

RETRIEVAL_DOCUMENT = "RETRIEVAL_DOCUMENT"


class GeminiProvider(BaseProvider):
    provider_name = "gemini"
    display_name = "Gemini"

    def _authorize_url(self, url: str) -> str:
        separator = "&" if "?" in url else "?"
        return url + separator + urlencode({"key": self._api_key})

    def create_chat(self, model: str) -> GeminiChat:
        return GeminiChat(self, model)

    def calculate_embeddings(
        self,
        model: str,
        input: Sequence[str],  # noqa: A002
        task_type: Optional[str] = None,
        title: Optional[str] = None,
        output_dimensionality: Optional[int] = None,
    ) -> List[Vector]:
        """Embed each input string via ``batchEmbedContents``.

        The API returns embeddings in request order and carries no index, so
        results correspond to inputs by position. ``title`` is only sent with
        the ``RETRIEVAL_DOCUMENT`` task type.
        """
        texts = validate_input(input, self.provider_name)
        requests: List[Dict[str, Any]] = []
        for text in texts:
            request: Dict[str, Any] = {"model": f"models/{model}", "content": {"parts": [{"text": text}]}}
            if task_type is not None:
                request["taskType"] = task_type
            if title is not None and task_type == RETRIEVAL_DOCUMENT:
                request["title"] = title
            if output_dimensionality is not None:
                request["outputDimensionality"] = output_dimensionality
            requests.append(request)

        data = self.call_api(f"models/{model}:batchEmbedContents", {"requests": requests})
        vectors = [
            Vector.of(item["values"])
            for item in dig_list(data, "embeddings")
            if isinstance(item, dict) and isinstance(item.get("values"), list)
        ]
        warn_count_mismatch(self._logger, self.log_context(model=model), len(vectors), len(texts))
        return vectors


__all__ = ["GeminiProvider"]
