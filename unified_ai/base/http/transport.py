"""Transport contract and the default httpx-backed implementation.

Providers never talk to httpx directly. They depend on the :class:`Transport`
protocol, a single synchronous ``fetch`` call, so tests and applications can
substitute their own exchange (a recording fake, a proxy-aware client, ...).

Payload handling in :class:`HttpxTransport`:
    - ``dict``/``list``: JSON-encoded; ``content-type`` and ``accept`` are set
      to ``application/json``.
    - ``str``/``bytes``: sent as-is.
    - :class:`FormData`: sent as ``multipart/form-data``.
    - ``None``: no body; the method defaults to ``GET`` (``POST`` otherwise).

Bodies announced as JSON (``application/json`` or any ``+json`` type) are
decoded; everything else is returned as text. Connection errors, timeouts and
undecodable JSON raise :class:`CommunicationError`.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable

import httpx

from ..errors import CommunicationError, ErrorCode, LogicError, classify_exception
from .client import get_httpx_client
from .form_data import DEFAULT_MIME_TYPE, FormData
from .response import HttpResponse

USER_AGENT = "unified-ai-python"
JSON_MEDIA_TYPE = "application/json"


@runtime_checkable
class Transport(Protocol):
    """Synchronous request/response HTTP exchange."""

    def fetch(
        self,
        url: str,
        payload: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        method: Optional[str] = None,
    ) -> HttpResponse:
        """Send one request and return the response.

        Raises:
            CommunicationError: On connection errors, timeouts, etc.
        """
        ...


def encode_json(data: Any) -> str:
    """Encode a request body, reporting unserializable values as caller misuse."""
    try:
        return json.dumps(data, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise LogicError(f"Failed to encode request body as JSON: {exc}") from exc


def decode_json(text: str) -> Any:
    """Decode a response body, reporting invalid JSON as a communication failure."""
    try:
        return json.loads(text)
    except ValueError as exc:
        raise CommunicationError(f"Invalid JSON response from API: {exc}") from exc


def is_json_media_type(content_type: str) -> bool:
    """True for ``application/json`` or a ``+json`` suffix type, parameters ignored."""
    media_type = content_type.split(";")[0].strip().lower()
    return media_type == JSON_MEDIA_TYPE or media_type.endswith("+json")


class HttpxTransport:
    """Default :class:`Transport` built on a pooled ``httpx.Client``.

    Parameters:
        client: Optional preconfigured client (proxies, custom TLS, mocking).
            When omitted the shared pooled client is used.
        user_agent: Value of the ``User-Agent`` header unless the caller sets one.
    """

    def __init__(self, client: Optional[httpx.Client] = None, *, user_agent: str = USER_AGENT) -> None:
        self._client = client
        self._user_agent = user_agent

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = get_httpx_client(None, purpose="transport")
        return self._client

    def fetch(
        self,
        url: str,
        payload: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        method: Optional[str] = None,
    ) -> HttpResponse:
        request_headers: Dict[str, str] = {k.lower(): v for k, v in (headers or {}).items()}
        request_headers.setdefault("user-agent", self._user_agent)
        kwargs: Dict[str, Any] = {}

        if isinstance(payload, FormData):
            data: Dict[str, str] = {}
            files: Dict[str, Any] = {}
            for field, item in payload.items.items():
                if item.is_file:
                    files[field] = (item.name, item.read(), item.mime or DEFAULT_MIME_TYPE)
                else:
                    data[field] = item.value  # type: ignore[assignment]
            kwargs["data"] = data
            kwargs["files"] = files
        elif isinstance(payload, (dict, list)):
            request_headers["content-type"] = "application/json"
            request_headers["accept"] = "application/json"
            kwargs["content"] = encode_json(payload).encode("utf-8")
        elif isinstance(payload, (str, bytes)):
            kwargs["content"] = payload

        verb = method or ("GET" if payload is None else "POST")
        try:
            resp = self.client.request(verb, url, headers=request_headers, **kwargs)
        except httpx.HTTPError as exc:
            code = classify_exception(exc)
            raise CommunicationError(
                f"HTTP request failed: {exc}",
                code=code if code is ErrorCode.TIMEOUT else None,
            ) from exc

        body: Any = resp.text
        content_type = resp.headers.get("content-type", "")
        if body != "" and is_json_media_type(content_type):
            body = decode_json(body)

        header_map = {name: resp.headers.get_list(name) for name in resp.headers.keys()}
        return HttpResponse.build(resp.status_code, body, header_map)


__all__ = ["Transport", "HttpxTransport", "encode_json", "decode_json", "is_json_media_type", "USER_AGENT"]
