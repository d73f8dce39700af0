"""Shared provider client base.

``BaseProvider`` owns what every provider client has in common: credential
and base URL resolution from configuration, the transport collaborator, URL
building and the ``call_api`` contract used by chat sessions, batches and
embeddings.

``call_api`` contract
---------------------
- ``endpoint`` is relative to the base URL unless it contains ``://``.
- HTTP status >= 400 raises :class:`ApiError` with the provider's
  ``error.message`` when present, otherwise ``"<Provider> API error (HTTP n)"``.
- With ``is_json=True`` the decoded body must be a JSON object, otherwise
  :class:`CommunicationError` is raised. With ``is_json=False`` the body text
  is returned unchanged.
- Transport failures surface as :class:`CommunicationError` from the
  transport itself. Nothing is retried.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from ..config import get_provider_config
from .errors import ApiError, CommunicationError, LogicError, classify_status
from .http.transport import HttpxTransport, Transport, encode_json
from .logging import LogContext, get_logger, log_event
from .utils.mapping import dig_str


def normalize_base_url(url: str) -> str:
    """Return ``url`` with exactly one trailing slash."""
    return url.rstrip("/") + "/"


class BaseProvider:
    """Common behavior for provider clients.

    Subclasses set ``provider_name`` (configuration and logging key) and
    ``display_name`` (used in error messages), and override
    :meth:`_auth_headers` or :meth:`_authorize_url` to attach credentials.

    Parameters:
        api_key: Explicit credential; resolved from configuration when omitted.
        base_url: Base URL override.
        transport: HTTP transport; defaults to :class:`HttpxTransport`.
        config: In-code configuration overrides.
    """

    provider_name: str = ""
    display_name: str = ""

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        transport: Optional[Transport] = None,
        config: Optional[Mapping[str, Any]] = None,
    ) -> None:
        overrides = dict(config or {})
        if api_key:
            overrides["api_key"] = api_key
        if base_url:
            overrides["base_url"] = base_url
        self._config: Dict[str, Any] = get_provider_config(self.provider_name, overrides)
        key = self._config.get("api_key")
        if not key:
            raise LogicError(
                f"{self.display_name} API key is not configured",
                provider=self.provider_name,
            )
        self._api_key: str = key
        self._base_url = normalize_base_url(self._config["base_url"])
        self._transport: Transport = transport or HttpxTransport()
        self._logger = get_logger(self.provider_name)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def default_model(self) -> Optional[str]:
        return self._config.get("model")

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def log_context(self, **fields: Any) -> LogContext:
        return LogContext(provider=self.provider_name, **fields)

    def set_options(self, *, custom_base_url: Optional[str] = None) -> "BaseProvider":
        """Update client-wide options; ``None`` leaves a setting unchanged."""
        if custom_base_url is not None:
            self._base_url = normalize_base_url(custom_base_url)
        return self

    def _auth_headers(self) -> Dict[str, str]:
        return {}

    def _authorize_url(self, url: str) -> str:
        return url

    def _build_url(self, endpoint: str) -> str:
        if "://" in endpoint:
            return endpoint
        return self._base_url + endpoint.lstrip("/")

    def call_api(
        self,
        endpoint: str,
        payload: Any = None,
        *,
        is_json: bool = True,
        method: Optional[str] = None,
    ) -> Any:
        """Send a request to the provider and return the decoded body."""
        url = self._authorize_url(self._build_url(endpoint))
        response = self._transport.fetch(url, payload, self._auth_headers(), method)
        data = response.data

        if response.status_code >= 400:
            message = dig_str(data, "error", "message") or (
                f"{self.display_name} API error (HTTP {response.status_code})"
            )
            code = classify_status(response.status_code)
            log_event(
                self._logger,
                "api.error",
                self.log_context(),
                level=logging.WARNING,
                endpoint=endpoint,
                status_code=response.status_code,
                error_code=code.value,
                message=message,
            )
            raise ApiError(
                message,
                status_code=response.status_code,
                code=code,
                provider=self.provider_name,
            )

        if not is_json:
            if isinstance(data, str):
                return data
            # The transport decoded a body announced as JSON; hand back text.
            return encode_json(data)
        if not isinstance(data, dict):
            raise CommunicationError(
                f"Invalid JSON response from {self.display_name} API",
                provider=self.provider_name,
            )
        return data


__all__ = ["BaseProvider", "normalize_base_url"]
