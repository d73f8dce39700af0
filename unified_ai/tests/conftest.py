"""Pytest configuration for the unified_ai test suite.

Provides a recording fake transport so no test touches the network, a log
capture helper for the package's non-propagating loggers, and isolation from
API keys or config files present in the developer's environment.
"""

from __future__ import annotations

import json
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, Iterator, List, Mapping, Optional, Union

import pytest

from unified_ai.base.http.response import HttpResponse
from unified_ai.base.logging import get_logger
from unified_ai.config import reset_config_cache
from unified_ai.config.env import get_env_var_candidates

PROVIDERS = ("claude", "openai", "gemini", "grok", "deepseek")


@dataclass
class RecordedCall:
    url: str
    payload: Any
    headers: Dict[str, str]
    method: Optional[str]

    @property
    def json(self) -> Any:
        return self.payload


@dataclass
class FakeTransport:
    """Transport double that records requests and replays queued responses."""

    calls: List[RecordedCall] = field(default_factory=list)
    _responses: Deque[Union[HttpResponse, Exception]] = field(default_factory=deque)

    def queue(
        self,
        data: Any,
        status_code: int = 200,
        headers: Optional[Mapping[str, Any]] = None,
    ) -> "FakeTransport":
        self._responses.append(HttpResponse.build(status_code, data, headers))
        return self

    def queue_error(self, exc: Exception) -> "FakeTransport":
        self._responses.append(exc)
        return self

    def fetch(
        self,
        url: str,
        payload: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        method: Optional[str] = None,
    ) -> HttpResponse:
        self.calls.append(RecordedCall(url, payload, dict(headers or {}), method))
        if not self._responses:
            raise AssertionError(f"unexpected request to {url}")
        item = self._responses.popleft()
        if isinstance(item, Exception):
            raise item
        return item


class ListHandler(logging.Handler):
    """Capture log records into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def events(self, name: Optional[str] = None) -> List[Dict[str, Any]]:
        out = []
        for record in self.records:
            try:
                payload = json.loads(record.getMessage())
            except ValueError:
                continue
            if name is None or payload.get("event") == name:
                payload["_level"] = record.levelno
                out.append(payload)
        return out


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove provider credentials and config overrides from the environment."""
    for provider in PROVIDERS:
        for name in get_env_var_candidates(provider):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(f"{provider.upper()}_MODEL", raising=False)
        monkeypatch.delenv(f"{provider.upper()}_BASE_URL", raising=False)
    monkeypatch.delenv("UNIFIED_AI_CONFIG_FILE", raising=False)
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def capture_logs() -> Iterator[ListHandler]:
    """Attach a list handler to the shared ``unified_ai`` logger."""
    base = get_logger()
    handler = ListHandler()
    previous_level = base.level
    base.setLevel(logging.DEBUG)
    base.addHandler(handler)
    yield handler
    base.removeHandler(handler)
    base.setLevel(previous_level)
