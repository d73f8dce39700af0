"""Unified configuration layer for providers.

Sources are merged in a predictable order, later wins:
    1. Built-in defaults (``config.defaults``)
    2. Optional external config file (JSON or YAML) pointed to by
       ``UNIFIED_AI_CONFIG_FILE``
    3. Environment variables (``<PROVIDER>_MODEL``, ``<PROVIDER>_BASE_URL`` and
       the API key candidates from ``config.env``)
    4. In-code overrides passed to :func:`get_provider_config`

External config file structure example::

    openai:
      model: gpt-4o-mini
      organization: org-123
    claude:
      base_url: https://proxy.internal/anthropic/
      api_version: "2023-06-01"

Public API
----------
* get_provider_config(provider, overrides=None) -> dict
* get_model(provider) -> str | None
* reset_config_cache()
"""
from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from ..base.errors import LogicError
from .defaults import (
    CLAUDE_DEFAULT_API_VERSION,
    CLAUDE_DEFAULT_BASE_URL,
    CLAUDE_DEFAULT_MAX_TOKENS,
    CLAUDE_DEFAULT_MODEL,
    CONFIG_FILE_ENV,
    DEEPSEEK_DEFAULT_BASE_URL,
    DEEPSEEK_DEFAULT_MODEL,
    GEMINI_DEFAULT_BASE_URL,
    GEMINI_DEFAULT_MODEL,
    GROK_DEFAULT_BASE_URL,
    GROK_DEFAULT_MODEL,
    OPENAI_BATCH_COMPLETION_WINDOW,
    OPENAI_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_MODEL,
)
from .env import resolve_provider_key

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "claude": {
        "model": CLAUDE_DEFAULT_MODEL,
        "base_url": CLAUDE_DEFAULT_BASE_URL,
        "api_version": CLAUDE_DEFAULT_API_VERSION,
        "max_tokens": CLAUDE_DEFAULT_MAX_TOKENS,
    },
    "openai": {
        "model": OPENAI_DEFAULT_MODEL,
        "base_url": OPENAI_DEFAULT_BASE_URL,
        "completion_window": OPENAI_BATCH_COMPLETION_WINDOW,
    },
    "gemini": {"model": GEMINI_DEFAULT_MODEL, "base_url": GEMINI_DEFAULT_BASE_URL},
    "grok": {"model": GROK_DEFAULT_MODEL, "base_url": GROK_DEFAULT_BASE_URL},
    "deepseek": {"model": DEEPSEEK_DEFAULT_MODEL, "base_url": DEEPSEEK_DEFAULT_BASE_URL},
}

ENV_FIELD_MAP = {
    "model": "MODEL",
    "base_url": "BASE_URL",
}

_FILE_CACHE: Optional[Dict[str, Any]] = None


def _load_file() -> Dict[str, Any]:
    """Load the external config file once; JSON first, then YAML.

    A missing path yields an empty mapping. A file that exists but cannot be
    parsed, or whose top level is not a mapping, raises :class:`LogicError`.
    """
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not os.path.isfile(path):
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise LogicError(f"Cannot parse config file '{path}': {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise LogicError(f"Config file '{path}' must contain a mapping at the top level")
    _FILE_CACHE = data
    return _FILE_CACHE


def reset_config_cache() -> None:
    """Forget the parsed config file so the next lookup re-reads it."""
    global _FILE_CACHE
    _FILE_CACHE = None


def _env_values(provider: str) -> Dict[str, Any]:
    prefix = provider.upper()
    values: Dict[str, Any] = {}
    for field, suffix in ENV_FIELD_MAP.items():
        if val := os.environ.get(f"{prefix}_{suffix}"):
            values[field] = val
    key, _ = resolve_provider_key(provider)
    if key:
        values["api_key"] = key
    return values


def get_provider_config(provider: str, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged configuration mapping for ``provider``.

    Parameters:
        provider: Canonical provider name (``claude``, ``openai``, ...).
        overrides: In-code values; ``None`` entries are ignored.
    """
    name = (provider or "").lower().strip()
    merged: Dict[str, Any] = copy.deepcopy(DEFAULTS.get(name, {}))
    section = _load_file().get(name)
    if isinstance(section, Mapping):
        merged.update({k: v for k, v in section.items() if v is not None})
    merged.update(_env_values(name))
    if overrides:
        merged.update({k: v for k, v in overrides.items() if v is not None})
    return merged


def get_model(provider: str) -> Optional[str]:
    """Return the configured default model for ``provider``."""
    return get_provider_config(provider).get("model")


__all__ = ["DEFAULTS", "get_provider_config", "get_model", "reset_config_cache"]
