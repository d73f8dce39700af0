"""Typed parameter object for provider client initialization.

Purpose
-------
Capture the common constructor parameters of provider clients in a small,
validated DTO so the factory boundary has a stable contract. Provider-specific
values travel in ``extra`` and are forwarded as keyword arguments.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation; fields are read
  as-is so collaborator objects in ``extra`` are not serialized.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class AdapterParams(BaseModel):
    """Common provider client initialization parameters.

    Attributes
    ----------
    provider:
        Canonical provider name; informational, never forwarded.
    api_key:
        API key. When omitted the client resolves it from configuration.
    base_url:
        Optional override for the API base URL (proxies, gateways).
    organization:
        OpenAI organization id; ignored by other providers' factories.
    config:
        In-code configuration overrides merged last.
    extra:
        Provider-specific keyword arguments.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    provider: Optional[str] = None
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    organization: Optional[str] = None
    config: Dict[str, Any] = Field(default_factory=dict)
    extra: Dict[str, Any] = Field(default_factory=dict)


__all__ = ["AdapterParams"]
