"""Provider factory.

Purpose
-------
Create provider clients from a canonical name. Provider modules are imported
lazily with ``importlib`` so constructing one client does not import the
others.

Scope
-----
Supported providers: ``claude``, ``openai``, ``gemini``, ``grok`` and
``deepseek``.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Mapping, Optional, Tuple, Type

from .dto.adapter_params import AdapterParams
from .errors import AccessError, LogicError


class UnknownProviderError(LogicError):
    """Raised when a provider cannot be resolved or constructed.

    Failure modes include an unregistered name, an import failure, a missing
    client class and invalid constructor arguments.
    """


def create_provider(provider: str, **kwargs: Any) -> Any:
    """Shortcut delegating to :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, **kwargs)


class ProviderFactory:
    """Create provider clients based on a canonical name (e.g. ``"claude"``)."""

    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "claude": {"module": "unified_ai.claude.client", "class": "ClaudeProvider"},
        "openai": {"module": "unified_ai.openai.client", "class": "OpenAIProvider"},
        "gemini": {"module": "unified_ai.gemini.client", "class": "GeminiProvider"},
        "grok": {"module": "unified_ai.grok.client", "class": "GrokProvider"},
        "deepseek": {"module": "unified_ai.deepseek.client", "class": "DeepSeekProvider"},
    }

    @classmethod
    def create(
        cls,
        provider: str,
        *,
        params: Optional[AdapterParams] = None,
        **kwargs: Any,
    ) -> Any:
        """Create a provider client.

        Parameters
        ----------
        provider:
            Canonical provider name.
        params:
            Optional :class:`AdapterParams`; explicit ``kwargs`` win.
        **kwargs:
            Client constructor keyword arguments (``api_key``, ``base_url``,
            ``transport``, ``config``, ...).

        Raises
        ------
        UnknownProviderError
            Unknown name, import failure, missing class or bad arguments.
        LogicError
            Raised by the client itself, e.g. when no API key is configured.
        """
        merged_kwargs = cls._coerce_params(params, kwargs)

        name = (provider or "").lower().strip()
        spec = cls._PROVIDERS.get(name)
        if not spec:
            raise UnknownProviderError(f"Unknown provider '{provider}'")
        if name != "openai" and "organization" not in kwargs:
            merged_kwargs.pop("organization", None)

        module_path, class_name = spec["module"], spec["class"]
        try:
            mod = import_module(module_path)
        except ImportError as exc:
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider '{provider}': {exc}"
            ) from exc

        try:
            klass: Type = getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownProviderError(
                f"Client class '{class_name}' not found in '{module_path}' for provider '{provider}'"
            ) from exc

        try:
            return klass(**merged_kwargs)
        except TypeError as exc:
            raise UnknownProviderError(
                f"Invalid arguments for '{provider}' client constructor: {exc}"
            ) from exc
        except AccessError:
            raise

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported canonical provider names in registration order."""
        return tuple(cls._PROVIDERS.keys())

    @staticmethod
    def _coerce_params(params: Optional[AdapterParams], kwargs: Mapping[str, Any]) -> Dict[str, Any]:
        """Merge ``AdapterParams`` into ``kwargs``.

        - Values in ``kwargs`` take precedence.
        - ``None`` fields and empty ``config`` are dropped.
        - ``extra`` entries are flattened into keyword arguments.
        - ``config`` mappings are shallow-merged, ``kwargs`` winning.
        """
        if params is None:
            return dict(kwargs)
        merged: Dict[str, Any] = {k: v for k, v in params if v is not None}
        merged.pop("provider", None)
        extra = merged.pop("extra", {}) or {}
        if not merged.get("config"):
            merged.pop("config", None)
        merged.update(extra)
        if "config" in merged and "config" in kwargs:
            cfg = dict(merged["config"])
            cfg.update(kwargs["config"])
            merged["config"] = cfg
            kwargs = {k: v for k, v in kwargs.items() if k != "config"}
        merged.update(kwargs)
        return merged


__all__ = ["ProviderFactory", "UnknownProviderError", "create_provider"]
