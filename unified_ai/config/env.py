"""Environment variables holding provider API keys.

``ENV_MAP`` names the canonical variable per provider. ``ENV_ALIASES`` lists
every accepted name for providers known under more than one, canonical first;
the first usable value wins. Lookups never raise: an unknown provider or an
unset variable simply yields nothing.
"""

from __future__ import annotations

import os
from typing import Dict, Optional, Tuple

ENV_MAP: Dict[str, str] = {
    "claude": "ANTHROPIC_API_KEY",
    "openai": "OPENAI_API_KEY",
    "gemini": "GEMINI_API_KEY",
    "grok": "XAI_API_KEY",
    "deepseek": "DEEPSEEK_API_KEY",
}

ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "claude": ("ANTHROPIC_API_KEY", "CLAUDE_API_KEY"),
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    "grok": ("XAI_API_KEY", "GROK_API_KEY"),
}

# Substrings marking copy-pasted sample values such as "sk-changeme".
PLACEHOLDER_MARKERS = ("placeholder", "changeme", "example")


def is_placeholder(val: Optional[str]) -> bool:
    """True when ``val`` looks like a sample value rather than a real key."""
    if val is None:
        return False
    lowered = str(val).strip().lower()
    return any(marker in lowered for marker in PLACEHOLDER_MARKERS)


def get_env_var_name(provider: str) -> Optional[str]:
    """Canonical key variable for ``provider``, or ``None`` if unknown."""
    return ENV_MAP.get((provider or "").lower())


def get_env_var_candidates(provider: str) -> Tuple[str, ...]:
    """All accepted key variables for ``provider``, canonical first."""
    name = (provider or "").lower()
    ordered = [ENV_MAP[name]] if name in ENV_MAP else []
    ordered += [alias for alias in ENV_ALIASES.get(name, ()) if alias not in ordered]
    return tuple(ordered)


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(key, variable)`` for the first usable candidate, else ``(None, None)``."""
    for var in get_env_var_candidates(provider):
        value = os.environ.get(var)
        if value and not is_placeholder(value):
            return value, var
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "PLACEHOLDER_MARKERS",
    "is_placeholder",
    "get_env_var_name",
    "get_env_var_candidates",
    "resolve_provider_key",
]
