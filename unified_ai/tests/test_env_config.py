"""Tests for environment key resolution and merged provider configuration."""
from __future__ import annotations

import json

import pytest

from unified_ai.base.errors import LogicError
from unified_ai.config import DEFAULTS, get_model, get_provider_config, reset_config_cache
from unified_ai.config.env import ENV_MAP, get_env_var_candidates, is_placeholder, resolve_provider_key


def test_env_map_covers_all_providers():
    assert set(ENV_MAP) == {"claude", "openai", "gemini", "grok", "deepseek"}  # nosec B101
    assert list(get_env_var_candidates("gemini")) == ["GEMINI_API_KEY", "GOOGLE_API_KEY"]  # nosec B101


def test_resolve_provider_key_uses_alias_and_skips_placeholders(monkeypatch):
    monkeypatch.setenv("XAI_API_KEY", "placeholder")
    monkeypatch.setenv("GROK_API_KEY", "real-key")
    assert resolve_provider_key("grok") == ("real-key", "GROK_API_KEY")  # nosec B101
    assert resolve_provider_key("unknown") == (None, None)  # nosec B101
    assert is_placeholder("ChangeMe") and not is_placeholder("sk-123")  # nosec B101


def test_defaults_when_nothing_is_configured():
    cfg = get_provider_config("claude")
    assert cfg["base_url"] == DEFAULTS["claude"]["base_url"]  # nosec B101
    assert cfg["api_version"] == "2023-06-01"  # nosec B101
    assert cfg["max_tokens"] == 1024  # nosec B101
    assert "api_key" not in cfg  # nosec B101


def test_merge_order_file_then_env_then_overrides(tmp_path, monkeypatch):
    path = tmp_path / "providers.yaml"
    path.write_text("openai:\n  model: from-file\n  base_url: https://file.example/v1\n  organization: org-file\n")
    monkeypatch.setenv("UNIFIED_AI_CONFIG_FILE", str(path))
    monkeypatch.setenv("OPENAI_MODEL", "from-env")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    reset_config_cache()

    cfg = get_provider_config("openai", {"base_url": "https://override.example/v1", "organization": None})
    assert cfg["model"] == "from-env"  # nosec B101
    assert cfg["base_url"] == "https://override.example/v1"  # nosec B101
    assert cfg["organization"] == "org-file"  # nosec B101
    assert cfg["api_key"] == "sk-env"  # nosec B101
    assert get_model("openai") == "from-env"  # nosec B101


def test_json_config_file(tmp_path, monkeypatch):
    path = tmp_path / "providers.json"
    path.write_text(json.dumps({"gemini": {"model": "gemini-json"}}))
    monkeypatch.setenv("UNIFIED_AI_CONFIG_FILE", str(path))
    reset_config_cache()
    assert get_model("gemini") == "gemini-json"  # nosec B101


def test_config_file_must_be_mapping(tmp_path, monkeypatch):
    path = tmp_path / "providers.yaml"
    path.write_text("- just\n- a list\n")
    monkeypatch.setenv("UNIFIED_AI_CONFIG_FILE", str(path))
    reset_config_cache()
    with pytest.raises(LogicError):
        get_provider_config("openai")
