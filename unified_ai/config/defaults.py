"""unified_ai.config.defaults
==========================

Central place for small, stable default values used across the package.
These defaults can be overridden via environment variables or an external
configuration file, but provide sensible fallbacks for local development and
tests.

This module intentionally avoids importing from other package modules to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Claude ----
CLAUDE_DEFAULT_BASE_URL = "https://api.anthropic.com/"
CLAUDE_DEFAULT_API_VERSION = "2023-06-01"
CLAUDE_DEFAULT_MODEL = "claude-sonnet-4-0"
# The Messages API requires max_tokens on every request.
CLAUDE_DEFAULT_MAX_TOKENS = 1024

# ---- OpenAI ----
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1/"
OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
OPENAI_BATCH_ENDPOINT = "/v1/responses"
OPENAI_BATCH_COMPLETION_WINDOW = "24h"

# ---- Gemini ----
GEMINI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/"
GEMINI_DEFAULT_MODEL = "gemini-2.5-flash"

# ---- Grok (xAI) ----
GROK_DEFAULT_BASE_URL = "https://api.x.ai/v1/"
GROK_DEFAULT_MODEL = "grok-4"

# ---- DeepSeek ----
DEEPSEEK_DEFAULT_BASE_URL = "https://api.deepseek.com/"
DEEPSEEK_DEFAULT_MODEL = "deepseek-chat"

# ---- Configuration file ----
CONFIG_FILE_ENV = "UNIFIED_AI_CONFIG_FILE"


__all__ = [
    "CLAUDE_DEFAULT_BASE_URL",
    "CLAUDE_DEFAULT_API_VERSION",
    "CLAUDE_DEFAULT_MODEL",
    "CLAUDE_DEFAULT_MAX_TOKENS",
    "OPENAI_DEFAULT_BASE_URL",
    "OPENAI_DEFAULT_MODEL",
    "OPENAI_BATCH_ENDPOINT",
    "OPENAI_BATCH_COMPLETION_WINDOW",
    "GEMINI_DEFAULT_BASE_URL",
    "GEMINI_DEFAULT_MODEL",
    "GROK_DEFAULT_BASE_URL",
    "GROK_DEFAULT_MODEL",
    "DEEPSEEK_DEFAULT_BASE_URL",
    "DEEPSEEK_DEFAULT_MODEL",
    "CONFIG_FILE_ENV",
]
