"""llm_adapters.config.defaults
=============================

Central place for small, stable default values used across the adapters and
the factory. These can be overridden via environment variables, an external
config file, or constructor arguments.

This module intentionally avoids importing from other packages to prevent
circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# OpenAI defaults (explicit base URL so the SDK does not consult the environment)
OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"

# Anthropic defaults; the Messages API requires max_tokens on every request
ANTHROPIC_DEFAULT_MODEL = "claude-3-5-sonnet-latest"
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com"
ANTHROPIC_DEFAULT_MAX_TOKENS = 1024

# Gemini defaults
GEMINI_DEFAULT_MODEL = "gemini-2.0-flash"


__all__ = [
    "OPENAI_DEFAULT_MODEL",
    "OPENAI_DEFAULT_BASE_URL",
    "ANTHROPIC_DEFAULT_MODEL",
    "ANTHROPIC_DEFAULT_BASE_URL",
    "ANTHROPIC_DEFAULT_MAX_TOKENS",
    "GEMINI_DEFAULT_MODEL",
]
