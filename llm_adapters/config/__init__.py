"""Unified configuration layer for the adapter factory.

Merge order (later wins)
------------------------
1. Built-in defaults (``config.defaults``)
2. Optional external config file (JSON or YAML) pointed to by
   ``LLM_ADAPTERS_CONFIG_FILE``
3. Environment variables ``<PROVIDER>_MODEL`` and the provider's API key
   variables (see ``config.env``)
4. In-code overrides passed to ``get_provider_config``

External Config File
--------------------
JSON is tried first, then YAML. Structure example::

    openai:
      model: gpt-4o-mini
    anthropic:
      model: claude-3-5-sonnet-latest
      max_tokens: 2048

Only the factory consults this module; adapters receive plain values.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    ANTHROPIC_DEFAULT_MAX_TOKENS,
    ANTHROPIC_DEFAULT_MODEL,
    GEMINI_DEFAULT_MODEL,
    OPENAI_DEFAULT_MODEL,
)
from .env import resolve_provider_key

CONFIG_FILE_ENV = "LLM_ADAPTERS_CONFIG_FILE"

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openai": {"model": OPENAI_DEFAULT_MODEL},
    "anthropic": {"model": ANTHROPIC_DEFAULT_MODEL, "max_tokens": ANTHROPIC_DEFAULT_MAX_TOKENS},
    "gemini": {"model": GEMINI_DEFAULT_MODEL},
}

_FILE_CACHE: Optional[Dict[str, Any]] = None


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    data: Any
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        _FILE_CACHE = {}
        return _FILE_CACHE
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            data = {}
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE = data
    return data


def reset_config_cache() -> None:
    """Forget the parsed config file so the next lookup re-reads it."""
    global _FILE_CACHE
    _FILE_CACHE = None


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    model = os.getenv(f"{provider.upper()}_MODEL")
    if model:
        out["model"] = model
    key, _ = resolve_provider_key(provider)
    if key:
        out["api_key"] = key
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    ``None`` values in ``overrides`` are ignored.
    """
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}
    cfg |= DEFAULTS.get(name, {})

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


__all__ = [
    "CONFIG_FILE_ENV",
    "DEFAULTS",
    "get_provider_config",
    "get_model",
    "reset_config_cache",
]
