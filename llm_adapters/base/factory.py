"""Provider Factory utilities.

Purpose
-------
Create adapter instances by canonical name. Adapter modules are imported
lazily with ``importlib`` so only the SDK that is actually used gets loaded.

This is the one place where configuration and the process environment are
consulted: the resolved API key, model and limits are passed to the adapter
constructor, which never looks them up itself.

Failure modes
-------------
Unknown names, import failures, missing classes, a missing API key and
constructor errors raise :class:`UnknownProviderError`. Invalid parameter
values raise ``pydantic.ValidationError``.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Optional, Tuple, Type

from ..config import get_provider_config
from ..config.env import get_env_var_name
from .dto.adapter_params import AdapterParams
from .errors import NormalizedError
from .interfaces import LLMProvider


class UnknownProviderError(Exception):
    """Raised when a provider cannot be resolved or initialized."""


class ProviderFactory:
    """Create provider adapters based on a canonical name (e.g., ``"openai"``)."""

    # Map canonical provider names to import paths and class names
    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "openai": {"module": "llm_adapters.openai.client", "class": "OpenAIProvider"},
        "anthropic": {"module": "llm_adapters.anthropic.client", "class": "AnthropicProvider"},
        "gemini": {"module": "llm_adapters.gemini.client", "class": "GeminiProvider"},
    }

    # Fields the Gemini adapter does not accept
    _UNSUPPORTED_FIELDS: Dict[str, Tuple[str, ...]] = {
        "gemini": ("base_url",),
    }

    @classmethod
    def create(
        cls,
        provider: str,
        *,
        params: Optional[AdapterParams] = None,
        **kwargs: Any,
    ) -> LLMProvider:
        """Create a provider adapter instance.

        Parameters
        ----------
        provider:
            Canonical provider name (e.g., ``"openai"``).
        params:
            Optional :class:`AdapterParams`; explicit ``kwargs`` win over it and
            both win over configuration (see ``llm_adapters.config``).
        **kwargs:
            Adapter constructor keyword arguments (e.g. ``client=`` for tests).

        Raises
        ------
        UnknownProviderError
            If the provider is unknown, cannot be imported, has no API key
            available, or its constructor fails.
        """
        name = (provider or "").lower().strip()
        spec = cls._PROVIDERS.get(name)
        if not spec:
            raise UnknownProviderError(f"Unknown provider '{provider}'")

        merged = cls._resolve_kwargs(name, params, kwargs)
        if not merged.get("api_key"):
            raise UnknownProviderError(
                f"No API key for provider '{name}'; pass api_key or set {get_env_var_name(name)}"
            )

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
                f"Adapter class '{class_name}' not found in '{module_path}' for provider '{provider}'"
            ) from exc

        try:
            return klass(**merged)
        except TypeError as exc:
            raise UnknownProviderError(
                f"Invalid arguments for '{provider}' adapter constructor: {exc}"
            ) from exc
        except NormalizedError as exc:
            raise UnknownProviderError(
                f"Failed to initialize provider '{provider}': {exc.message}"
            ) from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported canonical provider names in deterministic order."""
        return tuple(cls._PROVIDERS.keys())

    @classmethod
    def _resolve_kwargs(
        cls, name: str, params: Optional[AdapterParams], kwargs: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Merge config, ``params`` and ``kwargs`` (later wins, ``None`` ignored)."""
        overrides: Dict[str, Any] = {}
        if params is not None:
            overrides |= params.model_dump(exclude_none=True)
        overrides |= {k: v for k, v in kwargs.items() if v is not None}
        cfg = get_provider_config(name, overrides)
        allowed = set(AdapterParams.model_fields) - set(cls._UNSUPPORTED_FIELDS.get(name, ()))
        merged = {k: v for k, v in cfg.items() if k in allowed}
        # Non-config kwargs (client=...) pass through untouched
        merged |= {k: v for k, v in overrides.items() if k not in AdapterParams.model_fields}
        return merged


__all__ = ["ProviderFactory", "UnknownProviderError"]
