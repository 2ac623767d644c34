"""
Provider-agnostic interfaces (Protocols) for the adapter layer.

Re-exports Protocols split into single-class modules under
``llm_adapters.base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import LLMProvider

__all__ = [
    "LLMProvider",
]
