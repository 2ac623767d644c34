"""Interfaces (Protocols) split into single-class modules.

``llm_adapters.base.interfaces`` re-exports a stable API from here.
"""

from .llm_provider import LLMProvider

__all__ = [
    "LLMProvider",
]
