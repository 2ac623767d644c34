"""
Provider-agnostic DTOs for the adapter layer.

Re-exports the single-class modules under ``llm_adapters.base.models_parts``
so call sites keep one stable import path.
"""

from .models_parts import ChatResponse, Message, Role, ROLES

__all__ = [
    "Role",
    "ROLES",
    "Message",
    "ChatResponse",
]
