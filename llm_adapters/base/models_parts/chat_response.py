"""
ChatResponse DTO representing normalized provider responses.

The ``raw`` field carries the provider payload for diagnostics only and is
intentionally excluded from default serialization to prevent large object
graphs from being logged or persisted unintentionally.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ChatResponse:
    """Provider-agnostic response from a single chat invocation.

    Attributes:
        content: Text produced by the model.
        model_used: Model identifier reported by the backend, which may differ
            from the requested one due to backend routing.
        finish_reason: Backend-specific stop reason passed through verbatim
            (e.g. ``"stop"``, ``"end_turn"``, ``"STOP"``).
        raw: Optional provider SDK/native object for diagnostics only.
    """

    content: str
    model_used: str
    finish_reason: Optional[str] = None
    raw: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary excluding raw provider objects."""
        return {
            "content": self.content,
            "model_used": self.model_used,
            "finish_reason": self.finish_reason,
        }


__all__ = [
    "ChatResponse",
]
