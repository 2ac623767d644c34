"""Small pure helpers shared by provider adapters."""

from .messages import require_turns, split_system, validate_messages

__all__ = ["require_turns", "split_system", "validate_messages"]
