"""
Message DTO used across providers.

Defines the immutable `Message` dataclass and the `Role` literal representing
the sender role. Ordering inside a message sequence is conversation order and
adapters must forward it unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple


# Message roles accepted by every adapter.
Role = Literal["system", "user", "assistant"]

ROLES: Tuple[str, ...] = ("system", "user", "assistant")


@dataclass(frozen=True)
class Message:
    """A single chat turn.

    Attributes:
        role: The role of the message author (``"system"``, ``"user"`` or
            ``"assistant"``).
        content: Plain text content of the turn.

    Raises:
        ValueError: If ``role`` is not a known role or ``content`` is not a string.
    """

    role: Role
    content: str

    def __post_init__(self) -> None:
        if self.role not in ROLES:
            raise ValueError(f"unknown message role: {self.role!r}")
        if not isinstance(self.content, str):
            raise ValueError("message content must be a string")


__all__ = [
    "Message",
    "Role",
    "ROLES",
]
