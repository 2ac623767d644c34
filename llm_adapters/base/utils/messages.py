"""Message helpers shared across providers.

This module provides small utilities that validate and split chat message
sequences for downstream provider adapters. Helpers here must be side-effect
free and operate on provider-agnostic DTOs only.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..constants import EMPTY_MESSAGES_ERROR, NO_CONVERSATION_TURNS_ERROR, NOT_A_MESSAGE_ERROR
from ..errors import ErrorCode, NormalizedError
from ..models import Message


def validate_messages(messages: Sequence[Message], *, provider: str) -> List[Message]:
    """Check the capability contract precondition and return a list copy.

    Raises:
        NormalizedError: ``INVALID_REQUEST`` when ``messages`` is empty or
            contains anything other than ``Message`` instances.
    """
    if messages is None or isinstance(messages, (str, bytes)):
        raise NormalizedError(
            code=ErrorCode.INVALID_REQUEST, message=EMPTY_MESSAGES_ERROR, provider=provider
        )
    items = list(messages)
    if not items:
        raise NormalizedError(
            code=ErrorCode.INVALID_REQUEST, message=EMPTY_MESSAGES_ERROR, provider=provider
        )
    if not all(isinstance(m, Message) for m in items):
        raise NormalizedError(
            code=ErrorCode.INVALID_REQUEST, message=NOT_A_MESSAGE_ERROR, provider=provider
        )
    return items


def split_system(messages: Sequence[Message]) -> Tuple[Optional[str], List[Message]]:
    """Separate system turns from the conversation.

    Returns ``(system_text, turns)`` where ``system_text`` joins every system
    message with a blank line (``None`` when there are none) and ``turns``
    keeps the remaining messages in their original order.
    """
    system_parts: List[str] = []
    turns: List[Message] = []
    for m in messages:
        if m.role == "system":
            system_parts.append(m.content)
        else:
            turns.append(m)
    system_text = "\n\n".join(system_parts) if system_parts else None
    return system_text, turns


def require_turns(turns: Sequence[Message], *, provider: str) -> None:
    """Reject a conversation left with no user or assistant turn.

    Backends that lift system text out of the turn list cannot accept a
    request made of system messages only.
    """
    if not turns:
        raise NormalizedError(
            code=ErrorCode.INVALID_REQUEST, message=NO_CONVERSATION_TURNS_ERROR, provider=provider
        )


__all__ = ["require_turns", "split_system", "validate_messages"]
