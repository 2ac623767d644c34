"""Models parts package: one DTO per module, re-exported by ``base.models``."""

from .message import Message, Role, ROLES
from .chat_response import ChatResponse

__all__ = [
    "Message",
    "Role",
    "ROLES",
    "ChatResponse",
]
