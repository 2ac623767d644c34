"""
Adapter Base Package

Exports the provider-agnostic contract, DTOs, error taxonomy and factory:
- Interfaces: the ``LLMProvider`` capability contract
- Models: ``Message`` and ``ChatResponse``
- Errors: ``ErrorCode`` and ``NormalizedError``
- Factory: lazy creation of adapters by canonical name
"""

from .dto import AdapterParams
from .errors import DecodedError, ErrorCode, NormalizedError
from .factory import ProviderFactory, UnknownProviderError
from .interfaces import LLMProvider
from .models import ChatResponse, Message, Role
from .provider import BaseChatProvider

__all__ = [
    # Models
    "Role",
    "Message",
    "ChatResponse",
    # Errors
    "ErrorCode",
    "NormalizedError",
    "DecodedError",
    # Interfaces
    "LLMProvider",
    "BaseChatProvider",
    # Factory
    "AdapterParams",
    "ProviderFactory",
    "UnknownProviderError",
]
