"""llm_adapters package

A thin typed interface for sending chat messages to one of several LLM
backends (OpenAI, Anthropic, Gemini) and normalizing their responses and
errors into a single shape.

Public API (re-exported):
    - Version: ``__version__``
    - Models: :class:`Message`, :class:`ChatResponse`
    - Errors: :class:`ErrorCode`, :class:`NormalizedError`
    - Contract: :class:`LLMProvider`
    - Factory: :func:`create`

Adapter classes are importable from their subpackages
(``llm_adapters.openai.OpenAIProvider`` etc.); importing them pulls in the
matching vendor SDK.
"""

from typing import Any, Optional

from .base.dto import AdapterParams
from .base.errors import ErrorCode, NormalizedError
from .base.factory import ProviderFactory, UnknownProviderError
from .base.interfaces import LLMProvider
from .base.models import ChatResponse, Message

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Message",
    "ChatResponse",
    "ErrorCode",
    "NormalizedError",
    "LLMProvider",
    "AdapterParams",
    "ProviderFactory",
    "UnknownProviderError",
    "create",
]


def create(provider_name: str, *, params: Optional[AdapterParams] = None, **kwargs: Any) -> LLMProvider:
    """Instantiate a provider adapter by name.

    Parameters
    ----------
    provider_name:
        Canonical provider name: ``"openai"``, ``"anthropic"`` or ``"gemini"``.
    params:
        Optional typed :class:`AdapterParams`.
    **kwargs:
        Adapter constructor keyword arguments; they take precedence over ``params``.

    Raises
    ------
    UnknownProviderError
        See :meth:`ProviderFactory.create`.
    """
    return ProviderFactory.create(provider_name, params=params, **kwargs)
