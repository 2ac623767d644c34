"""LLMProvider Protocol (single-class module).

Defines the one operation every provider adapter must expose.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from ..models import ChatResponse, Message


@runtime_checkable
class LLMProvider(Protocol):
    """Minimal interface for Large Language Model providers.

    Implementations translate ``Message`` sequences into their SDK request
    shape, normalize results to ``ChatResponse``, and never leak SDK
    exceptions upstream.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g., ``"openai"`` or ``"anthropic"``."""
        ...

    async def generate_response(self, messages: Sequence[Message]) -> ChatResponse:
        """Execute a single chat completion round trip.

        Failure handling: every failure raises exactly one
        ``NormalizedError``; a successful call returns exactly one
        ``ChatResponse`` with non-empty content.
        """
        ...
