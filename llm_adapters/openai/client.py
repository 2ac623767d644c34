"""OpenAIProvider adapter.

Uses the ``openai`` SDK's ``AsyncOpenAI.chat.completions.create``. Messages map
one-to-one onto Chat Completions messages (roles are shared), so translation
is a plain ordered copy.

The SDK client is built once with ``max_retries=0``: retry policy belongs to
the caller.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Tuple

import openai

from ..base.constants import DEFAULT_HTTP_TIMEOUT
from ..base.errors import DecodedError
from ..base.models import Message
from ..base.provider import BaseChatProvider
from ..config.defaults import OPENAI_DEFAULT_BASE_URL, OPENAI_DEFAULT_MODEL
from .errors import OPENAI_STATUS_TABLE, decode_openai_error

__all__ = ["OpenAIProvider"]


class OpenAIProvider(BaseChatProvider):
    """Adapter for OpenAI Chat Completions."""

    status_table = OPENAI_STATUS_TABLE

    def __init__(
        self,
        api_key: str,
        model: Optional[str] = None,
        *,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        timeout_seconds: Optional[float] = None,
        base_url: Optional[str] = None,
        client: Optional[Any] = None,
    ) -> None:
        """
        Args:
            api_key: OpenAI API key (opaque; never read from the environment here).
            model: Model to request; defaults to ``OPENAI_DEFAULT_MODEL``.
            max_tokens: Optional completion token cap.
            temperature: Optional sampling temperature.
            timeout_seconds: SDK request timeout; defaults to ``DEFAULT_HTTP_TIMEOUT``.
            base_url: API base URL override (proxies, gateways).
            client: Pre-built ``AsyncOpenAI``-compatible client, mainly for tests.
        """
        super().__init__(
            api_key,
            model or OPENAI_DEFAULT_MODEL,
            max_tokens=max_tokens,
            temperature=temperature,
            timeout_seconds=timeout_seconds,
        )
        self._client = client or openai.AsyncOpenAI(
            api_key=api_key,
            base_url=base_url or OPENAI_DEFAULT_BASE_URL,
            timeout=timeout_seconds if timeout_seconds is not None else DEFAULT_HTTP_TIMEOUT,
            max_retries=0,
        )

    @property
    def provider_name(self) -> str:
        """Return the canonical provider name."""
        return "openai"

    def build_request(self, messages: Sequence[Message]) -> Dict[str, Any]:
        """Translate messages into ``chat.completions.create`` keyword arguments."""
        params: Dict[str, Any] = {
            "model": self._model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
        }
        if self._max_tokens is not None:
            params["max_tokens"] = self._max_tokens
        if self._temperature is not None:
            params["temperature"] = self._temperature
        return params

    async def _invoke(self, request: Dict[str, Any]) -> Any:
        return await self._client.chat.completions.create(**request)

    def _extract(self, payload: Any) -> Tuple[Optional[str], Optional[str], Optional[str]]:
        try:
            choice = payload.choices[0]
            text = choice.message.content
            finish_reason = choice.finish_reason
        except (AttributeError, IndexError, TypeError):
            text, finish_reason = None, None
        return text, getattr(payload, "model", None), finish_reason

    def decode_error(self, exc: BaseException) -> Optional[DecodedError]:
        return decode_openai_error(exc)
