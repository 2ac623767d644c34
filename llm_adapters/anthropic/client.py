"""AnthropicProvider adapter.

Uses the ``anthropic`` SDK Messages API (``AsyncAnthropic.messages.create``).

Translation notes:
* The Messages API takes system text as a top-level ``system`` parameter, so
  system turns are lifted out (joined by blank lines, in order) and the
  remaining user/assistant turns keep their relative order.
* ``max_tokens`` is mandatory for this API; ``ANTHROPIC_DEFAULT_MAX_TOKENS``
  applies when none is configured.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Tuple

import anthropic

from ..base.constants import DEFAULT_HTTP_TIMEOUT
from ..base.errors import DecodedError
from ..base.models import Message
from ..base.provider import BaseChatProvider
from ..base.utils.messages import require_turns, split_system
from ..config.defaults import (
    ANTHROPIC_DEFAULT_BASE_URL,
    ANTHROPIC_DEFAULT_MAX_TOKENS,
    ANTHROPIC_DEFAULT_MODEL,
)
from .errors import ANTHROPIC_STATUS_TABLE, decode_anthropic_error


def extract_text(resp: Any) -> str:
    """Join the text blocks of a Messages API response with newlines.

    Non-text blocks (tool use, thinking) are skipped. Returns an empty string
    when the response has no textual parts.
    """
    try:
        blocks = resp.content
    except AttributeError:
        return ""
    parts = [
        b.text
        for b in blocks or ()
        if getattr(b, "type", None) == "text" and getattr(b, "text", None)
    ]
    return "\n".join(parts)


class AnthropicProvider(BaseChatProvider):
    """Adapter for the Anthropic Messages API."""

    status_table = ANTHROPIC_STATUS_TABLE

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
        super().__init__(
            api_key,
            model or ANTHROPIC_DEFAULT_MODEL,
            max_tokens=max_tokens or ANTHROPIC_DEFAULT_MAX_TOKENS,
            temperature=temperature,
            timeout_seconds=timeout_seconds,
        )
        self._client = client or anthropic.AsyncAnthropic(
            api_key=api_key,
            base_url=base_url or ANTHROPIC_DEFAULT_BASE_URL,
            timeout=timeout_seconds if timeout_seconds is not None else DEFAULT_HTTP_TIMEOUT,
            max_retries=0,
        )

    @property
    def provider_name(self) -> str:
        """Return the canonical provider name."""
        return "anthropic"

    def build_request(self, messages: Sequence[Message]) -> Dict[str, Any]:
        """Translate messages into ``messages.create`` keyword arguments."""
        system_text, turns = split_system(messages)
        require_turns(turns, provider=self.provider_name)
        params: Dict[str, Any] = {
            "model": self._model,
            "max_tokens": self._max_tokens,
            "messages": [{"role": m.role, "content": m.content} for m in turns],
        }
        if system_text is not None:
            params["system"] = system_text
        if self._temperature is not None:
            params["temperature"] = self._temperature
        return params

    async def _invoke(self, request: Dict[str, Any]) -> Any:
        return await self._client.messages.create(**request)

    def _extract(self, payload: Any) -> Tuple[Optional[str], Optional[str], Optional[str]]:
        return (
            extract_text(payload),
            getattr(payload, "model", None),
            getattr(payload, "stop_reason", None),
        )

    def decode_error(self, exc: BaseException) -> Optional[DecodedError]:
        return decode_anthropic_error(exc)


__all__ = ["AnthropicProvider", "extract_text"]
