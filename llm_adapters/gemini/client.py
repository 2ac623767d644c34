"""GeminiProvider adapter.

Uses the ``google-genai`` SDK (``genai.Client(...).aio.models.generate_content``).
Each adapter owns its own ``genai.Client`` so credentials stay per-instance.

Translation: system turns become ``config["system_instruction"]``; ``user``
turns keep role ``user`` and ``assistant`` turns become role ``model``, each
as a single text part, in the caller's order.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Tuple

from google import genai
from google.genai import types as genai_types

from ..base.constants import DEFAULT_HTTP_TIMEOUT
from ..base.errors import DecodedError
from ..base.models import Message
from ..base.provider import BaseChatProvider
from ..base.utils.messages import require_turns, split_system
from ..config.defaults import GEMINI_DEFAULT_MODEL
from .errors import GEMINI_STATUS_TABLE, decode_gemini_error

_ROLE_MAP = {"user": "user", "assistant": "model"}


def _enum_text(value: Any) -> Optional[str]:
    """Return the wire string of an SDK enum (or plain string) value."""
    if value is None:
        return None
    return str(getattr(value, "value", value))


class GeminiProvider(BaseChatProvider):
    """Adapter for Gemini ``generate_content``."""

    status_table = GEMINI_STATUS_TABLE

    def __init__(
        self,
        api_key: str,
        model: Optional[str] = None,
        *,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        timeout_seconds: Optional[float] = None,
        client: Optional[Any] = None,
    ) -> None:
        super().__init__(
            api_key,
            model or GEMINI_DEFAULT_MODEL,
            max_tokens=max_tokens,
            temperature=temperature,
            timeout_seconds=timeout_seconds,
        )
        timeout = timeout_seconds if timeout_seconds is not None else DEFAULT_HTTP_TIMEOUT
        self._client = client or genai.Client(
            api_key=api_key,
            vertexai=False,
            # HttpOptions.timeout is expressed in milliseconds
            http_options=genai_types.HttpOptions(timeout=int(timeout * 1000)),
        )

    @property
    def provider_name(self) -> str:
        """Return the canonical provider name."""
        return "gemini"

    def build_request(self, messages: Sequence[Message]) -> Dict[str, Any]:
        """Translate messages into ``models.generate_content`` keyword arguments."""
        system_text, turns = split_system(messages)
        require_turns(turns, provider=self.provider_name)
        config: Dict[str, Any] = {}
        if system_text is not None:
            config["system_instruction"] = system_text
        if self._max_tokens is not None:
            config["max_output_tokens"] = self._max_tokens
        if self._temperature is not None:
            config["temperature"] = self._temperature
        params: Dict[str, Any] = {
            "model": self._model,
            "contents": [
                {"role": _ROLE_MAP[m.role], "parts": [{"text": m.content}]} for m in turns
            ],
        }
        if config:
            params["config"] = config
        return params

    async def _invoke(self, request: Dict[str, Any]) -> Any:
        return await self._client.aio.models.generate_content(**request)

    def _extract(self, payload: Any) -> Tuple[Optional[str], Optional[str], Optional[str]]:
        try:
            text = payload.text
        except (AttributeError, TypeError, ValueError):
            text = None
        finish_reason: Optional[str] = None
        candidates = getattr(payload, "candidates", None)
        if candidates:
            finish_reason = _enum_text(getattr(candidates[0], "finish_reason", None))
        return text, getattr(payload, "model_version", None), finish_reason

    def decode_error(self, exc: BaseException) -> Optional[DecodedError]:
        return decode_gemini_error(exc)


__all__ = ["GeminiProvider"]
