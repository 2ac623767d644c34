"""BaseChatProvider: shared request/response orchestration for adapters.

Purpose:
- Run the single-call algorithm every adapter follows (validate, translate,
  await the SDK, normalize, classify failures) so concrete adapters only
  supply their request shape, SDK invocation, response extraction, error
  decoder and private status table.

External dependencies:
- None directly; concrete subclasses own their vendor SDK client.

Concurrency:
- Instances are immutable after ``__init__``. ``generate_response`` keeps all
  per-call state in locals, so concurrent calls through one instance are
  independent. ``asyncio.CancelledError`` is a ``BaseException`` and passes
  through untouched.
"""

from __future__ import annotations

import time
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Sequence, Tuple

from .constants import EMPTY_RESPONSE_ERROR, MISSING_API_KEY_ERROR
from .errors import DecodedError, ErrorCode, NormalizedError, normalize_exception
from .interfaces import LLMProvider
from .logging import LogContext, get_logger, normalized_log_event
from .models import ChatResponse, Message
from .utils.messages import validate_messages


class BaseChatProvider(LLMProvider):
    """Reusable base class for the provider adapters.

    Subclasses must implement:
    - ``provider_name``: canonical provider identifier.
    - ``build_request(messages)``: pure translation into SDK keyword arguments.
    - ``_invoke(request)``: await the SDK call and return its payload.
    - ``_extract(payload)``: ``(text, model_used, finish_reason)`` from a payload.
    - ``decode_error(exc)``: parse ``exc`` into the backend error shape or ``None``.

    and set ``status_table``, the closed indicator -> ``ErrorCode`` mapping.
    """

    status_table: ClassVar[Mapping[str, ErrorCode]] = {}

    def __init__(
        self,
        api_key: str,
        model: str,
        *,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        timeout_seconds: Optional[float] = None,
    ) -> None:
        if not api_key:
            raise NormalizedError(
                code=ErrorCode.INVALID_API_KEY,
                message=MISSING_API_KEY_ERROR,
                provider=self.provider_name,
            )
        self._api_key = api_key
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._timeout_seconds = timeout_seconds
        self._logger = get_logger(f"llm_adapters.{self.provider_name}")

    # ----- Abstract surface -----
    @property
    def provider_name(self) -> str:  # pragma: no cover - abstract
        """Return the canonical provider name (e.g., ``openai``)."""
        raise NotImplementedError

    def build_request(self, messages: Sequence[Message]) -> Dict[str, Any]:  # pragma: no cover - abstract
        raise NotImplementedError

    async def _invoke(self, request: Dict[str, Any]) -> Any:  # pragma: no cover - abstract
        raise NotImplementedError

    def _extract(self, payload: Any) -> Tuple[Optional[str], Optional[str], Optional[str]]:  # pragma: no cover - abstract
        raise NotImplementedError

    def decode_error(self, exc: BaseException) -> Optional[DecodedError]:  # pragma: no cover - abstract
        raise NotImplementedError

    # ----- Basic info -----
    @property
    def model(self) -> str:
        """Return the model requested by this adapter."""
        return self._model

    # ----- Chat -----
    async def generate_response(self, messages: Sequence[Message]) -> ChatResponse:
        """Perform one chat round trip and return the normalized response.

        Raises:
            NormalizedError: on invalid input, any SDK failure, or an empty
                success payload. The original exception is chained as the cause.
        """
        items: List[Message] = validate_messages(messages, provider=self.provider_name)
        request = self.build_request(items)
        ctx = LogContext(provider=self.provider_name, model=self._model)
        normalized_log_event(
            self._logger,
            "chat.start",
            ctx,
            phase="start",
            message_count=len(items),
            max_tokens=self._max_tokens,
            temperature=self._temperature,
        )
        t0 = time.perf_counter()
        try:
            payload = await self._invoke(request)
        except Exception as exc:
            error = self.normalize_error(exc)
            self._log_error(ctx, error)
            if error is exc:
                raise
            raise error from exc
        latency_ms = (time.perf_counter() - t0) * 1000.0

        response = self._to_response(payload)
        if response is None:
            error = NormalizedError(
                code=ErrorCode.PROVIDER_ERROR,
                message=EMPTY_RESPONSE_ERROR,
                provider=self.provider_name,
            )
            self._log_error(ctx, error)
            raise error
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            latency_ms=latency_ms,
            model_used=response.model_used,
            finish_reason=response.finish_reason,
        )
        return response

    def normalize_error(self, exc: BaseException) -> NormalizedError:
        """Classify ``exc`` with this adapter's decoder and status table."""
        return normalize_exception(
            exc,
            self.decode_error(exc),
            self.status_table,
            provider=self.provider_name,
        )

    # ----- helpers -----
    def _to_response(self, payload: Any) -> Optional[ChatResponse]:
        """Build a ``ChatResponse`` or return ``None`` when no text came back."""
        text, model_used, finish_reason = self._extract(payload)
        if not text:
            return None
        return ChatResponse(
            content=text,
            model_used=model_used or self._model,
            finish_reason=finish_reason,
            raw=payload,
        )

    def _log_error(self, ctx: LogContext, error: NormalizedError) -> None:
        normalized_log_event(
            self._logger,
            "chat.error",
            ctx,
            phase="finalize",
            error_code=error.code.value,
            status=error.status,
            error=error.message,
        )


__all__ = ["BaseChatProvider"]
