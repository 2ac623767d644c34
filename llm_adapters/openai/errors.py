"""OpenAI error decoding and status table.

``decode_openai_error`` parses a caught exception into the Chat Completions
error shape. Only ``openai.APIStatusError`` (an HTTP error response from the
API) qualifies; connection and timeout errors carry no backend status and
decode to ``None``.

The indicator is the error ``code`` when it appears in the table, otherwise
the error ``type`` (``context_length_exceeded`` arrives with type
``invalid_request_error``, so ``code`` must win).
"""

from __future__ import annotations

from typing import Dict, Optional

import openai

from ..base.errors import DecodedError, ErrorCode

OPENAI_STATUS_TABLE: Dict[str, ErrorCode] = {
    "invalid_api_key": ErrorCode.INVALID_API_KEY,
    "rate_limit_exceeded": ErrorCode.RATE_LIMIT_EXCEEDED,
    "context_length_exceeded": ErrorCode.CONTEXT_LENGTH_EXCEEDED,
    "invalid_request_error": ErrorCode.INVALID_REQUEST,
}


def _str_or_none(value: object) -> Optional[str]:
    return value if isinstance(value, str) and value else None


def decode_openai_error(exc: BaseException) -> Optional[DecodedError]:
    """Return the decoded OpenAI error shape, or ``None`` if ``exc`` has none."""
    if not isinstance(exc, openai.APIStatusError):
        return None
    code = _str_or_none(exc.code)
    err_type = _str_or_none(exc.type)
    status = code if code in OPENAI_STATUS_TABLE else (err_type or code)
    body = exc.body if isinstance(exc.body, dict) else {}
    message = _str_or_none(body.get("message")) or exc.message
    return DecodedError(status=status, message=message, http_status=exc.status_code)


__all__ = ["OPENAI_STATUS_TABLE", "decode_openai_error"]
