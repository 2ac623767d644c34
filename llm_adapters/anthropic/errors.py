"""Anthropic error decoding and status table.

Anthropic error responses have the body
``{"type": "error", "error": {"type": "<error type>", "message": "..."}}``.
``decode_anthropic_error`` accepts only ``anthropic.APIStatusError`` and reads
the nested ``error.type`` as the indicator; a status error whose body does not
carry it still decodes (indicator ``None``) and resolves to ``PROVIDER_ERROR``.
"""

from __future__ import annotations

from typing import Dict, Optional

import anthropic

from ..base.errors import DecodedError, ErrorCode

ANTHROPIC_STATUS_TABLE: Dict[str, ErrorCode] = {
    "authentication_error": ErrorCode.INVALID_API_KEY,
    "rate_limit_error": ErrorCode.RATE_LIMIT_EXCEEDED,
    "context_length_exceeded": ErrorCode.CONTEXT_LENGTH_EXCEEDED,
    "invalid_request_error": ErrorCode.INVALID_REQUEST,
}


def decode_anthropic_error(exc: BaseException) -> Optional[DecodedError]:
    """Return the decoded Anthropic error shape, or ``None`` if ``exc`` has none."""
    if not isinstance(exc, anthropic.APIStatusError):
        return None
    body = exc.body if isinstance(exc.body, dict) else {}
    error = body.get("error")
    status: Optional[str] = None
    message: Optional[str] = None
    if isinstance(error, dict):
        if isinstance(error.get("type"), str):
            status = error["type"]
        if isinstance(error.get("message"), str):
            message = error["message"]
    return DecodedError(status=status, message=message or exc.message, http_status=exc.status_code)


__all__ = ["ANTHROPIC_STATUS_TABLE", "decode_anthropic_error"]
