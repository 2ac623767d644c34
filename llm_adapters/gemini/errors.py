"""Gemini error decoding and status table.

``google.genai.errors.APIError`` carries the canonical Google RPC ``status``
string (``UNAUTHENTICATED``, ``RESOURCE_EXHAUSTED``...) and the raw error JSON
in ``details``. Gemini reports a bad key as ``INVALID_ARGUMENT`` with an
``ErrorInfo`` detail whose ``reason`` is ``API_KEY_INVALID``, so the ErrorInfo
reason is used as the indicator when the table knows it, otherwise the status.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from google.genai import errors as genai_errors

from ..base.errors import DecodedError, ErrorCode

GEMINI_STATUS_TABLE: Dict[str, ErrorCode] = {
    "API_KEY_INVALID": ErrorCode.INVALID_API_KEY,
    "UNAUTHENTICATED": ErrorCode.INVALID_API_KEY,
    "RESOURCE_EXHAUSTED": ErrorCode.RATE_LIMIT_EXCEEDED,
    "INVALID_ARGUMENT": ErrorCode.INVALID_REQUEST,
}

_ERROR_INFO_TYPE = "type.googleapis.com/google.rpc.ErrorInfo"


def _error_info_reason(details: Any) -> Optional[str]:
    """Return the ``reason`` of the first ErrorInfo entry in the error JSON."""
    if not isinstance(details, dict):
        return None
    error = details.get("error", details)
    entries = error.get("details") if isinstance(error, dict) else None
    if not isinstance(entries, list):
        return None
    for entry in entries:
        if isinstance(entry, dict) and entry.get("@type") == _ERROR_INFO_TYPE:
            reason = entry.get("reason")
            return reason if isinstance(reason, str) else None
    return None


def decode_gemini_error(exc: BaseException) -> Optional[DecodedError]:
    """Return the decoded Gemini error shape, or ``None`` if ``exc`` has none."""
    if not isinstance(exc, genai_errors.APIError):
        return None
    reason = _error_info_reason(exc.details)
    status = exc.status if isinstance(exc.status, str) else None
    indicator = reason if reason in GEMINI_STATUS_TABLE else status
    message = exc.message if isinstance(exc.message, str) else None
    http_status = exc.code if isinstance(exc.code, int) else None
    return DecodedError(status=indicator, message=message, http_status=http_status)


__all__ = ["GEMINI_STATUS_TABLE", "decode_gemini_error"]
