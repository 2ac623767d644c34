"""
Error classification helpers mapping decoded failures to ``ErrorCode`` values.

Each adapter first decodes a caught exception into :class:`DecodedError` (its
backend's own error shape) or ``None`` when the exception does not have that
shape at all. Classification is then total:

1. ``NormalizedError`` passthrough.
2. Not decoded -> ``UNKNOWN_ERROR``.
3. Decoded with an indicator present in the adapter's table -> mapped code.
4. Decoded otherwise -> ``PROVIDER_ERROR``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .error_code import ErrorCode
from .normalized_error import NormalizedError


@dataclass(frozen=True)
class DecodedError:
    """A failure parsed into a backend's known error shape.

    Attributes:
        status: Backend status/type indicator used for table lookup.
        message: Backend-provided message text, if any.
        http_status: HTTP status code reported by the SDK, if any.
    """

    status: Optional[str]
    message: Optional[str] = None
    http_status: Optional[int] = None


def classify_decoded(
    decoded: Optional[DecodedError], table: Mapping[str, ErrorCode]
) -> ErrorCode:
    """Resolve a decoded failure against an adapter's status table."""
    if decoded is None:
        return ErrorCode.UNKNOWN_ERROR
    if decoded.status is not None and decoded.status in table:
        return table[decoded.status]
    return ErrorCode.PROVIDER_ERROR


def normalize_exception(
    exc: BaseException,
    decoded: Optional[DecodedError],
    table: Mapping[str, ErrorCode],
    *,
    provider: str,
) -> NormalizedError:
    """Build the single :class:`NormalizedError` raised for ``exc``.

    The backend message is preserved when the failure was decoded; otherwise
    the exception's own text (or type name when empty) is used.
    """
    if isinstance(exc, NormalizedError):
        return exc
    code = classify_decoded(decoded, table)
    message = (decoded.message if decoded else None) or str(exc) or type(exc).__name__
    return NormalizedError(
        code=code,
        message=message,
        raw=exc,
        provider=provider,
        status=decoded.status if decoded else None,
    )


__all__ = [
    "DecodedError",
    "classify_decoded",
    "normalize_exception",
]
