"""
Structured normalized error exception type.

Wraps provider-specific failures with an `ErrorCode` discriminant so callers
can branch on ``error.code`` without knowing which backend raised it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass(eq=False)
class NormalizedError(Exception):
    """Represents a provider failure resolved to a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable message; the backend's own text when available.
        raw: Optional original exception for diagnostics.
        provider: Provider key where the error originated (e.g., ``"openai"``).
        status: Backend status/type indicator that was decoded, if any.
    """

    code: ErrorCode
    message: str
    raw: Optional[BaseException] = None
    provider: Optional[str] = None
    status: Optional[str] = None

    @property
    def retryable(self) -> bool:
        """Hint for caller retry policy; only throttling is considered retryable."""
        return self.code is ErrorCode.RATE_LIMIT_EXCEEDED

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, code, and message."""
        return f"{self.provider or '-'} {self.code.value}: {self.message}"


__all__ = ["NormalizedError"]
