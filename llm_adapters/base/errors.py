"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``llm_adapters.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.normalized_error import NormalizedError
from .errors_parts.classification import DecodedError, classify_decoded, normalize_exception

__all__ = [
    "ErrorCode",
    "NormalizedError",
    "DecodedError",
    "classify_decoded",
    "normalize_exception",
]
