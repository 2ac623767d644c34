"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `llm_adapters.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .normalized_error import NormalizedError
from .classification import DecodedError, classify_decoded, normalize_exception

__all__ = [
    "ErrorCode",
    "NormalizedError",
    "DecodedError",
    "classify_decoded",
    "normalize_exception",
]
