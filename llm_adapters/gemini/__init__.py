"""Gemini adapter package."""

from .client import GeminiProvider
from .errors import GEMINI_STATUS_TABLE, decode_gemini_error

__all__ = ["GeminiProvider", "GEMINI_STATUS_TABLE", "decode_gemini_error"]
