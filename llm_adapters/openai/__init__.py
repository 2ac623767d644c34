"""OpenAI adapter package."""

from .client import OpenAIProvider
from .errors import OPENAI_STATUS_TABLE, decode_openai_error

__all__ = ["OpenAIProvider", "OPENAI_STATUS_TABLE", "decode_openai_error"]
