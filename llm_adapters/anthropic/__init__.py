"""Anthropic adapter package."""

from .client import AnthropicProvider
from .errors import ANTHROPIC_STATUS_TABLE, decode_anthropic_error

__all__ = ["AnthropicProvider", "ANTHROPIC_STATUS_TABLE", "decode_anthropic_error"]
