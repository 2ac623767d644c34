"""Base shared constants for provider adapters.

Central location to avoid scattering magic strings across adapters.
"""
from __future__ import annotations

# Sentinel messages used when raising INVALID_REQUEST before any network I/O
EMPTY_MESSAGES_ERROR = "messages must be a non-empty sequence"
NOT_A_MESSAGE_ERROR = "messages must contain only Message instances"
NO_CONVERSATION_TURNS_ERROR = "messages must contain at least one user or assistant turn"

# Missing credential sentinel
MISSING_API_KEY_ERROR = "missing_api_key"  # pragma: allowlist secret - generic placeholder string, not a real secret

# Default HTTP timeout (seconds) handed to SDK clients
DEFAULT_HTTP_TIMEOUT = 60.0

# Raised as PROVIDER_ERROR when a successful payload carries no text
EMPTY_RESPONSE_ERROR = "provider returned an empty response"

__all__ = [
    "EMPTY_MESSAGES_ERROR",
    "NOT_A_MESSAGE_ERROR",
    "NO_CONVERSATION_TURNS_ERROR",
    "EMPTY_RESPONSE_ERROR",
    "MISSING_API_KEY_ERROR",
    "DEFAULT_HTTP_TIMEOUT",
]
