"""Helpers for building fake SDK clients and SDK error inputs in tests."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import httpx

FAKE_KEY = "sk-fake-key"  # pragma: allowlist secret - test value

PROMPT = "Analyze the impact of rising temperatures on urban planning"


def http_request(url: str) -> httpx.Request:
    return httpx.Request("POST", url)


def http_response(status: int, url: str) -> httpx.Response:
    """Build an ``httpx.Response`` bound to a POST request, as SDK errors expect."""
    return httpx.Response(status, request=http_request(url))


def openai_client(create: Any) -> SimpleNamespace:
    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


def anthropic_client(create: Any) -> SimpleNamespace:
    return SimpleNamespace(messages=SimpleNamespace(create=create))


def gemini_client(generate_content: Any) -> SimpleNamespace:
    return SimpleNamespace(
        aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate_content))
    )
