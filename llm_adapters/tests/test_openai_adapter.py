"""OpenAI adapter: translation, normalization and error classification."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock

import openai
import pytest

from llm_adapters.base.errors import ErrorCode, NormalizedError
from llm_adapters.base.interfaces import LLMProvider
from llm_adapters.base.models import Message
from llm_adapters.openai import OPENAI_STATUS_TABLE, OpenAIProvider, decode_openai_error

from .utils import FAKE_KEY, http_request, http_response, openai_client

URL = "https://api.openai.com/v1/chat/completions"


def _completion(text, model="gpt-4o-mini-2024-07-18", finish_reason="stop"):
    return SimpleNamespace(
        model=model,
        choices=[SimpleNamespace(message=SimpleNamespace(content=text), finish_reason=finish_reason)],
    )


def _status_error(status, *, code=None, err_type=None, message="backend says no"):
    body = {"message": message, "type": err_type, "param": None, "code": code}
    return openai.APIStatusError(
        f"Error code: {status}", response=http_response(status, URL), body=body
    )


def _provider(create, **kwargs):
    return OpenAIProvider(FAKE_KEY, "gpt-4o-mini", client=openai_client(create), **kwargs)


def test_satisfies_capability_contract():
    assert isinstance(_provider(AsyncMock()), LLMProvider)


def test_build_request_preserves_order_and_roles(conversation):
    req = _provider(AsyncMock()).build_request(conversation)
    assert req["model"] == "gpt-4o-mini"
    assert req["messages"] == [{"role": m.role, "content": m.content} for m in conversation]
    assert "max_tokens" not in req and "temperature" not in req


def test_build_request_is_idempotent(conversation):
    provider = _provider(AsyncMock(), max_tokens=64, temperature=0.2)
    assert provider.build_request(conversation) == provider.build_request(conversation)
    assert provider.build_request(conversation)["max_tokens"] == 64
    assert provider.build_request(conversation)["temperature"] == 0.2


@pytest.mark.asyncio
async def test_generate_response_success(user_messages):
    payload = _completion("Temperatures are rising...")
    create = AsyncMock(return_value=payload)
    resp = await _provider(create).generate_response(user_messages)
    assert resp.content == "Temperatures are rising..."
    assert resp.model_used == "gpt-4o-mini-2024-07-18"
    assert resp.finish_reason == "stop"
    assert resp.raw is payload
    create.assert_awaited_once()
    assert create.await_args.kwargs["messages"] == [{"role": "user", "content": user_messages[0].content}]


@pytest.mark.asyncio
async def test_model_used_falls_back_to_requested(user_messages):
    create = AsyncMock(return_value=_completion("ok", model=None))
    resp = await _provider(create).generate_response(user_messages)
    assert resp.model_used == "gpt-4o-mini"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "code, err_type, expected",
    [
        ("invalid_api_key", "invalid_request_error", ErrorCode.INVALID_API_KEY),
        ("rate_limit_exceeded", "requests", ErrorCode.RATE_LIMIT_EXCEEDED),
        ("context_length_exceeded", "invalid_request_error", ErrorCode.CONTEXT_LENGTH_EXCEEDED),
        (None, "invalid_request_error", ErrorCode.INVALID_REQUEST),
        ("model_not_found", "invalid_request_error", ErrorCode.INVALID_REQUEST),
    ],
)
async def test_status_table_entries(user_messages, code, err_type, expected):
    exc = _status_error(400, code=code, err_type=err_type)
    with pytest.raises(NormalizedError) as info:
        await _provider(AsyncMock(side_effect=exc)).generate_response(user_messages)
    assert info.value.code is expected
    assert info.value.message == "backend says no"
    assert info.value.raw is exc
    assert info.value.provider == "openai"
    assert info.value.__cause__ is exc


def test_table_is_exactly_the_documented_mapping():
    assert OPENAI_STATUS_TABLE == {
        "invalid_api_key": ErrorCode.INVALID_API_KEY,
        "rate_limit_exceeded": ErrorCode.RATE_LIMIT_EXCEEDED,
        "context_length_exceeded": ErrorCode.CONTEXT_LENGTH_EXCEEDED,
        "invalid_request_error": ErrorCode.INVALID_REQUEST,
    }


@pytest.mark.asyncio
async def test_unmapped_status_is_provider_error(user_messages):
    exc = _status_error(429, code="insufficient_quota", err_type="insufficient_quota")
    with pytest.raises(NormalizedError) as info:
        await _provider(AsyncMock(side_effect=exc)).generate_response(user_messages)
    assert info.value.code is ErrorCode.PROVIDER_ERROR
    assert info.value.status == "insufficient_quota"


@pytest.mark.asyncio
async def test_status_error_without_body_is_provider_error(user_messages):
    exc = openai.InternalServerError("Error code: 500", response=http_response(500, URL), body=None)
    with pytest.raises(NormalizedError) as info:
        await _provider(AsyncMock(side_effect=exc)).generate_response(user_messages)
    assert info.value.code is ErrorCode.PROVIDER_ERROR
    assert info.value.message == "Error code: 500"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "exc",
    [
        openai.APIConnectionError(request=http_request(URL)),
        openai.APITimeoutError(request=http_request(URL)),
        RuntimeError("socket closed"),
    ],
)
async def test_failures_without_backend_shape_are_unknown(user_messages, exc):
    with pytest.raises(NormalizedError) as info:
        await _provider(AsyncMock(side_effect=exc)).generate_response(user_messages)
    assert info.value.code is ErrorCode.UNKNOWN_ERROR
    assert info.value.raw is exc


def test_decoder_ignores_foreign_exceptions():
    assert decode_openai_error(ValueError("x")) is None


@pytest.mark.asyncio
@pytest.mark.parametrize("text", [None, ""])
async def test_empty_completion_is_provider_error(user_messages, text):
    with pytest.raises(NormalizedError) as info:
        await _provider(AsyncMock(return_value=_completion(text))).generate_response(user_messages)
    assert info.value.code is ErrorCode.PROVIDER_ERROR


@pytest.mark.asyncio
async def test_malformed_payload_is_provider_error(user_messages):
    with pytest.raises(NormalizedError) as info:
        await _provider(AsyncMock(return_value=SimpleNamespace(choices=[]))).generate_response(user_messages)
    assert info.value.code is ErrorCode.PROVIDER_ERROR


@pytest.mark.asyncio
async def test_empty_messages_never_reach_backend():
    create = AsyncMock()
    with pytest.raises(NormalizedError) as info:
        await _provider(create).generate_response([])
    assert info.value.code is ErrorCode.INVALID_REQUEST
    create.assert_not_awaited()


def test_missing_key_is_rejected_at_construction():
    with pytest.raises(NormalizedError) as info:
        OpenAIProvider("", client=openai_client(AsyncMock()))
    assert info.value.code is ErrorCode.INVALID_API_KEY
    assert info.value.message == "missing_api_key"
    assert info.value.provider == "openai"


def test_builds_real_sdk_client_without_network():
    provider = OpenAIProvider(FAKE_KEY, timeout_seconds=5)
    assert isinstance(provider._client, openai.AsyncOpenAI)
    assert provider._client.max_retries == 0
    assert provider.model == "gpt-4o-mini"


def test_message_roles_map_verbatim():
    provider = _provider(AsyncMock())
    req = provider.build_request([Message(role="assistant", content="a"), Message(role="user", content="b")])
    assert [m["role"] for m in req["messages"]] == ["assistant", "user"]
