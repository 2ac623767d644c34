"""Unit coverage for the Message/ChatResponse DTOs and message helpers."""

from __future__ import annotations

import dataclasses

import pytest

from llm_adapters.base.errors import ErrorCode, NormalizedError
from llm_adapters.base.models import ChatResponse, Message
from llm_adapters.base.utils.messages import require_turns, split_system, validate_messages


def test_message_is_immutable():
    m = Message(role="user", content="hi")
    with pytest.raises(dataclasses.FrozenInstanceError):
        m.content = "changed"  # type: ignore[misc]


@pytest.mark.parametrize("role", ["tool", "developer", "", "USER"])
def test_message_rejects_unknown_roles(role):
    with pytest.raises(ValueError):
        Message(role=role, content="hi")  # type: ignore[arg-type]


def test_message_rejects_non_string_content():
    with pytest.raises(ValueError):
        Message(role="user", content=["not", "text"])  # type: ignore[arg-type]


def test_chat_response_to_dict_excludes_raw():
    resp = ChatResponse(content="hello", model_used="m-1", finish_reason="stop", raw=object())
    assert resp.to_dict() == {"content": "hello", "model_used": "m-1", "finish_reason": "stop"}


def test_chat_response_defaults():
    resp = ChatResponse(content="hello", model_used="m-1")
    assert resp.finish_reason is None
    assert resp.raw is None


@pytest.mark.parametrize("bad", [[], (), None, "user"])
def test_validate_messages_rejects_empty_input(bad):
    with pytest.raises(NormalizedError) as info:
        validate_messages(bad, provider="openai")
    assert info.value.code is ErrorCode.INVALID_REQUEST
    assert info.value.provider == "openai"


def test_validate_messages_rejects_foreign_items():
    with pytest.raises(NormalizedError) as info:
        validate_messages([{"role": "user", "content": "hi"}], provider="openai")  # type: ignore[list-item]
    assert info.value.code is ErrorCode.INVALID_REQUEST


def test_validate_messages_accepts_any_iterable_and_keeps_order():
    msgs = [Message(role="user", content=str(i)) for i in range(3)]
    assert validate_messages(iter(msgs), provider="x") == msgs


def test_split_system_keeps_turn_order(conversation):
    system_text, turns = split_system(conversation)
    assert system_text == "You are terse.\n\nAnswer in French."
    assert [m.content for m in turns] == ["first question", "first answer", "second question"]


def test_split_system_without_system_turns(user_messages):
    system_text, turns = split_system(user_messages)
    assert system_text is None
    assert turns == user_messages


def test_require_turns_rejects_system_only_input():
    _, turns = split_system([Message(role="system", content="only rules")])
    with pytest.raises(NormalizedError) as info:
        require_turns(turns, provider="p")
    assert info.value.code is ErrorCode.INVALID_REQUEST  # nosec B101
    require_turns([Message(role="user", content="hi")], provider="p")
