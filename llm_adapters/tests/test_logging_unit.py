from __future__ import annotations

import json
import logging
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from llm_adapters.base.log_support import JsonFormatter, LogContext
from llm_adapters.base.logging import (
    BASE_LOGGER_NAME,
    REQUIRED_NORMALIZED_KEYS,
    configure_logger,
    get_logger,
    log_event,
    normalized_log_event,
)
from llm_adapters.base.models import Message
from llm_adapters.anthropic import AnthropicProvider

from .utils import FAKE_KEY, PROMPT, anthropic_client


def _events(stream):
    return [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]


def _reply(text="Temperatures are rising..."):
    return SimpleNamespace(
        model="claude-3", stop_reason="end_turn", content=[SimpleNamespace(type="text", text=text)]
    )


def test_child_logger_propagates_to_base():
    child = get_logger("llm_adapters.unit")
    assert child.propagate is True
    assert not child.handlers
    assert get_logger().name == BASE_LOGGER_NAME


def test_log_event_drops_none_and_merges_context(log_stream):
    ctx = LogContext(provider="openai", model="gpt", extra={"request_kind": "chat", "skip": None})
    log_event(get_logger("llm_adapters.unit"), "unit.event", ctx, count=2, missing=None)
    (event,) = _events(log_stream)
    assert event == {
        "event": "unit.event",
        "provider": "openai",
        "model": "gpt",
        "request_kind": "chat",
        "count": 2,
    }


def test_normalized_event_has_required_keys(log_stream):
    normalized_log_event(
        get_logger("llm_adapters.unit"), "unit.fail", None, phase="finalize", error_code="PROVIDER_ERROR", phase_override=None
    )
    (event,) = _events(log_stream)
    for key in REQUIRED_NORMALIZED_KEYS:
        assert key in event
    assert set(event) == {"event", "phase", "error_code"}


def test_normalized_event_omits_error_code_on_success(log_stream):
    normalized_log_event(get_logger("llm_adapters.unit"), "unit.ok", phase="start")
    (event,) = _events(log_stream)
    assert "error_code" not in event


@pytest.mark.asyncio
async def test_success_emits_start_and_end(log_stream):
    provider = AnthropicProvider(FAKE_KEY, "claude-3-5-sonnet-latest", client=anthropic_client(AsyncMock(return_value=_reply())))
    await provider.generate_response([Message(role="user", content=PROMPT)])
    start, end = _events(log_stream)
    assert start["event"] == "chat.start"
    assert start["phase"] == "start"
    assert start["provider"] == "anthropic"
    assert start["message_count"] == 1
    assert set(start) == {"event", "provider", "model", "phase", "message_count", "max_tokens"}
    assert end["event"] == "chat.end"
    assert end["phase"] == "finalize"
    assert end["model_used"] == "claude-3"
    assert end["finish_reason"] == "end_turn"
    assert end["latency_ms"] >= 0
    assert PROMPT not in log_stream.getvalue()
    assert FAKE_KEY not in log_stream.getvalue()


@pytest.mark.asyncio
async def test_failure_emits_error_event(log_stream):
    provider = AnthropicProvider(FAKE_KEY, client=anthropic_client(AsyncMock(side_effect=RuntimeError("boom"))))
    with pytest.raises(Exception):
        await provider.generate_response([Message(role="user", content=PROMPT)])
    events = _events(log_stream)
    assert [e["event"] for e in events] == ["chat.start", "chat.error"]
    assert events[-1]["error_code"] == "UNKNOWN_ERROR"
    assert events[-1]["error"] == "boom"


@pytest.mark.asyncio
async def test_empty_reply_emits_error_event(log_stream):
    provider = AnthropicProvider(FAKE_KEY, client=anthropic_client(AsyncMock(return_value=_reply(""))))
    with pytest.raises(Exception):
        await provider.generate_response([Message(role="user", content=PROMPT)])
    assert _events(log_stream)[-1]["error_code"] == "PROVIDER_ERROR"


def test_json_formatter_hoists_payload():
    record = logging.LogRecord(
        "llm_adapters.unit", logging.INFO, __file__, 1, json.dumps({"event": "x", "n": 1}), None, None
    )
    out = json.loads(JsonFormatter().format(record))
    assert out["event"] == "x"
    assert out["n"] == 1
    assert out["level"] == "INFO"
    assert out["logger"] == "llm_adapters.unit"
    assert "msg" not in out


def test_json_formatter_keeps_plain_message():
    record = logging.LogRecord("llm_adapters.unit", logging.WARNING, __file__, 1, "plain %s", ("text",), None)
    out = json.loads(JsonFormatter().format(record))
    assert out["msg"] == "plain text"


def test_configure_logger_file_handler(tmp_path):
    log_file = tmp_path / "logs" / "adapters.log"
    logger = configure_logger(level="DEBUG", file_path=str(log_file))
    try:
        assert logger.level == logging.DEBUG
        log_event(get_logger("llm_adapters.unit"), "file.event", None, n=1)
        for h in logger.handlers:
            h.flush()
        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["event"] == "file.event"
    finally:
        configure_logger(level=logging.INFO, file_path=None)
    assert not any(getattr(h, "baseFilename", None) == str(log_file) for h in logger.handlers)
