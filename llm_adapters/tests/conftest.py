"""Shared fixtures for the adapter test suite.

Fake SDK clients (see ``tests.utils``) are ``SimpleNamespace`` trees exposing
the single awaitable each adapter calls, so no network access or real
credentials are needed.
"""

from __future__ import annotations

import io
import logging
from typing import Iterator, List

import pytest

from llm_adapters.base.logging import get_logger
from llm_adapters.base.models import Message

from .utils import PROMPT


@pytest.fixture()
def user_messages() -> List[Message]:
    return [Message(role="user", content=PROMPT)]


@pytest.fixture()
def conversation() -> List[Message]:
    """A multi-turn conversation with system turns at both ends of the sequence."""
    return [
        Message(role="system", content="You are terse."),
        Message(role="user", content="first question"),
        Message(role="assistant", content="first answer"),
        Message(role="user", content="second question"),
        Message(role="system", content="Answer in French."),
    ]


@pytest.fixture()
def log_stream() -> Iterator[io.StringIO]:
    """Capture lines emitted through the shared ``llm_adapters`` logger."""
    base = get_logger()
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    previous_level = base.level
    base.setLevel(logging.INFO)
    base.addHandler(handler)
    yield stream
    base.removeHandler(handler)
    base.setLevel(previous_level)
