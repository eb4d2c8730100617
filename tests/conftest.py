"""Shared fixtures for the chat relay test suite."""
from __future__ import annotations

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from chat_relay import config
from chat_relay.llm_base import LLMClient
from chat_relay.main import create_app
from chat_relay.rate_limit import QuotaTracker


# ---------------------------------------------------------------------------
# Fake upstream
# ---------------------------------------------------------------------------

SAMPLE_COMPLETION = "Hello there! I am a helpful assistant. What would you like to talk about today?"


class FakeLLMClient(LLMClient):
    """Records prompts and returns a canned completion (or raises)."""

    default_model = "fake-model"

    def __init__(self, text: str = SAMPLE_COMPLETION, error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.prompts: List[str] = []

    async def generate(self, prompt: str, model: Optional[str] = None) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture(autouse=True)
def no_stream_delay(monkeypatch):
    """Streaming tests should not wait on the pacing delay."""
    monkeypatch.setattr(config, "STREAM_WORD_DELAY", 0.0)


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    return FakeLLMClient()


@pytest.fixture
def quota_tracker() -> QuotaTracker:
    return QuotaTracker()


@pytest.fixture
def app(fake_llm, quota_tracker):
    return create_app(llm_client=fake_llm, quota_tracker=quota_tracker)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


# ---------------------------------------------------------------------------
# Sample conversations
# ---------------------------------------------------------------------------

@pytest.fixture
def conversation() -> dict:
    return {
        "messages": [
            {"role": "system", "content": "You are terse."},
            {"role": "user", "content": "hi"},
        ],
        "stream": False,
    }
