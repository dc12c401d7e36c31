"""Shared test fixtures."""

import json
import logging
from types import SimpleNamespace
from typing import Any
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.api.main import create_app
from app.config.app_config import AppConfig
from app.prompts.registry.prompt_registry import PromptRegistry


def _make_tool_call(name: str, arguments: Any = None, call_id: str = "call_1") -> SimpleNamespace:
    """Build a chat-completions tool call; dict arguments are JSON-encoded like the API does."""
    if isinstance(arguments, dict):
        arguments = json.dumps(arguments)
    return SimpleNamespace(
        id=call_id,
        type="function",
        function=SimpleNamespace(name=name, arguments=arguments if arguments is not None else "{}"),
    )


def _make_completion(content: str | None = None, tool_calls: list | None = None) -> SimpleNamespace:
    """Build a minimal chat-completions response."""
    message = SimpleNamespace(role="assistant", content=content, tool_calls=tool_calls)
    return SimpleNamespace(
        choices=[SimpleNamespace(index=0, message=message, finish_reason="tool_calls" if tool_calls else "stop")],
        usage=SimpleNamespace(prompt_tokens=12, completion_tokens=34, total_tokens=46),
    )


@pytest.fixture
def cfg() -> AppConfig:
    return AppConfig.from_env({"API_KEY": "test-key", "LOG_FILE": "", "LLM_MODEL": "test-model"})


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("trackr_api.tests")


@pytest.fixture
def prompts() -> PromptRegistry:
    return PromptRegistry.default()


@pytest.fixture
def llm_client() -> MagicMock:
    """Stand-in for the OpenAI client; set `chat.completions.create` per test."""
    client = MagicMock()
    client.chat.completions.create.return_value = _make_completion(content="Hello.")
    return client


@pytest.fixture
def api(cfg: AppConfig, llm_client: MagicMock) -> TestClient:
    return TestClient(create_app(cfg, client=llm_client))


@pytest.fixture
def completion():
    """Factory for fake chat-completions responses."""
    return _make_completion


@pytest.fixture
def tool_call():
    """Factory for fake tool calls."""
    return _make_tool_call
