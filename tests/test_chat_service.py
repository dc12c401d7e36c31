"""Tests for ChatService — request construction, response shaping, error mapping."""

import logging

import httpx
import openai
import pytest

from app.models.chat_models import ChatMessage, FunctionCallResponse, TextResponse
from app.prompts.feature.trackr_agent.chat_prompt import CHAT_FALLBACK_TEXT, CHAT_SYSTEM
from app.service.feature.trackr_agent.base.llm_base import LLMServiceError
from app.service.feature.trackr_agent.chat_service import ChatService, _to_kwargs

_REQ = httpx.Request("POST", "https://llm.test/v1/chat/completions")


def _chat(message: str = "What's my balance?", history: list | None = None) -> ChatMessage:
    return ChatMessage.model_validate({"history": history or [], "message": message})


@pytest.fixture
def service(llm_client, prompts, logger) -> ChatService:
    return ChatService(llm_client, "test-model", prompts.chat, logger)


# -- Request construction ---------------------------------------------------


async def test_request_carries_system_history_message_and_tools(service, llm_client) -> None:
    history = [
        {"role": "user", "content": "hi"},
        {"role": "model", "parts": [{"text": "Hello, how can I help?"}]},
    ]
    await service.dispatch(_chat("Show my cards", history))

    kwargs = llm_client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "test-model"
    assert kwargs["tool_choice"] == "auto"
    assert kwargs["messages"] == [
        {"role": "system", "content": CHAT_SYSTEM},
        {"role": "user", "content": "hi"},
        {"role": "assistant", "content": "Hello, how can I help?"},
        {"role": "user", "content": "Show my cards"},
    ]
    names = [t["function"]["name"] for t in kwargs["tools"]]
    assert "getCards" in names and "updateTransaction" in names


def test_requires_tool_catalog(llm_client, prompts, logger) -> None:
    with pytest.raises(ValueError):
        ChatService(llm_client, "test-model", prompts.insight, logger)


# -- Function-call branch ---------------------------------------------------


async def test_single_function_call(service, llm_client, completion, tool_call) -> None:
    llm_client.chat.completions.create.return_value = completion(tool_calls=[tool_call("getBalance")])

    out = await service.dispatch(_chat())

    assert isinstance(out, FunctionCallResponse)
    assert out.model_dump() == {"type": "function_call", "calls": [{"name": "getBalance", "args": {}}]}


async def test_calls_keep_model_order_and_decode_args(service, llm_client, completion, tool_call) -> None:
    llm_client.chat.completions.create.return_value = completion(
        content="Let me look that up.",
        tool_calls=[
            tool_call("getTransactions", {"category": "groceries", "limit": 5}, call_id="c1"),
            tool_call("getBalance", call_id="c2"),
            tool_call("updateTransaction", {"id": "tx-9", "amount": 12.5}, call_id="c3"),
        ],
    )

    out = await service.dispatch(_chat("Groceries and balance, then fix tx-9"))

    assert [c.name for c in out.calls] == ["getTransactions", "getBalance", "updateTransaction"]
    assert out.calls[0].args == {"category": "groceries", "limit": 5}
    assert out.calls[2].args == {"id": "tx-9", "amount": 12.5}
    assert "content" not in out.model_dump()


async def test_undeclared_tool_is_dropped(service, llm_client, completion, tool_call, caplog) -> None:
    llm_client.chat.completions.create.return_value = completion(
        tool_calls=[tool_call("deleteEverything"), tool_call("getCards", {"status": "active"})]
    )

    with caplog.at_level(logging.WARNING):
        out = await service.dispatch(_chat("cards"))

    assert [c.name for c in out.calls] == ["getCards"]
    assert "deleteEverything" in caplog.text


async def test_missing_required_args_still_forwarded(service, llm_client, completion, tool_call, caplog) -> None:
    llm_client.chat.completions.create.return_value = completion(tool_calls=[tool_call("updateTransaction", {})])

    with caplog.at_level(logging.WARNING):
        out = await service.dispatch(_chat("update it"))

    assert out.calls[0].name == "updateTransaction"
    assert "missing required" in caplog.text


async def test_undecodable_args_become_empty(service, llm_client, completion, tool_call) -> None:
    llm_client.chat.completions.create.return_value = completion(tool_calls=[tool_call("getCards", "{not json")])

    out = await service.dispatch(_chat("cards"))

    assert out.calls[0].args == {}


# -- Text branch ------------------------------------------------------------


async def test_text_reply(service, llm_client, completion) -> None:
    llm_client.chat.completions.create.return_value = completion(content="A budget is a plan for your money.")

    out = await service.dispatch(_chat("What is a budget?"))

    assert isinstance(out, TextResponse)
    assert out.model_dump() == {"type": "text", "content": "A budget is a plan for your money."}


@pytest.mark.parametrize("content", [None, "", "   \n"])
async def test_empty_reply_uses_fallback(service, llm_client, completion, content) -> None:
    llm_client.chat.completions.create.return_value = completion(content=content, tool_calls=[])

    out = await service.dispatch(_chat("???"))

    assert out == TextResponse(content=CHAT_FALLBACK_TEXT)


async def test_only_dropped_calls_uses_fallback(service, llm_client, completion, tool_call) -> None:
    llm_client.chat.completions.create.return_value = completion(tool_calls=[tool_call("notATool")])

    out = await service.dispatch(_chat("do it"))

    assert out.content == CHAT_FALLBACK_TEXT


async def test_no_choices_uses_fallback(service, llm_client) -> None:
    llm_client.chat.completions.create.return_value = type("R", (), {"choices": [], "usage": None})()

    out = await service.dispatch(_chat())

    assert out.content == CHAT_FALLBACK_TEXT


# -- Failures ---------------------------------------------------------------


async def test_missing_client_is_not_configured(prompts, logger) -> None:
    service = ChatService(None, "test-model", prompts.chat, logger)
    with pytest.raises(LLMServiceError) as exc:
        await service.dispatch(_chat())
    assert exc.value.code == "LLM_NOT_CONFIGURED"


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (openai.APITimeoutError(request=_REQ), "LLM_TIMEOUT"),
        (openai.APIConnectionError(request=_REQ), "LLM_UNAVAILABLE"),
        (
            openai.RateLimitError("slow down", response=httpx.Response(429, request=_REQ), body=None),
            "LLM_RATE_LIMIT",
        ),
        (
            openai.AuthenticationError("bad key", response=httpx.Response(401, request=_REQ), body=None),
            "LLM_AUTH",
        ),
        (
            openai.BadRequestError("bad history", response=httpx.Response(400, request=_REQ), body=None),
            "LLM_BAD_REQUEST",
        ),
        (
            openai.InternalServerError("boom", response=httpx.Response(500, request=_REQ), body=None),
            "LLM_UNAVAILABLE",
        ),
        (RuntimeError("anything else"), "LLM_UNAVAILABLE"),
    ],
)
async def test_provider_errors_are_mapped(service, llm_client, error, code) -> None:
    llm_client.chat.completions.create.side_effect = error

    with pytest.raises(LLMServiceError) as exc:
        await service.dispatch(_chat())

    assert exc.value.code == code
    assert exc.value.__cause__ is error


async def test_provider_called_once(service, llm_client) -> None:
    llm_client.chat.completions.create.side_effect = openai.APIConnectionError(request=_REQ)

    with pytest.raises(LLMServiceError):
        await service.dispatch(_chat())

    assert llm_client.chat.completions.create.call_count == 1


# -- Helpers ----------------------------------------------------------------


def test_to_kwargs() -> None:
    assert _to_kwargs({"a": 1}) == {"a": 1}
    assert _to_kwargs('{"a": 1}') == {"a": 1}
    assert _to_kwargs("  ") == {}
    assert _to_kwargs("[1, 2]") == {}
    assert _to_kwargs(None) == {}
