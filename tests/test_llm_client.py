# tests/test_llm_client.py
from dataclasses import replace

import httpx
import openai
import pytest

from app.lib import llm_client
from app.lib.errors import (
    InsufficientBalanceError,
    MissingApiKeyError,
    UpstreamAuthError,
    UpstreamError,
    UpstreamRateLimitError,
    UpstreamTimeoutError,
)

_URL = "https://api.deepseek.com/v1/chat/completions"


def _status_error(status: int) -> openai.APIStatusError:
    request = httpx.Request("POST", _URL)
    return openai.APIStatusError("upstream said no", response=httpx.Response(status, request=request), body=None)


@pytest.mark.asyncio
async def test_complete_returns_text_and_usage(fake_llm):
    fake_llm.reply_with('  {"title": "x"}  ')
    out = await llm_client.complete("prompt", system="sys", max_tokens=100)
    assert out.text == '{"title": "x"}'
    assert out.tokens_used == 1234
    assert out.model == "deepseek-chat"

    call = fake_llm.calls[0]
    assert call["response_format"] == {"type": "json_object"}
    assert call["max_tokens"] == 100
    assert call["temperature"] == pytest.approx(0.7)
    assert call["messages"][0] == {"role": "system", "content": "sys"}
    assert call["messages"][1] == {"role": "user", "content": "prompt"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error, expected",
    [
        (openai.APITimeoutError(request=httpx.Request("POST", _URL)), UpstreamTimeoutError),
        (_status_error(402), InsufficientBalanceError),
        (_status_error(401), UpstreamAuthError),
        (_status_error(429), UpstreamRateLimitError),
        (_status_error(503), UpstreamError),
        (openai.APIConnectionError(request=httpx.Request("POST", _URL)), UpstreamError),
    ],
)
async def test_upstream_failures_are_classified(fake_llm, error, expected):
    fake_llm.fail_with(error)
    with pytest.raises(expected) as info:
        await llm_client.complete("prompt", system="sys", max_tokens=10)
    assert info.value.__cause__ is error


@pytest.mark.asyncio
async def test_missing_key_fails_at_request_time(monkeypatch, fake_llm):
    monkeypatch.setattr(llm_client, "config", replace(llm_client.config, deepseek_api_key=""))
    with pytest.raises(MissingApiKeyError):
        await llm_client.complete("prompt", system="sys", max_tokens=10)
    assert fake_llm.calls == []


def test_placeholder_key_counts_as_missing(monkeypatch):
    monkeypatch.setattr(llm_client, "config", replace(llm_client.config, deepseek_api_key="test_mode"))
    with pytest.raises(MissingApiKeyError):
        llm_client.get_client()


def test_real_client_built_lazily_without_retries(monkeypatch):
    monkeypatch.setattr(llm_client, "_client", None)
    c = llm_client.get_client()
    assert isinstance(c, openai.AsyncOpenAI)
    assert c.max_retries == 0
    assert str(c.base_url).startswith("https://api.deepseek.com")
    assert llm_client.get_client() is c
