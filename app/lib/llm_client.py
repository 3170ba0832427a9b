# app/lib/llm_client.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import openai
from openai import AsyncOpenAI

from app.config import config
from app.logger import get_logger
from app.lib.errors import (
    InsufficientBalanceError,
    MissingApiKeyError,
    StoryApiError,
    UpstreamAuthError,
    UpstreamError,
    UpstreamRateLimitError,
    UpstreamTimeoutError,
)

log = get_logger(__name__)

# created lazily: a missing key must fail the request, not the process
_client: Optional[AsyncOpenAI] = None


@dataclass(frozen=True)
class Completion:
    text: str
    tokens_used: int
    model: str


def get_client() -> AsyncOpenAI:
    global _client
    key = config.deepseek_api_key
    if not key or key == "test_mode":
        raise MissingApiKeyError()
    if _client is None:
        _client = AsyncOpenAI(
            api_key=key,
            base_url=config.deepseek_base_url,
            timeout=config.llm_timeout_seconds,
            max_retries=0,  # one attempt per incoming request
        )
    return _client


def classify_status_error(e: openai.APIStatusError) -> StoryApiError:
    status = e.status_code
    if status == 402:
        return InsufficientBalanceError()
    if status == 401:
        return UpstreamAuthError()
    if status == 429:
        return UpstreamRateLimitError()
    if status in (408, 504):
        return UpstreamTimeoutError()
    return UpstreamError(details=f"upstream status {status}: {e.message}")


async def complete(
    prompt: str,
    *,
    system: str,
    max_tokens: int,
    temperature: Optional[float] = None,
) -> Completion:
    """
    Single chat-completion call in JSON mode.
    Upstream failures are re-raised as StoryApiError subclasses.
    """
    client = get_client()
    model = config.deepseek_model
    try:
        resp = await client.chat.completions.create(
            model=model,
            temperature=config.llm_temperature if temperature is None else temperature,
            max_tokens=max_tokens,
            response_format={"type": "json_object"},
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
        )
    # APITimeoutError subclasses APIConnectionError, so it goes first
    except openai.APITimeoutError as e:
        log.warning(f"{model} timed out after {config.llm_timeout_seconds}s")
        raise UpstreamTimeoutError() from e
    except openai.APIStatusError as e:
        log.error(f"{model} returned status {e.status_code}: {e.message}")
        raise classify_status_error(e) from e
    except openai.APIConnectionError as e:
        log.error(f"could not reach {config.deepseek_base_url}: {e}")
        raise UpstreamError(details=str(e)) from e

    content = (resp.choices[0].message.content or "").strip()
    usage = getattr(resp, "usage", None)
    tokens = getattr(usage, "total_tokens", 0) or 0
    return Completion(text=content, tokens_used=int(tokens), model=getattr(resp, "model", None) or model)
