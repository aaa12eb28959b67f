"""Tests for the OpenAI client wrapper"""

import pytest

from travelai.llm.llm_client import LLMClient, LLMError, LLMNotConfiguredError


async def test_complete_sends_system_prompt_first(make_llm):
    llm = make_llm(reply="  hello  ")

    reply = await llm.complete("system text", [{"role": "user", "content": "hi"}], max_tokens=50, temperature=0.2)

    assert reply == "hello"
    call = llm._client.completions.calls[0]
    assert call["messages"] == [
        {"role": "system", "content": "system text"},
        {"role": "user", "content": "hi"},
    ]
    assert call["max_tokens"] == 50
    assert call["temperature"] == 0.2
    assert "response_format" not in call


async def test_json_mode_requests_json_object(make_llm):
    llm = make_llm(reply='{"title": "Trip to Rome"}')

    reply = await llm.complete("Reply in JSON", [{"role": "user", "content": "Rome"}], json_mode=True)

    assert reply == '{"title": "Trip to Rome"}'
    assert llm._client.completions.calls[0]["response_format"] == {"type": "json_object"}


async def test_provider_error_is_wrapped(make_llm):
    llm = make_llm(error=RuntimeError("rate limited"))

    with pytest.raises(LLMError, match="rate limited"):
        await llm.complete("s", [])


async def test_unconfigured_client_raises(unconfigured_llm):
    with pytest.raises(LLMNotConfiguredError):
        await unconfigured_llm.complete("s", [])
    assert unconfigured_llm._client.completions.calls == []


@pytest.mark.parametrize("key, configured", [
    ("", False),
    ("   ", False),
    ("sk-your-key-here", False),
    ("sk-live", True),
])
def test_is_configured(key, configured):
    assert LLMClient(api_key=key, client=object()).is_configured is configured
