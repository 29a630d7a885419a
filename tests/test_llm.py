"""
Tests for the LLM client wrapper.
"""
from unittest.mock import Mock

import pytest
from openai import OpenAIError

from src.services.exceptions import AIServiceError
from src.utils.llm import LLMClient, parse_llm_json

def completion(content):
    response = Mock()
    response.choices = [Mock(message=Mock(content=content))]
    return response

def test_parse_plain_json():
    assert parse_llm_json('{"a": 1}') == {"a": 1}

def test_parse_fenced_json():
    assert parse_llm_json('```json\n{"days": []}\n```') == {"days": []}

def test_parse_json_with_surrounding_text():
    assert parse_llm_json('Here is your plan: {"ok": true} Enjoy!') == {"ok": True}

@pytest.mark.parametrize("raw", ["", "no json here", "[1, 2]", "{broken"])
def test_parse_invalid(raw):
    with pytest.raises(ValueError):
        parse_llm_json(raw)

def test_complete_json_sends_messages():
    client = Mock()
    client.chat.completions.create.return_value = completion('{"x": "y"}')
    llm = LLMClient(api_key="key", model="test-model", client=client)

    result = llm.complete_json("hello", system_prompt="be brief", max_tokens=100)

    assert result == {"x": "y"}
    kwargs = client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "test-model"
    assert kwargs["messages"] == [
        {"role": "system", "content": "be brief"},
        {"role": "user", "content": "hello"}
    ]
    assert kwargs["response_format"] == {"type": "json_object"}
    assert kwargs["max_tokens"] == 100

def test_complete_json_without_json_mode():
    client = Mock()
    client.chat.completions.create.return_value = completion('{"x": 1}')
    llm = LLMClient(api_key="key", model="m", client=client, json_mode=False)

    llm.complete_json("hello")

    kwargs = client.chat.completions.create.call_args.kwargs
    assert "response_format" not in kwargs
    assert len(kwargs["messages"]) == 1

def test_api_error_becomes_ai_service_error():
    client = Mock()
    client.chat.completions.create.side_effect = OpenAIError("boom")
    llm = LLMClient(api_key="key", model="m", client=client)

    with pytest.raises(AIServiceError):
        llm.complete_json("hello")

def test_unparseable_reply_becomes_ai_service_error():
    client = Mock()
    client.chat.completions.create.return_value = completion("sorry, I can't")
    llm = LLMClient(api_key="key", model="m", client=client)

    with pytest.raises(AIServiceError):
        llm.complete_json("hello")

def test_from_env(monkeypatch):
    monkeypatch.setenv("MINIMAX_API_KEY", "mm-key")
    monkeypatch.delenv("MINIMAX_BASE_URL", raising=False)
    monkeypatch.delenv("MINIMAX_MODEL", raising=False)

    llm = LLMClient.from_env("MINIMAX", default_model="MiniMax-Text-01",
                             default_base_url="https://api.minimax.chat/v1", json_mode=False)

    assert llm.model == "MiniMax-Text-01"
    assert str(llm.client.base_url).startswith("https://api.minimax.chat/v1")
    assert llm.json_mode is False

def test_from_env_requires_key(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    with pytest.raises(AIServiceError):
        LLMClient.from_env("OPENAI")
