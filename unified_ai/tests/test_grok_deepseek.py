"""Tests for the OpenAI-compatible chat-completions clients (Grok, DeepSeek)."""
from __future__ import annotations

import pytest

from unified_ai.base.models import FinishReason, Role
from unified_ai.deepseek import DeepSeekProvider
from unified_ai.deepseek.response import parse_response as parse_deepseek
from unified_ai.grok import GrokProvider
from unified_ai.grok.response import parse_response as parse_grok


def _completion(content="ok", finish="stop", **message):
    body = {"choices": [{"index": 0, "message": {"role": "assistant", "content": content, **message}}]}
    body["choices"][0]["finish_reason"] = finish
    return body


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, FinishReason.COMPLETE),
        ("stop", FinishReason.COMPLETE),
        ("length", FinishReason.TOKEN_LIMIT),
        ("tool_calls", FinishReason.TOOL_CALL),
        ("content_filter", FinishReason.CONTENT_FILTERED),
        ("something_new", FinishReason.UNKNOWN),
    ],
)
def test_grok_finish_reason_table(raw, expected):
    assert parse_grok(_completion(finish=raw)).finish_reason is expected  # nosec B101


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, FinishReason.UNKNOWN),
        ("stop", FinishReason.COMPLETE),
        ("length", FinishReason.TOKEN_LIMIT),
        ("content_filter", FinishReason.CONTENT_FILTERED),
        ("tool_calls", FinishReason.TOOL_CALL),
        ("insufficient_system_resource", FinishReason.UNKNOWN),
    ],
)
def test_deepseek_finish_reason_table(raw, expected):
    response = parse_deepseek(_completion(finish=raw))
    assert response.finish_reason is expected  # nosec B101
    assert response.raw_finish_reason == raw  # nosec B101


@pytest.mark.parametrize("parse", [parse_grok, parse_deepseek])
def test_empty_content_is_none(parse):
    assert parse(_completion(content="")).text is None  # nosec B101
    assert parse(_completion(content=None)).text is None  # nosec B101
    assert parse({"choices": []}).text is None  # nosec B101


def test_grok_refusal_is_content_filtered():
    response = parse_grok(_completion(content=None, finish="stop", refusal="I can't help with that."))
    assert response.text is None  # nosec B101
    assert response.finish_reason is FinishReason.CONTENT_FILTERED  # nosec B101


def test_grok_refusal_with_text_keeps_finish_code():
    response = parse_grok(_completion(content="partial", finish="length", refusal="no"))
    assert response.finish_reason is FinishReason.TOKEN_LIMIT  # nosec B101


def test_grok_usage_with_reasoning_details():
    data = _completion()
    data["usage"] = {"prompt_tokens": 10, "completion_tokens": 5, "completion_tokens_details": {"reasoning_tokens": 3}}
    assert parse_grok(data).usage.to_dict() == {"input": 10, "output": 5, "reasoning": 3}  # nosec B101


def test_deepseek_usage_fallback_keys():
    data = _completion()
    data["usage"] = {"input_tokens": 7, "output_tokens": 2, "reasoning_tokens": 1}
    assert parse_deepseek(data).usage.to_dict() == {"input": 7, "output": 2, "reasoning": 1}  # nosec B101
    assert parse_deepseek(_completion()).usage is None  # nosec B101


def test_deepseek_chat_request(transport):
    client = DeepSeekProvider("ds-key", transport=transport)
    chat = client.create_chat("deepseek-chat")
    chat.set_system_instruction("Be exact.")
    chat.set_options(temperature=0.0, max_tokens=50)
    transport.queue(_completion("4"))
    response = chat.send_message("2+2?")

    call = transport.calls[0]
    assert call.url == "https://api.deepseek.com/chat/completions"  # nosec B101
    assert call.headers == {"Authorization": "Bearer ds-key"}  # nosec B101
    assert call.payload["messages"] == [  # nosec B101
        {"role": "system", "content": "Be exact."},
        {"role": "user", "content": "2+2?"},
    ]
    assert call.payload["temperature"] == 0.0 and call.payload["max_tokens"] == 50  # nosec B101
    assert response.text == "4"  # nosec B101
    assert [m.role for m in chat.get_messages()] == [Role.USER, Role.MODEL]  # nosec B101


def test_grok_reasoning_effort_option(transport):
    client = GrokProvider("xai-key", transport=transport)
    chat = client.create_chat("grok-3-mini").set_options(reasoning_effort="high", temperature=0.5)
    chat.add_message("Think")
    payload = chat.build_payload()
    assert payload["reasoning_effort"] == "high"  # nosec B101
    assert payload["temperature"] == 0.5  # nosec B101
    assert client.base_url == "https://api.x.ai/v1/"  # nosec B101
