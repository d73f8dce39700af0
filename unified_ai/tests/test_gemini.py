"""Tests for the Gemini client: generateContent normalization and embeddings."""
from __future__ import annotations

import pytest

from unified_ai.base.errors import ApiError, LogicError
from unified_ai.base.models import FinishReason, Role
from unified_ai.gemini import GeminiProvider
from unified_ai.gemini.response import parse_response

MODEL = "gemini-2.0-flash"


@pytest.fixture()
def client(transport):
    return GeminiProvider("g-key", transport=transport)


def _candidate(*texts, finish="STOP"):
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": t} for t in texts]}, "finishReason": finish}]}


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("STOP", FinishReason.COMPLETE),
        ("MAX_TOKENS", FinishReason.TOKEN_LIMIT),
        ("SAFETY", FinishReason.CONTENT_FILTERED),
        ("RECITATION", FinishReason.CONTENT_FILTERED),
        ("TOOL_CALLS", FinishReason.TOOL_CALL),
        ("OTHER", FinishReason.UNKNOWN),
        (None, FinishReason.UNKNOWN),
    ],
)
def test_finish_reason_table(raw, expected):
    response = parse_response(_candidate("x", finish=raw))
    assert response.finish_reason is expected  # nosec B101
    assert response.raw_finish_reason == raw  # nosec B101


def test_text_parts_are_joined_and_usage_read():
    data = _candidate("one", "two")
    data["usageMetadata"] = {"promptTokenCount": 4, "candidatesTokenCount": 6, "thoughtsTokenCount": 2}
    response = parse_response(data)
    assert response.text == "one\ntwo"  # nosec B101
    assert response.usage.to_dict() == {"input": 4, "output": 6, "reasoning": 2}  # nosec B101


def test_blocked_prompt_has_no_text():
    data = _candidate("ignored")
    data["promptFeedback"] = {"blockReason": "SAFETY"}
    assert parse_response(data).text is None  # nosec B101


def test_candidate_text_fallback():
    assert parse_response({"candidates": [{"text": "flat"}]}).text == "flat"  # nosec B101
    assert parse_response({"candidates": []}).text is None  # nosec B101


def test_chat_payload_and_key_in_query(client, transport):
    chat = client.create_chat(MODEL)
    chat.set_system_instruction("Answer briefly.")
    chat.set_options(
        max_output_tokens=32,
        temperature=0.2,
        stop_sequences=["END"],
        safety_settings=[{"category": "HARM_CATEGORY_HATE_SPEECH", "threshold": "BLOCK_NONE"}],
    )
    chat.add_message("Earlier answer", Role.MODEL)
    transport.queue(_candidate("Sure"))
    response = chat.send_message("Go on")

    call = transport.calls[0]
    assert call.url == (  # nosec B101
        "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent?key=g-key"
    )
    assert call.headers == {}  # nosec B101
    assert call.payload == {  # nosec B101
        "contents": [
            {"role": "model", "parts": [{"text": "Earlier answer"}]},
            {"role": "user", "parts": [{"text": "Go on"}]},
        ],
        "systemInstruction": {"parts": [{"text": "Answer briefly."}]},
        "generationConfig": {"maxOutputTokens": 32, "temperature": 0.2, "stopSequences": ["END"]},
        "safetySettings": [{"category": "HARM_CATEGORY_HATE_SPEECH", "threshold": "BLOCK_NONE"}],
    }
    assert response.text == "Sure"  # nosec B101
    assert chat.get_messages()[-1].role is Role.MODEL  # nosec B101


def test_minimal_payload_omits_optional_sections(client):
    chat = client.create_chat(MODEL)
    chat.add_message("Hi")
    assert chat.build_payload() == {"contents": [{"role": "user", "parts": [{"text": "Hi"}]}]}  # nosec B101


def test_api_error_restores_history(client, transport):
    chat = client.create_chat(MODEL)
    transport.queue({"error": {"message": "quota"}}, status_code=429)
    with pytest.raises(ApiError) as info:
        chat.send_message("Hi")
    assert info.value.message == "quota"  # nosec B101
    assert chat.get_messages() == []  # nosec B101


def test_embeddings_request_and_positional_results(client, transport, capture_logs):
    transport.queue({"embeddings": [{"values": [0.1, 0.2]}, {"values": [0.3, 0.4]}]})
    vectors = client.calculate_embeddings(
        "text-embedding-004",
        ["a", "b"],
        task_type="RETRIEVAL_DOCUMENT",
        title="Doc",
        output_dimensionality=2,
    )
    assert [v.values for v in vectors] == [(0.1, 0.2), (0.3, 0.4)]  # nosec B101
    call = transport.calls[0]
    assert call.url.startswith(  # nosec B101
        "https://generativelanguage.googleapis.com/v1beta/models/text-embedding-004:batchEmbedContents?key="
    )
    assert call.payload["requests"][0] == {  # nosec B101
        "model": "models/text-embedding-004",
        "content": {"parts": [{"text": "a"}]},
        "taskType": "RETRIEVAL_DOCUMENT",
        "title": "Doc",
        "outputDimensionality": 2,
    }
    assert not capture_logs.events("embeddings.mismatch")  # nosec B101


def test_embeddings_title_only_for_retrieval_document(client, transport, capture_logs):
    transport.queue({"embeddings": [{"values": [1.0]}]})
    vectors = client.calculate_embeddings("text-embedding-004", ["a", "b"], task_type="CLUSTERING", title="Doc")
    assert "title" not in transport.calls[0].payload["requests"][0]  # nosec B101
    assert len(vectors) == 1  # nosec B101
    mismatch = capture_logs.events("embeddings.mismatch")[-1]
    assert (mismatch["returned"], mismatch["expected"]) == (1, 2)  # nosec B101


@pytest.mark.parametrize("bad", [[], [""]])
def test_embeddings_reject_empty_input(client, transport, bad):
    with pytest.raises(LogicError):
        client.calculate_embeddings("text-embedding-004", bad)
    assert transport.calls == []  # nosec B101
