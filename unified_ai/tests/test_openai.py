"""Tests for the OpenAI client: Responses normalization, batches, embeddings."""
from __future__ import annotations

import json
from datetime import datetime, timezone

import httpx
import pytest

from unified_ai.base.errors import LogicError, UnexpectedResponseError
from unified_ai.base.http import FormData, HttpxTransport
from unified_ai.base.models import BatchStatus, FinishReason, Message, Role
from unified_ai.openai import OpenAIProvider
from unified_ai.openai.response import parse_response

BATCH_ID = "batch_abc"


@pytest.fixture()
def client(transport):
    return OpenAIProvider("sk-test", transport=transport)


def _batch(**fields):
    data = {"id": BATCH_ID, "object": "batch", "status": "validating"}
    data.update(fields)
    return data


def _message_output(*texts):
    return {"output": [{"type": "message", "content": [{"type": "output_text", "text": t} for t in texts]}]}


@pytest.mark.parametrize(
    "details,expected",
    [
        (None, FinishReason.COMPLETE),
        ({"reason": None}, FinishReason.COMPLETE),
        ({"reason": "stop"}, FinishReason.COMPLETE),
        ({"reason": "length"}, FinishReason.TOKEN_LIMIT),
        ({"reason": "max_output_tokens"}, FinishReason.TOKEN_LIMIT),
        ({"reason": "content_filter"}, FinishReason.CONTENT_FILTERED),
        ({"reason": "tool_calls"}, FinishReason.TOOL_CALL),
        ({"reason": "mystery"}, FinishReason.UNKNOWN),
    ],
)
def test_finish_reason_table(details, expected):
    data = _message_output("x")
    data["incomplete_details"] = details
    assert parse_response(data).finish_reason is expected  # nosec B101


def test_text_from_message_items_only():
    data = {
        "output": [
            {"type": "reasoning", "summary": []},
            {"type": "message", "content": [
                {"type": "output_text", "text": "Hello"},
                {"type": "refusal", "refusal": "nope"},
                {"type": "output_text", "text": "there"},
            ]},
        ],
        "usage": {"input_tokens": 9, "output_tokens": 3, "output_tokens_details": {"reasoning_tokens": 2}},
    }
    response = parse_response(data)
    assert response.text == "Hello\nthere"  # nosec B101
    assert (response.usage.input_tokens, response.usage.output_tokens, response.usage.reasoning_tokens) == (9, 3, 2)  # nosec B101


@pytest.mark.parametrize("data", [{"blocked": True, **_message_output("hidden")}, {"output": []}, {}])
def test_no_text_is_none(data):
    assert parse_response(data).text is None  # nosec B101


def test_chat_payload_headers_and_organization(client, transport):
    client.set_options(organization_id="org-1")
    chat = client.create_chat("gpt-4o-mini")
    chat.set_system_instruction("Be terse.")
    chat.set_options(max_output_tokens=64, metadata={"k": "v"})
    transport.queue(_message_output("ok"))
    chat.send_message("Hi")
    call = transport.calls[0]
    assert call.url == "https://api.openai.com/v1/responses"  # nosec B101
    assert call.headers == {"Authorization": "Bearer sk-test", "OpenAI-Organization": "org-1"}  # nosec B101
    assert call.payload == {  # nosec B101
        "model": "gpt-4o-mini",
        "input": [{"role": "user", "content": "Hi"}],
        "instructions": "Be terse.",
        "max_output_tokens": 64,
        "metadata": {"k": "v"},
    }


def test_batch_upload_then_create(client, transport, capture_logs):
    batch = client.create_batch().set_metadata({"job": "nightly"})
    batch.add_chat("gpt-4o-mini", "req-1").add_message("one")
    batch.add_chat("gpt-4o-mini", "req-2").add_message("two")
    transport.queue({"id": "file-xyz", "object": "file"}).queue(_batch(input_file_id="file-xyz"))

    handle = batch.submit()
    assert len(transport.calls) == 2  # nosec B101
    upload, create = transport.calls
    assert upload.url == "https://api.openai.com/v1/files"  # nosec B101
    assert isinstance(upload.payload, FormData)  # nosec B101
    items = upload.payload.items
    assert items["purpose"].value == "batch"  # nosec B101
    assert items["file"].name == "batch_requests.jsonl"  # nosec B101
    assert items["file"].mime == "text/jsonl"  # nosec B101
    lines = [json.loads(line) for line in items["file"].read().decode().splitlines()]
    assert [line["custom_id"] for line in lines] == ["req-1", "req-2"]  # nosec B101
    assert lines[0]["method"] == "POST" and lines[0]["url"] == "/v1/responses"  # nosec B101
    assert lines[0]["body"]["input"] == [{"role": "user", "content": "one"}]  # nosec B101

    assert create.url == "https://api.openai.com/v1/batches"  # nosec B101
    assert create.payload == {  # nosec B101
        "input_file_id": "file-xyz",
        "endpoint": "/v1/responses",
        "completion_window": "24h",
        "metadata": {"job": "nightly"},
    }
    assert handle.get_status() is BatchStatus.IN_PROGRESS  # nosec B101


def test_upload_without_file_id(client, transport):
    transport.queue({"object": "file"})
    with pytest.raises(UnexpectedResponseError):
        client.upload_content("x", "a.jsonl", "batch")


def test_empty_batch_submit_makes_no_calls(client, transport):
    with pytest.raises(LogicError):
        client.create_batch().submit()
    assert transport.calls == []  # nosec B101


def test_duplicate_custom_id(client):
    batch = client.create_batch()
    batch.add_chat("m", "x")
    with pytest.raises(LogicError):
        batch.add_chat("m", "x")


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("validating", BatchStatus.IN_PROGRESS),
        ("in_progress", BatchStatus.IN_PROGRESS),
        ("finalizing", BatchStatus.IN_PROGRESS),
        ("completed", BatchStatus.COMPLETED),
        ("cancelling", BatchStatus.FAILED),
        ("failed", BatchStatus.FAILED),
        ("expired", BatchStatus.FAILED),
        ("cancelled", BatchStatus.FAILED),
        ("paused", BatchStatus.OTHER),
    ],
)
def test_status_table(client, transport, raw, expected):
    transport.queue(_batch(status=raw))
    assert client.retrieve_batch(BATCH_ID).get_status() is expected  # nosec B101


def test_result_lines_success_and_error(client, transport, capture_logs):
    document = (
        '{"custom_id":"a","response":{"status_code":200,"body":{"output":[{"type":"message",'
        '"content":[{"type":"output_text","text":"hi"}]}]}}}\n'
        '{"custom_id":"b","error":{"message":"boom"}}'
    )
    transport.queue(_batch(status="completed", output_file_id="file-out"))
    transport.queue(document)

    handle = client.retrieve_batch(BATCH_ID)
    assert handle.get_messages() == {"a": Message("hi", Role.MODEL)}  # nosec B101
    assert transport.calls[1].url == "https://api.openai.com/v1/files/file-out/content"  # nosec B101
    warning = capture_logs.events("batch.result.error")[-1]
    assert warning["custom_id"] == "b"  # nosec B101
    assert warning["message"] == "Error in request 'b': boom"  # nosec B101

    handle.get_messages()
    assert len(transport.calls) == 2  # nosec B101


def test_non_200_result_line_is_warned(client, transport, capture_logs):
    document = json.dumps({"custom_id": "c", "response": {"status_code": 400, "body": {"error": {"message": "bad input"}}}, "error": None})
    transport.queue(_batch(status="completed", output_file_id="f")).queue(document)
    assert client.retrieve_batch(BATCH_ID).get_messages() == {}  # nosec B101
    assert capture_logs.events("batch.result.error")[-1]["message"] == "Error in request 'c': bad input"  # nosec B101


def test_error_summary(client, transport):
    transport.queue(_batch(errors={"data": [{"message": "line 1 invalid"}, {"message": "line 2 invalid"}]}))
    transport.queue(_batch(request_counts={"total": 4, "completed": 3, "failed": 1}))
    transport.queue(_batch(request_counts={"total": 4, "completed": 4, "failed": 0}))
    assert client.retrieve_batch(BATCH_ID).get_error() == "Batch errors: line 1 invalid, line 2 invalid"  # nosec B101
    assert client.retrieve_batch(BATCH_ID).get_error() == "Batch encountered issues: 1 requests failed"  # nosec B101
    assert client.retrieve_batch(BATCH_ID).get_error() is None  # nosec B101


def test_timestamps(client, transport):
    transport.queue(_batch(created_at=1711471533, completed_at=None, failed_at=1711475133))
    transport.queue(_batch(created_at="soon"))
    handle = client.retrieve_batch(BATCH_ID)
    assert handle.get_created_at() == datetime.fromtimestamp(1711471533, tz=timezone.utc)  # nosec B101
    assert handle.get_completed_at() == datetime.fromtimestamp(1711475133, tz=timezone.utc)  # nosec B101
    bad = client.retrieve_batch(BATCH_ID)
    assert bad.get_created_at() is None and bad.get_completed_at() is None  # nosec B101


def test_list_and_cancel(client, transport):
    transport.queue({"data": [_batch(id="b1")], "has_more": False}).queue(_batch(status="cancelling"))
    assert [b.id for b in client.list_batches(limit=1)] == ["b1"]  # nosec B101
    assert transport.calls[0].url == "https://api.openai.com/v1/batches?limit=1"  # nosec B101
    assert client.cancel_batch(BATCH_ID) is True  # nosec B101


def test_embeddings_sorted_by_index(client, transport, capture_logs):
    transport.queue({"data": [
        {"index": 1, "embedding": [0.0, 1.0]},
        {"index": 0, "embedding": [1.0, 0.0]},
    ]})
    vectors = client.calculate_embeddings("text-embedding-3-small", ["first", "second"], dimensions=2)
    assert [v.values for v in vectors] == [(1.0, 0.0), (0.0, 1.0)]  # nosec B101
    assert transport.calls[0].payload == {  # nosec B101
        "model": "text-embedding-3-small",
        "input": ["first", "second"],
        "dimensions": 2,
    }
    assert not capture_logs.events("embeddings.dimensions_unsupported")  # nosec B101
    assert not capture_logs.events("embeddings.mismatch")  # nosec B101


def test_embeddings_warnings(client, transport, capture_logs):
    transport.queue({"data": [{"index": 0, "embedding": [1.0]}, {"index": 1, "error": {"message": "too long"}}]})
    vectors = client.calculate_embeddings("text-embedding-ada-002", ["a", "b"], dimensions=8)
    assert len(vectors) == 1  # nosec B101
    assert capture_logs.events("embeddings.dimensions_unsupported")  # nosec B101
    assert capture_logs.events("embeddings.item_error")[-1]["message"] == "too long"  # nosec B101
    assert capture_logs.events("embeddings.mismatch")[-1]["returned"] == 1  # nosec B101


@pytest.mark.parametrize("bad", [[], ["ok", ""]])
def test_embeddings_reject_empty_input(client, transport, bad):
    with pytest.raises(LogicError):
        client.calculate_embeddings("text-embedding-3-small", bad)
    assert transport.calls == []  # nosec B101


def test_completed_at_skips_unparseable_fields(client, transport):
    transport.queue(_batch(completed_at="garbage", failed_at=1711475133))
    handle = client.retrieve_batch(BATCH_ID)
    assert handle.get_completed_at() == datetime(2024, 3, 26, 17, 45, 33, tzinfo=timezone.utc)  # nosec B101


def test_results_served_as_jsonl_over_httpx():
    document = (
        '{"custom_id":"a","response":{"status_code":200,"body":{"output":[{"type":"message",'
        '"content":[{"type":"output_text","text":"hi"}]}]}}}\n'
    )

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/content"):
            return httpx.Response(200, content=document.encode(), headers={"content-type": "application/jsonl"})
        return httpx.Response(200, json=_batch(status="completed", output_file_id="file-out"))

    http = HttpxTransport(httpx.Client(transport=httpx.MockTransport(handler)))
    client = OpenAIProvider("sk-test", transport=http)
    assert client.retrieve_batch(BATCH_ID).get_messages() == {"a": Message("hi", Role.MODEL)}  # nosec B101
