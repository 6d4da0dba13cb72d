"""Unit tests for the JSON-RPC envelope codec."""
import json

import pytest
from pydantic import ValidationError

from ethrpc.jsonrpc.codec import (
    IdSequence,
    build_payload,
    parse_response,
    serialize_payload,
    success_envelope,
)
from ethrpc.jsonrpc.models import ErrorCode, RpcPayload, RpcResponse
from ethrpc.utils.errors import DecodeError, DecodeErrorReason


def test_build_payload_fields():
    """Test that a payload carries the version, method, params and an id."""
    payload = build_payload("eth_getBalance", ["0x0", "latest"], IdSequence())

    assert payload.jsonrpc == "2.0"
    assert payload.method == "eth_getBalance"
    assert payload.params == ["0x0", "latest"]
    assert payload.id == 1


def test_build_payload_ids_are_monotonic():
    """Test that ids from one sequence never repeat."""
    sequence = IdSequence()
    ids = [build_payload("eth_blockNumber", [], sequence).id for _ in range(5)]

    assert ids == [1, 2, 3, 4, 5]


def test_build_payload_default_sequence_is_shared():
    """Test that payloads built without a sequence still get distinct ids."""
    first = build_payload("eth_blockNumber")
    second = build_payload("eth_blockNumber")

    assert second.id > first.id
    assert first.params == []


def test_build_payload_requires_method():
    """Test that an empty method name is rejected."""
    with pytest.raises(ValueError):
        build_payload("", [])


def test_payload_is_immutable():
    """Test that a built envelope cannot be changed."""
    payload = build_payload("eth_blockNumber", [], IdSequence())

    with pytest.raises(ValidationError):
        payload.method = "eth_chainId"


def test_serialize_payload():
    """Test the wire form of a payload."""
    payload = RpcPayload(method="eth_chainId", params=[], id=7)

    assert json.loads(serialize_payload(payload)) == {
        "jsonrpc": "2.0",
        "method": "eth_chainId",
        "params": [],
        "id": 7,
    }


def test_round_trip_keeps_request_id():
    """Test that a synthetic answer to a serialized request matches its id."""
    payload = build_payload("eth_blockNumber", [], IdSequence(41))
    request = json.loads(serialize_payload(payload))
    raw = json.dumps({"jsonrpc": "2.0", "id": request["id"], "result": "0x64"})

    response = parse_response(raw)

    assert response.id == payload.id == 41
    assert response.result == "0x64"


def test_parse_response_success_from_dict():
    """Test parsing an already decoded envelope."""
    response = parse_response({"jsonrpc": "2.0", "id": 1, "result": True})

    assert response.is_error is False
    assert response.result is True


def test_parse_response_null_result_is_valid():
    """Test that ``result: null`` counts as a present result."""
    response = parse_response('{"jsonrpc": "2.0", "id": 3, "result": null}')

    assert response.result is None
    assert response.error is None
    assert response.to_dict() == {"jsonrpc": "2.0", "id": 3, "result": None}


def test_parse_response_error():
    """Test parsing an error envelope."""
    response = parse_response(
        b'{"jsonrpc": "2.0", "id": 2, "error": {"code": -32601, "message": "Method not found"}}'
    )

    assert response.is_error
    assert response.error.code == ErrorCode.METHOD_NOT_FOUND
    assert response.to_dict()["error"] == {"code": -32601, "message": "Method not found"}


def test_parse_response_not_json():
    """Test that unparsable input fails with NOT_JSON."""
    with pytest.raises(DecodeError) as exc_info:
        parse_response("<html>502 Bad Gateway</html>")

    assert exc_info.value.reason == DecodeErrorReason.NOT_JSON
    assert exc_info.value.raw == "<html>502 Bad Gateway</html>"


@pytest.mark.parametrize("raw", [
    {"result": 1, "error": {"code": 1, "message": "x"}},
    {"jsonrpc": "2.0", "id": 1, "result": 1, "error": {"code": 1, "message": "x"}},
    {"jsonrpc": "2.0", "id": 1},
    {"jsonrpc": "2.0", "result": 1},
    {"id": 1, "result": 1},
    {"jsonrpc": "2.0", "id": 1, "error": {"message": "no code"}},
    [1, 2, 3],
    "42",
])
def test_parse_response_malformed(raw):
    """Test that inconsistent envelopes are rejected, not coerced."""
    with pytest.raises(DecodeError) as exc_info:
        parse_response(raw)

    assert exc_info.value.reason == DecodeErrorReason.MALFORMED_ENVELOPE


def test_response_model_requires_exactly_one_outcome():
    """Test the model-level invariant on direct construction."""
    with pytest.raises(ValidationError):
        RpcResponse(id=1)

    with pytest.raises(ValidationError):
        RpcResponse(id=1, result=1, error={"code": 1, "message": "x"})


def test_success_envelope():
    """Test wrapping a local result."""
    response = success_envelope(9, ["0xabc"])

    assert response.to_dict() == {"jsonrpc": "2.0", "id": 9, "result": ["0xabc"]}


def test_error_codes():
    """Test that error codes are correctly defined."""
    assert ErrorCode.PARSE_ERROR == -32700
    assert ErrorCode.INVALID_REQUEST == -32600
    assert ErrorCode.METHOD_NOT_FOUND == -32601
    assert ErrorCode.INVALID_PARAMS == -32602
    assert ErrorCode.INTERNAL_ERROR == -32603
