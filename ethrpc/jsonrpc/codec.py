"""Building and parsing JSON-RPC 2.0 envelopes."""
import itertools
import json
import threading
from typing import Any, Dict, Optional, Sequence, Union

from pydantic import ValidationError

from ..utils.errors import DecodeError, DecodeErrorReason
from .models import RpcPayload, RpcResponse

JSONRPC_VERSION = "2.0"


class IdSequence:
    """Monotonic request id counter, one per provider instance."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            return next(self._counter)


_default_sequence = IdSequence()


def build_payload(
    method: str,
    params: Optional[Sequence[Any]] = None,
    sequence: Optional[IdSequence] = None
) -> RpcPayload:
    """Build a request envelope with the next id from ``sequence``.

    Args:
        method: JSON-RPC method name (e.g., "eth_blockNumber")
        params: Positional parameters
        sequence: Id source; the process-wide sequence is used when omitted

    Returns:
        Frozen RpcPayload
    """
    if not isinstance(method, str) or not method:
        raise ValueError(f"JSONRPC method should be specified for params: {params!r}")
    sequence = sequence or _default_sequence
    return RpcPayload(
        jsonrpc=JSONRPC_VERSION,
        method=method,
        params=list(params or []),
        id=sequence.next()
    )


def serialize_payload(payload: RpcPayload) -> str:
    return json.dumps(payload.model_dump(), separators=(",", ":"))


def success_envelope(request_id: Optional[Union[int, str]], result: Any) -> RpcResponse:
    """Wrap a locally produced result in a standard response envelope."""
    return RpcResponse(jsonrpc=JSONRPC_VERSION, id=request_id, result=result)


def parse_response(raw: Union[str, bytes, Dict[str, Any]]) -> RpcResponse:
    """Parse and validate a response envelope.

    Raises:
        DecodeError: NOT_JSON when ``raw`` is not parsable, MALFORMED_ENVELOPE
            when the envelope fields are missing or inconsistent
    """
    data = raw
    if isinstance(raw, (str, bytes, bytearray)):
        try:
            data = json.loads(raw)
        except (ValueError, UnicodeDecodeError) as e:
            raise DecodeError(
                DecodeErrorReason.NOT_JSON,
                f"Response is not valid JSON: {e}",
                raw=raw
            ) from e

    if not isinstance(data, dict):
        raise DecodeError(
            DecodeErrorReason.MALFORMED_ENVELOPE,
            f"Response is not a JSON object: {data!r}",
            raw=raw
        )

    missing = [field for field in ("jsonrpc", "id") if field not in data]
    if missing:
        raise DecodeError(
            DecodeErrorReason.MALFORMED_ENVELOPE,
            f"Response is missing required field(s): {', '.join(missing)}",
            raw=raw
        )

    try:
        return RpcResponse.model_validate(data)
    except ValidationError as e:
        raise DecodeError(
            DecodeErrorReason.MALFORMED_ENVELOPE,
            f"Malformed JSON-RPC response: {e.errors()[0]['msg']}",
            raw=raw
        ) from e
