"""JSON-RPC 2.0 envelope codec."""
from .models import RpcPayload, RpcResponse, RpcErrorObject, ErrorCode
from .codec import (
    IdSequence,
    build_payload,
    parse_response,
    serialize_payload,
    success_envelope,
)

__all__ = [
    "RpcPayload",
    "RpcResponse",
    "RpcErrorObject",
    "ErrorCode",
    "IdSequence",
    "build_payload",
    "parse_response",
    "serialize_payload",
    "success_envelope",
]
