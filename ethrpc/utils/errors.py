"""Custom exception classes for the RPC client layer."""
from enum import Enum
from typing import Any, Optional


class EthRpcError(Exception):
    """Base exception for ethrpc errors."""

    pass


class FormatError(EthRpcError):
    """Bad argument or result shape, raised by the formatting hooks."""

    pass


class InvalidParameterCount(FormatError):
    """Too few parameters for a method model."""

    def __init__(self, method: str, expected: int, given: int):
        self.method = method
        self.expected = expected
        self.given = given
        super().__init__(
            f"Invalid number of parameters for \"{method}\". Got {given} expected {expected}!"
        )


class DecodeErrorReason(str, Enum):
    NOT_JSON = "not_json"
    MALFORMED_ENVELOPE = "malformed_envelope"


class DecodeError(EthRpcError):
    """Malformed JSON-RPC wire envelope."""

    def __init__(self, reason: DecodeErrorReason, message: str, raw: Any = None):
        self.reason = reason
        self.raw = raw
        super().__init__(message)


class TransportError(EthRpcError):
    """The channel itself failed; the provider is marked disconnected."""

    pass


class ConnectionTimeout(TransportError):
    def __init__(self, duration: float):
        self.duration = duration
        super().__init__(f"CONNECTION TIMEOUT: timeout of {duration} s achieved")


class InvalidConnection(TransportError):
    def __init__(self, endpoint: str):
        self.endpoint = endpoint
        super().__init__(f"CONNECTION ERROR: Couldn't connect to node {endpoint}.")


class InvalidResponse(EthRpcError):
    """Response body could not be decoded."""

    def __init__(self, raw_body: Any):
        self.raw_body = raw_body
        super().__init__(f"Invalid JSON RPC response: {raw_body!r}")


class BridgeError(EthRpcError):
    """No response or an unusable response from a native bridge call."""

    pass


class NodeError(EthRpcError):
    """The node answered with a JSON-RPC error object."""

    def __init__(self, code: int, message: str, data: Optional[Any] = None):
        self.code = code
        self.message = message
        self.data = data
        super().__init__(f"JSON-RPC Error {code}: {message}")
