"""JSON-RPC 2.0 request/response models."""
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Any, Dict, List, Optional, Union, Literal


class RpcPayload(BaseModel):
    """JSON-RPC 2.0 request envelope. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    jsonrpc: Literal["2.0"] = "2.0"
    method: str
    params: List[Any] = Field(default_factory=list)
    id: int


class RpcErrorObject(BaseModel):
    """JSON-RPC 2.0 error model."""

    code: int
    message: str
    data: Optional[Any] = None


class RpcResponse(BaseModel):
    """JSON-RPC 2.0 response model.

    Exactly one of ``result`` and ``error`` must be supplied. A ``result`` of
    ``None`` counts as supplied, so presence is checked on the raw input keys
    rather than on the values.
    """

    jsonrpc: Literal["2.0"] = "2.0"
    id: Optional[Union[int, str]]
    result: Optional[Any] = None
    error: Optional[RpcErrorObject] = None

    @model_validator(mode="before")
    @classmethod
    def _exactly_one_outcome(cls, data: Any) -> Any:
        if isinstance(data, dict):
            has_result = "result" in data
            has_error = "error" in data
            if has_result == has_error:
                raise ValueError("response must contain exactly one of 'result' or 'error'")
        return data

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            data["error"] = self.error.model_dump(exclude_none=True)
        else:
            data["result"] = self.result
        return data


class ErrorCode:
    """JSON-RPC 2.0 standard error codes."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603
