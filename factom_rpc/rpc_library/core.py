# factom_rpc/rpc_library/core.py
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, StrictInt

JSONRPC_VERSION = "2.0"

# Correlation ids are unsigned 64 bit values and wrap instead of overflowing.
ID_BITS = 64
ID_MODULUS = 2 ** ID_BITS
MAX_ID = ID_MODULUS - 1

T = TypeVar("T")


def next_id(current: int, step: int = 1) -> int:
    """Advances a correlation id by ``step``, wrapping to zero past ``MAX_ID``."""
    return (current + step) % ID_MODULUS


def check_id(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Request id must be an integer, got {type(value).__name__}")
    if value < 0 or value > MAX_ID:
        raise ValueError(f"Request id must be between 0 and {MAX_ID}, got {value}")
    return value


@dataclass(frozen=True)
class ApiRequest:
    """Represents a JSON-RPC 2.0 request to one of the Factom endpoints."""
    method: str
    params: Dict[str, Any] = field(default_factory=dict)
    id: int = 0
    jsonrpc: str = JSONRPC_VERSION

    def __post_init__(self):
        if not isinstance(self.method, str) or not self.method.strip():
            raise ValueError("RPC method name must be a non-empty string")
        for key in self.params:
            if not isinstance(key, str):
                raise ValueError(f"Parameter names must be strings, got {key!r}")
        check_id(self.id)

    @classmethod
    def new(cls, method: str, params: Optional[Mapping[str, Any]] = None, id: int = 0) -> "ApiRequest":
        return cls(method=method, params=dict(params or {}), id=id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "jsonrpc": self.jsonrpc,
            "id": self.id,
            "method": self.method,
            "params": self.params,
        }

    def to_json(self) -> bytes:
        return json.dumps(self.to_dict()).encode("utf-8")


class ApiError(BaseModel):
    """The ``error`` member of a JSON-RPC response."""
    model_config = ConfigDict(frozen=True)

    code: StrictInt
    message: str
    data: Optional[Any] = None

    def __str__(self) -> str:
        text = f"RPC Error {self.code}: {self.message}"
        if self.data is not None:
            text += f" ({self.data})"
        return text


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Represents a JSON-RPC 2.0 response carrying either a result or an error."""
    id: Optional[int]
    result: Optional[T] = None
    error: Optional[ApiError] = None

    def __post_init__(self):
        if self.error is not None and self.result is not None:
            raise ValueError("A response cannot carry both a result and an error")

    def success(self) -> bool:
        return self.error is None

    def is_error(self) -> bool:
        return self.error is not None
