# factom_rpc/rpc_library/parser.py
"""
Decoding of JSON-RPC response bodies.

``parse`` turns raw bytes into an ``ApiResponse``. API errors reported by the
daemon are returned as data; a body that cannot be understood raises a
``ParseError`` subclass.
"""
import json
from functools import lru_cache
from typing import Any, Optional, Type

import structlog
from pydantic import TypeAdapter, ValidationError

from factom_rpc.errors import MalformedResponseError, SchemaMismatchError
from factom_rpc.rpc_library.core import ApiError, ApiResponse

logger = structlog.get_logger()


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def _type_name(result_type: Any) -> str:
    return getattr(result_type, "__name__", None) or repr(result_type)


def json_shape(value: Any) -> str:
    """Names the JSON kind of a decoded value, e.g. ``object`` or ``string``."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def parse(body: bytes, result_type: Type[Any] = Any, *, method: Optional[str] = None) -> ApiResponse:
    """Decodes ``body`` into an ``ApiResponse`` whose result is validated as ``result_type``.

    Raises:
        MalformedResponseError: body is not a JSON-RPC response object.
        SchemaMismatchError: ``result`` does not validate against ``result_type``.
    """
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error("Response is not valid JSON", method=method, error=str(e))
        raise MalformedResponseError(f"Response body is not valid JSON: {e}", body) from e

    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Expected a JSON-RPC response object, got {json_shape(data)}", body
        )

    response_id = data.get("id")
    if response_id is not None and (isinstance(response_id, bool) or not isinstance(response_id, int)):
        raise MalformedResponseError(f"Response id must be an integer or null, got {json_shape(response_id)}", body)

    raw_error = data.get("error")
    if raw_error is not None:
        try:
            error = ApiError.model_validate(raw_error)
        except ValidationError as e:
            raise MalformedResponseError(f"Response error member is not a valid error object: {e}", body) from e
        logger.info("RPC call returned an error", method=method, code=error.code, message=error.message)
        return ApiResponse(id=response_id, error=error)

    if "result" not in data:
        raise MalformedResponseError("Response carries neither a result nor an error", body)

    raw_result = data["result"]
    try:
        result = _adapter(result_type).validate_python(raw_result)
    except ValidationError as e:
        first = e.errors()[0]
        path = tuple(first.get("loc", ()))
        offending = first.get("input", raw_result)
        logger.error(
            "Result schema mismatch",
            method=method,
            expected=_type_name(result_type),
            path=list(path),
        )
        raise SchemaMismatchError(
            method,
            expected=_type_name(result_type),
            actual="missing" if first.get("type") == "missing" else json_shape(offending),
            path=path,
            detail=first.get("msg", ""),
        ) from e

    return ApiResponse(id=response_id, result=result)
