# factom_rpc/rpc_library/__init__.py
"""
JSON-RPC protocol layer: envelopes, URIs, transport, dispatch and parsing.
"""
from .core import (
    ApiError,
    ApiRequest,
    ApiResponse,
    ID_MODULUS,
    JSONRPC_VERSION,
    MAX_ID,
    next_id,
)
from .dispatcher import JSON_HEADERS, send
from .parser import parse
from .transport import HttpxTransport, JsonRpcTransport
from .uri import API_PATH, DEBUG_PATH, api_uri, debug_uri, normalize

__all__ = [
    'ApiError',
    'ApiRequest',
    'ApiResponse',
    'ID_MODULUS',
    'JSONRPC_VERSION',
    'MAX_ID',
    'next_id',
    'JSON_HEADERS',
    'send',
    'parse',
    'HttpxTransport',
    'JsonRpcTransport',
    'API_PATH',
    'DEBUG_PATH',
    'api_uri',
    'debug_uri',
    'normalize',
]
