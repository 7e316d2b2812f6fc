# factom_rpc/__init__.py
"""
Async JSON-RPC client for the Factom node, wallet and debug APIs.
"""
from .client import Endpoint, Factom
from .config import FactomSettings, configure_logging
from .errors import (
    ConfigurationError,
    FactomError,
    FetchError,
    MalformedResponseError,
    ParseError,
    SchemaMismatchError,
    TransportError,
)
from .rpc_library import ApiError, ApiRequest, ApiResponse, normalize, parse

__version__ = "0.1.0"

__all__ = [
    'Factom',
    'Endpoint',
    'FactomSettings',
    'configure_logging',

    # Protocol
    'ApiError',
    'ApiRequest',
    'ApiResponse',
    'normalize',
    'parse',

    # Errors
    'FactomError',
    'ConfigurationError',
    'FetchError',
    'TransportError',
    'ParseError',
    'MalformedResponseError',
    'SchemaMismatchError',
]
