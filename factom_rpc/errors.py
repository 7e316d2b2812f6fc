# factom_rpc/errors.py
"""
Local failure types raised by the client.

Errors returned by factomd itself are not raised; they come back as the
``error`` branch of an ``ApiResponse`` (see ``rpc_library.core.ApiError``).
"""
from typing import Any, Optional, Sequence, Union


class FactomError(Exception):
    """Base class for every failure raised by this library."""


class ConfigurationError(FactomError, ValueError):
    """An endpoint host or setting could not be turned into a usable client."""

    def __init__(self, message: str, value: Optional[Any] = None):
        self.value = value
        super().__init__(message)


class FetchError(FactomError):
    """The request never produced a response body."""


class TransportError(FetchError):
    """Connection, DNS, TLS or timeout failure while talking to an endpoint."""

    def __init__(self, uri: str, reason: str):
        self.uri = uri
        self.reason = reason
        super().__init__(f"Transport error for {uri}: {reason}")


class ParseError(FactomError):
    """A response body could not be decoded."""


class MalformedResponseError(ParseError):
    """Body is not JSON or not a JSON-RPC response envelope."""

    def __init__(self, message: str, body: Optional[bytes] = None):
        self.body = body
        super().__init__(message)


class SchemaMismatchError(ParseError):
    """The envelope is valid but ``result`` does not fit the expected type."""

    def __init__(
        self,
        method: Optional[str],
        expected: str,
        actual: str,
        path: Sequence[Union[str, int]] = (),
        detail: str = "",
    ):
        self.method = method
        self.expected = expected
        self.actual = actual
        self.path = tuple(path)
        self.detail = detail
        location = ".".join(str(part) for part in self.path) or "<result>"
        message = (
            f"Result of {method or 'call'} does not match {expected}: "
            f"got {actual} at {location}"
        )
        if detail:
            message += f" ({detail})"
        super().__init__(message)
