# factom_rpc/rpc_library/transport.py
from abc import ABC, abstractmethod
from typing import Mapping, Optional, Union

import httpx
import structlog

from factom_rpc.errors import MalformedResponseError, TransportError

logger = structlog.get_logger()

DEFAULT_TIMEOUT = 30.0


class JsonRpcTransport(ABC):
    """Abstract base class for the HTTP layer shared by every call of a client."""

    @abstractmethod
    async def post(self, uri: Union[str, httpx.URL], content: bytes, headers: Mapping[str, str]) -> bytes:
        """Posts ``content`` to ``uri`` and returns the raw response body."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Releases pooled connections."""
        pass


class HttpxTransport(JsonRpcTransport):
    """Implements the transport on a single pooled ``httpx.AsyncClient``.

    The underlying client is safe to use from many concurrent calls and keeps
    no per-call state, so clones of a ``Factom`` client can share one instance.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, client: Optional[httpx.AsyncClient] = None):
        self.timeout = timeout
        self.client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def is_closed(self) -> bool:
        return self.client.is_closed

    async def post(self, uri: Union[str, httpx.URL], content: bytes, headers: Mapping[str, str]) -> bytes:
        if self.client.is_closed:
            logger.error("Transport is closed", uri=str(uri))
            raise TransportError(str(uri), "transport is closed")
        try:
            response = await self.client.post(uri, content=content, headers=dict(headers))
        except httpx.DecodingError as e:
            logger.error("Response body could not be decoded", uri=str(uri), error=str(e))
            raise MalformedResponseError(f"Response body from {uri} could not be decoded: {e}") from e
        except httpx.RequestError as e:
            logger.error("Transport failure", uri=str(uri), error=str(e) or type(e).__name__)
            raise TransportError(str(uri), str(e) or type(e).__name__) from e

        # JSON-RPC errors are often delivered with a 4xx/5xx status, so the body
        # is handed to the parser instead of raising here.
        if response.is_error:
            logger.warning("Non-success HTTP status", uri=str(uri), status_code=response.status_code)
        return response.content

    async def close(self) -> None:
        if not self.client.is_closed:
            await self.client.aclose()
