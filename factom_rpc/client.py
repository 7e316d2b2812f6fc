# factom_rpc/client.py
"""
The ``Factom`` client: endpoint registry, correlation id and the shared
dispatch-and-parse path every per-call method goes through.
"""
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Type

import httpx
import structlog

from factom_rpc.api import BalanceApi, BlockApi, ChainApi, DebugApi, NodeApi, WalletApi
from factom_rpc.config import (
    DEFAULT_NODE_HOST,
    DEFAULT_WALLET_HOST,
    OPEN_NODE_HOST,
    TESTNET_HOST,
    FactomSettings,
)
from factom_rpc.rpc_library.core import ApiRequest, ApiResponse, check_id, next_id
from factom_rpc.rpc_library.dispatcher import send
from factom_rpc.rpc_library.parser import parse
from factom_rpc.rpc_library.transport import DEFAULT_TIMEOUT, HttpxTransport, JsonRpcTransport
from factom_rpc.rpc_library.uri import api_uri, debug_uri

logger = structlog.get_logger()


class Endpoint(str, Enum):
    """The three logical services a client talks to."""
    NODE = "factomd"
    WALLET = "walletd"
    DEBUG = "debug"


class Factom(BalanceApi, BlockApi, ChainApi, NodeApi, WalletApi, DebugApi):
    """
    Client for the factomd, factom-walletd and debug JSON-RPC APIs.

    The correlation id is only changed by ``increment_id`` and ``set_id``;
    calls reuse the current id until the caller advances it. ``clone`` gives an
    independent id and URIs on top of the same transport.

    ``timeout`` only configures the default ``HttpxTransport``; when a
    ``transport`` is passed its own timeout applies and ``timeout`` is ignored.

    Example:
        async with Factom() as factom:
            response = await factom.heights()
            if response.success():
                print(response.result.leaderheight)
    """

    def __init__(
        self,
        node_host: Optional[str] = None,
        wallet_host: Optional[str] = None,
        *,
        transport: Optional[JsonRpcTransport] = None,
        timeout: float = DEFAULT_TIMEOUT,
        request_id: int = 0,
    ):
        if node_host is None:
            node_host = DEFAULT_NODE_HOST
        if wallet_host is None:
            wallet_host = DEFAULT_WALLET_HOST
        # Malformed hosts raise ConfigurationError here, before any transport exists.
        self.node_uri: httpx.URL = api_uri(node_host)
        self.wallet_uri: httpx.URL = api_uri(wallet_host)
        self.debug_uri: httpx.URL = debug_uri(node_host)
        self.id: int = check_id(request_id)
        self.transport: JsonRpcTransport = transport or HttpxTransport(timeout=timeout)
        logger.debug(
            "Factom client initialized",
            node_uri=str(self.node_uri),
            wallet_uri=str(self.wallet_uri),
            debug_uri=str(self.debug_uri),
        )

    @classmethod
    def from_open_public_node(cls, **kwargs) -> "Factom":
        """Node calls go to the public open node, wallet calls to the local walletd."""
        return cls(OPEN_NODE_HOST, DEFAULT_WALLET_HOST, **kwargs)

    @classmethod
    def from_testnet(cls, **kwargs) -> "Factom":
        """Node calls go to the public testnet node, wallet calls to the local walletd."""
        return cls(TESTNET_HOST, DEFAULT_WALLET_HOST, **kwargs)

    @classmethod
    def from_custom_hosts(cls, node_host: str, wallet_host: str, **kwargs) -> "Factom":
        return cls(node_host, wallet_host, **kwargs)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **kwargs) -> "Factom":
        settings = FactomSettings.from_env(env_file)
        if "transport" not in kwargs:
            kwargs.setdefault("timeout", settings.timeout)
        return cls(settings.node_host, settings.wallet_host, **kwargs)

    def clone(self) -> "Factom":
        """Returns a client with the same URIs and id that shares this client's transport."""
        other = object.__new__(type(self))
        other.node_uri = self.node_uri
        other.wallet_uri = self.wallet_uri
        other.debug_uri = self.debug_uri
        other.id = self.id
        other.transport = self.transport
        return other

    __copy__ = clone

    def increment_id(self) -> int:
        """Advances the correlation id by one, wrapping to zero, and returns it."""
        self.id = next_id(self.id)
        return self.id

    def set_id(self, value: int) -> int:
        self.id = check_id(value)
        return self.id

    def request(self, method: str, params: Optional[Mapping[str, Any]] = None) -> ApiRequest:
        """Builds an envelope with the current id without advancing it."""
        return ApiRequest.new(method, params, id=self.id)

    def endpoint_uri(self, endpoint: Endpoint) -> httpx.URL:
        endpoint = Endpoint(endpoint)
        if endpoint is Endpoint.NODE:
            return self.node_uri
        if endpoint is Endpoint.WALLET:
            return self.wallet_uri
        return self.debug_uri

    async def call(
        self,
        endpoint: Endpoint,
        method: str,
        params: Optional[Mapping[str, Any]] = None,
        result_type: Type[Any] = Any,
    ) -> ApiResponse:
        """Sends ``method`` to ``endpoint`` and parses the reply as ``result_type``.

        API errors are returned on ``response.error``. Local failures raise
        ``TransportError``, ``MalformedResponseError`` or ``SchemaMismatchError``.
        """
        request = self.request(method, params)
        uri = self.endpoint_uri(endpoint)
        logger.info("Making RPC call", endpoint=Endpoint(endpoint).value, method=method, request_id=request.id)

        body = await send(self.transport, request, uri)
        response = parse(body, result_type, method=method)

        if response.id is not None and response.id != request.id:
            logger.warning(
                "Response id does not match request id",
                method=method,
                request_id=request.id,
                response_id=response.id,
            )
        if response.success():
            logger.info("RPC call successful", method=method, request_id=request.id)
        return response

    async def factomd_call(
        self, method: str, params: Optional[Dict[str, Any]] = None, result_type: Type[Any] = Any
    ) -> ApiResponse:
        return await self.call(Endpoint.NODE, method, params, result_type)

    async def walletd_call(
        self, method: str, params: Optional[Dict[str, Any]] = None, result_type: Type[Any] = Any
    ) -> ApiResponse:
        return await self.call(Endpoint.WALLET, method, params, result_type)

    async def debug_call(
        self, method: str, params: Optional[Dict[str, Any]] = None, result_type: Type[Any] = Any
    ) -> ApiResponse:
        return await self.call(Endpoint.DEBUG, method, params, result_type)

    async def aclose(self) -> None:
        """Closes the transport. Clones sharing it can no longer make calls."""
        await self.transport.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    def __repr__(self) -> str:
        return (
            f"Factom(node_uri='{self.node_uri}', wallet_uri='{self.wallet_uri}', "
            f"debug_uri='{self.debug_uri}', id={self.id})"
        )
