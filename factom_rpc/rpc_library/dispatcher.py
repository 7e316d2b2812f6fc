# factom_rpc/rpc_library/dispatcher.py
from typing import Union

import httpx
import structlog

from factom_rpc.rpc_library.core import ApiRequest
from factom_rpc.rpc_library.transport import JsonRpcTransport

logger = structlog.get_logger()

JSON_HEADERS = {"Content-Type": "application/json"}


async def send(transport: JsonRpcTransport, request: ApiRequest, uri: Union[str, httpx.URL]) -> bytes:
    """Posts one JSON-RPC envelope to ``uri`` and returns the response body.

    A single attempt is made. ``TransportError`` propagates from the transport
    when no response arrives; any response body, whatever its HTTP status, is
    returned for the parser to interpret.
    """
    logger.debug("Sending RPC request", method=request.method, request_id=request.id, uri=str(uri))
    return await transport.post(uri, request.to_json(), JSON_HEADERS)
