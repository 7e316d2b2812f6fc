# tests/conftest.py
import json

import httpx
import pytest

from factom_rpc import Factom
from factom_rpc.rpc_library.transport import HttpxTransport


def pytest_configure(config):
    """Bare bruk asyncio, ikke trio."""
    config.option.asyncio_mode = "auto"


class RecordingNode:
    """
    Fake factomd/walletd behind an httpx.MockTransport.

    Answers every request with the queued replies in order and records the
    decoded requests it received.
    """

    def __init__(self):
        self.requests = []
        self.replies = []

    def reply(self, payload, status_code: int = 200):
        body = payload if isinstance(payload, (bytes, str)) else json.dumps(payload)
        self.replies.append((status_code, body))
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.replies:
            return httpx.Response(500, text="no reply queued")
        status_code, body = self.replies.pop(0)
        return httpx.Response(status_code, content=body if isinstance(body, bytes) else body.encode("utf-8"))

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def node():
    return RecordingNode()


@pytest.fixture
def transport(node):
    return HttpxTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(node.handler)))


@pytest.fixture
async def factom(transport):
    client = Factom(transport=transport)
    yield client
    await client.aclose()
