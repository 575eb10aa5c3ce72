"""Shared fixtures: a local fake indexer and a local fake validator."""

import asyncio
import socket
from typing import Dict, List, Optional

import grpc
import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from blockrelay.protocol import Empty, add_validator_service_to_server
from blockrelay.types import Endpoint

SAMPLE_HEIGHT = 2763


def block_text(height: int, transactions: int = 2) -> str:
    """Text-format block as the indexer serves it."""
    lines = [
        "block_header {",
        "  version: 1",
        f"  block_height: {height}",
        '  previous_block_hash: "\\001\\002\\003"',
        '  hash: "\\252\\273\\314"',
        "  timestamp {",
        "    seconds: 1717000000",
        "  }",
        "}",
    ]
    for i in range(transactions):
        lines += [
            "transactions {",
            f'  txn_hash: "tx-{height}-{i}"',
            "  txn_type: 2",
            '  payload: "\\000\\001"',
            "}",
        ]
    lines.append('signature: "sig"')
    return "\n".join(lines) + "\n"


def unused_port() -> int:
    with socket.socket() as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


class FakeIndexer:
    """Serves text-format blocks wrapped in JSON strings and records every request."""
    
    def __init__(self):
        self.url = ""
        self.requests: List[dict] = []
        self.blocks: Dict[int, str] = {}
        self.delay = 0.0
        self._status: Optional[int] = None
        self._body: Optional[bytes] = None
    
    def add_block(self, height: int, transactions: int = 2) -> None:
        self.blocks[height] = block_text(height, transactions)
    
    def respond_with(self, status: int, body) -> None:
        """Answer every request with a fixed status and raw body."""
        self._status = status
        self._body = body.encode() if isinstance(body, str) else body
    
    async def handle(self, request: web.Request) -> web.Response:
        self.requests.append({
            "method": request.method,
            "path": request.path,
            "query": dict(request.query),
            "headers": request.headers.copy(),
            "body": await request.read(),
        })
        if self.delay:
            await asyncio.sleep(self.delay)
        if self._status is not None:
            return web.Response(status=self._status, body=self._body)
        height = int(request.query["blockHeight"])
        if height not in self.blocks:
            return web.Response(status=404, text=f"block {height} not found")
        return web.json_response(self.blocks[height])


class FakeValidator:
    """ValidatorService servicer recording every broadcast block."""
    
    def __init__(self):
        self.endpoint: Optional[Endpoint] = None
        self.received = []
        self.delay = 0.0
        self.abort_with = None
    
    async def Broadcast(self, request, context):
        self.received.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.abort_with:
            await context.abort(*self.abort_with)
        return Empty()


@pytest_asyncio.fixture
async def indexer():
    fake = FakeIndexer()
    app = web.Application()
    app.router.add_post("/store", fake.handle)
    server = TestServer(app, host="127.0.0.1")
    await server.start_server()
    fake.url = f"http://127.0.0.1:{server.port}"
    yield fake
    await server.close()


@pytest_asyncio.fixture
async def validator():
    fake = FakeValidator()
    server = grpc.aio.server()
    add_validator_service_to_server(fake, server)
    port = server.add_insecure_port("127.0.0.1:0")
    await server.start()
    fake.endpoint = Endpoint("127.0.0.1", port)
    yield fake
    await server.stop(None)


@pytest.fixture
def sample_block():
    from blockrelay.fetching import decode_block
    return decode_block(block_text(SAMPLE_HEIGHT))
