"""Shared fixtures: an in-process fake node and a scriptable native bridge."""
import json
import threading
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest
from fastapi import FastAPI

from ethrpc.jsonrpc.models import ErrorCode, RpcPayload
from ethrpc.providers.http import HttpAgent, HttpProvider

BLOCK_HASH = "0x" + "ab" * 32
ACCOUNT = "0x" + "12" * 20
NODE_ACCOUNT = "0x" + "CD" * 20
NODE_HOST = "http://testnode:8545"

SAMPLE_BLOCK = {
    "number": "0x64",
    "hash": BLOCK_HASH,
    "gasLimit": "0x1c9c380",
    "gasUsed": "0x5208",
    "timestamp": "0x5f5e100",
    "miner": "0x" + "AB" * 20,
    "transactions": [],
}


def create_node_app() -> FastAPI:
    """Build a fake Ethereum node answering a handful of JSON-RPC methods."""
    app = FastAPI(title="Fake Node")
    app.state.received = []

    methods: Dict[str, Callable[[list], Any]] = {
        "eth_blockNumber": lambda params: "0x64",
        "eth_chainId": lambda params: "0x1",
        "net_version": lambda params: "1",
        "eth_accounts": lambda params: [NODE_ACCOUNT],
        "eth_getUncleCountByBlockNumber": lambda params: "0x1",
        "eth_getUncleCountByBlockHash": lambda params: "0x2",
        "eth_getBlockByNumber": lambda params: SAMPLE_BLOCK,
        "eth_getBlockByHash": lambda params: SAMPLE_BLOCK,
        "personal_unlockAccount": lambda params: True,
    }

    @app.post("/")
    async def jsonrpc_endpoint(payload: RpcPayload):
        app.state.received.append(payload)
        if payload.method not in methods:
            return {
                "jsonrpc": "2.0",
                "id": payload.id,
                "error": {
                    "code": ErrorCode.METHOD_NOT_FOUND,
                    "message": f"the method {payload.method} does not exist/is not available",
                },
            }
        return {"jsonrpc": "2.0", "id": payload.id, "result": methods[payload.method](payload.params)}

    return app


@pytest.fixture
def node_app():
    """Fake node application."""
    return create_node_app()


@pytest.fixture
def node_provider(node_app):
    """HttpProvider wired to the fake node through an ASGI transport."""
    client = httpx.AsyncClient(transport=httpx.ASGITransport(app=node_app))
    return HttpProvider(NODE_HOST, agent=HttpAgent(http=client, https=client))


def mock_http_provider(handler: Callable[[httpx.Request], httpx.Response], host: str = NODE_HOST, **kwargs) -> HttpProvider:
    """HttpProvider whose requests are answered by ``handler``."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpProvider(host, agent=HttpAgent(http=client, https=client), **kwargs)


class FakeBridge:
    """Records bridge calls and answers them with scripted responses.

    ``responses`` maps the full bridge method name to the raw value handed to
    the callback; a callable is invoked with the call arguments first.
    """

    def __init__(self, responses: Optional[Dict[str, Any]] = None, threaded: bool = False):
        self.responses = responses or {}
        self.threaded = threaded
        self.calls: List[tuple] = []

    def call(self, method: str, args: Dict[str, Any], callback) -> None:
        self.calls.append((method, args))
        response = self.responses.get(method)
        if callable(response):
            response = response(args)
        if self.threaded:
            threading.Thread(target=callback, args=(response,)).start()
        else:
            callback(response)


def bridge_result(result: Any) -> str:
    return json.dumps({"result": result})


@pytest.fixture
def fake_bridge():
    return FakeBridge()
