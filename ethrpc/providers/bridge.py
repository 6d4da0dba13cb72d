"""Transport provider that forwards calls to a host application bridge."""
import asyncio
import json
import logging
from typing import Any, Callable, Dict, List, Optional, Protocol, runtime_checkable

from ..jsonrpc.codec import build_payload, success_envelope
from ..jsonrpc.models import RpcPayload, RpcResponse
from ..utils.errors import BridgeError, TransportError
from .base import BaseProvider

logger = logging.getLogger(__name__)

BridgeCallback = Callable[[Optional[str]], None]

NO_RESPONSE_MESSAGE = "there is no response from callback"


@runtime_checkable
class NativeBridge(Protocol):
    """Opaque call/response channel into the host application.

    ``call`` receives ``"<namespace>.<action>"`` and ``{name, id, object}``
    and later invokes ``callback`` with a JSON string, or with None when the
    host has nothing to say. The callback may fire on any thread.
    """

    def call(self, method: str, args: Dict[str, Any], callback: BridgeCallback) -> None:
        ...


def _param(payload: RpcPayload, index: int) -> Any:
    return payload.params[index] if len(payload.params) > index else None


class BridgeProvider(BaseProvider):
    """Routes wallet methods to a native bridge and everything else to a fallback.

    Account and chain queries are answered from locally cached state; the
    account cache is filled by ``eth_requestAccounts`` or :meth:`set_config`.
    """

    def __init__(
        self,
        bridge: NativeBridge,
        fallback: Optional[BaseProvider] = None,
        namespace: str = "eth",
        address: Optional[str] = None,
        chain_id: Optional[Any] = None,
    ):
        super().__init__(fallback.host if fallback else f"bridge:{namespace}")
        self.bridge = bridge
        self.fallback = fallback
        self.namespace = namespace
        self.address = address
        self.chain_id = chain_id
        self.ready = bool(address)

        # JSON-RPC method -> (bridge action, builder for the bridge argument object)
        self._bridge_methods: Dict[str, tuple] = {
            "eth_requestAccounts": ("requestAccounts", lambda p: {}),
            "eth_sign": ("signMessage", lambda p: {"data": _param(p, 1)}),
            "personal_sign": ("signPersonalMessage", lambda p: {"data": _param(p, 0)}),
            "personal_ecRecover": (
                "ecRecover",
                lambda p: {"signature": _param(p, 1), "message": _param(p, 0)}
            ),
            "eth_signTypedData": ("signTypedMessage", lambda p: {"data": _param(p, 1)}),
            "eth_signTypedData_v3": ("signTypedMessage", lambda p: {"data": _param(p, 1)}),
            "eth_sendTransaction": ("signTransaction", lambda p: _param(p, 0)),
        }
        # JSON-RPC method -> locally cached answer
        self._local_methods: Dict[str, Callable[[], Any]] = {
            "isConnected": lambda: True,
            "eth_accounts": lambda: [self.address] if self.address else [],
            "eth_coinbase": lambda: self.address,
            "net_version": lambda: self.chain_id,
            "eth_chainId": lambda: self.chain_id,
        }
        logger.info(
            f"Bridge provider created (namespace={namespace}, "
            f"fallback={fallback.host if fallback else None})"
        )

    def set_config(self, address: Optional[str] = None, chain_id: Optional[Any] = None) -> None:
        self.address = address
        self.chain_id = chain_id

    def set_address(self, address: Optional[str]) -> None:
        self.address = address
        self.ready = bool(address)

    async def enable(self) -> List[str]:
        """Ask the host application for account access."""
        return await self.request("eth_requestAccounts", [])

    async def _exchange(self, payload: RpcPayload) -> RpcResponse:
        local = self._local_methods.get(payload.method)
        if local is not None:
            return success_envelope(payload.id, local())

        routed = self._bridge_methods.get(payload.method)
        if routed is not None:
            action, build_args = routed
            return await self._call_native(action, payload.id, build_args(payload))

        return await self._forward(payload)

    async def _call_native(self, action: str, request_id: int, params: Any) -> RpcResponse:
        method_name = f"{self.namespace}.{action}"
        loop = asyncio.get_running_loop()
        future: "asyncio.Future[Optional[str]]" = loop.create_future()

        def resolve(raw: Optional[str]) -> None:
            if not future.done():
                future.set_result(raw)

        def on_response(raw: Optional[str] = None) -> None:
            loop.call_soon_threadsafe(resolve, raw)

        logger.debug(f"Bridge call {method_name} (id={request_id})")
        try:
            self.bridge.call(method_name, {"name": action, "id": request_id, "object": params}, on_response)
        except Exception as e:
            self.connected = False
            logger.error(f"Bridge call {method_name} raised: {e}", exc_info=True)
            raise BridgeError(f"bridge call {method_name} failed: {e}") from e

        raw = await future
        if not raw:
            self.connected = False
            raise BridgeError(NO_RESPONSE_MESSAGE)

        self.connected = True
        result = self._decode_bridge_response(method_name, raw)
        if action == "requestAccounts":
            self.address = self._first_account(method_name, raw, result)
        return success_envelope(request_id, result)

    def _decode_bridge_response(self, method_name: str, raw: Any) -> Any:
        if isinstance(raw, (bytes, bytearray)):
            raw = raw.decode("utf-8", errors="replace")
        if not isinstance(raw, str):
            raise BridgeError(f"{method_name} returned a non-string response: {raw!r}")
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise BridgeError(f"{method_name} returned invalid JSON: {raw!r}") from e
        if not isinstance(data, dict) or "result" not in data:
            raise BridgeError(f"{method_name} response has no result: {raw!r}")
        return data["result"]

    def _first_account(self, method_name: str, raw: str, result: Any) -> Optional[str]:
        if result is None:
            return None
        if not isinstance(result, list) or (result and not isinstance(result[0], str)):
            raise BridgeError(f"{method_name} returned invalid accounts: {raw!r}")
        return result[0] if result else None

    async def _forward(self, payload: RpcPayload) -> RpcResponse:
        if self.fallback is None:
            raise BridgeError(f"No fallback provider configured for method {payload.method}")
        # The fallback draws ids from its own sequence; answer with ours.
        forwarded = build_payload(payload.method, payload.params, self.fallback.id_sequence)
        try:
            response = await self.fallback.dispatch(forwarded)
        except TransportError:
            self.connected = False
            raise
        self.connected = True
        return response.model_copy(update={"id": payload.id})

    async def disconnect(self) -> None:
        if self.fallback is not None:
            await self.fallback.disconnect()
