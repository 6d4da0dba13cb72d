"""Transport provider contract shared by every channel."""
import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence, Set

from ..jsonrpc.codec import IdSequence, build_payload
from ..jsonrpc.models import RpcPayload, RpcResponse
from ..utils.errors import EthRpcError, NodeError

logger = logging.getLogger(__name__)

SendCallback = Callable[[Optional[Exception], Optional[RpcResponse]], None]


class BaseProvider(ABC):
    """Uniform request/response contract over a concrete channel.

    Subclasses implement :meth:`_exchange`; everything callers rely on
    (asynchronous callbacks, the in-flight id set, ``request``) lives here.
    """

    def __init__(self, host: str = ""):
        self.host = host
        self.connected = False
        self.id_sequence = IdSequence()
        self.pending: Set[int] = set()

    @abstractmethod
    async def _exchange(self, payload: RpcPayload) -> RpcResponse:
        """Perform one exchange, raising an EthRpcError on failure."""

    def send(self, payload: RpcPayload, callback: SendCallback) -> "asyncio.Task[None]":
        """Schedule the exchange and report its outcome to ``callback``.

        The callback runs exactly once, from the event loop, after this method
        has returned: ``callback(error, None)`` or ``callback(None, response)``.

        Raises:
            ValueError: If a request with the same id is already in flight
        """
        if payload.id in self.pending:
            raise ValueError(f"Request id {payload.id} is already in flight on {self!r}")
        self.pending.add(payload.id)
        loop = asyncio.get_running_loop()
        return loop.create_task(self._complete(payload, callback))

    async def _complete(self, payload: RpcPayload, callback: SendCallback) -> None:
        error: Optional[Exception] = None
        response: Optional[RpcResponse] = None
        try:
            response = await self._exchange(payload)
        except EthRpcError as e:
            logger.warning(f"{payload.method} (id={payload.id}) failed: {e}")
            error = e
        except Exception as e:
            logger.error(f"Unexpected error sending {payload.method} (id={payload.id}): {e}", exc_info=True)
            error = e
        finally:
            self.pending.discard(payload.id)
        callback(error, response)

    async def dispatch(self, payload: RpcPayload) -> RpcResponse:
        """Send ``payload`` and wait for its response envelope."""
        loop = asyncio.get_running_loop()
        future: "asyncio.Future[RpcResponse]" = loop.create_future()

        def callback(error: Optional[Exception], response: Optional[RpcResponse]) -> None:
            if future.done():
                return
            if error is not None:
                future.set_exception(error)
            else:
                future.set_result(response)

        self.send(payload, callback)
        return await future

    async def request(self, method: str, params: Optional[Sequence[Any]] = None) -> Any:
        """Call ``method`` and return the ``result`` of its response.

        Raises:
            NodeError: If the node answered with an error object
        """
        payload = build_payload(method, params, self.id_sequence)
        response = await self.dispatch(payload)
        if response.error is not None:
            raise NodeError(response.error.code, response.error.message, response.error.data)
        return response.result

    async def disconnect(self) -> None:
        """Release transport resources. Safe to call repeatedly."""
        pass

    def supports_subscriptions(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(host={self.host!r}, connected={self.connected})"
