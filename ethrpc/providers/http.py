"""HTTP(S) transport provider backed by httpx."""
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

import httpx

from ..jsonrpc.codec import parse_response, serialize_payload
from ..jsonrpc.models import RpcPayload, RpcResponse
from ..utils.errors import ConnectionTimeout, InvalidConnection, InvalidResponse
from .base import BaseProvider

logger = logging.getLogger(__name__)

DEFAULT_HOST = "http://localhost:8545"

HeadersOption = Union[Mapping[str, str], List[Dict[str, str]]]


@dataclass
class HttpAgent:
    """Caller-supplied clients that replace the provider's own keep-alive clients."""
    http: Optional[httpx.AsyncClient] = None
    https: Optional[httpx.AsyncClient] = None


def _normalize_headers(headers: Optional[HeadersOption]) -> Dict[str, str]:
    """Accept a mapping or a list of ``{"name": ..., "value": ...}`` entries."""
    if not headers:
        return {}
    if isinstance(headers, Mapping):
        pairs = list(headers.items())
    else:
        try:
            pairs = [(header["name"], header["value"]) for header in headers]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid header entries: {headers!r}") from e
    for name, value in pairs:
        if not isinstance(name, str) or not isinstance(value, str):
            raise ValueError(f"Header {name!r} must map a string name to a string value")
    return dict(pairs)


class HttpProvider(BaseProvider):
    """Sends JSON-RPC payloads as HTTP POST requests.

    ``connected`` tracks the outcome of the last completed exchange only:
    any HTTP response marks the provider connected, a timeout or a failure to
    send marks it disconnected.
    """

    def __init__(
        self,
        host: Optional[str] = None,
        timeout: float = 0,
        with_credentials: bool = False,
        headers: Optional[HeadersOption] = None,
        keep_alive: bool = True,
        agent: Optional[HttpAgent] = None,
    ):
        """Initialize the provider.

        Args:
            host: Node endpoint (default http://localhost:8545)
            timeout: Request timeout in seconds, 0 disables it
            with_credentials: Send cookies held by the client with each request
            headers: Extra request headers
            keep_alive: Reuse connections between requests
            agent: Explicit clients to use instead of creating one
        """
        super().__init__(host or DEFAULT_HOST)
        self.timeout = timeout
        self.with_credentials = with_credentials
        self.headers = _normalize_headers(headers)
        self.keep_alive = keep_alive
        self.agent = agent
        self.http_agent: Optional[httpx.AsyncClient] = None
        self.https_agent: Optional[httpx.AsyncClient] = None
        self._closed = False

        if not self.agent:
            if self.is_secure:
                self.https_agent = self._create_agent()
            else:
                self.http_agent = self._create_agent()
        logger.info(f"HTTP provider created for {self.host} (keep_alive={self.keep_alive})")

    @property
    def is_secure(self) -> bool:
        return self.host[:5].lower() == "https"

    def _create_agent(self) -> httpx.AsyncClient:
        limits = httpx.Limits(max_keepalive_connections=20 if self.keep_alive else 0)
        return httpx.AsyncClient(limits=limits)

    def _select_agent(self) -> httpx.AsyncClient:
        if self.agent:
            client = self.agent.https if self.is_secure else self.agent.http
        else:
            client = self.https_agent if self.is_secure else self.http_agent
        if client is None:
            self.connected = False
            raise InvalidConnection(self.host)
        return client

    def _prepare_request(self, client: httpx.AsyncClient, payload: RpcPayload) -> httpx.Request:
        headers = {"Content-Type": "application/json"}
        headers.update(self.headers)
        request = client.build_request(
            "POST",
            self.host,
            content=serialize_payload(payload),
            headers=headers,
            timeout=self.timeout or None
        )
        if not self.with_credentials:
            request.headers.pop("Cookie", None)
        return request

    async def _exchange(self, payload: RpcPayload) -> RpcResponse:
        logger.debug(f"POST {self.host} {payload.method} (id={payload.id})")
        try:
            client = self._select_agent()
            request = self._prepare_request(client, payload)
            response = await client.send(request)
        except httpx.TimeoutException as e:
            self.connected = False
            raise ConnectionTimeout(self.timeout) from e
        except (httpx.HTTPError, httpx.InvalidURL, OSError, RuntimeError) as e:
            self.connected = False
            raise InvalidConnection(self.host) from e

        self.connected = True
        body = response.text
        try:
            data = json.loads(body)
        except ValueError as e:
            raise InvalidResponse(body) from e
        return parse_response(data)

    async def disconnect(self) -> None:
        """Close the clients this provider created; supplied agents are left open."""
        if self._closed:
            return
        self._closed = True
        for client in (self.http_agent, self.https_agent):
            if client is not None:
                await client.aclose()
        logger.info(f"HTTP provider for {self.host} disconnected")
