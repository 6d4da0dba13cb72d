"""JSON-RPC client layer for Ethereum-style nodes."""
from .config import ProviderSettings, create_provider
from .formatters import Formatters
from .jsonrpc import RpcPayload, RpcResponse, build_payload, parse_response
from .methods import MethodController
from .module import RpcModule, eth_module, personal_module
from .providers import BaseProvider, BridgeProvider, HttpAgent, HttpProvider, NativeBridge

__version__ = "1.0.0"

__all__ = [
    "ProviderSettings",
    "create_provider",
    "Formatters",
    "RpcPayload",
    "RpcResponse",
    "build_payload",
    "parse_response",
    "MethodController",
    "RpcModule",
    "eth_module",
    "personal_module",
    "BaseProvider",
    "BridgeProvider",
    "HttpAgent",
    "HttpProvider",
    "NativeBridge",
]
