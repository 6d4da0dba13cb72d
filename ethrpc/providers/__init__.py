"""Transport providers."""
from .base import BaseProvider, SendCallback
from .http import HttpAgent, HttpProvider
from .bridge import BridgeProvider, NativeBridge

__all__ = [
    "BaseProvider",
    "SendCallback",
    "HttpAgent",
    "HttpProvider",
    "BridgeProvider",
    "NativeBridge",
]
