"""RPC module: named method models bound to an injected provider."""
import logging
import re
from typing import Any, Dict, List, Optional, Type

from .formatters import Formatters, formatters as default_formatters
from .methods import ETH_METHOD_MODELS, PERSONAL_METHOD_MODELS
from .methods.base import AbstractMethodModel
from .methods.controller import MethodController
from .providers.base import BaseProvider

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"_([a-z])")


def _to_camel(name: str) -> str:
    return _CAMEL_BOUNDARY.sub(lambda m: m.group(1).upper(), name)


class RpcModule:
    """Exposes method models by name over one provider.

    Usage:
        eth = RpcModule(HttpProvider("http://localhost:8545"), ETH_METHOD_MODELS)
        count = await eth.call("getBlockUncleCount", "latest")
        count = await eth.get_block_uncle_count("latest")
    """

    def __init__(
        self,
        provider: BaseProvider,
        method_models: Optional[Dict[str, Type[AbstractMethodModel]]] = None,
        formatters: Optional[Formatters] = None,
        controller: Optional[MethodController] = None,
    ):
        self.provider = provider
        self.formatters = formatters or default_formatters
        self.controller = controller or MethodController()
        self.method_models: Dict[str, Type[AbstractMethodModel]] = {}
        for name, model_class in (method_models or {}).items():
            self.register_method(name, model_class)

    def register_method(self, name: str, model_class: Type[AbstractMethodModel]) -> None:
        """Register a method model class under ``name``."""
        self.method_models[name] = model_class
        logger.info(f"Registered method model: {name} -> {model_class.rpc_method_default}")

    def list_methods(self) -> List[str]:
        return list(self.method_models)

    def set_provider(self, provider: BaseProvider) -> None:
        self.provider = provider

    def create_method_model(self, name: str, *parameters: Any) -> AbstractMethodModel:
        if name not in self.method_models:
            raise ValueError(f"Method not found: {name}")
        return self.method_models[name](self.formatters, list(parameters))

    async def call(self, name: str, *parameters: Any) -> Any:
        """Execute the method registered as ``name``."""
        model = self.create_method_model(name, *parameters)
        return await self.controller.execute(model, self.provider, self)

    def __getattr__(self, attribute: str):
        if attribute.startswith("_"):
            raise AttributeError(attribute)
        name = _to_camel(attribute)
        if name not in self.__dict__.get("method_models", {}):
            raise AttributeError(f"{type(self).__name__} has no method {attribute!r}")

        async def method(*parameters: Any) -> Any:
            return await self.call(name, *parameters)

        method.__name__ = attribute
        return method


def eth_module(provider: BaseProvider, formatters: Optional[Formatters] = None) -> RpcModule:
    return RpcModule(provider, ETH_METHOD_MODELS, formatters)


def personal_module(provider: BaseProvider, formatters: Optional[Formatters] = None) -> RpcModule:
    return RpcModule(provider, PERSONAL_METHOD_MODELS, formatters)
