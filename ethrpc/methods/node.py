"""Node and account method models."""
from typing import Any, List, Optional

from .base import AbstractMethodModel


class GetChainIdMethodModel(AbstractMethodModel):
    rpc_method_default = "eth_chainId"

    def after_execution(self, response: Any) -> int:
        return self.formatters.hex_to_number(response)


class VersionMethodModel(AbstractMethodModel):
    """Network id; nodes answer with a decimal string."""

    rpc_method_default = "net_version"

    def after_execution(self, response: Any) -> int:
        return self.formatters.hex_to_number(response)


class GetAccountsMethodModel(AbstractMethodModel):
    rpc_method_default = "eth_accounts"

    def after_execution(self, response: Any) -> List[str]:
        return [self.formatters.output_address_formatter(address) for address in response or []]


class RequestAccountsMethodModel(GetAccountsMethodModel):
    rpc_method_default = "eth_requestAccounts"


class GetCoinbaseMethodModel(AbstractMethodModel):
    rpc_method_default = "eth_coinbase"

    def after_execution(self, response: Any) -> Optional[str]:
        return self.formatters.output_address_formatter(response)
