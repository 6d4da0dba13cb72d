"""Block-scoped method models."""
from typing import Any

from .base import AbstractMethodModel, BlockIdentifierMethodModel


class GetBlockNumberMethodModel(AbstractMethodModel):
    rpc_method_default = "eth_blockNumber"
    parameters_amount = 0

    def after_execution(self, response: Any) -> int:
        return self.formatters.hex_to_number(response)


class GetBlockMethodModel(BlockIdentifierMethodModel):
    """Block by number or hash; the second argument requests full transactions."""

    number_method = "eth_getBlockByNumber"
    hash_method = "eth_getBlockByHash"
    parameters_amount = 2

    def format_remaining_parameters(self) -> None:
        self._parameters[1] = bool(self._parameters[1])

    def after_execution(self, response: Any) -> Any:
        return self.formatters.output_block_formatter(response)


class GetBlockTransactionCountMethodModel(BlockIdentifierMethodModel):
    number_method = "eth_getBlockTransactionCountByNumber"
    hash_method = "eth_getBlockTransactionCountByHash"
    parameters_amount = 1

    def after_execution(self, response: Any) -> int:
        return self.formatters.hex_to_number(response)


class GetBlockUncleCountMethodModel(BlockIdentifierMethodModel):
    number_method = "eth_getUncleCountByBlockNumber"
    hash_method = "eth_getUncleCountByBlockHash"
    parameters_amount = 1

    def after_execution(self, response: Any) -> int:
        return self.formatters.hex_to_number(response)


class GetUncleMethodModel(BlockIdentifierMethodModel):
    number_method = "eth_getUncleByBlockNumberAndIndex"
    hash_method = "eth_getUncleByBlockHashAndIndex"
    parameters_amount = 2

    def format_remaining_parameters(self) -> None:
        self._parameters[1] = self.formatters.to_hex_index(self._parameters[1])

    def after_execution(self, response: Any) -> Any:
        return self.formatters.output_block_formatter(response)


class GetTransactionFromBlockMethodModel(BlockIdentifierMethodModel):
    number_method = "eth_getTransactionByBlockNumberAndIndex"
    hash_method = "eth_getTransactionByBlockHashAndIndex"
    parameters_amount = 2

    def format_remaining_parameters(self) -> None:
        self._parameters[1] = self.formatters.to_hex_index(self._parameters[1])

    def after_execution(self, response: Any) -> Any:
        return self.formatters.output_transaction_formatter(response)
