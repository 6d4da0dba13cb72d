"""Default formatting service for method model parameters and results.

Method models receive a formatting service at construction time and call its
operations by name. Every operation is a pure function of its argument and
raises :class:`FormatError` when the value has the wrong shape.
"""
from typing import Any, Dict, Optional

from .utils.errors import FormatError
from .utils.validation import (
    is_address,
    is_decimal_string,
    is_hex_strict,
    is_predefined_block_number,
)

# Transaction fields sent as hex quantities
TRANSACTION_QUANTITY_FIELDS = (
    "gas",
    "gasPrice",
    "value",
    "nonce",
    "chainId",
    "maxFeePerGas",
    "maxPriorityFeePerGas",
)

# Block fields returned as hex quantities
BLOCK_QUANTITY_FIELDS = (
    "gasLimit",
    "gasUsed",
    "size",
    "timestamp",
    "number",
    "difficulty",
    "totalDifficulty",
    "baseFeePerGas",
)

# Transaction fields returned as hex quantities
OUTPUT_TRANSACTION_QUANTITY_FIELDS = (
    "blockNumber",
    "transactionIndex",
    "nonce",
    "gas",
    "gasPrice",
    "value",
    "maxFeePerGas",
    "maxPriorityFeePerGas",
    "chainId",
)


class Formatters:
    """Named formatting operations used by method models."""

    def hex_to_number(self, value: Any) -> int:
        """Convert a hex quantity to an integer."""
        if isinstance(value, bool):
            raise FormatError(f"Given value \"{value}\" is not a number.")
        if isinstance(value, int):
            return value
        if is_hex_strict(value) and value not in ("0x", "-0x"):
            return int(value, 16)
        if is_decimal_string(value):
            return int(value)
        raise FormatError(f"Given value \"{value}\" is not a valid hex string.")

    def number_to_hex(self, value: Any) -> str:
        """Convert an integer, decimal string or hex string to a hex quantity."""
        if isinstance(value, bool) or value is None:
            raise FormatError(f"Given input \"{value}\" is not a number.")
        if isinstance(value, str):
            if is_hex_strict(value):
                value = self.hex_to_number(value)
            elif is_decimal_string(value):
                value = int(value)
            else:
                raise FormatError(f"Given input \"{value}\" is not a number.")
        if not isinstance(value, int):
            raise FormatError(f"Given input \"{value}\" is not a number.")
        return hex(value)

    def to_hex_index(self, value: Any) -> str:
        """Format a block or transaction index."""
        if is_hex_strict(value):
            return value.lower()
        return self.number_to_hex(value)

    def input_block_number_formatter(self, block_number: Any) -> Optional[str]:
        """Normalize a block reference to its wire form.

        Symbolic tags pass through, hex strings (numbers or hashes) are
        lowercased, and integers or decimal strings become hex quantities.
        """
        if block_number is None:
            return None
        if is_predefined_block_number(block_number):
            return block_number
        if is_hex_strict(block_number):
            return block_number.lower()
        try:
            return self.number_to_hex(block_number)
        except FormatError as e:
            raise FormatError(f"Given block identifier \"{block_number}\" is invalid.") from e

    def input_address_formatter(self, address: Any) -> str:
        if not is_address(address):
            raise FormatError(
                f"Provided address \"{address}\" is invalid, the capitalization "
                "checksum test failed, or its an indirect IBAN address which can't be converted."
            )
        address = address.lower()
        return address if address.startswith("0x") else "0x" + address

    def output_address_formatter(self, address: Any) -> Optional[str]:
        if address is None:
            return None
        return self.input_address_formatter(address)

    def input_sign_formatter(self, data: Any) -> str:
        """Hex-encode data to be signed, leaving hex strings untouched."""
        if is_hex_strict(data):
            return data
        if not isinstance(data, str):
            raise FormatError(f"Data to sign must be a string, got {type(data).__name__}.")
        return "0x" + data.encode("utf-8").hex()

    def input_transaction_formatter(self, transaction: Any) -> Dict[str, Any]:
        if not isinstance(transaction, dict):
            raise FormatError(f"The transaction must be an object, got {transaction!r}.")
        if "from" not in transaction:
            raise FormatError("The send transactions \"from\" field must be defined!")

        formatted = dict(transaction)
        formatted["from"] = self.input_address_formatter(formatted["from"])
        if formatted.get("to") is not None:
            formatted["to"] = self.input_address_formatter(formatted["to"])
        if "gasLimit" in formatted and "gas" not in formatted:
            formatted["gas"] = formatted.pop("gasLimit")
        for field in TRANSACTION_QUANTITY_FIELDS:
            if formatted.get(field) is not None:
                formatted[field] = self.number_to_hex(formatted[field])
        return formatted

    def output_transaction_formatter(self, transaction: Any) -> Optional[Dict[str, Any]]:
        if transaction is None:
            return None
        if not isinstance(transaction, dict):
            raise FormatError(f"The transaction must be an object, got {transaction!r}.")

        formatted = dict(transaction)
        for field in OUTPUT_TRANSACTION_QUANTITY_FIELDS:
            if formatted.get(field) is not None:
                formatted[field] = self.hex_to_number(formatted[field])
        for field in ("from", "to"):
            if formatted.get(field) is not None:
                formatted[field] = self.output_address_formatter(formatted[field])
        return formatted

    def output_block_formatter(self, block: Any) -> Optional[Dict[str, Any]]:
        if block is None:
            return None
        if not isinstance(block, dict):
            raise FormatError(f"The block must be an object, got {block!r}.")

        formatted = dict(block)
        for field in BLOCK_QUANTITY_FIELDS:
            if formatted.get(field) is not None:
                formatted[field] = self.hex_to_number(formatted[field])
        if formatted.get("miner") is not None:
            formatted["miner"] = self.output_address_formatter(formatted["miner"])
        if isinstance(formatted.get("transactions"), list):
            formatted["transactions"] = [
                self.output_transaction_formatter(tx) if isinstance(tx, dict) else tx
                for tx in formatted["transactions"]
            ]
        return formatted


formatters = Formatters()
