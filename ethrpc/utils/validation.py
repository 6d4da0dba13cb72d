"""Input validation utilities."""
import re
from typing import Any

HEX_STRICT = re.compile(r"^-?0x[0-9a-fA-F]*$")
BLOCK_HASH = re.compile(r"^0x[0-9a-fA-F]{64}$")
ADDRESS = re.compile(r"^(0x)?[0-9a-fA-F]{40}$")
DECIMAL = re.compile(r"^[0-9]+$")

PREDEFINED_BLOCK_NUMBERS = frozenset({"latest", "pending", "earliest", "safe", "finalized"})


def is_hex_strict(value: Any) -> bool:
    """Validate a 0x-prefixed hex string."""
    return isinstance(value, str) and bool(HEX_STRICT.match(value))


def is_block_hash(value: Any) -> bool:
    """Validate a 32-byte, 0x-prefixed hash."""
    return isinstance(value, str) and bool(BLOCK_HASH.match(value))


def is_address(value: Any) -> bool:
    """Validate a 20-byte address, with or without the 0x prefix."""
    return isinstance(value, str) and bool(ADDRESS.match(value))


def is_decimal_string(value: Any) -> bool:
    return isinstance(value, str) and bool(DECIMAL.match(value))


def is_predefined_block_number(value: Any) -> bool:
    """Check for a symbolic block tag such as "latest"."""
    return isinstance(value, str) and value in PREDEFINED_BLOCK_NUMBERS
