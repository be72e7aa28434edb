"""
Canonical hex encoding for verifier calldata.

Every scalar handed to the rollup verifier contract is a 256-bit big-endian
unsigned integer written as ``0x`` followed by 64 lowercase hex digits.
"""

import math
import re
from decimal import Decimal
from numbers import Integral
from typing import Any

from hexbytes import HexBytes
from web3 import Web3

UINT256_HEX_DIGITS = 64

# ASCII digits only: no underscores, no Unicode digits
_DECIMAL_PATTERN = re.compile(r"[+-]?[0-9]+")
_HEX_PATTERN = re.compile(r"-?0[xX][0-9a-fA-F]+")


class ConversionError(ValueError):
    """Raised when a value cannot be read as a non-negative integer."""


def to_big_int(value: Any) -> int:
    """
    Convert a numeric value into a Python int.

    Accepts ints, integral floats and Decimals, decimal or ``0x`` hex strings,
    and bytes (big-endian, as returned by web3 for ``bytes32`` fields).

    Args:
        value: Value to convert

    Returns:
        The integer value

    Raises:
        ConversionError: If the value is fractional, non-numeric or empty
    """
    match value:
        case Integral():
            return int(value)
        case HexBytes() | bytes() | bytearray():
            return Web3.to_int(primitive=bytes(value))
        case float() | Decimal():
            if not math.isfinite(value) or value != int(value):
                raise ConversionError(f"Cannot convert non-integral value {value!r} to an integer")
            return int(value)
        case str():
            text = value.strip()
            if not text:
                raise ConversionError("Cannot convert an empty string to an integer")
            if _HEX_PATTERN.fullmatch(text):
                return Web3.to_int(hexstr=text)
            if _DECIMAL_PATTERN.fullmatch(text):
                return int(text, 10)
            raise ConversionError(f"Cannot convert {value!r} to an integer")
        case _:
            raise ConversionError(f"Cannot convert {type(value).__name__} to an integer")


def pad256(value: Any) -> str:
    """
    Encode a value as a zero-padded ``0x`` prefixed 256-bit hex string.

    Values wider than 256 bits are not truncated, the result is simply
    longer than 66 characters.

    Raises:
        ConversionError: If the value is not a non-negative integer
    """
    number = to_big_int(value)
    if number < 0:
        raise ConversionError(f"Cannot encode negative value {number} as uint256")
    return "0x" + format(number, "x").zfill(UINT256_HEX_DIGITS)


def to_unprefixed_hex(value: Any) -> str:
    """Hex digits of a non-negative value with no ``0x`` prefix and no padding."""
    number = to_big_int(value)
    if number < 0:
        raise ConversionError(f"Cannot encode negative value {number} as hex")
    return format(number, "x")
