"""Common conversion methods."""

from re import compile as re_compile
from typing import Any, SupportsBytes, TypeAlias

from moac_exceptions import DecodeError, EncodeError

NumberConvertible: TypeAlias = str | bytes | SupportsBytes | int

INT64_MAX = 2**63 - 1

HEX_QUANTITY = re_compile(r"0[xX][0-9a-fA-F]+")


def int_to_hex(number: int) -> str:
    """Encode a non-negative integer as a `0x`-prefixed lowercase hex string."""
    if number < 0:
        raise EncodeError(f"cannot hex-encode negative number {int(number)}")
    return hex(number)


def parse_big_int(value: Any) -> int:
    """Decode a `0x`-prefixed hex string into an arbitrary-precision integer."""
    if not isinstance(value, str) or HEX_QUANTITY.fullmatch(value) is None:
        raise DecodeError(f"invalid hex quantity {value!r}")
    return int(value[2:], 16)


def parse_int(value: Any) -> int:
    """
    Decode a `0x`-prefixed hex string into a native integer.

    Values that do not fit in a signed 64-bit integer are rejected instead of being
    truncated.
    """
    number = parse_big_int(value)
    if number > INT64_MAX:
        raise DecodeError(f"hex quantity {value!r} overflows a 64-bit integer")
    return number


def to_number(input_number: NumberConvertible) -> int:
    """Convert multiple types into a number."""
    if isinstance(input_number, int):
        return input_number
    if isinstance(input_number, str):
        return parse_big_int(input_number)
    if isinstance(input_number, bytes) or isinstance(input_number, SupportsBytes):
        return int.from_bytes(input_number, byteorder="big")
    raise DecodeError(f"invalid type for `number`: {type(input_number).__name__}")


def to_hex(input_bytes: bytes) -> str:
    """Convert bytes into a `0x`-prefixed hex string."""
    return "0x" + bytes(input_bytes).hex()
