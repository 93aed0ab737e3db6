"""Basic type primitives used to define other types."""

from decimal import Decimal, InvalidOperation
from typing import Any, Type, TypeVar

from pydantic import GetCoreSchemaHandler
from pydantic_core.core_schema import (
    PlainValidatorFunctionSchema,
    no_info_plain_validator_function,
    to_string_ser_schema,
)

from moac_exceptions import DecodeError

from .conversions import NumberConvertible, int_to_hex, parse_big_int, parse_int, to_number

N = TypeVar("N", bound="Number")


class ToStringSchema:
    """
    Type converter to add a simple pydantic schema that correctly
    parses and serializes the type.
    """

    @staticmethod
    def __get_pydantic_core_schema__(
        source_type: Any, handler: GetCoreSchemaHandler
    ) -> PlainValidatorFunctionSchema:
        """Validate with the class wire parser and serialize with `str`."""
        return no_info_plain_validator_function(
            source_type.from_wire,
            serialization=to_string_ser_schema(),
        )


class Number(int, ToStringSchema):
    """Class that helps represent numbers decoded from node responses."""

    def __new__(cls, input_number: NumberConvertible | N):
        """Create a new Number object."""
        return super(Number, cls).__new__(cls, to_number(input_number))

    def __str__(self) -> str:
        """Return the string representation of the number."""
        return str(int(self))

    def hex(self) -> str:
        """Return the hexadecimal representation of the number."""
        return int_to_hex(self)

    @staticmethod
    def parse(value: str) -> int:
        """Parse the wire representation of the number."""
        return parse_big_int(value)

    @classmethod
    def from_wire(cls: Type[N], value: Any) -> N:
        """
        Convert a JSON value into the number.

        Strings must be `0x`-prefixed hex quantities. Integers go through the same range
        checks and must not be negative.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            if value < 0:
                raise DecodeError(f"expected non-negative quantity, got {int(value)}")
            return cls(cls.parse(hex(value)))
        if isinstance(value, str):
            return cls(cls.parse(value))
        raise DecodeError(f"expected hex quantity, got {value!r}")


class HexNumber(Number):
    """Class that helps represent hexadecimal numbers on the wire."""

    def __str__(self) -> str:
        """Return the string representation of the number."""
        return self.hex()


class Quantity(HexNumber):
    """Hex quantity that must fit in a native signed 64-bit integer."""

    @staticmethod
    def parse(value: str) -> int:
        """Parse the wire representation of the number."""
        return parse_int(value)


class Wei(HexNumber):
    """Arbitrary-precision amount of wei, parsed from hex or from `<value> <unit>` strings."""

    def __new__(cls, input_number: NumberConvertible | N):
        """Create a new Wei object."""
        if isinstance(input_number, str) and not input_number.lower().startswith("0x"):
            words = input_number.split()
            if not words or len(words) > 2:
                raise DecodeError(f"invalid wei amount {input_number!r}")
            multiplier = 1
            if len(words) > 1:
                multiplier = cls._get_multiplier(words[1].lower())
            try:
                value = Decimal(words[0]) * multiplier
            except InvalidOperation as e:
                raise DecodeError(f"invalid wei amount {input_number!r}") from e
            if not value.is_finite() or value < 0:
                raise DecodeError(f"invalid wei amount {input_number!r}")
            if value != value.to_integral_value():
                raise DecodeError(f"wei amount {input_number!r} is not a whole number of wei")
            return super(Number, cls).__new__(cls, int(value))
        return super(Wei, cls).__new__(cls, input_number)

    @staticmethod
    def _get_multiplier(unit: str) -> int:
        """Return the multiplier for the given unit of wei, handling synonyms."""
        match unit:
            case "wei" | "sha":
                return 1
            case "kwei" | "ksha":
                return 10**3
            case "mwei" | "msha":
                return 10**6
            case "gwei" | "gsha" | "xiao":
                return 10**9
            case "micro":
                return 10**12
            case "milli":
                return 10**15
            case "mc" | "moac":
                return 10**18
            case _:
                raise DecodeError(f"Invalid unit {unit}")
