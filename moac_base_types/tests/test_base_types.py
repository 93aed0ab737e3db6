"""
Test suite for `moac_base_types` module base types and conversions.
"""

from typing import Any, List

import pytest
from pydantic import ValidationError

from moac_exceptions import DecodeError, EncodeError

from ..base_types import HexNumber, Quantity, Wei
from ..constants import MOAC_1, moac1
from ..conversions import INT64_MAX, int_to_hex, parse_big_int, parse_int
from ..json import to_json
from ..pydantic import CamelModel


@pytest.mark.parametrize(
    "number, expected",
    [
        (0, "0x0"),
        (1, "0x1"),
        (255, "0xff"),
        (4096, "0x1000"),
        (INT64_MAX, "0x7fffffffffffffff"),
        (MOAC_1, "0xde0b6b3a7640000"),
    ],
)
def test_int_to_hex(number: int, expected: str):
    """Integers are encoded as lowercase `0x`-prefixed hex."""
    assert int_to_hex(number) == expected
    assert parse_big_int(expected) == number


def test_int_to_hex_negative():
    """Negative numbers have no wire representation."""
    with pytest.raises(EncodeError):
        int_to_hex(-1)


@pytest.mark.parametrize("number_type", [HexNumber, Quantity, Wei])
def test_hex_number_negative(number_type: type):
    """Printing a negative hex number reports the value as an encode error."""
    number = number_type(-5)
    with pytest.raises(EncodeError, match="negative number -5$"):
        str(number)
    with pytest.raises(EncodeError):
        number.hex()


@pytest.mark.parametrize("number", [0, 1, 21_000, 0xDEADBEEF, INT64_MAX])
def test_parse_int_round_trip(number: int):
    """Native integers survive encoding and decoding."""
    assert parse_int(int_to_hex(number)) == number


@pytest.mark.parametrize("number", [2**64, 2**255 + 7, 123 * MOAC_1])
def test_parse_big_int_does_not_truncate(number: int):
    """Big integers decode to the exact value."""
    assert parse_big_int(hex(number)) == number


def test_parse_int_uppercase():
    """Hex digits and prefix are case insensitive."""
    assert parse_int("0XFF") == 255


@pytest.mark.parametrize(
    "value",
    ["0xzz", "0x", "", "ff", "12", "0x1_0", " 0x10", "0x10 ", "-0x1", None, 16, 1.5, True],
)
def test_parse_malformed(value: Any):
    """Malformed quantities are rejected by both parsers."""
    with pytest.raises(DecodeError):
        parse_int(value)
    with pytest.raises(DecodeError):
        parse_big_int(value)


def test_parse_int_overflow():
    """Values beyond 64 bits fail the native parser but not the big one."""
    too_big = hex(INT64_MAX + 1)
    with pytest.raises(DecodeError):
        parse_int(too_big)
    assert parse_big_int(too_big) == INT64_MAX + 1


@pytest.mark.parametrize(
    "s, expected",
    [
        ("0", 0),
        ("0x10", 16),
        ("1 mc", 10**18),
        ("2 MOAC", 2 * 10**18),
        ("2.5 mc", 25 * 10**17),
        ("1 sha", 1),
        ("1 xiao", 10**9),
        ("1 gsha", 10**9),
        ("1 milli", 10**15),
        ("1e18", 10**18),
        ("123456789.123456789123456789 mc", 123456789123456789123456789),
    ],
)
def test_wei_parsing(s: str, expected: int):
    """Wei amounts accept hex or decimal values with an optional unit."""
    assert Wei(s) == expected


@pytest.mark.parametrize(
    "s", ["1 parsec", "0.5 sha", "a lot", "1 2 3", "-1 mc", "-5", "NaN", "inf mc"]
)
def test_wei_parsing_invalid(s: str):
    """Unknown units, negative amounts and fractional wei are rejected."""
    with pytest.raises(DecodeError):
        Wei(s)


def test_moac1():
    """One MOAC is 10^18 wei."""
    assert moac1() == MOAC_1 == 1_000_000_000_000_000_000


def test_hex_number_str():
    """Hex numbers print as hex."""
    assert str(HexNumber(26)) == "0x1a"
    assert str(Quantity(0)) == "0x0"


class SampleModel(CamelModel):
    """Model used to exercise the wire types."""

    block_number: Quantity = Quantity(0)
    gas_price: Wei = Wei(0)
    topics: List[str] = []
    note: str | None = None


def test_model_decodes_hex_fields():
    """Hex strings on the wire become integers."""
    model = SampleModel.model_validate(
        {"blockNumber": "0x1b4", "gasPrice": "0x4a817c800", "topics": ["0x01"]}
    )
    assert model.block_number == 436
    assert isinstance(model.block_number, Quantity)
    assert model.gas_price == 20_000_000_000


def test_model_null_members_keep_defaults():
    """`null` on the wire leaves the zero value in place."""
    model = SampleModel.model_validate({"blockNumber": None, "gasPrice": None, "topics": None})
    assert model.block_number == 0
    assert model.gas_price == 0
    assert model.topics == []


@pytest.mark.parametrize(
    "payload",
    [
        {"blockNumber": "0xzz"},
        {"blockNumber": "0x8000000000000000"},
        {"blockNumber": "436"},
        {"blockNumber": True},
        {"blockNumber": 2**70},
        {"blockNumber": INT64_MAX + 1},
        {"blockNumber": -5},
        {"gasPrice": -1},
        {"gasPrice": "20 gwei"},
    ],
)
def test_model_rejects_malformed_numbers(payload):
    """Malformed numbers fail validation instead of being coerced."""
    with pytest.raises(ValidationError):
        SampleModel.model_validate(payload)


def test_model_big_wei():
    """Wei fields are not bounded to 64 bits."""
    model = SampleModel.model_validate({"gasPrice": hex(2**80)})
    assert model.gas_price == 2**80


def test_model_integer_members():
    """JSON integers are range checked like hex strings."""
    model = SampleModel.model_validate({"blockNumber": INT64_MAX, "gasPrice": 2**80})
    assert model.block_number == INT64_MAX
    assert isinstance(model.block_number, Quantity)
    assert model.gas_price == 2**80
    assert str(model.block_number) == "0x7fffffffffffffff"


def test_to_json():
    """Models serialize by alias with hex numbers and no unset members."""
    model = SampleModel(block_number=436, gas_price=Wei("1 mc"))
    assert to_json(model) == {
        "blockNumber": "0x1b4",
        "gasPrice": "0xde0b6b3a7640000",
        "topics": [],
    }
    assert to_json([model, "latest", True]) == [to_json(model), "latest", True]
