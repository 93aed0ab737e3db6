"""
Common definitions and types.
"""

from .base_types import HexNumber, Number, Quantity, Wei
from .constants import MOAC_1, moac1
from .conversions import int_to_hex, parse_big_int, parse_int, to_hex, to_number
from .json import to_json
from .pydantic import CamelModel, MoacBaseModel

__all__ = (
    "CamelModel",
    "HexNumber",
    "MOAC_1",
    "MoacBaseModel",
    "Number",
    "Quantity",
    "Wei",
    "int_to_hex",
    "moac1",
    "parse_big_int",
    "parse_int",
    "to_hex",
    "to_json",
    "to_number",
)
