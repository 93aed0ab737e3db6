"""
JSON encoding for values sent as RPC parameters.
"""

from typing import Any

from .pydantic import MoacBaseModel


def to_json(input: Any) -> Any:
    """
    Converts a parameter to its json data representation.

    Models are serialized by alias without their unset members, lists are converted
    item by item and every other value is returned unchanged.
    """
    if isinstance(input, list):
        return [to_json(item) for item in input]
    elif isinstance(input, MoacBaseModel):
        return input.serialize(mode="json", by_alias=True)
    else:
        return input
