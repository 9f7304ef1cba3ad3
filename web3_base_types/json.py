"""
JSON encoding of web3 types.
"""

from typing import Any

from .base_types import Data, Quantity
from .pydantic import Web3BaseModel


def to_json(input: Any) -> Any:
    """
    Converts a model, value type or container of them to its json data
    representation, using the wire field names.

    Other JSON values (numbers, booleans, strings, `None`) are returned as is,
    so the result can be used directly as JSON-RPC parameters.
    """
    if isinstance(input, (list, tuple)):
        return [to_json(item) for item in input]
    elif isinstance(input, dict):
        return {key: to_json(value) for key, value in input.items()}
    elif isinstance(input, Web3BaseModel):
        return input.serialize(mode="json", by_alias=True)
    elif isinstance(input, (Data, Quantity)):
        return str(input)
    else:
        return input
