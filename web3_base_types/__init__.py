"""
Common definitions and types.
"""

from .base_types import (
    Address,
    Data,
    DecodeMode,
    FixedSizeBytes,
    Hash,
    Quantity,
    WireFlag,
    WireList,
    WireSchema,
    wire_fallback,
)
from .conversions import (
    hex_to_bytes,
    parse_quantity,
    to_bytes,
    to_fixed_size_bytes,
    to_hex,
    to_quantity,
)
from .json import to_json
from .pydantic import CamelModel, WireModel

__all__ = (
    "Address",
    "CamelModel",
    "Data",
    "DecodeMode",
    "FixedSizeBytes",
    "Hash",
    "Quantity",
    "WireFlag",
    "WireList",
    "WireModel",
    "WireSchema",
    "hex_to_bytes",
    "parse_quantity",
    "to_bytes",
    "to_fixed_size_bytes",
    "to_hex",
    "to_json",
    "to_quantity",
    "wire_fallback",
)
