"""Exceptions raised by the web3 bindings."""

from .exceptions import (
    DecodeError,
    LengthMismatchError,
    MalformedHexError,
    NumericDecodeError,
    RPCError,
    TransportError,
    Web3Exception,
)

__all__ = [
    "DecodeError",
    "LengthMismatchError",
    "MalformedHexError",
    "NumericDecodeError",
    "RPCError",
    "TransportError",
    "Web3Exception",
]
