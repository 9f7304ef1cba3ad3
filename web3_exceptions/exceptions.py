"""
Error types raised while decoding node responses and talking to providers.
"""

from typing import Any


class Web3Exception(Exception):
    """
    Base class for all exceptions _expected_ to be thrown during normal
    operation.
    """


class DecodeError(Web3Exception, ValueError):
    """
    Thrown when a wire value cannot be turned into its domain type.

    Subclasses `ValueError` so that pydantic reports it as a validation error
    of the field being decoded.
    """

    field: str | None
    value: Any

    def __init__(self, message: str, *, value: Any = None, field: str | None = None):
        """Initialize the error with the offending value and wire field, if known."""
        super().__init__(message)
        self.message = message
        self.value = value
        self.field = field

    def __str__(self) -> str:
        """Return the message prefixed with the wire field, if known."""
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message


class MalformedHexError(DecodeError):
    """
    Thrown when a hex string has an odd number of digits or contains a
    non-hex character after the optional `0x` prefix.
    """


class LengthMismatchError(DecodeError):
    """
    Thrown by strict fixed-width construction when the input is not exactly
    the expected number of bytes.
    """

    expected: int
    actual: int

    def __init__(self, expected: int, actual: int, *, value: Any = None, field: str | None = None):
        """Initialize the error with the expected and actual byte lengths."""
        super().__init__(
            f"expected {expected} bytes, got {actual}",
            value=value,
            field=field,
        )
        self.expected = expected
        self.actual = actual


class NumericDecodeError(DecodeError):
    """
    Thrown by strict quantity parsing when a value is not a non-negative
    integer in hex or decimal notation.
    """


class TransportError(Web3Exception):
    """
    Thrown by a provider when a round trip fails below the JSON-RPC layer:
    connection refused, timeout, HTTP error status or an undecodable body.

    The underlying exception, if any, is chained as `__cause__`.
    """

    provider: str | None

    def __init__(self, message: str, *, provider: str | None = None):
        """Initialize the error with the name of the failing provider."""
        super().__init__(message)
        self.provider = provider

    def __str__(self) -> str:
        """Return the message prefixed with the provider name, if known."""
        if self.provider:
            return f"[{self.provider}] {super().__str__()}"
        return super().__str__()


class RPCError(Web3Exception):
    """
    Thrown when the node executed a call but answered with a JSON-RPC error
    object.
    """

    code: int
    message: str
    data: Any

    def __init__(self, code: int | str, message: str, data: Any = None, **kwargs):
        """Initialize the RPCError."""
        super().__init__(message)
        self.code = int(code)
        self.message = message
        self.data = data

    def __str__(self) -> str:
        """Return string representation of the RPCError."""
        if self.data is not None:
            return f"RPCError(code={self.code}, message={self.message}, data={self.data})"
        return f"RPCError(code={self.code}, message={self.message})"
