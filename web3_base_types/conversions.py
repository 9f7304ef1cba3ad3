"""Common conversion methods."""

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any, List, SupportsBytes, TypeAlias

from web3_exceptions import LengthMismatchError, MalformedHexError, NumericDecodeError
from web3_logging import get_logger

logger = get_logger(__name__)

BytesConvertible: TypeAlias = str | bytes | SupportsBytes | List[int]
FixedSizeBytesConvertible: TypeAlias = str | bytes | SupportsBytes | List[int] | int
NumberConvertible: TypeAlias = str | bytes | SupportsBytes | int | float

HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")
DECIMAL_DIGITS = re.compile(r"[0-9]+")

# Decimal quantities with more digits are rejected rather than converted.
# Matches the default `sys.get_int_max_str_digits()`, far above uint256.
MAX_DECIMAL_DIGITS = 4300


def has_hex_prefix(text: str) -> bool:
    """Return whether the string starts with `0x` or `0X`."""
    return text[:2] in ("0x", "0X")


def strip_hex_prefix(text: str) -> str:
    """Remove a leading `0x`/`0X`, if present."""
    if has_hex_prefix(text):
        return text[2:]
    return text


def hex_to_bytes(text: str) -> bytes:
    """
    Decode a hex string, with or without the `0x` prefix.

    The empty string and a bare `0x` both decode to `b""`.

    :raises MalformedHexError: if the digits are of odd length or contain a
        non-hex character (whitespace included).
    """
    digits = strip_hex_prefix(text)
    if not HEX_DIGITS.fullmatch(digits):
        raise MalformedHexError(f"non-hex character in {text!r}", value=text)
    if len(digits) % 2 == 1:
        raise MalformedHexError(f"odd number of hex digits in {text!r}", value=text)
    return bytes.fromhex(digits)


def to_bytes(input_bytes: BytesConvertible) -> bytes:
    """Convert multiple types into bytes."""
    if input_bytes is None:
        raise TypeError("Cannot convert `None` input to bytes")

    if (
        isinstance(input_bytes, SupportsBytes)
        or isinstance(input_bytes, bytes)
        or isinstance(input_bytes, list)
    ):
        return bytes(input_bytes)

    if isinstance(input_bytes, str):
        return hex_to_bytes(input_bytes)

    raise TypeError(f"invalid type for `bytes`: {type(input_bytes).__name__}")


def to_fixed_size_bytes(
    input_bytes: FixedSizeBytesConvertible,
    size: int,
    *,
    strict: bool = False,
) -> bytes:
    """
    Convert multiple types into fixed-size bytes.

    Conversion of byte and hex input is lossy unless `strict` is set: input
    shorter than `size` is zero-padded on the right and longer input keeps
    its first `size` bytes. Callers that need exact lengths must pass
    `strict=True`.

    :param input_bytes: The input data to convert. Integers are encoded
        big-endian and always padded on the left.
    :param size: The size of the output bytes.
    :param strict: Raise `LengthMismatchError` instead of padding or
        truncating.
    """
    if isinstance(input_bytes, int):
        if input_bytes < 0:
            raise ValueError(f"cannot encode negative integer {input_bytes} as bytes")
        if input_bytes.bit_length() > size * 8:
            raise LengthMismatchError(
                size, (input_bytes.bit_length() + 7) // 8, value=input_bytes
            )
        return input_bytes.to_bytes(size, byteorder="big")
    raw = to_bytes(input_bytes)
    if len(raw) == size:
        return raw
    if strict:
        raise LengthMismatchError(size, len(raw), value=input_bytes)
    return raw[:size].ljust(size, b"\x00")


def to_hex(input_bytes: BytesConvertible) -> str:
    """Convert multiple types into a bytes hex string."""
    return "0x" + to_bytes(input_bytes).hex()


def _decimal_digits_to_int(digits: str) -> int:
    if len(digits) > MAX_DECIMAL_DIGITS:
        raise NumericDecodeError(
            f"decimal quantity of {len(digits)} digits exceeds {MAX_DECIMAL_DIGITS}", value=digits
        )
    try:
        return int(digits, 10)
    except ValueError as e:
        raise NumericDecodeError(str(e), value=digits) from e


def _parse_quantity_strict(input_number: Any) -> int:
    if isinstance(input_number, bool):
        raise NumericDecodeError(f"boolean {input_number} is not a quantity", value=input_number)
    if isinstance(input_number, int):
        if input_number < 0:
            raise NumericDecodeError(
                f"negative value {input_number} is not a quantity", value=input_number
            )
        return int(input_number)
    if isinstance(input_number, bytes) or isinstance(input_number, SupportsBytes):
        return int.from_bytes(bytes(input_number), byteorder="big")
    if isinstance(input_number, str):
        if has_hex_prefix(input_number):
            digits = input_number[2:]
            if digits and HEX_DIGITS.fullmatch(digits):
                return int(digits, 16)
        elif DECIMAL_DIGITS.fullmatch(input_number):
            return _decimal_digits_to_int(input_number)
    raise NumericDecodeError(f"{input_number!r} is not a quantity", value=input_number)


def _parse_quantity_lenient(input_number: Any) -> int:
    if isinstance(input_number, float):
        if not math.isfinite(input_number) or input_number < 0:
            raise NumericDecodeError(f"{input_number!r} is not a quantity", value=input_number)
        return int(input_number)
    if isinstance(input_number, str):
        token = input_number.strip()
        try:
            return _parse_quantity_strict(token)
        except NumericDecodeError:
            pass
        try:
            number = Decimal(token)
        except InvalidOperation as e:
            raise NumericDecodeError(
                f"{input_number!r} is not a number", value=input_number
            ) from e
        if not number.is_finite() or number < 0:
            raise NumericDecodeError(f"{input_number!r} is not a quantity", value=input_number)
        if number.adjusted() >= MAX_DECIMAL_DIGITS:
            raise NumericDecodeError(
                f"{input_number!r} exceeds {MAX_DECIMAL_DIGITS} decimal digits", value=input_number
            )
        # int() truncates toward zero, dropping any fractional part.
        return int(number)
    return _parse_quantity_strict(input_number)


def parse_quantity(input_number: NumberConvertible, *, strict: bool = False) -> int:
    """
    Convert a wire quantity into a non-negative integer of arbitrary size.

    Strict parsing accepts non-negative ints, `0x`-prefixed hex with at least
    one digit, decimal digit strings and big-endian bytes. Lenient parsing
    also accepts any numeric token that `decimal.Decimal` understands
    (`"1.0"`, `"1e3"`, surrounding whitespace) and JSON floats, truncating the
    fractional part.

    :raises NumericDecodeError: if the value cannot be read as a non-negative
        number.
    """
    if strict:
        return _parse_quantity_strict(input_number)
    return _parse_quantity_lenient(input_number)


def to_quantity(input_number: NumberConvertible, *, strict: bool = False) -> int:
    """
    Convert a wire quantity like `parse_quantity`.

    In lenient mode (the default) a value that cannot be read as a
    non-negative number is decoded as 0 and a warning is logged instead of
    raising.
    """
    if strict:
        return parse_quantity(input_number, strict=True)
    try:
        return parse_quantity(input_number)
    except NumericDecodeError as e:
        logger.warning(f"Decoding malformed quantity as 0: {e}")
        return 0
