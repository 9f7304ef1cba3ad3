"""Basic type primitives used to define other types."""

from enum import Enum
from typing import Annotated, Any, Callable, ClassVar, List, SupportsBytes, Type, TypeVar

from pydantic import GetCoreSchemaHandler, ValidationError, WrapValidator
from pydantic_core.core_schema import (
    PlainValidatorFunctionSchema,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    to_string_ser_schema,
    with_info_plain_validator_function,
)

from web3_exceptions import DecodeError, MalformedHexError
from web3_logging import get_logger

from .conversions import (
    BytesConvertible,
    FixedSizeBytesConvertible,
    NumberConvertible,
    to_bytes,
    parse_quantity,
    to_fixed_size_bytes,
    to_quantity,
)

logger = get_logger(__name__)

W = TypeVar("W", bound="WireSchema")
E = TypeVar("E")


class DecodeMode(str, Enum):
    """
    Policy applied when a wire field holds a malformed value.

    `LENIENT` replaces the value with the zero value of the field's type and
    logs a warning, `STRICT` aborts decoding with the specific `DecodeError`.
    Absent and `null` fields decode to the zero value under both policies.
    """

    LENIENT = "lenient"
    STRICT = "strict"

    @classmethod
    def from_context(cls, context: Any) -> "DecodeMode":
        """Read the mode from a pydantic validation context, defaulting to lenient."""
        if isinstance(context, dict):
            return cls(context.get("decode_mode", cls.LENIENT))
        return cls.LENIENT


class WireSchema:
    """
    Type converter to add a pydantic schema that parses wire values according
    to the `DecodeMode` found in the validation context, and serializes the
    type through its string representation.
    """

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> PlainValidatorFunctionSchema:
        """Validate with `validate_wire` and serialize with `str`."""
        return with_info_plain_validator_function(
            cls.validate_wire,
            serialization=to_string_ser_schema(),
        )

    @classmethod
    def validate_wire(cls: Type[W], value: Any, info: ValidationInfo) -> W:
        """Decode a single wire value, substituting zero in lenient mode."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.zero()
        mode = DecodeMode.from_context(info.context)
        try:
            return cls.from_wire(value, strict=mode == DecodeMode.STRICT)
        except DecodeError as e:
            if mode == DecodeMode.STRICT:
                raise
            field = getattr(info, "field_name", None) or cls.__name__
            logger.warning(f"Decoding malformed {field} as zero: {e}")
            return cls.zero()

    @classmethod
    def zero(cls: Type[W]) -> W:
        """Return the value an absent or unreadable wire field decodes to."""
        raise NotImplementedError

    @classmethod
    def from_wire(cls: Type[W], value: Any, *, strict: bool = False) -> W:
        """Build the type from a raw JSON value."""
        raise NotImplementedError


class Quantity(int, WireSchema):
    """
    Arbitrary-precision non-negative integer such as a balance, gas amount or
    block number.

    Direct construction parses strictly; see `parse_quantity` for the
    accepted notations.
    """

    def __new__(cls, input_number: NumberConvertible = 0, *, strict: bool = True):
        """Create a new Quantity object."""
        return super(Quantity, cls).__new__(cls, to_quantity(input_number, strict=strict))

    def __str__(self) -> str:
        """Return the wire representation of the quantity."""
        return self.hex()

    def hex(self) -> str:
        """Return the minimal hexadecimal representation of the quantity."""
        return hex(self)

    @classmethod
    def zero(cls) -> "Quantity":
        """Return a zero quantity."""
        return cls(0)

    @classmethod
    def from_wire(cls, value: Any, *, strict: bool = False) -> "Quantity":
        """Parse a hex, decimal or numeric JSON value."""
        return cls(parse_quantity(value, strict=strict))


class Data(bytes, WireSchema):
    """Class that represents an opaque byte sequence of variable length."""

    def __new__(cls, input_bytes: BytesConvertible = b""):
        """Create a new Data object."""
        if type(input_bytes) is cls:
            return input_bytes
        return super(Data, cls).__new__(cls, to_bytes(input_bytes))

    def __hash__(self) -> int:
        """Return the hash of the bytes."""
        return super(Data, self).__hash__()

    def __str__(self) -> str:
        """Return the hexadecimal representation of the bytes."""
        return self.hex()

    def hex(self, *args, **kwargs) -> str:
        """Return the canonical lowercase `0x`-prefixed hexadecimal representation."""
        return "0x" + super().hex(*args, **kwargs)

    @classmethod
    def zero(cls) -> "Data":
        """Return the empty byte sequence."""
        return cls()

    @classmethod
    def from_wire(cls, value: Any, *, strict: bool = False) -> "Data":
        """Decode a hex string."""
        if not isinstance(value, str):
            raise MalformedHexError(
                f"expected a hex string, got {type(value).__name__}", value=value
            )
        return cls(value)


T = TypeVar("T", bound="FixedSizeBytes")


class FixedSizeBytes(Data):
    """
    Class that represents bytes of a fixed length.

    Construction from bytes or a hex string is lossy unless `strict=True`:
    shorter input is zero-padded on the right and longer input is truncated
    to its first `byte_length` bytes. Strict construction raises
    `LengthMismatchError` instead. Integers are encoded big-endian.
    """

    byte_length: ClassVar[int]

    def __class_getitem__(cls, length: int) -> Type["FixedSizeBytes"]:
        """Create a new FixedSizeBytes class with the given length."""

        class Sized(cls):  # type: ignore
            byte_length = length

        return Sized

    def __new__(
        cls,
        input_bytes: FixedSizeBytesConvertible | T = 0,
        *,
        strict: bool = False,
    ):
        """Create a new FixedSizeBytes object."""
        if type(input_bytes) is cls:
            return input_bytes
        return super(FixedSizeBytes, cls).__new__(
            cls,
            to_fixed_size_bytes(input_bytes, cls.byte_length, strict=strict),
        )

    def __hash__(self) -> int:
        """Return the hash of the bytes."""
        return super(FixedSizeBytes, self).__hash__()

    def __eq__(self, other: object) -> bool:
        """
        Compare byte-wise.

        Strings, integers and bytes are converted with the same class first;
        a value of a different length is never equal.
        """
        if other is None:
            return False
        if not isinstance(other, FixedSizeBytes):
            if not isinstance(other, (str, int, bytes, SupportsBytes)):
                return NotImplemented
            try:
                other = type(self)(other, strict=True)
            except (DecodeError, TypeError, ValueError):
                return False
        return bytes(self) == bytes(other)

    def __ne__(self, other: object) -> bool:
        """Compare two FixedSizeBytes objects to be not equal."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    @classmethod
    def zero(cls: Type[T]) -> T:
        """Return the all-zero value."""
        return cls(0)

    @classmethod
    def from_wire(cls: Type[T], value: Any, *, strict: bool = False) -> T:
        """Decode a hex string, enforcing the exact length when `strict`."""
        if not isinstance(value, str):
            raise MalformedHexError(
                f"expected a hex string, got {type(value).__name__}", value=value
            )
        return cls(value, strict=strict)


class Address(FixedSizeBytes[20]):  # type: ignore
    """Class that represents a 20-byte account or contract address."""

    pass


class Hash(FixedSizeBytes[32]):  # type: ignore
    """Class that represents a 32-byte hash or log topic."""

    pass


def wire_fallback(zero: Callable[[], Any]) -> WrapValidator:
    """
    Return a validator that decodes a structured wire value (list, flag,
    nested record) and, in lenient mode, falls back to `zero()` when the value
    has the wrong shape.

    Scalar list elements handle their own errors. Record elements need their
    own fallback, e.g. `WireList[Annotated[Log, wire_fallback(Log)]]`, so that
    one unreadable element does not empty the whole list.
    """

    def validate(value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo) -> Any:
        try:
            return handler(value)
        except ValidationError:
            if DecodeMode.from_context(info.context) == DecodeMode.STRICT:
                raise
            fallback = zero()
            logger.warning(f"Decoding malformed {info.field_name} as {fallback!r}")
            return fallback

    return WrapValidator(validate)


WireList = Annotated[List[E], wire_fallback(list)]
"""List field whose shape errors decode to `[]` in lenient mode."""

WireFlag = Annotated[bool, wire_fallback(bool)]
"""Boolean field whose unreadable values decode to `False` in lenient mode."""
