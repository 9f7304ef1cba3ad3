"""
Conversion of node responses (wire format) into the domain records.

Every decoder is a pure function of the JSON value and a `DecodeMode`:

- Absent keys and `null` values decode to the zero value of the field in
  both modes.
- In `DecodeMode.LENIENT` a malformed value is replaced by the zero value of
  its field and a warning is logged; the other fields are decoded normally.
- In `DecodeMode.STRICT` the first malformed value aborts decoding of the
  whole record with the specific `DecodeError` subclass, whose `field`
  attribute holds the wire path of the offending value (e.g. `logs.0.data`).

No semantic validation (checksums, cross-field consistency) is performed.
"""

from typing import Any, Tuple, Type, TypeVar

from pydantic import ValidationError

from web3_base_types import DecodeMode, WireModel
from web3_exceptions import DecodeError
from web3_logging import get_logger

from .block_types import Block
from .receipt_types import Log, TransactionReceipt
from .sync_types import SyncStatus
from .transaction_types import Transaction

logger = get_logger(__name__)

M = TypeVar("M", bound=WireModel)


def _location(loc: Tuple[int | str, ...]) -> str | None:
    return ".".join(str(part) for part in loc) or None


def _find_cause(error: ValidationError, prefix: Tuple[int | str, ...] = ()) -> DecodeError | None:
    """Return the first `DecodeError` raised by a field, with its wire path set."""
    for detail in error.errors():
        loc = prefix + tuple(detail["loc"])
        cause = detail.get("ctx", {}).get("error")
        if isinstance(cause, DecodeError):
            cause.field = _location(loc)
            return cause
        if isinstance(cause, ValidationError):
            nested = _find_cause(cause, loc)
            if nested is not None:
                return nested
    return None


def _decode_error(model: Type[WireModel], error: ValidationError) -> DecodeError:
    """Pick the `DecodeError` to surface for a failed validation."""
    cause = _find_cause(error)
    if cause is not None:
        return cause
    first = error.errors()[0]
    return DecodeError(
        f"invalid {model.__name__}: {first['msg']}",
        value=first.get("input"),
        field=_location(tuple(first["loc"])),
    )


def decode(model: Type[M], data: Any, mode: DecodeMode = DecodeMode.LENIENT) -> M:
    """
    Decode a JSON object into `model`.

    :raises DecodeError: if `data` is not a JSON object, or, in strict mode,
        if any field is malformed.
    """
    try:
        return model.model_validate(data, context={"decode_mode": DecodeMode(mode)})
    except ValidationError as e:
        raise _decode_error(model, e) from e


def decode_block(data: Any, mode: DecodeMode = DecodeMode.LENIENT) -> Block | None:
    """Decode an `eth_getBlockBy*` result; `None` (block not found) stays `None`."""
    if data is None:
        return None
    return decode(Block, data, mode)


def decode_transaction(data: Any, mode: DecodeMode = DecodeMode.LENIENT) -> Transaction | None:
    """Decode an `eth_getTransactionBy*` result; `None` stays `None`."""
    if data is None:
        return None
    return decode(Transaction, data, mode)


def decode_receipt(
    data: Any, mode: DecodeMode = DecodeMode.LENIENT
) -> TransactionReceipt | None:
    """
    Decode an `eth_getTransactionReceipt` result, including its logs.

    `None` (transaction unknown or still pending) stays `None`.
    """
    if data is None:
        return None
    return decode(TransactionReceipt, data, mode)


def decode_log(data: Any, mode: DecodeMode = DecodeMode.LENIENT) -> Log | None:
    """Decode a single log entry, e.g. one element of an `eth_getLogs` result."""
    if data is None:
        return None
    return decode(Log, data, mode)


def decode_sync_status(data: Any, mode: DecodeMode = DecodeMode.LENIENT) -> SyncStatus:
    """
    Decode an `eth_syncing` result.

    The node answers `false` when it is not syncing and a progress object
    (`startingBlock`, `currentBlock`, `highestBlock`) while it is.
    """
    if data is None or data is False:
        return SyncStatus(syncing=False)
    if isinstance(data, dict):
        return decode(SyncStatus, data | {"syncing": True}, mode)
    if data is True:
        return SyncStatus(syncing=True)
    if DecodeMode(mode) == DecodeMode.STRICT:
        raise DecodeError(f"invalid sync status {data!r}", value=data)
    logger.warning(f"Decoding malformed sync status {data!r} as not syncing")
    return SyncStatus(syncing=False)
