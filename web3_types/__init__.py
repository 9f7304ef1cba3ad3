"""Domain records decoded from node responses."""

from .block_types import Block
from .decoding import (
    decode,
    decode_block,
    decode_log,
    decode_receipt,
    decode_sync_status,
    decode_transaction,
)
from .receipt_types import Log, TransactionReceipt
from .sync_types import SyncStatus
from .transaction_types import Transaction, TransactionRequest

__all__ = (
    "Block",
    "Log",
    "SyncStatus",
    "Transaction",
    "TransactionReceipt",
    "TransactionRequest",
    "decode",
    "decode_block",
    "decode_log",
    "decode_receipt",
    "decode_sync_status",
    "decode_transaction",
)
