"""Transaction receipt and log types."""

from typing import Annotated

from pydantic import AliasChoices, Field

from web3_base_types import (
    Address,
    Data,
    Hash,
    Quantity,
    WireFlag,
    WireList,
    WireModel,
    wire_fallback,
)


class Log(WireModel):
    """
    Log entry emitted by a contract.

    `removed` is true when the block containing the log was dropped from the
    canonical chain by a reorganization.
    """

    address: Address = Field(Address(0))
    block_hash: Hash = Field(Hash(0))
    block_number: Quantity = Field(Quantity(0))
    data: Data = Field(Data(), validation_alias=AliasChoices("data", "TxData"))
    log_index: Quantity = Field(Quantity(0))
    removed: WireFlag = False
    topics: WireList[Hash] = Field(default_factory=list)
    transaction_hash: Hash = Field(Hash(0))
    transaction_index: Quantity = Field(Quantity(0))


class TransactionReceipt(WireModel):
    """Receipt of an executed transaction, as returned by `eth_getTransactionReceipt`."""

    block_hash: Hash = Field(Hash(0))
    block_number: Quantity = Field(Quantity(0))
    contract_address: Address = Field(Address(0))
    cumulative_gas_used: Quantity = Field(Quantity(0))
    from_address: Address = Field(Address(0), alias="from")
    gas_used: Quantity = Field(Quantity(0))
    logs: WireList[Annotated[Log, wire_fallback(Log)]] = Field(default_factory=list)
    logs_bloom: Data = Field(Data())
    status: Quantity = Field(Quantity(0))
    to: Address = Field(Address(0))
    transaction_hash: Hash = Field(Hash(0))
    transaction_index: Quantity = Field(Quantity(0))

    effective_gas_price: Quantity = Field(Quantity(0))
    type: Quantity = Field(Quantity(0))
    # Pre-Byzantium receipts carry the post-transaction state root instead of `status`.
    root: Data = Field(Data())
