"""Block-related types returned by `eth_getBlockBy*`."""

from typing import Any

from pydantic import Field, field_validator

from web3_base_types import Address, Data, Hash, Quantity, WireList, WireModel


class Block(WireModel):
    """
    Block header fields plus the hashes of the block's transactions and
    uncles.

    Nodes answer `eth_getBlockByNumber(..., true)` with full transaction
    objects instead of hashes; only their `hash` is kept.
    """

    difficulty: Quantity = Field(Quantity(0))
    extra_data: Data = Field(Data())
    gas_limit: Quantity = Field(Quantity(0))
    gas_used: Quantity = Field(Quantity(0))
    hash: Hash = Field(Hash(0))
    logs_bloom: Data = Field(Data())
    miner: Address = Field(Address(0))
    mix_hash: Hash = Field(Hash(0))
    nonce: Data = Field(Data())
    number: Quantity = Field(Quantity(0))
    parent_hash: Hash = Field(Hash(0))
    receipts_root: Hash = Field(Hash(0))
    sha3_uncles: Hash = Field(Hash(0), alias="sha3Uncles")
    size: Quantity = Field(Quantity(0))
    state_root: Hash = Field(Hash(0))
    timestamp: Quantity = Field(Quantity(0))
    total_difficulty: Quantity = Field(Quantity(0))
    transactions: WireList[Hash] = Field(default_factory=list)
    transactions_root: Hash = Field(Hash(0))
    uncles: WireList[Hash] = Field(default_factory=list)

    # London
    base_fee_per_gas: Quantity = Field(Quantity(0))

    @field_validator("transactions", mode="before")
    @classmethod
    def transaction_objects_to_hashes(cls, value: Any) -> Any:
        """Keep only the hash of full transaction objects."""
        if isinstance(value, list):
            return [item.get("hash") if isinstance(item, dict) else item for item in value]
        return value
