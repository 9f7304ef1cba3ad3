"""Transaction-related types."""

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from web3_base_types import Address, CamelModel, Data, Hash, Quantity, WireModel


class Transaction(WireModel):
    """Transaction as returned by `eth_getTransactionByHash` and friends."""

    block_hash: Hash = Field(Hash(0))
    block_number: Quantity = Field(Quantity(0))
    from_address: Address = Field(Address(0), alias="from")
    gas: Quantity = Field(Quantity(0))
    gas_price: Quantity = Field(
        Quantity(0), validation_alias=AliasChoices("gasPrice", "gasprice")
    )
    hash: Hash = Field(Hash(0))
    input: Data = Field(Data())
    nonce: Quantity = Field(Quantity(0))
    r: Data = Field(Data())
    s: Data = Field(Data())
    to: Address = Field(Address(0))
    transaction_index: Quantity = Field(Quantity(0))
    v: Data = Field(Data())
    value: Quantity = Field(Quantity(0))

    # Typed transactions (EIP-2718, EIP-1559)
    type: Quantity = Field(Quantity(0))
    chain_id: Quantity = Field(Quantity(0))
    max_fee_per_gas: Quantity = Field(Quantity(0))
    max_priority_fee_per_gas: Quantity = Field(Quantity(0))


class TransactionRequest(CamelModel):
    """
    Outbound transaction parameters for `eth_sendTransaction`, `eth_call` and
    `eth_estimateGas`.

    Values are parsed strictly: a malformed or wrongly sized value raises
    instead of being replaced by zero. Unset fields are left out of the JSON
    rendering so that the node fills them in.
    """

    from_address: Address = Field(..., alias="from")
    to: Address | None = None
    gas: Quantity | None = None
    gas_price: Quantity | None = None
    value: Quantity | None = None
    data: Data | None = None
    nonce: Quantity | None = None

    @field_validator("from_address", "to", mode="plain")
    @classmethod
    def strict_address(cls, value: Any) -> Any:
        """Require exactly 20 bytes."""
        if value is None or isinstance(value, Address):
            return value
        try:
            return Address(value, strict=True)
        except TypeError as e:
            raise ValueError(f"invalid address {value!r}") from e

    @field_validator("gas", "gas_price", "value", "nonce", mode="plain")
    @classmethod
    def strict_quantity(cls, value: Any) -> Any:
        """Require an exact non-negative integer."""
        if value is None:
            return value
        return Quantity(value, strict=True)

    @field_validator("data", mode="plain")
    @classmethod
    def hex_data(cls, value: Any) -> Any:
        """Decode hex strings, rejecting malformed ones."""
        if value is None:
            return value
        try:
            return Data(value)
        except TypeError as e:
            raise ValueError(f"invalid data {value!r}") from e

    def __str__(self) -> str:
        """Return the JSON rendering sent to the node."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
