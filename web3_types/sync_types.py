"""Node synchronization status returned by `eth_syncing`."""

from pydantic import Field

from web3_base_types import Quantity, WireModel


class SyncStatus(WireModel):
    """
    Synchronization progress of a node.

    The block numbers are only meaningful while `syncing` is true; a node that
    is not syncing answers `false` and all of them are zero.
    """

    syncing: bool = False
    starting_block: Quantity = Field(Quantity(0))
    current_block: Quantity = Field(Quantity(0))
    highest_block: Quantity = Field(Quantity(0))
