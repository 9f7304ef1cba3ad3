"""
Test the outbound transaction parameters.
"""

import json

import pytest
from pydantic import ValidationError

from web3_base_types import Address, Quantity, to_json

from ..transaction_types import TransactionRequest

SENDER = "0x" + "5e" * 20
RECIPIENT = "0x" + "2e" * 20


def test_unset_fields_are_omitted():
    """Test that only the fields that were set are sent to the node."""
    request = TransactionRequest(from_address=SENDER, to=RECIPIENT, gas=21000, value="0x0")
    assert to_json(request) == {
        "from": SENDER,
        "to": RECIPIENT,
        "gas": "0x5208",
        "value": "0x0",
    }
    assert json.loads(str(request)) == to_json(request)


def test_wire_names_accepted():
    """Test construction from a wire-style dict."""
    request = TransactionRequest.model_validate(
        {"from": SENDER, "gasPrice": "0x3b9aca00", "data": "0xa9059cbb", "nonce": 7}
    )
    assert request.from_address == Address(SENDER)
    assert request.gas_price == Quantity(10**9)
    assert request.data == b"\xa9\x05\x9c\xbb"
    assert request.nonce == 7
    assert request.to is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"from_address": "0x" + "5e" * 19},
        {"from_address": SENDER, "to": "0x" + "2e" * 21},
        {"from_address": SENDER, "gas": "1.5"},
        {"from_address": SENDER, "value": -1},
        {"from_address": SENDER, "data": "0x123"},
        {},
    ],
)
def test_strict_parameters(kwargs):
    """Test that malformed parameters raise instead of decoding to zero."""
    with pytest.raises(ValidationError):
        TransactionRequest(**kwargs)
