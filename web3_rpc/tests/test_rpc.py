"""
Test the JSON-RPC request factory and the request/response types.
"""

import pytest

from web3_base_types import Address, Hash, Quantity
from web3_exceptions import RPCError, TransportError
from web3_types import TransactionRequest

from ..rpc import JSONRPC
from ..types import Request, Response


def test_request_ids_increase_per_factory():
    """Test that every factory numbers its requests from 1."""
    first, second = JSONRPC(), JSONRPC()
    assert [first.new_request("eth_chainId").id for _ in range(3)] == [1, 2, 3]
    assert second.new_request("eth_chainId").id == 1


def test_new_request_has_no_params():
    """Test a fresh request carries the method and an empty parameter list."""
    request = JSONRPC().new_request("eth_blockNumber")
    assert request.jsonrpc == "2.0"
    assert request.method == "eth_blockNumber"
    assert request.params == []


def test_set_params_chains():
    """Test that parameters can be attached while building the request."""
    request = JSONRPC().new_request("eth_getBlockByNumber").set_params("latest", False)
    assert isinstance(request, Request)
    assert request.params == ["latest", False]


def test_encode_request():
    """Test that domain values are rendered to their wire form."""
    rpc = JSONRPC()
    request = rpc.new_request("eth_getBalance").set_params(Address(1), Quantity(16))
    assert rpc.encode_request(request) == {
        "jsonrpc": "2.0",
        "method": "eth_getBalance",
        "params": ["0x" + "00" * 19 + "01", "0x10"],
        "id": 1,
    }


def test_encode_transaction_request():
    """Test that a transaction object is sent with wire names and no unset fields."""
    rpc = JSONRPC()
    tx = TransactionRequest(from_address=Address(1), gas=21000)
    request = rpc.new_request("eth_estimateGas").set_params(tx, "latest")
    assert rpc.encode_request(request)["params"] == [
        {"from": "0x" + "00" * 19 + "01", "gas": "0x5208"},
        "latest",
    ]


def test_decode_result():
    """Test a successful response."""
    response = JSONRPC().decode_response({"jsonrpc": "2.0", "id": 1, "result": "0x10"})
    assert not response.is_error
    assert response.id == 1
    assert response.get_result() == "0x10"


def test_decode_null_result():
    """Test that a `null` result (e.g. unknown block) is a valid response."""
    response = JSONRPC().decode_response({"jsonrpc": "2.0", "id": 1, "result": None})
    assert not response.is_error
    assert response.get_result() is None


def test_decode_error():
    """Test that an error object raises `RPCError` when the result is requested."""
    response = JSONRPC().decode_response(
        {
            "jsonrpc": "2.0",
            "id": 2,
            "error": {"code": 3, "message": "execution reverted", "data": "0x08c379a0"},
        }
    )
    assert response.is_error
    with pytest.raises(RPCError) as exc_info:
        response.get_result()
    assert exc_info.value.code == 3
    assert exc_info.value.message == "execution reverted"
    assert exc_info.value.data == "0x08c379a0"


@pytest.mark.parametrize(
    "payload",
    [
        None,
        [],
        "0x10",
        {"jsonrpc": "2.0", "id": 1},
        {"jsonrpc": "2.0", "id": 1, "error": {"message": "no code"}},
    ],
)
def test_decode_malformed_response(payload):
    """Test that malformed bodies are transport errors."""
    with pytest.raises(TransportError):
        JSONRPC().decode_response(payload)


def test_response_result_is_raw_json():
    """Test that results are left for the caller to decode."""
    block_hash = "0x" + "ab" * 32
    response = Response(id=1, result={"hash": block_hash})
    assert response.get_result() == {"hash": block_hash}
    assert Hash(response.get_result()["hash"]) == block_hash
