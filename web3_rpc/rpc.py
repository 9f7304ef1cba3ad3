"""Request factories that build and parse the messages of an RPC dialect."""

from abc import ABC, abstractmethod
from itertools import count
from typing import Any, Dict

from pydantic import ValidationError

from web3_base_types import to_json
from web3_exceptions import TransportError

from .types import Request, Response


class RPCMethod(ABC):
    """
    Builds requests and parses responses for one RPC dialect.

    Each instance owns its request-id sequence, so ids are unique per
    factory (and therefore per provider) rather than per process.
    """

    @abstractmethod
    def new_request(self, method: str) -> Request:
        """Return a new request for `method` with a fresh id and no parameters."""
        pass

    @abstractmethod
    def encode_request(self, request: Request) -> Dict[str, Any]:
        """Return the JSON payload sent for `request`."""
        pass

    @abstractmethod
    def decode_response(self, payload: Any) -> Response:
        """Parse a decoded JSON body into a `Response`."""
        pass


class JSONRPC(RPCMethod):
    """JSON-RPC 2.0 dialect."""

    def __init__(self):
        """Initialize the request id sequence."""
        self.request_id_counter = count(1)

    def new_request(self, method: str) -> Request:
        """Return a new request for `method`."""
        return Request(method=method, id=next(self.request_id_counter))

    def encode_request(self, request: Request) -> Dict[str, Any]:
        """Return the JSON-RPC 2.0 payload of `request`."""
        return {
            "jsonrpc": request.jsonrpc,
            "method": request.method,
            "params": to_json(request.params),
            "id": request.id,
        }

    def decode_response(self, payload: Any) -> Response:
        """
        Parse a JSON-RPC 2.0 response body.

        :raises TransportError: if the body is not a JSON object or carries
            neither `result` nor `error`.
        """
        if not isinstance(payload, dict):
            raise TransportError(f"expected a JSON object, got {type(payload).__name__}")
        if "result" not in payload and "error" not in payload:
            raise TransportError("RPC response contains neither a result nor an error")
        try:
            return Response.model_validate(payload)
        except ValidationError as e:
            raise TransportError(f"malformed RPC response: {e}") from e
