"""Abstract transport to a node."""

from abc import ABC, abstractmethod
from typing import Any

from web3_exceptions import TransportError

from ..rpc import JSONRPC, RPCMethod
from ..types import Request, Response


class Provider(ABC):
    """
    A transport able to deliver one request to a node and return its response.

    Subclasses implement `send` for a specific transport and release the
    resources they hold in `close`. A provider is also a context manager that
    closes itself on exit.
    """

    name: str = "provider"

    def __init__(self, rpc_method: RPCMethod | None = None):
        """Initialize the provider with the request factory of its dialect."""
        self.rpc_method = rpc_method if rpc_method is not None else JSONRPC()

    def get_rpc_method(self) -> RPCMethod:
        """Return the request factory that builds requests for this provider."""
        return self.rpc_method

    @abstractmethod
    def send(self, request: Request) -> Response:
        """
        Deliver `request` and block until its response arrives.

        :raises TransportError: if the round trip fails below the JSON-RPC
            layer.
        """
        pass

    def close(self) -> None:
        """Release the connection held by the provider, if any."""
        pass

    def decode_body(self, body: Any) -> Response:
        """Parse a decoded JSON body, attributing malformed bodies to this provider."""
        try:
            return self.rpc_method.decode_response(body)
        except TransportError as e:
            if e.provider is None:
                e.provider = self.name
            raise

    def transport_error(self, message: str) -> TransportError:
        """Return a `TransportError` attributed to this provider."""
        return TransportError(message, provider=self.name)

    def __enter__(self) -> "Provider":
        """Return the provider."""
        return self

    def __exit__(self, *exc_info: Any) -> None:
        """Close the provider."""
        self.close()
