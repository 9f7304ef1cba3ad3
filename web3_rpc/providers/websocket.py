"""JSON-RPC over a persistent WebSocket connection."""

import json
from typing import Any

from websockets.exceptions import WebSocketException
from websockets.sync.client import ClientConnection, connect

from web3_logging import get_logger

from ..rpc import RPCMethod
from ..types import Request, Response
from .base import Provider

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 10.0


class WebSocketProvider(Provider):
    """
    Keeps a single connection to the node, opened on the first request.

    Requests are sent one at a time and the next message received is taken as
    the response, so a provider must not be shared between threads.
    """

    name = "websocket"

    def __init__(
        self,
        url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        rpc_method: RPCMethod | None = None,
    ):
        """Initialize WebSocketProvider with the ws:// or wss:// url of the node."""
        super().__init__(rpc_method)
        self.url = url
        self.timeout = timeout
        self.connection: ClientConnection | None = None

    def connect(self) -> ClientConnection:
        """Return the open connection, connecting first if needed."""
        if self.connection is None:
            self.connection = connect(self.url, open_timeout=self.timeout)
        return self.connection

    def send(self, request: Request) -> Response:
        """Send `request` over the connection and wait for the reply."""
        payload = json.dumps(self.rpc_method.encode_request(request))
        try:
            connection = self.connect()
            connection.send(payload)
            message = connection.recv(timeout=self.timeout)
        except (WebSocketException, OSError, TimeoutError) as e:
            logger.debug(f"WebSocket round trip to {self.url} failed: {e!r}")
            self.close()
            raise self.transport_error(f"request to {self.url} failed: {e!r}") from e
        try:
            body: Any = json.loads(message)
        except ValueError as e:
            raise self.transport_error(f"undecodable response from {self.url}: {e}") from e
        return self.decode_body(body)

    def close(self) -> None:
        """Close the connection if it is open."""
        if self.connection is not None:
            self.connection.close()
            self.connection = None

    def __repr__(self) -> str:
        """Return the representation of the provider."""
        return f"WebSocketProvider(url={self.url!r})"
