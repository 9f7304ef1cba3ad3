"""JSON-RPC over a Unix domain socket (geth.ipc and similar)."""

import codecs
import io
import json
import socket
from pathlib import Path
from typing import Any

from web3_logging import get_logger

from ..rpc import RPCMethod
from ..types import Request, Response
from .base import Provider

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 10.0
CHUNK_SIZE = 4096
DOCUMENT_END = ("}", "]")


class IPCProvider(Provider):
    """
    Opens one connection per request, writes the JSON payload and reads until
    a complete JSON document has arrived.
    """

    name = "ipc"

    def __init__(
        self,
        path: str | Path,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        rpc_method: RPCMethod | None = None,
    ):
        """Initialize IPCProvider with the path of the node's socket."""
        super().__init__(rpc_method)
        self.path = Path(path)
        self.timeout = timeout
        self.decoder = json.JSONDecoder()

    def send(self, request: Request) -> Response:
        """Write `request` to the socket and parse the response document."""
        payload = json.dumps(self.rpc_method.encode_request(request)).encode()
        try:
            with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
                sock.settimeout(self.timeout)
                sock.connect(str(self.path))
                sock.sendall(payload)
                body = self.read_document(sock)
        except OSError as e:
            # socket.timeout is an OSError subclass
            logger.debug(f"IPC round trip on {self.path} failed: {e!r}")
            raise self.transport_error(f"IPC request on {self.path} failed: {e!r}") from e
        return self.decode_body(body)

    def read_document(self, sock: socket.socket) -> Any:
        """
        Receive until one complete JSON document has arrived.

        Each chunk is decoded once as it arrives. The text is only parsed when
        it ends with a closing bracket, or when the node closes the connection.
        """
        decoder = codecs.getincrementaldecoder("utf-8")()
        text = io.StringIO()
        while True:
            chunk = sock.recv(CHUNK_SIZE)
            try:
                decoded = decoder.decode(chunk, final=not chunk)
            except UnicodeDecodeError as e:
                raise self.transport_error(f"response from {self.path} is not UTF-8") from e
            text.write(decoded)
            if chunk and not decoded.rstrip().endswith(DOCUMENT_END):
                continue
            try:
                document, _ = self.decoder.raw_decode(text.getvalue().lstrip())
            except json.JSONDecodeError:
                if chunk:
                    continue
                raise self.transport_error(
                    f"connection to {self.path} closed before a full response arrived"
                )
            return document

    def __repr__(self) -> str:
        """Return the representation of the provider."""
        return f"IPCProvider(path={str(self.path)!r})"
