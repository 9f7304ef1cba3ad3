"""JSON-RPC over HTTP(S)."""

from typing import TYPE_CHECKING, Dict

import requests

from web3_logging import get_logger

from ..rpc import RPCMethod
from ..types import Request, Response
from .base import Provider

if TYPE_CHECKING:
    from web3_config import RemoteNode

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0


class HTTPProvider(Provider):
    """Sends every request as a separate POST to the node's RPC endpoint."""

    name = "http"

    def __init__(
        self,
        url: str,
        extra_headers: Dict[str, str] | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
        rpc_method: RPCMethod | None = None,
    ):
        """Initialize HTTPProvider with the given url."""
        super().__init__(rpc_method)
        if extra_headers is None:
            extra_headers = {}
        self.url = url
        self.extra_headers = extra_headers
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    @classmethod
    def from_remote_node(cls, node: "RemoteNode", **kwargs) -> "HTTPProvider":
        """Create a provider for a node declared in `env.yaml`."""
        return cls(
            str(node.node_url),
            dict(node.rpc_headers),
            timeout=node.timeout,
            **kwargs,
        )

    def send(self, request: Request) -> Response:
        """Post `request` and parse the response body."""
        payload = self.rpc_method.encode_request(request)
        headers = {"Content-Type": "application/json"} | self.extra_headers
        try:
            response = self.session.post(
                self.url, json=payload, headers=headers, timeout=self.timeout
            )
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as e:
            logger.debug(f"POST {self.url} failed: {e}")
            raise self.transport_error(f"request to {self.url} failed: {e}") from e
        except ValueError as e:
            logger.debug(f"POST {self.url} returned a non-JSON body: {e}")
            raise self.transport_error(f"undecodable response from {self.url}: {e}") from e
        return self.decode_body(body)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __repr__(self) -> str:
        """Return the representation of the provider."""
        return f"HTTPProvider(url={self.url!r})"
