"""Binding between callers and the provider that carries their requests."""

from web3_logging import get_logger

from .providers import Provider
from .rpc import RPCMethod
from .types import Request, Response

logger = get_logger(__name__)


class RequestManager:
    """
    Holds exactly one provider and forwards requests to it unchanged.

    Requests are built with the provider's own request factory so that their
    ids are unique on that provider. The manager does not retry, batch or
    cache; transport errors reach the caller untouched.
    """

    def __init__(self, provider: Provider):
        """Initialize the manager with the provider it sends through."""
        self.provider = provider

    @property
    def rpc_method(self) -> RPCMethod:
        """Request factory of the bound provider."""
        return self.provider.get_rpc_method()

    def new_request(self, method: str) -> Request:
        """Return a new request for `method` with an id from the provider's factory."""
        return self.rpc_method.new_request(method)

    def send(self, request: Request) -> Response:
        """
        Send `request` through the provider and return its response.

        :raises TransportError: propagated from the provider.
        """
        logger.verbose(f"-> {request.method} id={request.id} params={request.params!r}")
        response = self.provider.send(request)
        if response.is_error:
            logger.verbose(f"<- id={response.id} error={response.error!r}")
        else:
            logger.verbose(f"<- id={response.id} result={response.result!r}")
        return response
