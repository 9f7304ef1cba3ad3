"""JSON-RPC request/response protocol, providers and the request manager."""

from .providers import HTTPProvider, IPCProvider, Provider, WebSocketProvider
from .request_manager import RequestManager
from .rpc import JSONRPC, RPCMethod
from .types import ErrorObject, Request, Response

__all__ = (
    "ErrorObject",
    "HTTPProvider",
    "IPCProvider",
    "JSONRPC",
    "Provider",
    "RPCMethod",
    "Request",
    "RequestManager",
    "Response",
    "WebSocketProvider",
)
