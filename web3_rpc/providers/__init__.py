"""Transports that carry requests to a node."""

from .base import Provider
from .http import HTTPProvider
from .ipc import IPCProvider
from .websocket import WebSocketProvider

__all__ = (
    "HTTPProvider",
    "IPCProvider",
    "Provider",
    "WebSocketProvider",
)
