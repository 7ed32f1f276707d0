"""Protocol interfaces for the backend services.

This package contains protocol definitions using structural typing.
Handlers and services depend on these protocols, not on the concrete
RPC clients, so any object with matching methods can stand in for a backend.

Every call returns the backend's response message as a dict, or raises
``RpcError`` (``RpcTransportError`` for network-level failures).
"""

from .auth_backend import AuthBackend
from .category_backend import CategoryBackend
from .order_backend import OrderBackend
from .product_backend import ProductBackend

__all__ = [
    "AuthBackend",
    "CategoryBackend",
    "OrderBackend",
    "ProductBackend",
]
