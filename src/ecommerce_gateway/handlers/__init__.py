"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers, one class per
resource. Handlers depend on backend protocols or, for resources that span
backends, on services.

Architecture:
    Handler -> [Service ->] Backend client
    (HTTP)  -> (Aggregation) -> (RPC)
"""

from .auth_handler import AuthHandler
from .category_handler import CategoryHandler
from .order_handler import OrderHandler
from .product_handler import ProductHandler
from .user_handler import UserHandler

__all__ = [
    "AuthHandler",
    "CategoryHandler",
    "OrderHandler",
    "ProductHandler",
    "UserHandler",
]
