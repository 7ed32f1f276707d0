"""E-commerce API Gateway - one REST surface over RPC backends.

This package fronts the category, product, order and auth backends with a
single REST API and one authorization policy:

Layers:
    - protocols: Backend contracts (CategoryBackend, ProductBackend, ...)
    - clients: RPC channels and backend clients (BackendClients)
    - services: Cross-backend aggregation (OrderService)
    - handlers: HTTP endpoint handlers, one per resource
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (Identity, Role, PageWindow)
    - api: FastAPI app, routes and the authorization gate

For HTTP API:
    ```python
    from ecommerce_gateway.api.app import app
    ```
"""

from ecommerce_gateway.clients import BackendClients
from ecommerce_gateway.config import get_settings, settings
from ecommerce_gateway.entities import Identity, PageWindow, Role
from ecommerce_gateway.errors import RpcError, RpcTransportError
from ecommerce_gateway.handlers import (
    AuthHandler,
    CategoryHandler,
    OrderHandler,
    ProductHandler,
    UserHandler,
)
from ecommerce_gateway.protocols import AuthBackend, CategoryBackend, OrderBackend, ProductBackend
from ecommerce_gateway.services import OrderService

__all__ = [
    # Configuration
    "settings",
    "get_settings",
    # Protocols (interfaces)
    "CategoryBackend",
    "ProductBackend",
    "OrderBackend",
    "AuthBackend",
    # Clients (RPC)
    "BackendClients",
    "RpcError",
    "RpcTransportError",
    # Services (aggregation)
    "OrderService",
    # Handlers (HTTP)
    "AuthHandler",
    "CategoryHandler",
    "OrderHandler",
    "ProductHandler",
    "UserHandler",
    # Entities (domain models)
    "Identity",
    "PageWindow",
    "Role",
]
