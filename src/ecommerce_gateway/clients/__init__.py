"""Backend client layer.

Holds the RPC channels to the category, product, order and auth backends
and the thin clients that expose each backend operation as a method. The
clients satisfy the protocols in ``ecommerce_gateway.protocols`` through
structural typing.

Usage:
    ```python
    from ecommerce_gateway.clients import BackendClients

    clients = await BackendClients.connect()
    ...
    await clients.aclose()
    ```
"""

from .auth_client import AuthServiceClient
from .catalog_clients import CategoryServiceClient, ProductServiceClient
from .client_set import BackendClients
from .order_client import OrderServiceClient
from .rpc_channel import RpcChannel

__all__ = [
    "BackendClients",
    "RpcChannel",
    "CategoryServiceClient",
    "ProductServiceClient",
    "OrderServiceClient",
    "AuthServiceClient",
]
