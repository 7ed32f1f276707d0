"""Order service for cross-backend aggregation.

An order lives in the order backend but refers to a product owned by the
product backend. This service composes the two:

- before an order is created, the referenced product must exist;
- when an order is read, its product is fetched and embedded as a trimmed
  ``{id, title}`` projection.

Both compositions are sequential on purpose: the second call's input is
derived from the first call's output.
"""

import logging
from typing import Any

from ecommerce_gateway.dto import CreateOrderRequest
from ecommerce_gateway.entities import PageWindow
from ecommerce_gateway.errors import (
    BackendFailure,
    NotFoundError,
    RpcError,
    UpstreamRejection,
    translate_rpc_error,
)
from ecommerce_gateway.protocols import OrderBackend, ProductBackend

logger = logging.getLogger(__name__)


def referenced_product_id(order: dict[str, Any]) -> str:
    """Get the product identifier an order refers to.

    The order backend returns the reference as a ``product`` sub-message;
    a flat ``product_id`` is accepted as well.
    """
    product = order.get("product")
    if isinstance(product, dict) and product.get("id"):
        return product["id"]
    return order.get("product_id", "")


class OrderService:
    """Order orchestration over the order and product backends.

    Example:
        ```python
        service = OrderService(orders=clients.order, products=clients.product)
        order = await service.get_order("o1")
        order["product"]  # {"id": "p1", "title": "Pen"}
        ```
    """

    def __init__(self, orders: OrderBackend, products: ProductBackend) -> None:
        """Initialize the order service.

        Args:
            orders: Order backend client (required).
            products: Product backend client (required).
        """
        self._orders = orders
        self._products = products

    async def create_order(self, request: CreateOrderRequest) -> dict[str, Any]:
        """Create an order after confirming its product exists.

        Business logic:
        1. Fetch the referenced product; abort with 404 if that fails
        2. Create the order in the order backend

        This is a pre-condition check only. The product can still be deleted
        between the two calls; nothing is rolled back or locked.

        Args:
            request: The bound create-order body

        Returns:
            The order backend's created order

        Raises:
            NotFoundError: If the referenced product lookup failed for any reason
            UpstreamRejection: If the order backend rejected the order
            TransportError: If the order backend was unreachable
        """
        try:
            await self._products.get_product_by_id(request.product_id)
        except RpcError as e:
            logger.warning("Order rejected, product %s lookup failed: %s", request.product_id, e.message)
            raise NotFoundError(e.message) from e

        try:
            return await self._orders.create_order(
                product_id=request.product_id,
                quantity=request.quantity,
                user_name=request.user_name,
                user_address=request.user_address,
                user_phone=request.user_phone,
            )
        except RpcError as e:
            logger.warning("Order backend rejected order: %s", e.message)
            raise translate_rpc_error(e, UpstreamRejection) from e

    async def get_order(self, order_id: str) -> dict[str, Any]:
        """Fetch an order and embed a summary of its product.

        Business logic:
        1. Fetch the order
        2. Fetch the product it refers to
        3. Replace the order's product with ``{id, title}``

        All or nothing: if the product lookup fails, the whole operation
        fails even though the order itself was found.

        Args:
            order_id: Identifier of the order

        Returns:
            The order with its ``product`` replaced by the trimmed projection

        Raises:
            NotFoundError: If the order lookup was refused or the product
                lookup failed for any reason
            TransportError: If the order backend was unreachable
        """
        try:
            order = await self._orders.get_order_by_id(order_id)
        except RpcError as e:
            raise translate_rpc_error(e, NotFoundError) from e

        product_id = referenced_product_id(order)
        try:
            product = await self._products.get_product_by_id(product_id)
        except RpcError as e:
            logger.warning(
                "Order %s found but product %s lookup failed: %s", order_id, product_id, e.message
            )
            raise NotFoundError(e.message) from e

        return {
            **order,
            "product": {"id": product.get("id", product_id), "title": product.get("title", "")},
        }

    async def list_orders(self, window: PageWindow) -> dict[str, Any]:
        """List orders, passing the backend result through unmodified."""
        try:
            return await self._orders.get_order_list(window)
        except RpcError as e:
            raise translate_rpc_error(e, BackendFailure) from e
