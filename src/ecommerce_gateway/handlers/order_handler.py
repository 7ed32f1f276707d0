"""HTTP handlers for order operations.

Orders span two backends, so these handlers delegate to OrderService
rather than calling a backend client directly.
"""

import logging

from ecommerce_gateway.dto import CreateOrderRequest, Envelope, Order, PackedOrder, ResourceList
from ecommerce_gateway.entities import Identity, PageWindow
from ecommerce_gateway.services import OrderService

logger = logging.getLogger(__name__)


class OrderHandler:
    """HTTP handlers for the order resource.

    Example:
        ```python
        handler = OrderHandler(order_service=OrderService(orders, products))

        @router.get("/order/{id}", response_model=Envelope[PackedOrder])
        async def get_order(id: str, identity: AnyIdentity, handler: OrderHandlerDep):
            return await handler.get_order(identity, id)
        ```
    """

    def __init__(self, order_service: OrderService) -> None:
        """Initialize the order handler.

        Args:
            order_service: The order aggregation service (required).
        """
        self._orders = order_service

    async def create_order(self, identity: Identity, request: CreateOrderRequest) -> Envelope[Order]:
        """Handle POST /order requests.

        Returns:
            Envelope with the created order

        Raises:
            NotFoundError: If the referenced product does not exist
            UpstreamRejection: If the order backend refused the order
            TransportError: If a backend was unreachable
        """
        order = await self._orders.create_order(request)
        logger.info(
            "Order %s placed by %s for product %s",
            order.get("id"),
            identity.username,
            request.product_id,
        )
        return Envelope[Order](data=Order.model_validate(order))

    async def get_order(self, identity: Identity, order_id: str) -> Envelope[PackedOrder]:
        """Handle GET /order/{id} requests.

        Returns:
            Envelope with the order and its embedded product summary
        """
        order = await self._orders.get_order(order_id)
        return Envelope[PackedOrder](data=PackedOrder.model_validate(order))

    async def list_orders(self, identity: Identity, window: PageWindow) -> Envelope[ResourceList]:
        """Handle GET /order requests."""
        orders = await self._orders.list_orders(window)
        return Envelope[ResourceList](data=orders)
