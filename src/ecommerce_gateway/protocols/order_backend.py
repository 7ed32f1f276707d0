"""Order backend protocol."""

from typing import Any, Protocol, runtime_checkable

from ecommerce_gateway.entities import PageWindow


@runtime_checkable
class OrderBackend(Protocol):
    """Protocol for the order service."""

    async def create_order(
        self,
        product_id: str,
        quantity: int,
        user_name: str,
        user_address: str,
        user_phone: str,
    ) -> dict[str, Any]:
        """Create an order.

        The order backend does not check that the product exists; callers
        are expected to have done so.
        """
        ...

    async def get_order_by_id(self, order_id: str) -> dict[str, Any]:
        """Fetch an order. The referenced product is returned as ``product.id``."""
        ...

    async def get_order_list(self, window: PageWindow) -> dict[str, Any]:
        ...
