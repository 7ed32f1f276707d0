"""Product backend protocol."""

from typing import Any, Protocol, runtime_checkable

from ecommerce_gateway.entities import PageWindow


@runtime_checkable
class ProductBackend(Protocol):
    """Protocol for the product service.

    ``get_product_by_id`` is also used by the order aggregation to confirm
    a product exists and to fetch its title.
    """

    async def create_product(
        self,
        category_id: str,
        title: str,
        descrip: str,
        price: float,
    ) -> dict[str, Any]:
        ...

    async def get_product_by_id(self, product_id: str) -> dict[str, Any]:
        ...

    async def get_product_list(self, window: PageWindow) -> dict[str, Any]:
        ...

    async def update_product(self, product_id: str, title: str, price: float) -> dict[str, Any]:
        ...

    async def delete_product(self, product_id: str) -> dict[str, Any]:
        ...
