"""RPC clients for the catalog backend (categories and products)."""

from typing import Any

from ecommerce_gateway.entities import PageWindow

from .messages import window_message
from .rpc_channel import RpcChannel


class CategoryServiceClient:
    """RPC client satisfying the CategoryBackend protocol."""

    SERVICE = "CategoryService"

    def __init__(self, channel: RpcChannel) -> None:
        self._channel = channel

    async def create_category(self, category_title: str) -> dict[str, Any]:
        return await self._channel.call(
            self.SERVICE, "CreateCategory", {"category_title": category_title}
        )

    async def get_category_by_id(self, category_id: str) -> dict[str, Any]:
        return await self._channel.call(self.SERVICE, "GetCategoryById", {"id": category_id})

    async def get_category_list(self, window: PageWindow) -> dict[str, Any]:
        return await self._channel.call(self.SERVICE, "GetCategoryList", window_message(window))

    async def update_category(self, category_id: str, category_title: str) -> dict[str, Any]:
        return await self._channel.call(
            self.SERVICE,
            "UpdateCategory",
            {"id": category_id, "category_title": category_title},
        )

    async def delete_category(self, category_id: str) -> dict[str, Any]:
        return await self._channel.call(self.SERVICE, "DeleteCategory", {"id": category_id})


class ProductServiceClient:
    """RPC client satisfying the ProductBackend protocol."""

    SERVICE = "ProductService"

    def __init__(self, channel: RpcChannel) -> None:
        self._channel = channel

    async def create_product(
        self,
        category_id: str,
        title: str,
        descrip: str,
        price: float,
    ) -> dict[str, Any]:
        return await self._channel.call(
            self.SERVICE,
            "CreateProduct",
            {
                "category_id": category_id,
                "title": title,
                "descrip": descrip,
                "price": price,
            },
        )

    async def get_product_by_id(self, product_id: str) -> dict[str, Any]:
        return await self._channel.call(self.SERVICE, "GetProductById", {"id": product_id})

    async def get_product_list(self, window: PageWindow) -> dict[str, Any]:
        return await self._channel.call(self.SERVICE, "GetProductList", window_message(window))

    async def update_product(self, product_id: str, title: str, price: float) -> dict[str, Any]:
        return await self._channel.call(
            self.SERVICE,
            "UpdateProduct",
            {"id": product_id, "title": title, "price": price},
        )

    async def delete_product(self, product_id: str) -> dict[str, Any]:
        return await self._channel.call(self.SERVICE, "DeleteProduct", {"id": product_id})
