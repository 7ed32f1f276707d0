"""Category backend protocol."""

from typing import Any, Protocol, runtime_checkable

from ecommerce_gateway.entities import PageWindow


@runtime_checkable
class CategoryBackend(Protocol):
    """Protocol for the category service."""

    async def create_category(self, category_title: str) -> dict[str, Any]:
        ...

    async def get_category_by_id(self, category_id: str) -> dict[str, Any]:
        ...

    async def get_category_list(self, window: PageWindow) -> dict[str, Any]:
        ...

    async def update_category(self, category_id: str, category_title: str) -> dict[str, Any]:
        ...

    async def delete_category(self, category_id: str) -> dict[str, Any]:
        ...
