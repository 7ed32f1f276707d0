"""HTTP handlers for category operations."""

import logging

from ecommerce_gateway.dto import (
    Category,
    CreateCategoryRequest,
    Envelope,
    ResourceList,
    UpdateCategoryRequest,
)
from ecommerce_gateway.entities import Identity, PageWindow
from ecommerce_gateway.errors import (
    BackendFailure,
    NotFoundError,
    RpcError,
    UpstreamRejection,
    translate_rpc_error,
    translate_update_error,
)
from ecommerce_gateway.protocols import CategoryBackend

logger = logging.getLogger(__name__)


class CategoryHandler:
    """HTTP handlers for the category resource.

    Each method takes the identity the gate admitted and the bound request,
    calls the category backend once and wraps the result in an envelope.
    """

    def __init__(self, categories: CategoryBackend) -> None:
        """Initialize the category handler.

        Args:
            categories: Category backend client (required).
        """
        self._categories = categories

    async def create_category(
        self, identity: Identity, request: CreateCategoryRequest
    ) -> Envelope[Category]:
        """Handle POST /category requests.

        Raises:
            UpstreamRejection: If the backend refused the category
            TransportError: If the backend was unreachable
        """
        try:
            category = await self._categories.create_category(request.category_title)
        except RpcError as e:
            raise translate_rpc_error(e, UpstreamRejection) from e

        logger.info("Category %s created by %s", category.get("id"), identity.username)
        return Envelope[Category](data=Category.model_validate(category))

    async def get_category(self, identity: Identity, category_id: str) -> Envelope[Category]:
        """Handle GET /category/{id} requests."""
        try:
            category = await self._categories.get_category_by_id(category_id)
        except RpcError as e:
            raise translate_rpc_error(e, NotFoundError) from e

        return Envelope[Category](data=Category.model_validate(category))

    async def list_categories(self, identity: Identity, window: PageWindow) -> Envelope[ResourceList]:
        """Handle GET /category requests."""
        try:
            categories = await self._categories.get_category_list(window)
        except RpcError as e:
            raise translate_rpc_error(e, BackendFailure) from e

        return Envelope[ResourceList](data=categories)

    async def update_category(
        self, identity: Identity, request: UpdateCategoryRequest
    ) -> Envelope[Category]:
        """Handle PUT /category requests.

        Raises:
            NotFoundError: If the backend could not update the category
            UpstreamRejection: If the backend refused the new values
            TransportError: If the backend was unreachable
        """
        try:
            category = await self._categories.update_category(request.id, request.category_title)
        except RpcError as e:
            raise translate_update_error(e) from e

        logger.info("Category %s updated by %s", request.id, identity.username)
        return Envelope[Category](data=Category.model_validate(category))

    async def delete_category(self, identity: Identity, category_id: str) -> Envelope[Category]:
        """Handle DELETE /category/{id} requests.

        Returns:
            Envelope with the backend's representation of the deleted category
        """
        try:
            category = await self._categories.delete_category(category_id)
        except RpcError as e:
            raise translate_rpc_error(e, UpstreamRejection) from e

        logger.info("Category %s deleted by %s", category_id, identity.username)
        return Envelope[Category](data=Category.model_validate(category))
