"""HTTP handlers for product operations."""

import logging

from ecommerce_gateway.dto import (
    CreateProductRequest,
    Envelope,
    Product,
    ResourceList,
    UpdateProductRequest,
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
from ecommerce_gateway.protocols import ProductBackend

logger = logging.getLogger(__name__)


class ProductHandler:
    """HTTP handlers for the product resource."""

    def __init__(self, products: ProductBackend) -> None:
        self._products = products

    async def create_product(
        self, identity: Identity, request: CreateProductRequest
    ) -> Envelope[Product]:
        """Handle POST /product requests.

        Whether the category exists is for the product backend to decide.
        """
        try:
            product = await self._products.create_product(
                category_id=request.category_id,
                title=request.title,
                descrip=request.descrip,
                price=request.price,
            )
        except RpcError as e:
            raise translate_rpc_error(e, UpstreamRejection) from e

        logger.info("Product %s created by %s", product.get("id"), identity.username)
        return Envelope[Product](data=Product.model_validate(product))

    async def get_product(self, identity: Identity, product_id: str) -> Envelope[Product]:
        """Handle GET /product/{id} requests."""
        try:
            product = await self._products.get_product_by_id(product_id)
        except RpcError as e:
            raise translate_rpc_error(e, NotFoundError) from e

        return Envelope[Product](data=Product.model_validate(product))

    async def list_products(self, identity: Identity, window: PageWindow) -> Envelope[ResourceList]:
        """Handle GET /product requests."""
        try:
            products = await self._products.get_product_list(window)
        except RpcError as e:
            raise translate_rpc_error(e, BackendFailure) from e

        return Envelope[ResourceList](data=products)

    async def update_product(
        self, identity: Identity, request: UpdateProductRequest
    ) -> Envelope[Product]:
        """Handle PUT /product requests."""
        try:
            product = await self._products.update_product(
                product_id=request.id,
                title=request.title,
                price=request.price,
            )
        except RpcError as e:
            raise translate_update_error(e) from e

        logger.info("Product %s updated by %s", request.id, identity.username)
        return Envelope[Product](data=Product.model_validate(product))

    async def delete_product(self, identity: Identity, product_id: str) -> Envelope[Product]:
        """Handle DELETE /product/{id} requests."""
        try:
            product = await self._products.delete_product(product_id)
        except RpcError as e:
            raise translate_rpc_error(e, UpstreamRejection) from e

        logger.info("Product %s deleted by %s", product_id, identity.username)
        return Envelope[Product](data=Product.model_validate(product))
