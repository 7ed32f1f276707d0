"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Backend clients and handlers stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Annotated, Any

from fastapi import Depends, FastAPI, Query, Request

from ecommerce_gateway.clients import BackendClients
from ecommerce_gateway.config import Settings, get_settings
from ecommerce_gateway.entities import PageWindow
from ecommerce_gateway.entities.page_window import DEFAULT_LIMIT, DEFAULT_OFFSET
from ecommerce_gateway.handlers import (
    AuthHandler,
    CategoryHandler,
    OrderHandler,
    ProductHandler,
    UserHandler,
)
from ecommerce_gateway.services import OrderService

logger = logging.getLogger(__name__)

BackendConnector = Callable[[Settings], Awaitable[BackendClients]]


def _from_state(request: Request, name: str) -> Any:
    """Fetch an object stored on app.state during lifespan.

    Raises:
        RuntimeError: If the object is not initialized
    """
    value = getattr(request.app.state, name, None)
    if value is None:
        raise RuntimeError(f"{name} not initialized. Check lifespan setup.")
    return value


def get_backend_clients(request: Request) -> BackendClients:
    """Dependency injection for the BackendClients set from app.state."""
    return _from_state(request, "backend_clients")


def get_auth_handler(request: Request) -> AuthHandler:
    return _from_state(request, "auth_handler")


def get_category_handler(request: Request) -> CategoryHandler:
    return _from_state(request, "category_handler")


def get_product_handler(request: Request) -> ProductHandler:
    return _from_state(request, "product_handler")


def get_order_handler(request: Request) -> OrderHandler:
    return _from_state(request, "order_handler")


def get_user_handler(request: Request) -> UserHandler:
    return _from_state(request, "user_handler")


def get_page_window(
    offset: Annotated[int, Query(ge=0, description="Records to skip")] = DEFAULT_OFFSET,
    limit: Annotated[int, Query(ge=0, description="Maximum records to return")] = DEFAULT_LIMIT,
    search: Annotated[str, Query(description="Free-text filter")] = "",
) -> PageWindow:
    """Bind the pagination window from the query string.

    Non-integer or negative values fail binding, so the request is rejected
    with 400 before any resource backend is called.
    """
    return PageWindow(offset=offset, limit=limit, search=search)


def build_lifespan(connect: BackendConnector | None = None):
    """Build the lifespan context manager for the FastAPI app.

    Args:
        connect: Coroutine building the backend client set from settings.
            Defaults to BackendClients.connect.

    Returns:
        Lifespan context manager for FastAPI
    """
    connector = connect or BackendClients.connect

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for FastAPI app.

        Initializes all layers and stores them in app.state:
        1. Backend clients - one channel per backend, fatal if any fails
        2. Services - OrderService for order aggregation
        3. Handlers - one per resource

        Cleanup:
            Removes all objects from app.state and closes every channel
        """
        settings: Settings = getattr(app.state, "settings", None) or get_settings()

        # Fatal at startup: the gateway cannot run without all four backends
        clients = await connector(settings)

        order_service = OrderService(orders=clients.order, products=clients.product)

        app.state.backend_clients = clients
        app.state.auth_handler = AuthHandler(auth=clients.auth)
        app.state.category_handler = CategoryHandler(categories=clients.category)
        app.state.product_handler = ProductHandler(products=clients.product)
        app.state.order_handler = OrderHandler(order_service=order_service)
        app.state.user_handler = UserHandler(auth=clients.auth)

        logger.info("✓ Backend clients initialized")
        logger.info("✓ Catalog backend: %s", settings.catalog_service_url)
        logger.info("✓ Order backend: %s", settings.order_service_url)
        logger.info("✓ Auth backend: %s", settings.auth_service_url)

        try:
            yield
        finally:
            del app.state.user_handler
            del app.state.order_handler
            del app.state.product_handler
            del app.state.category_handler
            del app.state.auth_handler
            del app.state.backend_clients
            await clients.aclose()
            logger.info("✓ Backend clients shut down")

    return lifespan


# Type aliases for cleaner dependency injection
AuthHandlerDep = Annotated[AuthHandler, Depends(get_auth_handler)]
CategoryHandlerDep = Annotated[CategoryHandler, Depends(get_category_handler)]
ProductHandlerDep = Annotated[ProductHandler, Depends(get_product_handler)]
OrderHandlerDep = Annotated[OrderHandler, Depends(get_order_handler)]
UserHandlerDep = Annotated[UserHandler, Depends(get_user_handler)]
BackendClientsDep = Annotated[BackendClients, Depends(get_backend_clients)]
PageWindowDep = Annotated[PageWindow, Depends(get_page_window)]
