"""REST route table.

Routes only bind the request and pick an access policy; the handlers do
the backend work. Protected routes take the gate's ``Identity`` as their
first dependency so the access check runs before any other binding.

Access:
    - public: POST /login
    - any authenticated caller: category/product reads, all order routes
    - admin: category/product writes, all user routes
"""

from typing import Any

from fastapi import APIRouter, status

from ecommerce_gateway.dto import (
    Category,
    CreateCategoryRequest,
    CreateOrderRequest,
    CreateProductRequest,
    CreateUserRequest,
    Envelope,
    ErrorEnvelope,
    LoginRequest,
    Order,
    PackedOrder,
    Product,
    ResourceList,
    TokenResponse,
    UpdateCategoryRequest,
    UpdateProductRequest,
    UpdateUserRequest,
    User,
)

from .dependencies import (
    AuthHandlerDep,
    CategoryHandlerDep,
    OrderHandlerDep,
    PageWindowDep,
    ProductHandlerDep,
    UserHandlerDep,
)
from .security import AdminIdentity, AnyIdentity

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorEnvelope},
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorEnvelope},
    status.HTTP_404_NOT_FOUND: {"model": ErrorEnvelope},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorEnvelope},
}

auth_router = APIRouter(tags=["auth"], responses=ERROR_RESPONSES)
category_router = APIRouter(prefix="/category", tags=["categories"], responses=ERROR_RESPONSES)
product_router = APIRouter(prefix="/product", tags=["products"], responses=ERROR_RESPONSES)
order_router = APIRouter(prefix="/order", tags=["orders"], responses=ERROR_RESPONSES)
user_router = APIRouter(prefix="/user", tags=["users"], responses=ERROR_RESPONSES)


@auth_router.post(
    "/login",
    response_model=Envelope[TokenResponse],
    status_code=status.HTTP_201_CREATED,
)
async def login(body: LoginRequest, handler: AuthHandlerDep) -> Envelope[TokenResponse]:
    """Exchange a username and password for a bearer token."""
    return await handler.login(body)


# Categories


@category_router.post("", response_model=Envelope[Category], status_code=status.HTTP_201_CREATED)
async def create_category(
    identity: AdminIdentity, body: CreateCategoryRequest, handler: CategoryHandlerDep
) -> Envelope[Category]:
    return await handler.create_category(identity, body)


@category_router.get("/{category_id}", response_model=Envelope[Category])
async def get_category(
    identity: AnyIdentity, category_id: str, handler: CategoryHandlerDep
) -> Envelope[Category]:
    return await handler.get_category(identity, category_id)


@category_router.get("", response_model=Envelope[ResourceList])
async def list_categories(
    identity: AnyIdentity, window: PageWindowDep, handler: CategoryHandlerDep
) -> Envelope[ResourceList]:
    return await handler.list_categories(identity, window)


@category_router.put("", response_model=Envelope[Category])
async def update_category(
    identity: AdminIdentity, body: UpdateCategoryRequest, handler: CategoryHandlerDep
) -> Envelope[Category]:
    return await handler.update_category(identity, body)


@category_router.delete("/{category_id}", response_model=Envelope[Category])
async def delete_category(
    identity: AdminIdentity, category_id: str, handler: CategoryHandlerDep
) -> Envelope[Category]:
    return await handler.delete_category(identity, category_id)


# Products


@product_router.post("", response_model=Envelope[Product], status_code=status.HTTP_201_CREATED)
async def create_product(
    identity: AdminIdentity, body: CreateProductRequest, handler: ProductHandlerDep
) -> Envelope[Product]:
    return await handler.create_product(identity, body)


@product_router.get("/{product_id}", response_model=Envelope[Product])
async def get_product(
    identity: AnyIdentity, product_id: str, handler: ProductHandlerDep
) -> Envelope[Product]:
    return await handler.get_product(identity, product_id)


@product_router.get("", response_model=Envelope[ResourceList])
async def list_products(
    identity: AnyIdentity, window: PageWindowDep, handler: ProductHandlerDep
) -> Envelope[ResourceList]:
    return await handler.list_products(identity, window)


@product_router.put("", response_model=Envelope[Product])
async def update_product(
    identity: AdminIdentity, body: UpdateProductRequest, handler: ProductHandlerDep
) -> Envelope[Product]:
    return await handler.update_product(identity, body)


@product_router.delete("/{product_id}", response_model=Envelope[Product])
async def delete_product(
    identity: AdminIdentity, product_id: str, handler: ProductHandlerDep
) -> Envelope[Product]:
    return await handler.delete_product(identity, product_id)


# Orders


@order_router.post("", response_model=Envelope[Order], status_code=status.HTTP_201_CREATED)
async def create_order(
    identity: AnyIdentity, body: CreateOrderRequest, handler: OrderHandlerDep
) -> Envelope[Order]:
    """Place an order. The referenced product must exist."""
    return await handler.create_order(identity, body)


@order_router.get("/{order_id}", response_model=Envelope[PackedOrder])
async def get_order(
    identity: AnyIdentity, order_id: str, handler: OrderHandlerDep
) -> Envelope[PackedOrder]:
    """Get an order with its product's id and title embedded."""
    return await handler.get_order(identity, order_id)


@order_router.get("", response_model=Envelope[ResourceList])
async def list_orders(
    identity: AnyIdentity, window: PageWindowDep, handler: OrderHandlerDep
) -> Envelope[ResourceList]:
    return await handler.list_orders(identity, window)


# Users


@user_router.post("", response_model=Envelope[User], status_code=status.HTTP_201_CREATED)
async def create_user(
    identity: AdminIdentity, body: CreateUserRequest, handler: UserHandlerDep
) -> Envelope[User]:
    return await handler.create_user(identity, body)


@user_router.get("/{user_id}", response_model=Envelope[User])
async def get_user(identity: AdminIdentity, user_id: str, handler: UserHandlerDep) -> Envelope[User]:
    return await handler.get_user(identity, user_id)


@user_router.get("", response_model=Envelope[ResourceList])
async def list_users(
    identity: AdminIdentity, window: PageWindowDep, handler: UserHandlerDep
) -> Envelope[ResourceList]:
    return await handler.list_users(identity, window)


@user_router.put("", response_model=Envelope[User])
async def update_user(
    identity: AdminIdentity, body: UpdateUserRequest, handler: UserHandlerDep
) -> Envelope[User]:
    return await handler.update_user(identity, body)


@user_router.delete("/{user_id}", response_model=Envelope[User])
async def delete_user(
    identity: AdminIdentity, user_id: str, handler: UserHandlerDep
) -> Envelope[User]:
    return await handler.delete_user(identity, user_id)


def build_router() -> APIRouter:
    """Combine all resource routers into one versioned router."""
    router = APIRouter()
    for resource_router in (auth_router, category_router, product_router, order_router, user_router):
        router.include_router(resource_router)
    return router
