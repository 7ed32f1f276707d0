"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import (
    CreateCategoryRequest,
    CreateOrderRequest,
    CreateProductRequest,
    CreateUserRequest,
    LoginRequest,
    UpdateCategoryRequest,
    UpdateProductRequest,
    UpdateUserRequest,
)
from .responses import (
    Category,
    Envelope,
    ErrorEnvelope,
    Order,
    PackedOrder,
    Product,
    ProductSummary,
    ResourceList,
    TokenResponse,
    User,
)

__all__ = [
    "LoginRequest",
    "CreateCategoryRequest",
    "UpdateCategoryRequest",
    "CreateProductRequest",
    "UpdateProductRequest",
    "CreateOrderRequest",
    "CreateUserRequest",
    "UpdateUserRequest",
    "Envelope",
    "ErrorEnvelope",
    "TokenResponse",
    "Category",
    "Product",
    "ProductSummary",
    "Order",
    "PackedOrder",
    "User",
    "ResourceList",
]
