"""Response DTOs for API endpoints.

Resource models mirror the backend messages. Backends may omit fields that
hold default values and may add fields the gateway does not know about, so
every field is optional and unknown fields are passed through.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Success envelope wrapped around every successful response."""

    message: str = Field("OK", description="Status message")
    data: T = Field(..., description="The resource or collection")


class ErrorEnvelope(BaseModel):
    """Failure envelope returned by every failed request."""

    error: str = Field(..., description="Human-readable error message")


class BackendModel(BaseModel):
    """Base for resource models that pass unknown backend fields through."""

    model_config = ConfigDict(extra="allow")


class TokenResponse(BackendModel):
    token: str = Field("", description="Bearer credential for subsequent requests")


class Category(BackendModel):
    id: str = ""
    category_title: str = ""
    created_at: str | None = None
    updated_at: str | None = None


class Product(BackendModel):
    id: str = ""
    category_id: str = ""
    title: str = ""
    descrip: str = ""
    price: float = 0.0
    created_at: str | None = None
    updated_at: str | None = None


class ProductSummary(BaseModel):
    """Trimmed product projection embedded in an order."""

    id: str = Field(..., description="Product identifier")
    title: str = Field(..., description="Product title")


class Order(BackendModel):
    id: str = ""
    product_id: str = ""
    quantity: int = 0
    user_name: str = ""
    user_address: str = ""
    user_phone: str = ""
    created_at: str | None = None


class PackedOrder(Order):
    """Order enriched with a summary of the referenced product."""

    product: ProductSummary = Field(..., description="Referenced product (id and title)")


class User(BackendModel):
    id: str = ""
    username: str = ""
    user_type: str = ""
    created_at: str | None = None
    updated_at: str | None = None


# List responses are passed through exactly as the backend returned them
ResourceList = dict[str, Any]
