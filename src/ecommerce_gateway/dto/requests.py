"""Request DTOs for API endpoints.

Only structural validation happens here: required fields must be present
and of the right type. Business rules belong to the backends.
"""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Request DTO for logging in."""

    username: str = Field(..., description="Account username")
    password: str = Field(..., description="Account password")


class CreateCategoryRequest(BaseModel):
    """Request DTO for creating a category."""

    category_title: str = Field(..., description="Display title of the category")


class UpdateCategoryRequest(BaseModel):
    """Request DTO for updating a category."""

    id: str = Field(..., description="Identifier of the category to update", min_length=1)
    category_title: str = Field(..., description="New display title")


class CreateProductRequest(BaseModel):
    """Request DTO for creating a product."""

    category_id: str = Field(..., description="Identifier of the owning category")
    title: str = Field(..., description="Product title")
    descrip: str = Field("", description="Free-text product description")
    price: float = Field(..., description="Unit price")


class UpdateProductRequest(BaseModel):
    """Request DTO for updating a product."""

    id: str = Field(..., description="Identifier of the product to update", min_length=1)
    title: str = Field(..., description="New product title")
    price: float = Field(..., description="New unit price")


class CreateOrderRequest(BaseModel):
    """Request DTO for placing an order.

    The referenced product is checked against the product backend before the
    order backend is called.
    """

    product_id: str = Field(..., description="Identifier of the ordered product")
    quantity: int = Field(..., description="Number of units ordered")
    user_name: str = Field(..., description="Buyer name")
    user_address: str = Field(..., description="Delivery address")
    user_phone: str = Field(..., description="Buyer phone number")


class CreateUserRequest(BaseModel):
    """Request DTO for creating a user."""

    username: str = Field(..., description="Account username")
    password: str = Field(..., description="Account password")
    user_type: str = Field(..., description="Role tag assigned to the account")


class UpdateUserRequest(BaseModel):
    """Request DTO for updating a user."""

    id: str = Field(..., description="Identifier of the user to update", min_length=1)
    password: str = Field(..., description="New password")
