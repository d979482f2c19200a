# storefront/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime


class ProductOut(BaseModel):
    """Product as returned by the catalog endpoints."""

    id: int
    name: str
    description: str
    price: float
    image: str
    category: str
    stock: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AddToCartIn(BaseModel):
    """Body of POST /api/cart."""

    product_id: int = Field(..., description="Product id")
    quantity: int = Field(..., ge=1, description="Quantity to add (>= 1)")


class UpdateQuantityIn(BaseModel):
    """Body of PATCH /api/cart/:id, quantity 0 removes the item."""

    quantity: int = Field(..., ge=0)


class CartItemOut(BaseModel):
    id: int
    product_id: int
    quantity: int
    created_at: datetime
    updated_at: datetime
    product: ProductOut

    model_config = ConfigDict(from_attributes=True)


class AddToWishlistIn(BaseModel):
    product_id: int


class WishlistItemOut(BaseModel):
    id: int
    created_at: datetime
    product: ProductOut

    model_config = ConfigDict(from_attributes=True)


class ProfileIn(BaseModel):
    """Partial profile, only the fields present in the request are written."""

    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None

    model_config = ConfigDict(extra="ignore")


class ProfileOut(BaseModel):
    id: int
    user_id: str
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ReviewIn(BaseModel):
    rating: int = Field(..., ge=1, le=5, description="Rating 1-5")
    title: str | None = None
    comment: str | None = None


class ReviewOut(BaseModel):
    id: int
    user_id: str
    product_id: int
    rating: int
    title: str | None
    comment: str | None
    first_name: str | None
    last_name: str | None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SessionIn(BaseModel):
    code: str | None = None


class MessageOut(BaseModel):
    message: str


class CreatedOut(BaseModel):
    message: str
    id: int
