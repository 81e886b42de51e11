"""Pydantic models describing Product payloads."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel


class Reviews(BaseModel):
    """Up to five customer/review pairs, stored as a fixed mapping."""

    customer1: str | None = None
    review1: str | None = None
    customer2: str | None = None
    review2: str | None = None
    customer3: str | None = None
    review3: str | None = None
    customer4: str | None = None
    review4: str | None = None
    customer5: str | None = None
    review5: str | None = None

    model_config = ConfigDict(extra="ignore")


class ProductFields(BaseModel):
    """Union of every product field across schema variants.

    Types are checked here; which fields are required (and how many images
    are expected) depends on the active variant and is enforced by the
    service layer.
    """

    name: str | None = Field(None, max_length=255)
    price: float | None = Field(None, ge=0, allow_inf_nan=False)
    corrected_price: float | None = Field(None, ge=0, allow_inf_nan=False)
    retail_price: float | None = Field(None, ge=0, allow_inf_nan=False)
    sale_price: float | None = Field(None, ge=0, allow_inf_nan=False)
    image: str | None = None
    images: list[str] | None = None
    description_pictures: list[str] | None = None
    category: str | None = Field(None, max_length=255)
    description: str | None = None
    mini_description: str | None = None
    reviews: Reviews | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("images", "description_pictures", mode="before")
    @classmethod
    def wrap_single_url(cls, v):
        """Accept a bare URL string where a list of URLs is expected."""
        if isinstance(v, str):
            return [v]
        return v


class ProductCreate(ProductFields):
    """Schema for POST bodies."""


class ProductUpdate(ProductFields):
    """Schema for PUT bodies (full replace)."""


class ProductRead(BaseModel):
    id: str
    name: str
    price: float | None = None
    corrected_price: float | None = None
    retail_price: float | None = None
    sale_price: float | None = None
    image: str | None = None
    images: list[str] = Field(default_factory=list)
    description_pictures: list[str] = Field(default_factory=list)
    category: str | None = None
    description: str | None = None
    mini_description: str | None = None
    reviews: Reviews = Field(default_factory=Reviews)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("reviews", mode="before")
    @classmethod
    def default_reviews(cls, v):
        return v or {}

    @field_serializer("created_at", "updated_at")
    def serialize_timestamps(self, value: datetime | None) -> str | None:
        """Convert datetime to ISO format string."""
        if value is None:
            return None
        return value.isoformat()

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class DeleteConfirmation(BaseModel):
    message: str
