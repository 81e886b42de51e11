"""Validate product payloads against the active schema variant."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import uuid

from catalog.services.errors import ValidationError


@dataclass(frozen=True)
class SchemaVariant:
    """Required fields and list-length rules for one deployment's schema.

    ``images_count`` / ``description_pictures_count``: ``None`` skips the
    check, ``0`` requires a non-empty list, any other value an exact length.
    """

    name: str
    required_fields: tuple[str, ...]
    images_count: int | None = None
    description_pictures_count: int | None = None


SCHEMA_VARIANTS: dict[str, SchemaVariant] = {
    "basic": SchemaVariant(
        name="basic",
        required_fields=("name", "price", "category"),
    ),
    "gallery": SchemaVariant(
        name="gallery",
        required_fields=("name", "price", "category"),
        images_count=0,
    ),
    "retail": SchemaVariant(
        name="retail",
        required_fields=("name", "retail_price", "sale_price", "category"),
        images_count=0,
    ),
    "full": SchemaVariant(
        name="full",
        required_fields=("name", "price", "category"),
        images_count=5,
        description_pictures_count=3,
    ),
}


def get_variant(name: str) -> SchemaVariant:
    try:
        return SCHEMA_VARIANTS[name]
    except KeyError:
        raise ValueError(f"Unknown product schema variant: {name}") from None


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (int, float)):
        return value == 0
    return False


def validate_product_fields(fields: dict[str, Any], variant: SchemaVariant) -> None:
    """Raise ``ValidationError`` unless ``fields`` satisfy ``variant``.

    ``fields`` uses snake_case keys. Checks run in order: required scalars,
    then ``images``, then ``descriptionPictures``.
    """
    missing = [key for key in variant.required_fields if _is_blank(fields.get(key))]
    if missing:
        raise ValidationError("All fields are required")

    images = fields.get("images") or []
    if variant.images_count == 0 and not images:
        raise ValidationError("Please provide at least one product image")
    if variant.images_count and len(images) != variant.images_count:
        raise ValidationError(
            f"Please provide exactly {variant.images_count} product images"
        )
    if any(_is_blank(url) for url in images):
        raise ValidationError("Product image URLs cannot be empty")

    pictures = fields.get("description_pictures") or []
    if variant.description_pictures_count and (
        len(pictures) != variant.description_pictures_count
    ):
        raise ValidationError(
            f"Please provide exactly {variant.description_pictures_count} description pictures"
        )
    if any(_is_blank(url) for url in pictures):
        raise ValidationError("Description picture URLs cannot be empty")


def parse_product_id(product_id: str) -> str:
    """Return the canonical form of ``product_id`` or raise ``ValidationError``."""
    try:
        return str(uuid.UUID(product_id.strip()))
    except (AttributeError, ValueError):
        raise ValidationError("Invalid product ID") from None
