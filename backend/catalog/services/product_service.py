"""Product CRUD operations against the store.

Every function either returns the stored product(s) or raises one of the
errors in ``catalog.services.errors``. Nothing here knows about HTTP.
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.api.schemas.product import ProductFields
from catalog.db.models.product import Product
from catalog.services.errors import NotFoundError, StorageError, ValidationError
from catalog.utils.product_validator import (
    SchemaVariant,
    parse_product_id,
    validate_product_fields,
)

logger = logging.getLogger(__name__)

# Overwritten by a PUT; id and created_at are never replaced.
REPLACEABLE_FIELDS = (
    "name",
    "price",
    "corrected_price",
    "retail_price",
    "sale_price",
    "image",
    "images",
    "description_pictures",
    "category",
    "description",
    "mini_description",
    "reviews",
)

_EMPTY_DEFAULTS: dict[str, Any] = {
    "images": [],
    "description_pictures": [],
    "reviews": {},
}


def _clean(payload: ProductFields) -> dict[str, Any]:
    """Flatten a payload into column values, trimming text and filling empties."""
    data = payload.model_dump(by_alias=False)
    values: dict[str, Any] = {}
    for key in REPLACEABLE_FIELDS:
        value = data.get(key)
        if isinstance(value, str):
            value = value.strip() or None
        elif isinstance(value, list):
            value = [item.strip() for item in value]
        elif key == "reviews" and value:
            value = {k: v for k, v in value.items() if v is not None}
        if value is None:
            value = _EMPTY_DEFAULTS.get(key)
        values[key] = value
    return values


def _validated(payload: ProductFields, variant: SchemaVariant) -> dict[str, Any]:
    values = _clean(payload)
    try:
        validate_product_fields(values, variant)
    except ValidationError as e:
        logger.warning(f"Rejected product payload ({variant.name} schema): {e.message}")
        raise
    return values


def _lookup_id(product_id: str) -> str:
    try:
        return parse_product_id(product_id)
    except ValidationError:
        logger.warning(f"Rejected malformed product id {product_id!r}")
        raise


def _get_or_raise(db: Session, product_id: str) -> Product:
    product = db.get(Product, product_id)
    if product is None:
        logger.info(f"Product {product_id} not found")
        raise NotFoundError()
    return product


def create_product(
    db: Session, payload: ProductFields, variant: SchemaVariant
) -> Product:
    """Validate ``payload`` and insert it as a new product."""
    values = _validated(payload, variant)
    try:
        product = Product(**values)
        db.add(product)
        db.commit()
        db.refresh(product)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error creating product: {e}", exc_info=True)
        raise StorageError() from e

    logger.info(f"Created product {product.id} ({product.name})")
    return product


def list_products(
    db: Session, order: Literal["newest", "insertion"] = "newest"
) -> list[Product]:
    """Return every stored product, newest first unless ``order`` says otherwise."""
    if order == "newest":
        ordering = Product.created_at.desc()
    else:
        ordering = Product.created_at.asc()
    try:
        return list(db.scalars(select(Product).order_by(ordering)).all())
    except SQLAlchemyError as e:
        logger.error(f"Database error listing products: {e}", exc_info=True)
        raise StorageError() from e


def get_product(db: Session, product_id: str) -> Product:
    """Fetch one product by identifier."""
    key = _lookup_id(product_id)
    try:
        return _get_or_raise(db, key)
    except SQLAlchemyError as e:
        logger.error(f"Database error fetching product {key}: {e}", exc_info=True)
        raise StorageError() from e


def update_product(
    db: Session, product_id: str, payload: ProductFields, variant: SchemaVariant
) -> Product:
    """Replace every replaceable field of an existing product.

    Fields missing from ``payload`` are cleared rather than preserved. A
    payload identical to the stored product writes nothing, so ``updated_at``
    only moves when a field actually changes.
    """
    key = _lookup_id(product_id)
    values = _validated(payload, variant)
    try:
        product = _get_or_raise(db, key)
        changed = {
            field: value
            for field, value in values.items()
            if getattr(product, field) != value
        }
        if not changed:
            logger.info(f"Product {key} unchanged; skipping write")
            return product
        for field, value in changed.items():
            setattr(product, field, value)
        db.commit()
        db.refresh(product)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error updating product {key}: {e}", exc_info=True)
        raise StorageError() from e

    logger.info(f"Updated product {key}")
    return product


def delete_product(db: Session, product_id: str) -> None:
    """Permanently remove one product."""
    key = _lookup_id(product_id)
    try:
        product = _get_or_raise(db, key)
        db.delete(product)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error deleting product {key}: {e}", exc_info=True)
        raise StorageError() from e

    logger.info(f"Deleted product {key}")
