"""CRUD endpoints for the product catalog."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from catalog.api.dependencies.db import get_session
from catalog.api.dependencies.settings import get_app_settings, get_schema_variant
from catalog.api.schemas.product import (
    DeleteConfirmation,
    ProductCreate,
    ProductRead,
    ProductUpdate,
)
from catalog.core.config import Settings
from catalog.services import product_service
from catalog.services.errors import CatalogError
from catalog.utils.product_validator import SchemaVariant

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_http(e: CatalogError) -> HTTPException:
    return HTTPException(status_code=e.status_code, detail=e.message)


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Unexpected error {action}: {e}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred",
    )


@router.get(
    "",
    summary="List all products",
    response_model=list[ProductRead],
)
def list_products(
    db: Session = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
) -> list[ProductRead]:
    """Return every product; newest first unless LIST_ORDER=insertion."""
    try:
        products = product_service.list_products(db, settings.list_order)
        return [ProductRead.model_validate(p) for p in products]
    except CatalogError as e:
        raise _to_http(e) from e
    except Exception as e:
        raise _unexpected("listing products", e) from e


@router.post(
    "",
    summary="Create a product",
    status_code=status.HTTP_201_CREATED,
    response_model=ProductRead,
)
def create_product(
    payload: ProductCreate,
    db: Session = Depends(get_session),
    variant: SchemaVariant = Depends(get_schema_variant),
) -> ProductRead:
    """Persist a new product after checking it against the active schema."""
    try:
        product = product_service.create_product(db, payload, variant)
        return ProductRead.model_validate(product)
    except CatalogError as e:
        raise _to_http(e) from e
    except Exception as e:
        raise _unexpected("creating product", e) from e


@router.get(
    "/{product_id}",
    summary="Fetch a product by id",
    response_model=ProductRead,
)
def get_product(
    product_id: str,
    db: Session = Depends(get_session),
) -> ProductRead:
    try:
        product = product_service.get_product(db, product_id)
        return ProductRead.model_validate(product)
    except CatalogError as e:
        raise _to_http(e) from e
    except Exception as e:
        raise _unexpected(f"fetching product {product_id}", e) from e


@router.put(
    "/{product_id}",
    summary="Replace an existing product",
    response_model=ProductRead,
)
def update_product(
    product_id: str,
    payload: ProductUpdate,
    db: Session = Depends(get_session),
    variant: SchemaVariant = Depends(get_schema_variant),
) -> ProductRead:
    """Overwrite all fields of a product.

    Validation matches creation. Fields left out of the body are cleared.
    """
    try:
        product = product_service.update_product(db, product_id, payload, variant)
        return ProductRead.model_validate(product)
    except CatalogError as e:
        raise _to_http(e) from e
    except Exception as e:
        raise _unexpected(f"updating product {product_id}", e) from e


@router.delete(
    "/{product_id}",
    summary="Delete a product",
    response_model=DeleteConfirmation,
)
def delete_product(
    product_id: str,
    db: Session = Depends(get_session),
) -> DeleteConfirmation:
    try:
        product_service.delete_product(db, product_id)
        return DeleteConfirmation(message="Product deleted successfully")
    except CatalogError as e:
        raise _to_http(e) from e
    except Exception as e:
        raise _unexpected(f"deleting product {product_id}", e) from e
