"""Server-rendered product detail page."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from catalog.api.dependencies.db import get_session
from catalog.services import product_service
from catalog.services.errors import CatalogError

logger = logging.getLogger(__name__)
router = APIRouter(tags=["pages"])

# Jinja2Templates autoescapes .html templates, so stored text is never
# interpreted as markup.
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[2] / "templates"))


@router.get(
    "/product/{product_id}",
    summary="Render a product detail page",
    response_class=HTMLResponse,
)
def product_page(
    product_id: str,
    request: Request,
    db: Session = Depends(get_session),
):
    """Static HTML view of one product; errors are returned as plain text."""
    try:
        product = product_service.get_product(db, product_id)
    except CatalogError as e:
        return PlainTextResponse(e.message, status_code=e.status_code)
    except Exception as e:
        logger.error(f"Unexpected error rendering product {product_id}: {e}", exc_info=True)
        return PlainTextResponse(
            "Server Error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    images = list(product.images or [])
    if not images and product.image:
        images = [product.image]
    price = product.price if product.price is not None else product.sale_price

    return templates.TemplateResponse(
        request,
        "product.html",
        {"product": product, "images": images, "price": price},
    )
