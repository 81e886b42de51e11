"""FastAPI application bootstrap and router wiring."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalog.api.routers import health, pages, products
from catalog.core.config import Settings, get_settings
from catalog.core.middleware import (
    BodySizeLimitMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed bodies as 400 like every other input error."""
    logger.warning(f"Invalid request to {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Instantiate the FastAPI app, its middleware and routers."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version="1.0.0")
    app.state.settings = settings

    logger.info(f"[CORS] Parsed allowed origins: {settings.cors_origins}")
    logger.info(
        f"Product schema: {settings.product_schema}, list order: {settings.list_order}"
    )

    # Last added runs first, so every response (413s included) gets the
    # security headers and a log line.
    app.add_middleware(BodySizeLimitMiddleware, max_bytes=settings.max_body_bytes)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(health.root_router)
    app.include_router(health.router)
    app.include_router(
        products.router,
        prefix=f"{settings.api_prefix}/products",
        tags=["products"],
    )
    if settings.api_prefix:
        # Unprefixed routes for clients of the earliest API revision.
        app.include_router(
            products.router,
            prefix="/products",
            tags=["products"],
            include_in_schema=False,
        )
    app.include_router(pages.router)

    return app


app = create_app()
