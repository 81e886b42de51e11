"""Typed failures raised by the product service.

Each error carries the HTTP status it maps to, so routers can translate the
error kind without inspecting message text.
"""

from __future__ import annotations

from fastapi import status


class CatalogError(Exception):
    """Base class for every failure a catalog operation can report."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(CatalogError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "All fields are required"


class NotFoundError(CatalogError):
    """No product exists for the given identifier."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Product not found"


class StorageError(CatalogError):
    """Any failure reported by the persistence layer, connectivity included."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server Error"
