"""Settings and schema variant dependencies."""

from fastapi import Depends, Request

from catalog.core.config import Settings
from catalog.utils.product_validator import SchemaVariant, get_variant


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


def get_schema_variant(settings: Settings = Depends(get_app_settings)) -> SchemaVariant:
    """FastAPI dependency resolving PRODUCT_SCHEMA to its validation rules."""
    return get_variant(settings.product_schema)
