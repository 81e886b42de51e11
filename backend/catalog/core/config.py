"""Centralized application settings using pydantic settings."""

from functools import lru_cache
from pathlib import Path
from typing import List, Literal

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
# Look for .env in the backend directory or project root
env_path = Path(__file__).parent.parent.parent / ".env"
if not env_path.exists():
    env_path = Path(__file__).parent.parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path, override=False)

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:3000",
]


class Settings(BaseSettings):
    """Environment-aware configuration (store URL, port, schema variant)."""

    # Application settings
    app_name: str = "Product Catalog API"
    log_level: str = "INFO"
    port: int = Field(default=5000, description="Port the API listens on")
    api_prefix: str = Field(
        default="/api",
        description="Path prefix for the JSON product routes",
    )

    # Database settings
    database_url: str | None = Field(
        default=None,
        description="Store connection URL; the server refuses to start without it",
    )

    # Product schema settings
    product_schema: Literal["basic", "gallery", "retail", "full"] = Field(
        default="full",
        description="Active product schema variant (required fields, list lengths)",
    )
    list_order: Literal["newest", "insertion"] = Field(
        default="newest",
        description="Ordering of the product listing",
    )

    # Hardening
    max_body_bytes: int = Field(
        default=1024 * 1024,
        ge=1,
        description="Largest accepted request body, in bytes",
    )

    # CORS settings - stored as string, converted to list via property
    cors_origins_raw: str | None = Field(
        default=None,
        alias="CORS_ORIGINS",
        description="Comma-separated list of allowed CORS origins",
        exclude=True,
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS_ORIGINS from comma-separated string to list."""
        if self.cors_origins_raw is None or not self.cors_origins_raw.strip():
            return list(DEFAULT_CORS_ORIGINS)
        origins = [
            origin.strip().rstrip("/")
            for origin in self.cors_origins_raw.split(",")
            if origin.strip()
        ]
        return origins if origins else list(DEFAULT_CORS_ORIGINS)

    @field_validator("database_url", mode="before")
    @classmethod
    def fix_database_url(cls, v: str | None) -> str | None:
        """Fix Heroku DATABASE_URL format (postgres:// -> postgresql+psycopg://)."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        if isinstance(v, str) and v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql+psycopg://", 1)
        return v

    @field_validator("api_prefix", mode="after")
    @classmethod
    def normalize_api_prefix(cls, v: str) -> str:
        """Ensure a leading slash and no trailing slash ("" disables the prefix)."""
        v = v.strip().strip("/")
        return f"/{v}" if v else ""


@lru_cache
def get_settings() -> Settings:
    """Provide singleton-like access for dependency injection."""
    return Settings()
