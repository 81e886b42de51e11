#!/usr/bin/env python3
"""Start the API server, refusing to run without a reachable product store."""

import logging
import sys

import uvicorn
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from catalog.core.config import get_settings
from catalog.db.base import Base
from catalog.db.models import Product  # noqa: F401  (registers the table)
from catalog.db.session import get_engine
from catalog.main import configure_logging

logger = logging.getLogger("catalog.startup")


def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level)

    if not settings.database_url:
        logger.error("DATABASE_URL is not set; refusing to start")
        return 1

    engine = get_engine()
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        logger.error(f"Could not connect to the product store: {e}")
        return 1
    logger.info("Connected to the product store")

    logger.info(f"Server running on port {settings.port}")
    uvicorn.run("catalog.main:app", host="0.0.0.0", port=settings.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
