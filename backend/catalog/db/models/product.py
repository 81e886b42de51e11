"""SQLAlchemy model for product records."""

from datetime import datetime, timezone
import uuid

from sqlalchemy import JSON, Column, Float, String, Text
from sqlalchemy.types import DateTime

from catalog.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False)
    price = Column(Float)
    corrected_price = Column(Float)
    retail_price = Column(Float)
    sale_price = Column(Float)
    image = Column(Text)
    images = Column(JSON, nullable=False, default=list)
    description_pictures = Column(JSON, nullable=False, default=list)
    category = Column(String(255))
    description = Column(Text)
    mini_description = Column(Text)
    # customer1..5 / review1..5
    reviews = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)