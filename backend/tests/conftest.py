"""Shared fixtures: an app wired to an in-memory SQLite store."""

from collections.abc import Callable, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from catalog.api.dependencies.db import get_session
from catalog.core.config import Settings
from catalog.db.base import Base
from catalog.db.models import Product  # noqa: F401
from catalog.db.session import get_engine
from catalog.main import create_app

IMAGES = [f"https://cdn.example.com/mug-{i}.jpg" for i in range(1, 6)]
PICTURES = [f"https://cdn.example.com/mug-detail-{i}.jpg" for i in range(1, 4)]


@pytest.fixture
def engine() -> Iterator[Engine]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db(session_factory) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_client(engine, session_factory) -> Callable[..., TestClient]:
    """Build a TestClient for an app configured with the given settings."""

    def _make(**overrides) -> TestClient:
        settings = Settings(database_url="sqlite://", **overrides)
        app: FastAPI = create_app(settings)

        def _session() -> Iterator[Session]:
            session = session_factory()
            try:
                yield session
            finally:
                session.close()

        app.dependency_overrides[get_session] = _session
        app.dependency_overrides[get_engine] = lambda: engine
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()


@pytest.fixture
def product_payload() -> dict:
    return {
        "name": "Mug",
        "price": 10,
        "category": "kitchen",
        "images": list(IMAGES),
        "descriptionPictures": list(PICTURES),
        "description": "A sturdy stoneware mug.",
        "miniDescription": "Stoneware mug",
        "reviews": {"customer1": "Ana", "review1": "Keeps coffee hot."},
    }
