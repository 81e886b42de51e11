"""Test the product service against the store directly."""

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from catalog.api.schemas.product import ProductCreate
from catalog.services import product_service
from catalog.services.errors import NotFoundError, StorageError, ValidationError
from catalog.utils.product_validator import get_variant

from tests.conftest import IMAGES, PICTURES

FULL = get_variant("full")


def _payload(**overrides) -> ProductCreate:
    data = {
        "name": "  Mug  ",
        "price": 10,
        "category": "kitchen",
        "images": IMAGES,
        "descriptionPictures": PICTURES,
    }
    data.update(overrides)
    return ProductCreate.model_validate(data)


class TestCreate:
    def test_trims_text_and_fills_empties(self, db):
        product = product_service.create_product(db, _payload(), FULL)

        assert product.name == "Mug"
        assert product.description is None
        assert product.reviews == {}
        assert product.created_at is not None

    def test_single_url_is_wrapped(self, db):
        product = product_service.create_product(
            db, _payload(images=IMAGES[0]), get_variant("gallery")
        )

        assert product.images == [IMAGES[0]]

    def test_store_failure_becomes_storage_error(self):
        db = MagicMock()
        db.commit.side_effect = OperationalError("INSERT", {}, Exception("gone"))

        with pytest.raises(StorageError):
            product_service.create_product(db, _payload(), FULL)
        db.rollback.assert_called_once()


class TestReadWriteDelete:
    def test_get_unknown_raises_not_found(self, db):
        with pytest.raises(NotFoundError):
            product_service.get_product(db, "00000000-0000-4000-8000-000000000000")

    def test_malformed_id_never_touches_the_store(self):
        db = MagicMock()

        for call in (
            lambda: product_service.get_product(db, "bad"),
            lambda: product_service.update_product(db, "bad", _payload(), FULL),
            lambda: product_service.delete_product(db, "bad"),
        ):
            with pytest.raises(ValidationError):
                call()

        assert db.method_calls == []

    def test_update_keeps_id_and_created_at(self, db):
        product = product_service.create_product(db, _payload(), FULL)
        product_id, created_at = product.id, product.created_at

        updated = product_service.update_product(
            db, product_id, _payload(name="Cup", description="Small"), FULL
        )

        assert updated.id == product_id
        assert updated.created_at == created_at
        assert updated.name == "Cup"
        assert updated.description == "Small"

    def test_delete_removes_row(self, db):
        product = product_service.create_product(db, _payload(), FULL)

        product_service.delete_product(db, product.id)

        with pytest.raises(NotFoundError):
            product_service.delete_product(db, product.id)

    def test_list_failure_becomes_storage_error(self):
        db = MagicMock()
        db.scalars.side_effect = OperationalError("SELECT", {}, Exception("gone"))

        with pytest.raises(StorageError):
            product_service.list_products(db)

    def test_identical_update_skips_the_write(self, db):
        product = product_service.create_product(db, _payload(), FULL)
        updated_at = product.updated_at

        with patch.object(db, "commit", wraps=db.commit) as commit:
            same = product_service.update_product(db, product.id, _payload(), FULL)

        commit.assert_not_called()
        assert same.updated_at == updated_at
