"""Test liveness and readiness endpoints."""

from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from catalog.db.session import get_engine


class TestLiveness:
    def test_root_returns_plain_text(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Product API is running"

    def test_live_probe(self, client):
        response = client.get("/health/live")

        assert response.json() == {"status": "ok", "service": "product-catalog-api"}


class TestReadiness:
    def test_ready_when_store_answers(self, client):
        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["checks"]["database"]["status"] == "healthy"
        assert body["schema"] == "full"

    def test_unready_when_store_is_down(self, client):
        broken = MagicMock()
        broken.connect.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))
        client.app.dependency_overrides[get_engine] = lambda: broken

        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["detail"]["status"] == "unhealthy"
