"""Test settings parsing."""

from catalog.core.config import DEFAULT_CORS_ORIGINS, Settings


class TestDatabaseUrl:
    def test_heroku_url_is_rewritten(self):
        settings = Settings(database_url="postgres://u:p@db:5432/catalog")

        assert settings.database_url == "postgresql+psycopg://u:p@db:5432/catalog"

    def test_blank_url_means_unset(self):
        assert Settings(database_url="  ").database_url is None

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite:///catalog.db")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("PRODUCT_SCHEMA", "gallery")

        settings = Settings()

        assert settings.database_url == "sqlite:///catalog.db"
        assert settings.port == 8080
        assert settings.product_schema == "gallery"


class TestCorsOrigins:
    def test_defaults(self):
        assert Settings(cors_origins_raw=None).cors_origins == DEFAULT_CORS_ORIGINS

    def test_parses_comma_separated_list(self):
        settings = Settings(cors_origins_raw="https://shop.example.com/, https://admin.example.com")

        assert settings.cors_origins == [
            "https://shop.example.com",
            "https://admin.example.com",
        ]


class TestApiPrefix:
    def test_normalized(self):
        assert Settings(api_prefix="v1/").api_prefix == "/v1"
        assert Settings(api_prefix="/").api_prefix == ""


class TestPrefixRouting:
    def test_custom_prefix(self, make_client):
        client = make_client(api_prefix="/v2")

        assert client.get("/v2/products").status_code == 200
        assert client.get("/products").status_code == 200
