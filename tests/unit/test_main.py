"""Tests for the FastAPI application factory module."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from portal_api.core.config import Settings
from portal_api.main import create_app

PROCEDURES = [
    "healthcheck",
    "createNewsArticle",
    "getNewsArticles",
    "getFeaturedNews",
    "updateNewsArticle",
    "createGalleryItem",
    "getGalleryItems",
    "createInformationPage",
    "getInformationPages",
    "getInformationPageBySlug",
    "updateInformationPage",
    "createContactInfo",
    "getContactInfo",
]


class TestCreateApp:
    """Tests for create_app."""

    @pytest.fixture
    def app(self):
        with patch("portal_api.main.get_settings") as mock_settings:
            mock_settings.return_value = Settings(database_url="sqlite+aiosqlite:///:memory:")
            return create_app()

    def test_app_is_created(self, app) -> None:
        assert app is not None
        assert app.title == "Portal API"

    def test_app_has_openapi_schema(self, app) -> None:
        client = TestClient(app, raise_server_exceptions=False)
        response = client.get("/openapi.json")
        assert response.status_code == 200
        schema = response.json()
        assert schema["info"]["title"] == "Portal API"

    def test_every_procedure_is_registered(self, app) -> None:
        client = TestClient(app, raise_server_exceptions=False)
        schema = client.get("/openapi.json").json()
        operation_ids = {op["operationId"] for path in schema["paths"].values() for op in path.values()}
        assert set(PROCEDURES) <= operation_ids

    def test_procedures_mounted_under_api_prefix(self, app) -> None:
        paths = {route.path for route in app.routes}
        for name in PROCEDURES:
            assert f"/api/v1/{name}" in paths

    def test_value_error_handler_registered(self, app) -> None:
        handler = app.exception_handlers.get(ValueError)
        assert handler is not None


class TestAppLifespan:
    """Tests for lifespan management."""

    async def test_lifespan_init_and_dispose(self) -> None:
        """Lifespan context manager initializes and disposes engine."""
        from portal_api.main import lifespan

        mock_app = AsyncMock()

        with (
            patch("portal_api.main.get_settings") as mock_get_settings,
            patch("portal_api.main.setup_logging") as mock_setup_logging,
            patch("portal_api.main.init_engine") as mock_init_engine,
            patch("portal_api.main.dispose_engine", new_callable=AsyncMock) as mock_dispose,
        ):
            mock_get_settings.return_value = Settings(
                database_url="sqlite+aiosqlite:///:memory:",
                database_schema="portal_test",
            )

            async with lifespan(mock_app):
                mock_setup_logging.assert_called_once()
                mock_init_engine.assert_called_once_with(
                    "sqlite+aiosqlite:///:memory:",
                    echo=False,
                    schema="portal_test",
                )

            mock_dispose.assert_awaited_once()
