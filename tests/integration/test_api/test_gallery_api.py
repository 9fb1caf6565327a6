"""Integration tests for the gallery procedures."""

from unittest.mock import AsyncMock, patch

from httpx import AsyncClient


async def _create(client: AsyncClient, **overrides: object) -> dict:
    body = {"title": "Harvest Festival", "image_url": "https://cdn.example.gov/festival.jpg", **overrides}
    response = await client.post("/api/v1/createGalleryItem", json=body)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateGalleryItem:
    """Tests for POST /api/v1/createGalleryItem."""

    async def test_create_minimal(self, client: AsyncClient) -> None:
        data = await _create(client)
        assert data["title"] == "Harvest Festival"
        assert data["image_url"] == "https://cdn.example.gov/festival.jpg"
        assert data["thumbnail_url"] is None
        assert data["category"] is None
        assert data["taken_at"] is None
        assert data["created_at"] is not None

    async def test_create_full(self, client: AsyncClient) -> None:
        data = await _create(
            client,
            description="Stalls on the green",
            thumbnail_url="https://cdn.example.gov/festival-thumb.jpg",
            category="events",
            taken_at="2025-09-20T15:00:00Z",
        )
        assert data["description"] == "Stalls on the green"
        assert data["thumbnail_url"] == "https://cdn.example.gov/festival-thumb.jpg"
        assert data["category"] == "events"
        assert data["taken_at"].startswith("2025-09-20T15:00:00")

    async def test_urls_returned_exactly_as_sent(self, client: AsyncClient) -> None:
        await _create(client, image_url="https://cdn.example.gov", thumbnail_url="https://cdn.example.gov")

        response = await client.get("/api/v1/getGalleryItems")
        (item,) = response.json()
        assert item["image_url"] == "https://cdn.example.gov"
        assert item["thumbnail_url"] == "https://cdn.example.gov"

    async def test_taken_at_offset_returned_as_same_instant(self, client: AsyncClient) -> None:
        data = await _create(client, taken_at="2025-09-20T11:00:00-04:00")
        assert data["taken_at"] == "2025-09-20T15:00:00Z"

    async def test_long_category_accepted(self, client: AsyncClient) -> None:
        data = await _create(client, category="c" * 500)
        assert data["category"] == "c" * 500

    async def test_malformed_url_returns_422(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/v1/createGalleryItem",
            json={"title": "Broken", "image_url": "festival.jpg"},
        )
        assert response.status_code == 422

    async def test_unexpected_error_returns_500(self, client: AsyncClient) -> None:
        with patch(
            "portal_api.api.v1.gallery.create_item",
            new_callable=AsyncMock,
            side_effect=RuntimeError("db down"),
        ):
            response = await client.post(
                "/api/v1/createGalleryItem",
                json={"title": "X", "image_url": "https://cdn.example.gov/x.jpg"},
            )
        assert response.status_code == 500


class TestGetGalleryItems:
    """Tests for GET /api/v1/getGalleryItems."""

    async def test_empty(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/getGalleryItems")
        assert response.status_code == 200
        assert response.json() == []

    async def test_most_recently_added_first(self, client: AsyncClient) -> None:
        await _create(client, title="First", taken_at="2020-01-01T00:00:00Z")
        await _create(client, title="Second", taken_at="2024-01-01T00:00:00Z")
        await _create(client, title="Third")

        response = await client.get("/api/v1/getGalleryItems")
        assert [i["title"] for i in response.json()] == ["Third", "Second", "First"]

    async def test_unexpected_error_returns_500(self, client: AsyncClient) -> None:
        with patch(
            "portal_api.api.v1.gallery.list_items",
            new_callable=AsyncMock,
            side_effect=RuntimeError("db down"),
        ):
            response = await client.get("/api/v1/getGalleryItems")
        assert response.status_code == 500
