"""
Tests for the dashboard HTTP routes.

The aggregation service is replaced through FastAPI dependency overrides, so
these tests cover the JSON contract and error mapping only.
"""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from app import create_app
from core.dependencies import get_aggregation_service
from core.errors import CatalogFetchError
from models import GenreTrend, PlatformStat, TrendingGame


@pytest.fixture()
def service() -> AsyncMock:
    mock = AsyncMock()
    mock.fetch_trending_games.return_value = [
        TrendingGame(id=3498, name="Grand Theft Auto V", image="gta.jpg", live_viewers=327000),
        TrendingGame(id=4200, name="Portal 2", image=None, live_viewers=0),
    ]
    mock.fetch_genre_trends.return_value = [
        GenreTrend(id="action", label="Action", value=2),
        GenreTrend(id="rpg", label="RPG", value=1),
    ]
    mock.fetch_platform_performance.return_value = [
        PlatformStat(id="pc", label="PC", value=500000),
    ]
    return mock


@pytest.fixture()
async def client(service):
    app = create_app()
    app.dependency_overrides[get_aggregation_service] = lambda: service

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


class TestDashboardContract:
    async def test_trending(self, client):
        r = await client.get("/api/trending")

        assert r.status_code == 200
        assert r.json() == [
            {"id": 3498, "name": "Grand Theft Auto V", "image": "gta.jpg", "liveViewers": 327000},
            {"id": 4200, "name": "Portal 2", "image": None, "liveViewers": 0},
        ]

    async def test_genre_trends(self, client):
        r = await client.get("/api/genre-trends")

        assert r.status_code == 200
        assert r.json() == [
            {"id": "action", "label": "Action", "value": 2},
            {"id": "rpg", "label": "RPG", "value": 1},
        ]

    async def test_platform_performance(self, client):
        r = await client.get("/api/platform-performance")

        assert r.status_code == 200
        assert r.json() == [{"id": "pc", "label": "PC", "value": 500000}]


class TestDashboardErrors:
    @pytest.mark.parametrize(
        "path, method",
        [
            ("/api/trending", "fetch_trending_games"),
            ("/api/genre-trends", "fetch_genre_trends"),
            ("/api/platform-performance", "fetch_platform_performance"),
        ],
    )
    async def test_catalog_failure_is_bad_gateway(self, client, service, path, method):
        getattr(service, method).side_effect = CatalogFetchError("RAWG /games returned 500", 500)

        r = await client.get(path)

        assert r.status_code == 502
        assert "detail" in r.json()

    async def test_unexpected_failure_is_server_error(self, client, service):
        service.fetch_trending_games.side_effect = RuntimeError("boom")

        r = await client.get("/api/trending")

        assert r.status_code == 500
        assert r.json() == {"detail": "Failed to fetch trending games"}


class TestServiceEndpoints:
    async def test_root(self, client):
        r = await client.get("/")
        assert r.json() == {"service": "gametrends-api", "status": "running"}

    async def test_health(self, client):
        r = await client.get("/health")
        assert r.status_code == 200
        assert r.json()["status"] == "healthy"

    async def test_ping(self, client):
        r = await client.get("/ping")
        assert r.text == "pong"

    async def test_cors_allows_frontend(self, client):
        r = await client.get("/health", headers={"Origin": "http://localhost:3000"})
        assert r.headers["access-control-allow-origin"] == "http://localhost:3000"
