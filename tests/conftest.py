"""
pytest configuration and shared fixtures for the Game Trends API tests.

No test talks to RAWG or Twitch. Provider clients are built with an
``httpx.MockTransport`` whose handler is one of the stubs below; each stub
serves canned JSON and records what it was asked for so tests can assert on
call counts and query parameters.
"""

import asyncio
import os

import httpx
import pytest

# Set env vars BEFORE importing the app so Settings picks them up correctly
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("RAWG_API_KEY", "test-rawg-key")
os.environ.setdefault("TWITCH_CLIENT_ID", "test-client-id")
os.environ.setdefault("TWITCH_CLIENT_SECRET", "test-client-secret")

from services import RawgAPIClient, TwitchAPIClient  # noqa: E402

TWITCH_CLIENT_ID = "test-client-id"
TWITCH_CLIENT_SECRET = "test-client-secret"


# ── Twitch ────────────────────────────────────────────────────────────────────


class TwitchStub:
    """Fake id.twitch.tv + api.twitch.tv.

    games:   display name -> Helix /games ``data`` list
    streams: game id      -> Helix /streams ``data`` list
    """

    def __init__(self):
        self.games: dict[str, list[dict]] = {}
        self.streams: dict[str, list[dict]] = {}
        self.token_status = 200
        self.token_body: dict = {"access_token": "app-token-1", "token_type": "bearer"}
        self.token_delay = 0.0
        self.helix_status = 200
        self.broken_names: set[str] = set()
        self.delays: dict[str, float] = {}
        self.token_calls = 0
        self.requests: list[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/oauth2/token":
            self.token_calls += 1
            if self.token_delay:
                await asyncio.sleep(self.token_delay)
            return httpx.Response(self.token_status, json=self.token_body)

        if path == "/helix/games":
            name = request.url.params["name"]
            if name in self.broken_names:
                raise httpx.ConnectError("connection reset", request=request)
            if name in self.delays:
                await asyncio.sleep(self.delays[name])
            if self.helix_status != 200:
                return httpx.Response(self.helix_status, json={"message": "error"})
            return httpx.Response(200, json={"data": self.games.get(name, [])})

        if path == "/helix/streams":
            game_id = request.url.params["game_id"]
            return httpx.Response(200, json={"data": self.streams.get(game_id, [])})

        return httpx.Response(404, json={"message": "not found"})

    def add_game(self, name: str, game_id: str, viewer_counts: list[int]) -> None:
        self.games[name] = [{"id": game_id, "name": name}]
        self.streams[game_id] = [{"viewer_count": n} for n in viewer_counts]

    @property
    def helix_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.startswith("/helix/")]


@pytest.fixture()
def twitch_stub() -> TwitchStub:
    return TwitchStub()


@pytest.fixture()
async def twitch_api(twitch_stub):
    client = TwitchAPIClient(
        client_id=TWITCH_CLIENT_ID,
        client_secret=TWITCH_CLIENT_SECRET,
        transport=httpx.MockTransport(twitch_stub),
    )
    yield client
    await client.close()


# ── RAWG ──────────────────────────────────────────────────────────────────────


def rawg_game(game_id: int, name: str, genres: list[str], image: str | None = None) -> dict:
    return {
        "id": game_id,
        "name": name,
        "background_image": image or f"https://media.rawg.io/{game_id}.jpg",
        "genres": [{"id": i, "name": g} for i, g in enumerate(genres)],
        "added": 1000 - game_id,
    }


class RawgStub:
    """Fake api.rawg.io serving ``/games`` and ``/platforms``."""

    def __init__(self):
        self.games: list[dict] = []
        self.platforms: list[dict] = []
        self.status = 200
        self.unreachable = False
        self.requests: list[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.unreachable:
            raise httpx.ConnectError("name resolution failed", request=request)
        if self.status != 200:
            return httpx.Response(self.status, json={"error": "invalid key"})

        page_size = int(request.url.params.get("page_size", 20))
        if request.url.path == "/api/games":
            return httpx.Response(200, json={"count": 1, "results": self.games[:page_size]})
        if request.url.path == "/api/platforms":
            return httpx.Response(200, json={"count": 1, "results": self.platforms[:page_size]})
        return httpx.Response(404, json={"detail": "Not found."})


@pytest.fixture()
def rawg_stub() -> RawgStub:
    return RawgStub()


@pytest.fixture()
async def rawg_api(rawg_stub):
    client = RawgAPIClient(api_key="test-rawg-key", transport=httpx.MockTransport(rawg_stub))
    yield client
    await client.close()
