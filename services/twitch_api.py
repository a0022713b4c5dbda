"""Twitch Helix API client.

Only public endpoints are used, authenticated with an app access token from
``AppTokenCache``. Failures surface as ``TransientProviderError`` (or
``CredentialError`` from the token cache) for the caller to absorb.
"""

import logging
from typing import cast

import httpx

from core.errors import TransientProviderError
from services.token_cache import OAUTH_BASE, AppTokenCache

logger = logging.getLogger(__name__)

HELIX_BASE = "https://api.twitch.tv/helix"


class TwitchAPIClient:
    """Client for the Twitch Helix API.

    Manages a shared httpx client for connection reuse and owns the app
    token cache used by every Helix request.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        *,
        helix_url: str = HELIX_BASE,
        oauth_url: str = OAUTH_BASE,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.client_id = client_id
        self.helix_url = helix_url.rstrip("/")

        # Shared HTTP client — reuses TCP connections across requests
        self._http = httpx.AsyncClient(timeout=timeout, transport=transport)

        self.token_cache = AppTokenCache(
            client_id=client_id,
            client_secret=client_secret,
            http=self._http,
            oauth_url=oauth_url,
        )

    async def close(self) -> None:
        """Close the shared HTTP client. Call on app shutdown."""
        await self._http.aclose()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _app_headers(self, token: str) -> dict[str, str]:
        return {"Client-ID": self.client_id, "Authorization": f"Bearer {token}"}

    async def _helix_get(self, path: str, params: dict | None = None) -> list[dict]:
        """GET a Helix endpoint and return its ``data`` array."""
        token = await self.token_cache.get()
        try:
            response = await self._http.get(
                f"{self.helix_url}/{path}",
                params=params,
                headers=self._app_headers(token),
            )
        except httpx.HTTPError as e:
            raise TransientProviderError(f"Helix GET /{path} failed: {type(e).__name__}") from e

        if response.status_code == 401:
            # Token revoked or expired provider-side; fetch a fresh one next time
            self.token_cache.invalidate(token)

        if response.status_code != 200:
            raise TransientProviderError(
                f"Helix GET /{path} returned {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return cast(list[dict], response.json().get("data") or [])
        except (ValueError, AttributeError) as e:
            raise TransientProviderError(f"Helix GET /{path} returned malformed body") from e

    # ------------------------------------------------------------------
    # Games
    # ------------------------------------------------------------------

    async def search_games_by_name(self, name: str) -> list[dict]:
        """Look up Twitch categories matching an exact game name."""
        return await self._helix_get("games", {"name": name})

    # ------------------------------------------------------------------
    # Streams
    # ------------------------------------------------------------------

    async def get_streams_by_game(self, game_id: str) -> list[dict]:
        """Get the live streams currently broadcasting a game."""
        return await self._helix_get("streams", {"game_id": game_id})
