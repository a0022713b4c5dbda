"""RAWG catalog API client"""

import logging
from typing import cast

import httpx

from core.errors import CatalogFetchError
from models.catalog import CatalogItem, CatalogPlatform

logger = logging.getLogger(__name__)

RAWG_BASE = "https://api.rawg.io/api"


class RawgAPIClient:
    """Client for the RAWG video game database.

    Every failure is raised as ``CatalogFetchError``; callers decide how a
    missing catalog is reported.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = RAWG_BASE,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

        # Shared HTTP client — reuses TCP connections across requests
        self._http = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def close(self) -> None:
        """Close the shared HTTP client. Call on app shutdown."""
        await self._http.aclose()

    async def _list(self, path: str, ordering: str, page_size: int) -> list[dict]:
        """GET a RAWG list endpoint and return its ``results`` array."""
        try:
            response = await self._http.get(
                f"{self.base_url}/{path}",
                params={"key": self.api_key, "ordering": ordering, "page_size": page_size},
            )
        except httpx.HTTPError as e:
            logger.error(f"RAWG GET /{path} failed: {type(e).__name__}: {e}")
            raise CatalogFetchError(f"RAWG /{path} request failed") from e

        if response.status_code != 200:
            logger.error(f"RAWG GET /{path} returned {response.status_code}")
            raise CatalogFetchError(
                f"RAWG /{path} returned {response.status_code}",
                status_code=response.status_code,
            )

        try:
            results = response.json()["results"]
        except (ValueError, KeyError, TypeError) as e:
            raise CatalogFetchError(f"RAWG /{path} returned malformed body") from e

        return cast(list[dict], results or [])

    async def list_games(self, ordering: str = "-added", page_size: int = 20) -> list[CatalogItem]:
        """List games in RAWG's ``ordering``."""
        results = await self._list("games", ordering, page_size)
        try:
            return [CatalogItem.from_api(g) for g in results]
        except (KeyError, TypeError, AttributeError) as e:
            raise CatalogFetchError("RAWG /games returned a malformed game") from e

    async def list_platforms(
        self, ordering: str = "-games_count", page_size: int = 20
    ) -> list[CatalogPlatform]:
        """List platforms in RAWG's ``ordering``."""
        results = await self._list("platforms", ordering, page_size)
        try:
            return [CatalogPlatform.from_api(p) for p in results]
        except (KeyError, TypeError) as e:
            raise CatalogFetchError("RAWG /platforms returned a malformed platform") from e
