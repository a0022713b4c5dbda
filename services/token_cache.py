"""Twitch app access token cache.

Holds a single client-credentials token in process memory. The token is
fetched on first use, reused until it nears the provider-reported expiry, and
can be dropped explicitly with ``invalidate()`` (e.g. after a 401 from Helix).
"""

import asyncio
import logging
import time

import httpx

from core.errors import CredentialError

logger = logging.getLogger(__name__)

OAUTH_BASE = "https://id.twitch.tv/oauth2"

_now = time.monotonic


class AppTokenCache:
    """Single-slot memoization cell for the Twitch app access token."""

    # Refresh this many seconds before Twitch's reported expiry
    EARLY_REFRESH_SECONDS = 300

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        http: httpx.AsyncClient,
        oauth_url: str = OAUTH_BASE,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.oauth_url = oauth_url.rstrip("/")
        self._http = http

        self._token: str | None = None
        # None means the provider gave no expiry: keep for the process lifetime
        self._expires_at: float | None = None
        self._lock = asyncio.Lock()

    @property
    def is_cached(self) -> bool:
        return self._token is not None and not self._is_expired(_now())

    def _is_expired(self, now: float) -> bool:
        return self._expires_at is not None and now >= self._expires_at

    def invalidate(self, token: str | None = None) -> None:
        """Drop the cached token; the next ``get()`` performs a new exchange.

        With *token*, only drop the slot while it still holds that token, so a
        late 401 for a replaced token leaves the fresh one alone.
        """
        if token is not None and token != self._token:
            return
        if self._token is not None:
            logger.info("Twitch app token invalidated")
        self._token = None
        self._expires_at = None

    async def get(self) -> str:
        """Return the cached app access token, fetching one when absent or expired.

        Raises:
            CredentialError: the client-credentials exchange failed. Nothing is cached.
        """
        if self.is_cached:
            return self._token  # type: ignore[return-value]

        async with self._lock:
            # Double-check after acquiring lock
            if self.is_cached:
                return self._token  # type: ignore[return-value]

            token, expires_in = await self._exchange()
            now = _now()
            self._token = token
            self._expires_at = now + self._lifetime(expires_in) if expires_in else None
            return token

    def _lifetime(self, expires_in: float) -> float:
        # Short-lived tokens refresh at half their lifetime, so a fresh token is
        # always usable at least once
        margin = min(self.EARLY_REFRESH_SECONDS, expires_in / 2)
        return expires_in - margin

    async def _exchange(self) -> tuple[str, float | None]:
        if not self.client_id or not self.client_secret:
            raise CredentialError("Twitch client credentials are not configured")

        logger.info("Requesting new Twitch app access token")
        try:
            response = await self._http.post(
                f"{self.oauth_url}/token",
                params={
                    "client_id": self.client_id,
                    "client_secret": self.client_secret,
                    "grant_type": "client_credentials",
                },
            )
        except httpx.HTTPError as e:
            logger.error(f"Token request failed: {type(e).__name__}: {e}")
            raise CredentialError("Could not get Twitch token") from e

        if response.status_code != 200:
            logger.error(f"Failed to get app token: {response.status_code} {response.text}")
            raise CredentialError(f"Could not get Twitch token (HTTP {response.status_code})")

        try:
            data = response.json()
        except ValueError as e:
            raise CredentialError("Token response is not valid JSON") from e

        access_token = data.get("access_token")
        if not access_token:
            logger.error("No access_token in token response")
            raise CredentialError("No access_token in token response")

        expires_in = data.get("expires_in")
        try:
            lifetime = float(expires_in) if expires_in else None
        except (TypeError, ValueError):
            logger.warning(f"Ignoring unparseable expires_in: {expires_in!r}")
            lifetime = None
        if lifetime is not None and lifetime <= 0:
            lifetime = None
        return access_token, lifetime
