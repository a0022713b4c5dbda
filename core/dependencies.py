"""Dependency injection utilities for FastAPI"""

import logging

from core.config import get_settings
from services import AggregationService, LiveMetricsResolver, RawgAPIClient, TwitchAPIClient

logger = logging.getLogger(__name__)


# ============================================
# Provider Clients
# ============================================


_twitch_api: TwitchAPIClient | None = None
_rawg_api: RawgAPIClient | None = None


def get_twitch_api() -> TwitchAPIClient:
    """Get shared TwitchAPIClient singleton (connection reuse + token cache)."""
    global _twitch_api
    if _twitch_api is None:
        settings = get_settings()
        if not settings.twitch_client_id or not settings.twitch_client_secret:
            logger.warning("Twitch credentials not configured, live viewers will read 0")
        _twitch_api = TwitchAPIClient(
            client_id=settings.twitch_client_id,
            client_secret=settings.twitch_client_secret,
            helix_url=settings.twitch_helix_url,
            oauth_url=settings.twitch_oauth_url,
            timeout=settings.http_timeout,
        )
    return _twitch_api


def get_rawg_api() -> RawgAPIClient:
    """Get shared RawgAPIClient singleton."""
    global _rawg_api
    if _rawg_api is None:
        settings = get_settings()
        if not settings.rawg_api_key:
            logger.warning("RAWG_API_KEY not configured, catalog requests will be rejected")
        _rawg_api = RawgAPIClient(
            api_key=settings.rawg_api_key,
            base_url=settings.rawg_base_url,
            timeout=settings.http_timeout,
        )
    return _rawg_api


async def close_provider_clients() -> None:
    """Close the shared provider clients. Call on app shutdown."""
    global _twitch_api, _rawg_api
    if _twitch_api is not None:
        await _twitch_api.close()
        _twitch_api = None
    if _rawg_api is not None:
        await _rawg_api.close()
        _rawg_api = None


# ============================================
# Service Dependencies
# ============================================


def get_live_metrics_resolver() -> LiveMetricsResolver:
    """Get LiveMetricsResolver bound to the shared Twitch client"""
    settings = get_settings()
    return LiveMetricsResolver(get_twitch_api(), timeout=settings.live_metrics_timeout)


def get_aggregation_service() -> AggregationService:
    """Get AggregationService instance (dependency injection)"""
    return AggregationService(rawg=get_rawg_api(), resolver=get_live_metrics_resolver())
