"""Services layer - Business logic

This module provides service classes for handling business logic.
Services are initialized with their dependencies and accessed through dependency injection.
"""

from .aggregation_service import AggregationService
from .live_metrics import LiveMetricsResolver
from .rawg_api import RawgAPIClient
from .token_cache import AppTokenCache
from .twitch_api import TwitchAPIClient

__all__ = [
    "AggregationService",
    "AppTokenCache",
    "LiveMetricsResolver",
    "RawgAPIClient",
    "TwitchAPIClient",
]
