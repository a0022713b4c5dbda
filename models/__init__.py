"""Data models for catalog input and dashboard output."""

from .catalog import CatalogItem, CatalogPlatform
from .dashboard import GenreTrend, PlatformStat, TrendingGame

__all__ = [
    "CatalogItem",
    "CatalogPlatform",
    "GenreTrend",
    "PlatformStat",
    "TrendingGame",
]
