"""Data models for the dashboard output contract."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TrendingGame:
    """Catalog item merged with its live Twitch viewer total."""

    id: int
    name: str | None
    image: str | None
    live_viewers: int = 0


@dataclass
class GenreTrend:
    """Occurrence count of one genre label across a catalog sample."""

    id: str
    label: str
    value: int


@dataclass
class PlatformStat:
    """Platform ranked by its catalog game count."""

    id: str
    label: str
    value: int
