"""Data models for RAWG catalog results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class CatalogItem:
    """A game as listed by the RAWG ``/games`` endpoint."""

    id: int
    name: str | None
    background_image: str | None = None
    genres: list[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> CatalogItem:
        return cls(
            id=data["id"],
            name=data.get("name"),
            background_image=data.get("background_image"),
            genres=[g["name"] for g in data.get("genres") or [] if g.get("name")],
        )


@dataclass
class CatalogPlatform:
    """A platform as listed by the RAWG ``/platforms`` endpoint."""

    slug: str
    name: str
    games_count: int = 0

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> CatalogPlatform:
        return cls(
            slug=data["slug"],
            name=data["name"],
            games_count=data.get("games_count") or 0,
        )
