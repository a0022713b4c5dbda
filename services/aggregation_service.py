"""Dashboard aggregation over RAWG and Twitch"""

import asyncio
import logging

from models.catalog import CatalogItem
from models.dashboard import GenreTrend, PlatformStat, TrendingGame
from services.live_metrics import LiveMetricsResolver
from services.rawg_api import RawgAPIClient

logger = logging.getLogger(__name__)

TRENDING_PAGE_SIZE = 5
GENRE_SAMPLE_SIZE = 50
PLATFORM_PAGE_SIZE = 8

GAMES_ORDERING = "-added"
PLATFORMS_ORDERING = "-games_count"


def genre_slug(label: str) -> str:
    """Lowercase *label* and hyphenate its first space only.

    "Massively Multiplayer" -> "massively-multiplayer", "A B C" -> "a-b c".
    """
    return label.lower().replace(" ", "-", 1)


def count_genres(games: list[CatalogItem]) -> list[GenreTrend]:
    """Tally genre labels across *games* in first-seen order."""
    counts: dict[str, int] = {}
    for game in games:
        for genre in game.genres:
            counts[genre] = counts.get(genre, 0) + 1

    return [GenreTrend(id=genre_slug(label), label=label, value=n) for label, n in counts.items()]


class AggregationService:
    """Build the three dashboard views.

    Catalog failures (``CatalogFetchError``) propagate to the caller; per-game
    live viewer failures are absorbed by the resolver and show up as 0.
    """

    def __init__(self, rawg: RawgAPIClient, resolver: LiveMetricsResolver):
        self.rawg = rawg
        self.resolver = resolver

    async def fetch_trending_games(self) -> list[TrendingGame]:
        """Top games by RAWG "added" count, merged with live Twitch viewers."""
        games = await self.rawg.list_games(ordering=GAMES_ORDERING, page_size=TRENDING_PAGE_SIZE)

        # gather returns results in argument order, not completion order
        viewers = await asyncio.gather(
            *(self.resolver.resolve_live_viewers(game.name) for game in games)
        )

        trending = [
            TrendingGame(
                id=game.id,
                name=game.name,
                image=game.background_image,
                live_viewers=count,
            )
            for game, count in zip(games, viewers, strict=True)
        ]
        logger.debug(f"Trending: {len(trending)} games, {sum(viewers)} live viewers total")
        return trending

    async def fetch_genre_trends(self) -> list[GenreTrend]:
        """Genre frequency across a larger sample of popular games."""
        games = await self.rawg.list_games(ordering=GAMES_ORDERING, page_size=GENRE_SAMPLE_SIZE)
        return count_genres(games)

    async def fetch_platform_performance(self) -> list[PlatformStat]:
        """Top platforms by game count, in RAWG's order."""
        platforms = await self.rawg.list_platforms(
            ordering=PLATFORMS_ORDERING, page_size=PLATFORM_PAGE_SIZE
        )
        return [PlatformStat(id=p.slug, label=p.name, value=p.games_count) for p in platforms]
