"""Live viewer resolution against Twitch.

A display name is resolved to a Twitch game id, then the viewer counts of all
live streams for that id are summed. Any failure along the way yields 0 so a
single unresolvable game never blocks the rest of the dashboard.
"""

import asyncio
import logging

from services.twitch_api import TwitchAPIClient

logger = logging.getLogger(__name__)


def _viewer_count(stream: dict) -> int:
    try:
        return max(int(stream.get("viewer_count") or 0), 0)
    except (TypeError, ValueError):
        return 0


class LiveMetricsResolver:
    """Resolve a game's total live viewers. Never raises."""

    def __init__(self, twitch: TwitchAPIClient, timeout: float | None = 5.0):
        self.twitch = twitch
        self.timeout = timeout

    async def resolve_live_viewers(self, display_name: str | None) -> int:
        """Return the summed live viewer count for *display_name*, or 0."""
        if not display_name:
            return 0

        try:
            return await asyncio.wait_for(self._resolve(display_name), timeout=self.timeout)
        except TimeoutError:
            logger.warning(f"Live viewer lookup timed out for {display_name!r}")
            return 0
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.warning(
                f"Error fetching Twitch data for {display_name!r}: {type(e).__name__}: {e}"
            )
            return 0

    async def _resolve(self, display_name: str) -> int:
        games = await self.twitch.search_games_by_name(display_name)
        if not games:
            logger.info(f"Game not found on Twitch: {display_name}")
            return 0

        # First result wins
        game_id = games[0]["id"]

        streams = await self.twitch.get_streams_by_game(game_id)
        return sum(_viewer_count(s) for s in streams)
