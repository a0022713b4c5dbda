"""Dashboard API routes"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from core.dependencies import get_aggregation_service
from core.errors import CatalogFetchError
from services import AggregationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["dashboard"])


# ============================================
# Response Models
# ============================================


class TrendingGameResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str | None
    image: str | None
    live_viewers: int = Field(alias="liveViewers", ge=0)


class GenreTrendResponse(BaseModel):
    id: str
    label: str
    value: int


class PlatformStatResponse(BaseModel):
    id: str
    label: str
    value: int


# ============================================
# Endpoints
# ============================================


@router.get("/trending", response_model=list[TrendingGameResponse])
async def get_trending(
    service: AggregationService = Depends(get_aggregation_service),
) -> list[TrendingGameResponse]:
    """Top games merged with live Twitch viewer counts"""
    try:
        games = await service.fetch_trending_games()
        return [
            TrendingGameResponse(id=g.id, name=g.name, image=g.image, live_viewers=g.live_viewers)
            for g in games
        ]
    except CatalogFetchError as e:
        logger.error(f"Trending catalog unavailable: {e}")
        raise HTTPException(status_code=502, detail="Failed to fetch trending games") from None
    except Exception as e:
        logger.exception(f"Failed to build trending games: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch trending games") from None


@router.get("/genre-trends", response_model=list[GenreTrendResponse])
async def get_genre_trends(
    service: AggregationService = Depends(get_aggregation_service),
) -> list[GenreTrendResponse]:
    """Genre frequency across popular games"""
    try:
        genres = await service.fetch_genre_trends()
        return [GenreTrendResponse(id=g.id, label=g.label, value=g.value) for g in genres]
    except CatalogFetchError as e:
        logger.error(f"Genre catalog unavailable: {e}")
        raise HTTPException(status_code=502, detail="Failed to fetch genre trends") from None
    except Exception as e:
        logger.exception(f"Failed to build genre trends: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch genre trends") from None


@router.get("/platform-performance", response_model=list[PlatformStatResponse])
async def get_platform_performance(
    service: AggregationService = Depends(get_aggregation_service),
) -> list[PlatformStatResponse]:
    """Top platforms by game count"""
    try:
        platforms = await service.fetch_platform_performance()
        return [PlatformStatResponse(id=p.id, label=p.label, value=p.value) for p in platforms]
    except CatalogFetchError as e:
        logger.error(f"Platform catalog unavailable: {e}")
        raise HTTPException(
            status_code=502, detail="Failed to fetch platform performance"
        ) from None
    except Exception as e:
        logger.exception(f"Failed to build platform performance: {e}")
        raise HTTPException(
            status_code=500, detail="Failed to fetch platform performance"
        ) from None
