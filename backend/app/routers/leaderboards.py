"""
Leaderboards router - Heroes of the week ranked by community votes
"""

from fastapi import APIRouter, Depends, Query
from typing import List

from app.schemas.leaderboard import HeroEntry, ErrorResponse
from app.services.data_source import (
    SQLAlchemyDataSource,
    get_data_source,
    cutoff_for_timeframe,
    load_leaderboard,
)

router = APIRouter()

@router.get(
    "/leaderboard",
    response_model=List[HeroEntry],
    responses={500: {"model": ErrorResponse, "description": "Vote/report data unavailable"}}
)
async def hero_leaderboard(
    timeframe: str = Query("week", pattern="^(all|week|month)$"),
    source: SQLAlchemyDataSource = Depends(get_data_source)
):
    """
    Get contributors ranked by hero score
    hero_score = 2 x upvotes received + 1 x reports authored (weights configurable)
    """
    cutoff = cutoff_for_timeframe(timeframe)
    leaderboard = load_leaderboard(source, cutoff)

    return [HeroEntry(**stat.to_dict()) for stat in leaderboard]
