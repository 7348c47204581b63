"""
Leaderboard schemas
"""

from pydantic import BaseModel, Field
from typing import Literal

from app.services.hero_scoring import GOLD_BADGE, SILVER_BADGE, BRONZE_BADGE, PARTICIPANT_BADGE

Badge = Literal[GOLD_BADGE, SILVER_BADGE, BRONZE_BADGE, PARTICIPANT_BADGE]

class HeroEntry(BaseModel):
    rank: int = Field(..., ge=1)
    user_id: str
    email: str  # "Unknown" when the user isn't in the directory
    received: int = Field(..., ge=0)
    given: int = Field(..., ge=0)
    reports: int = Field(..., ge=0)
    hero_score: int
    badge: Badge
    
    class Config:
        from_attributes = True

class ErrorResponse(BaseModel):
    error: str
