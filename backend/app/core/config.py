"""
Application settings - read from environment (and .env when present)
"""

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


class Settings:
    """Environment-driven configuration for the Civic Heroes backend"""

    def __init__(self):
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./civic_reports.db")
        self.CORS_ORIGINS: List[str] = _split_origins(os.getenv("CORS_ORIGINS", "*"))
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # Leaderboard window ("week" timeframe) in days
        self.LEADERBOARD_WINDOW_DAYS: int = int(os.getenv("LEADERBOARD_WINDOW_DAYS", "7"))

        # Hero score = received * W_RECEIVED + reports * W_REPORTS + given * W_GIVEN
        self.HERO_WEIGHT_RECEIVED: int = int(os.getenv("HERO_WEIGHT_RECEIVED", "2"))
        self.HERO_WEIGHT_REPORTS: int = int(os.getenv("HERO_WEIGHT_REPORTS", "1"))
        self.HERO_WEIGHT_GIVEN: int = int(os.getenv("HERO_WEIGHT_GIVEN", "0"))


settings = Settings()
