"""
Vote/report data source - read-only snapshots for the hero leaderboard
"""

import logging
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import DataUnavailable
from app.core.timeutils import utc_now
from app.database import get_db
from app.models.report import Report
from app.models.user import User
from app.models.vote import Vote
from app.services.hero_scoring import (
    HeroStat,
    HeroWeights,
    ReportRecord,
    UpvoteEvent,
    compute_leaderboard,
)

logger = logging.getLogger(__name__)

TIMEFRAME_DAYS = {"month": 30}


class SQLAlchemyDataSource:
    """Reads reports, upvotes and the user directory through an injected session"""

    def __init__(self, db: Session):
        self.db = db

    def list_upvotes_since(self, cutoff: Optional[datetime]) -> List[UpvoteEvent]:
        try:
            query = self.db.query(
                Vote.user_id,
                Vote.report_id,
                Report.user_id.label("owner_id"),
                Vote.created_at,
            ).outerjoin(Report, Report.id == Vote.report_id)
            if cutoff is not None:
                query = query.filter(Vote.created_at >= cutoff)
            rows = query.order_by(Vote.id).all()
        except SQLAlchemyError as e:
            logger.error("Failed to read upvotes: %s", e)
            raise DataUnavailable(f"Failed to read upvotes: {e}") from e

        return [
            UpvoteEvent(
                voter_id=row.user_id,
                report_id=row.report_id,
                report_owner_id=row.owner_id,
                created_at=row.created_at,
            )
            for row in rows
        ]

    def list_reports_since(self, cutoff: Optional[datetime]) -> List[ReportRecord]:
        try:
            query = self.db.query(Report.id, Report.user_id, Report.created_at)
            if cutoff is not None:
                query = query.filter(Report.created_at >= cutoff)
            rows = query.order_by(Report.created_at).all()
        except SQLAlchemyError as e:
            logger.error("Failed to read reports: %s", e)
            raise DataUnavailable(f"Failed to read reports: {e}") from e

        return [
            ReportRecord(id=row.id, reporter_id=row.user_id, created_at=row.created_at)
            for row in rows
        ]

    def list_directory(self) -> Dict[str, str]:
        try:
            rows = self.db.query(User.id, User.email).all()
        except SQLAlchemyError as e:
            logger.error("Failed to read user directory: %s", e)
            raise DataUnavailable(f"Failed to read user directory: {e}") from e

        return {row.id: row.email for row in rows if row.email}


def get_data_source(db: Session = Depends(get_db)) -> SQLAlchemyDataSource:
    """Request dependency - one data source per request session"""
    return SQLAlchemyDataSource(db)


def cutoff_for_timeframe(timeframe: str, now: Optional[datetime] = None) -> Optional[datetime]:
    """week -> configured window, month -> 30 days, all -> no cutoff"""
    if timeframe == "all":
        return None
    now = now or utc_now()
    days = TIMEFRAME_DAYS.get(timeframe, settings.LEADERBOARD_WINDOW_DAYS)
    return now - timedelta(days=days)


def load_leaderboard(
    source,
    cutoff: Optional[datetime],
    weights: Optional[HeroWeights] = None,
) -> List[HeroStat]:
    """
    Fetch the three snapshots and rank them.

    Any failed read propagates as DataUnavailable; no partial leaderboard
    is ever built.
    """
    upvotes = source.list_upvotes_since(cutoff)
    reports = source.list_reports_since(cutoff)
    directory = source.list_directory()

    leaderboard = compute_leaderboard(
        reports=reports,
        upvotes=upvotes,
        directory=directory,
        cutoff=cutoff,
        weights=weights or HeroWeights.from_settings(),
    )
    logger.info(
        "Leaderboard computed: %d heroes from %d upvotes and %d reports",
        len(leaderboard), len(upvotes), len(reports),
    )
    return leaderboard
