"""
Report store - create, list, upvote and update civic issue reports
"""

import logging
import time
from typing import List, Optional, Set

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.timeutils import utc_now
from app.models.report import Report
from app.models.vote import Vote
from app.schemas.report import ReportCreate

logger = logging.getLogger(__name__)


MAX_ID_ATTEMPTS = 5


def _new_report_id(db: Session) -> str:
    """Epoch milliseconds, bumped until unused"""
    candidate = int(time.time() * 1000)
    while db.get(Report, str(candidate)) is not None:
        candidate += 1
    return str(candidate)


def add_report(db: Session, data: ReportCreate) -> Report:
    """Persist a new report with zero upvotes and status "reported" """
    now = utc_now()
    for attempt in range(1, MAX_ID_ATTEMPTS + 1):
        report = Report(
            id=_new_report_id(db),
            user_id=data.user_id,
            title=data.title,
            issue=data.issue,
            description=data.description,
            category=data.category,
            location=data.location,
            address=data.address,
            image_uri=data.image_uri,
            voice_note_uri=data.voice_note_uri,
            latitude=data.coords.lat if data.coords else None,
            longitude=data.coords.lon if data.coords else None,
            upvotes=0,
            status="reported",
            created_at=now,
            updated_at=now,
        )
        db.add(report)
        try:
            db.commit()
            break
        except IntegrityError:
            # Another create took the same millisecond id; pick the next one
            db.rollback()
            if attempt == MAX_ID_ATTEMPTS:
                raise
            logger.warning("Report id %s already taken, retrying", report.id)
    db.refresh(report)

    logger.info("Report added: %s by %s", report.id, report.user_id)
    return report


def list_reports(db: Session) -> List[Report]:
    """Community feed, newest first"""
    return db.query(Report).order_by(Report.created_at.desc(), Report.id.desc()).all()


def get_report(db: Session, report_id: str) -> Optional[Report]:
    return db.get(Report, report_id)


def add_user_vote(db: Session, report: Report, user_id: str) -> bool:
    """
    Record an upvote from user_id on report.

    Returns:
        True if the vote was recorded, False if this user already voted
    """
    existing = db.query(Vote.id).filter(
        Vote.report_id == report.id,
        Vote.user_id == user_id
    ).first()
    if existing:
        return False

    db.add(Vote(report_id=report.id, user_id=user_id, created_at=utc_now()))
    report.upvotes = (report.upvotes or 0) + 1
    report.updated_at = utc_now()
    try:
        db.commit()
    except IntegrityError:
        # Lost a race against the same user's concurrent vote
        db.rollback()
        db.refresh(report)
        return False

    db.refresh(report)
    logger.info("User vote added: %s by %s", report.id, user_id)
    return True


def get_user_votes(db: Session, user_id: str) -> Set[str]:
    """IDs of every report user_id has upvoted"""
    rows = db.query(Vote.report_id).filter(Vote.user_id == user_id).all()
    return {row.report_id for row in rows}


def update_report_status(db: Session, report_id: str, status: str) -> Optional[Report]:
    report = db.get(Report, report_id)
    if report is None:
        return None

    report.status = status
    report.updated_at = utc_now()
    db.commit()
    db.refresh(report)

    logger.info("Report status updated: %s -> %s", report_id, status)
    return report
