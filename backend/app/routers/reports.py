"""
Reports router - file civic issues, browse the feed, upvote
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from app.database import get_db
from app.core.timeutils import time_ago, utc_now
from app.models.report import Report
from app.schemas.report import (
    Coordinates,
    ReportCreate,
    ReportResponse,
    StatusUpdate,
    VoteCreate,
    VoteResult,
)
from app.services import report_store

router = APIRouter()

def to_response(report: Report, now=None) -> ReportResponse:
    coords = None
    if report.latitude is not None and report.longitude is not None:
        coords = Coordinates(lat=report.latitude, lon=report.longitude)

    return ReportResponse(
        id=report.id,
        user_id=report.user_id,
        title=report.title,
        issue=report.issue,
        description=report.description,
        category=report.category,
        location=report.location,
        address=report.address,
        image_uri=report.image_uri,
        voice_note_uri=report.voice_note_uri,
        coords=coords,
        upvotes=report.upvotes or 0,
        status=report.status,
        timestamp=time_ago(report.created_at, now),
        created_at=report.created_at,
        updated_at=report.updated_at
    )

def get_report_or_404(report_id: str, db: Session) -> Report:
    report = report_store.get_report(db, report_id)
    if report is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Report {report_id} not found"
        )
    return report

@router.post("/", response_model=ReportResponse, status_code=status.HTTP_201_CREATED)
async def create_report(
    report: ReportCreate,
    db: Session = Depends(get_db)
):
    """File a new civic issue report"""
    db_report = report_store.add_report(db, report)
    return to_response(db_report)

@router.get("/", response_model=List[ReportResponse])
async def list_reports(db: Session = Depends(get_db)):
    """Community feed, newest first"""
    now = utc_now()
    return [to_response(report, now) for report in report_store.list_reports(db)]

@router.get("/{report_id}", response_model=ReportResponse)
async def get_report(report_id: str, db: Session = Depends(get_db)):
    """Get a single report"""
    return to_response(get_report_or_404(report_id, db))

@router.post("/{report_id}/upvote", response_model=VoteResult)
async def upvote_report(
    report_id: str,
    vote: VoteCreate,
    db: Session = Depends(get_db)
):
    """
    Upvote a report on behalf of vote.user_id
    A user can upvote a report only once; repeats leave the count unchanged
    """
    report = get_report_or_404(report_id, db)
    recorded = report_store.add_user_vote(db, report, vote.user_id)

    return VoteResult(
        report_id=report.id,
        upvotes=report.upvotes,
        voted=True,
        already_voted=not recorded
    )

@router.patch("/{report_id}/status", response_model=ReportResponse)
async def update_status(
    report_id: str,
    update: StatusUpdate,
    db: Session = Depends(get_db)
):
    """Move a report through reported -> in-progress -> resolved"""
    get_report_or_404(report_id, db)
    report = report_store.update_report_status(db, report_id, update.status)
    return to_response(report)
