"""
Upvote model - one vote per (report, user)
"""

from sqlalchemy import Column, Integer, String, DateTime, UniqueConstraint

from app.database import Base
from app.core.timeutils import utc_now


class Vote(Base):
    __tablename__ = "votes"
    __table_args__ = (
        UniqueConstraint("report_id", "user_id", name="uq_votes_report_user"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    # No FK: votes outlive deleted reports and then resolve to no owner
    report_id = Column(String, nullable=False, index=True)
    user_id = Column(String, nullable=False, index=True)
    created_at = Column(DateTime, default=utc_now, nullable=False, index=True)
