"""
Civic issue report model
"""

from sqlalchemy import Column, String, Integer, Float, DateTime, Text

from app.database import Base
from app.core.timeutils import utc_now


class Report(Base):
    __tablename__ = "reports"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)  # reporter
    title = Column(String, nullable=False)
    issue = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String, nullable=False)
    location = Column(String, nullable=False)
    address = Column(String, nullable=False)
    image_uri = Column(String, nullable=False)
    voice_note_uri = Column(String, nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    upvotes = Column(Integer, default=0, nullable=False)
    status = Column(String, default="reported", nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False, index=True)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now, nullable=False)
