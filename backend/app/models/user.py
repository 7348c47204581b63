"""
User directory model
"""

from sqlalchemy import Column, String, DateTime

from app.database import Base
from app.core.timeutils import utc_now


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, index=True)
    email = Column(String, unique=True, nullable=True)
    created_at = Column(DateTime, default=utc_now, nullable=False)
