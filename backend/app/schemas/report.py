"""
Report schemas
"""

from pydantic import BaseModel, Field
from typing import Literal, Optional
from datetime import datetime

ReportStatus = Literal["reported", "in-progress", "resolved"]

class Coordinates(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)

class ReportCreate(BaseModel):
    user_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    issue: str = Field(..., min_length=1)
    description: str
    category: str
    location: str
    address: str
    image_uri: str
    voice_note_uri: Optional[str] = None
    coords: Optional[Coordinates] = None

class ReportResponse(BaseModel):
    id: str
    user_id: str
    title: str
    issue: str
    description: str
    category: str
    location: str
    address: str
    image_uri: str
    voice_note_uri: Optional[str] = None
    coords: Optional[Coordinates] = None
    upvotes: int
    status: ReportStatus
    timestamp: str  # "2 hours ago"
    created_at: datetime
    updated_at: datetime

class VoteCreate(BaseModel):
    user_id: str = Field(..., min_length=1)

class VoteResult(BaseModel):
    report_id: str
    upvotes: int
    voted: bool
    already_voted: bool

class StatusUpdate(BaseModel):
    status: ReportStatus
