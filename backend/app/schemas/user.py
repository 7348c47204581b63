"""
User directory schemas
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional

class UserCreate(BaseModel):
    user_id: str = Field(..., min_length=1)
    email: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, value):
        # "" would otherwise collide on the unique email column
        if isinstance(value, str) and not value.strip():
            return None
        return value

class UserResponse(BaseModel):
    user_id: str
    email: Optional[str] = None
