"""
Tests for user registration when the database rejects the write.
"""
import asyncio
from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError

from app.routers.users import register_user
from app.schemas.user import UserCreate


def test_email_claimed_between_check_and_commit_is_409():
    db = MagicMock()
    db.query.return_value.filter.return_value.first.return_value = None
    db.get.return_value = None
    db.commit.side_effect = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed: users.email"))

    with pytest.raises(HTTPException) as exc_info:
        asyncio.run(register_user(UserCreate(user_id="B", email="a@example.com"), db=db))

    assert exc_info.value.status_code == 409
    db.rollback.assert_called_once()
    db.refresh.assert_not_called()
