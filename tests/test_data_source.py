"""
Tests for the SQLAlchemy-backed vote/report data source.
"""
from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from app.core.errors import DataUnavailable
from app.models import Report, User, Vote
from app.services.data_source import (
    SQLAlchemyDataSource,
    cutoff_for_timeframe,
    load_leaderboard,
)
from app.services.hero_scoring import GOLD_BADGE

NOW = datetime(2025, 3, 10, 12, 0, 0)


def make_report(report_id, user_id, created_at):
    return Report(
        id=report_id,
        user_id=user_id,
        title="Streetlight not working",
        issue="Streetlight not working",
        description="Dark for a week",
        category="Public Safety",
        location="Sector 21",
        address="Park Avenue, Sector 21",
        image_uri="file:///light.jpg",
        created_at=created_at,
        updated_at=created_at,
    )


@pytest.fixture
def seeded(db):
    db.add_all([
        User(id="A", email="a@example.com"),
        make_report("r1", "A", NOW - timedelta(days=1)),
        make_report("old", "C", NOW - timedelta(days=20)),
        Vote(report_id="r1", user_id="B", created_at=NOW - timedelta(hours=3)),
        Vote(report_id="deleted", user_id="B", created_at=NOW - timedelta(hours=2)),
        Vote(report_id="old", user_id="D", created_at=NOW - timedelta(days=15)),
    ])
    db.commit()
    return db


def test_upvotes_resolve_owner_or_none(seeded):
    source = SQLAlchemyDataSource(seeded)
    events = source.list_upvotes_since(NOW - timedelta(days=7))

    owners = {e.report_id: e.report_owner_id for e in events}
    assert owners == {"r1": "A", "deleted": None}
    assert all(e.voter_id == "B" for e in events)


def test_no_cutoff_returns_everything(seeded):
    source = SQLAlchemyDataSource(seeded)
    assert len(source.list_upvotes_since(None)) == 3
    assert {r.id for r in source.list_reports_since(None)} == {"r1", "old"}


def test_reports_since_filters_by_creation(seeded):
    source = SQLAlchemyDataSource(seeded)
    reports = source.list_reports_since(NOW - timedelta(days=7))
    assert [(r.id, r.reporter_id) for r in reports] == [("r1", "A")]


def test_directory_maps_ids_to_email(seeded):
    assert SQLAlchemyDataSource(seeded).list_directory() == {"A": "a@example.com"}


def test_load_leaderboard_end_to_end(seeded):
    board = load_leaderboard(SQLAlchemyDataSource(seeded), NOW - timedelta(days=7))

    assert [(s.user_id, s.hero_score, s.rank) for s in board] == [("A", 3, 1), ("B", 0, 2)]
    assert board[0].email == "a@example.com"
    assert board[0].badge == GOLD_BADGE
    assert board[1].given == 2
    assert board[1].email == "Unknown"


def test_read_failure_raises_data_unavailable():
    session = MagicMock()
    session.query.side_effect = OperationalError("SELECT", {}, Exception("connection refused"))
    source = SQLAlchemyDataSource(session)

    with pytest.raises(DataUnavailable, match="upvotes"):
        source.list_upvotes_since(None)
    with pytest.raises(DataUnavailable, match="reports"):
        source.list_reports_since(None)
    with pytest.raises(DataUnavailable, match="directory"):
        source.list_directory()


def test_load_leaderboard_fails_whole_request_on_partial_failure():
    source = MagicMock()
    source.list_upvotes_since.return_value = []
    source.list_reports_since.side_effect = DataUnavailable("reports offline")

    with pytest.raises(DataUnavailable, match="reports offline"):
        load_leaderboard(source, None)
    source.list_directory.assert_not_called()


def test_cutoff_for_timeframe():
    assert cutoff_for_timeframe("all", NOW) is None
    assert cutoff_for_timeframe("week", NOW) == NOW - timedelta(days=7)
    assert cutoff_for_timeframe("month", NOW) == NOW - timedelta(days=30)
