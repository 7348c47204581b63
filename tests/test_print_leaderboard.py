from datetime import timedelta
from unittest.mock import patch

from app.core.errors import DataUnavailable
from app.core.timeutils import utc_now
from app.models import Report, Vote

import print_leaderboard


def seed(db):
    now = utc_now()
    db.add(Report(
        id="r1", user_id="A", title="t", issue="i", description="d", category="c",
        location="l", address="a", image_uri="img",
        created_at=now - timedelta(days=1), updated_at=now,
    ))
    db.add(Vote(report_id="r1", user_id="B", created_at=now - timedelta(hours=1)))
    db.commit()


def test_prints_heroes(db, session_factory, capsys):
    seed(db)

    assert print_leaderboard.main([], session_factory=session_factory) == 0

    out = capsys.readouterr().out
    assert "2 heroes" in out
    assert "#1" in out and "A" in out
    assert "Hero of the Week" in out


def test_returns_1_on_data_unavailable(session_factory, capsys):
    with patch.object(print_leaderboard, "load_leaderboard", side_effect=DataUnavailable("db down")):
        assert print_leaderboard.main(["--all"], session_factory=session_factory) == 1

    assert "db down" in capsys.readouterr().out
