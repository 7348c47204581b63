#!/usr/bin/env python3
"""
Leaderboard Printer - Shows the current heroes straight from the database
Handy for checking the board before announcing the Hero of the Week
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend'))

from app.core.config import settings
from app.core.errors import DataUnavailable
from app.core.timeutils import utc_now
from app.database import SessionLocal
from app.services.data_source import SQLAlchemyDataSource, load_leaderboard
from datetime import timedelta
import argparse

def format_hero(stat) -> str:
    return (
        f"#{stat.rank:<3} {stat.user_id:<20} {stat.email:<30} "
        f"score={stat.hero_score:<5} received={stat.received:<4} "
        f"given={stat.given:<4} reports={stat.reports:<4} {stat.badge}"
    )

def main(argv=None, session_factory=SessionLocal):
    parser = argparse.ArgumentParser(description="Print the hero leaderboard")
    parser.add_argument("--days", type=int, default=settings.LEADERBOARD_WINDOW_DAYS, help="Window size in days")
    parser.add_argument("--all", action="store_true", help="Ignore the window and count everything")

    args = parser.parse_args(argv)
    cutoff = None if args.all else utc_now() - timedelta(days=args.days)

    db = session_factory()

    try:
        leaderboard = load_leaderboard(SQLAlchemyDataSource(db), cutoff)
        window = "all time" if cutoff is None else f"last {args.days} days"
        print(f"🏆 Hero leaderboard ({window}): {len(leaderboard)} heroes")
        for stat in leaderboard:
            print(format_hero(stat))
    except DataUnavailable as e:
        print(f"❌ Error: {e}")
        return 1
    finally:
        db.close()

    return 0

if __name__ == "__main__":
    exit(main())
