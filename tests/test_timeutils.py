from datetime import datetime, timedelta

import pytest

from app.core.timeutils import time_ago

NOW = datetime(2025, 3, 10, 12, 0, 0)


@pytest.mark.parametrize(
    "age, expected",
    [
        (timedelta(seconds=0), "Just now"),
        (timedelta(seconds=59), "Just now"),
        (timedelta(minutes=1), "1 minutes ago"),
        (timedelta(minutes=59), "59 minutes ago"),
        (timedelta(hours=1), "1 hours ago"),
        (timedelta(hours=23), "23 hours ago"),
        (timedelta(hours=24), "1 day ago"),
        (timedelta(hours=47), "1 day ago"),
        (timedelta(hours=48), "2 days ago"),
        (timedelta(days=10), "10 days ago"),
    ],
)
def test_time_ago(age, expected):
    assert time_ago(NOW - age, NOW) == expected
