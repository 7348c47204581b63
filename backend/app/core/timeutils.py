"""
Time helpers - all timestamps are stored as naive UTC
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current UTC time without tzinfo, matching what the DB hands back"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def time_ago(created_at: datetime, now: datetime = None) -> str:
    """Human friendly age of a report, e.g. "5 minutes ago" """
    now = now or utc_now()
    diff_seconds = (now - created_at).total_seconds()
    hours = int(diff_seconds // 3600)
    days = hours // 24

    if diff_seconds < 60:
        return "Just now"
    if diff_seconds < 3600:
        return f"{int(diff_seconds // 60)} minutes ago"
    if hours < 24:
        return f"{hours} hours ago"
    if days == 1:
        return "1 day ago"
    return f"{days} days ago"
