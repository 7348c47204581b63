from app.models.user import User
from app.models.report import Report
from app.models.vote import Vote

__all__ = ["User", "Report", "Vote"]
