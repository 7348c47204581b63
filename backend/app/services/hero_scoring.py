"""
Hero scoring - rank contributors by votes received and reports authored
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List, Mapping, Optional

from app.core.config import settings

UNKNOWN_EMAIL = "Unknown"

GOLD_BADGE = "🏆 Hero of the Week (Gold)"
SILVER_BADGE = "🥈 Silver Hero"
BRONZE_BADGE = "🥉 Bronze Hero"
PARTICIPANT_BADGE = "Participant"

PODIUM_BADGES = {1: GOLD_BADGE, 2: SILVER_BADGE, 3: BRONZE_BADGE}


@dataclass(frozen=True)
class ReportRecord:
    id: str
    reporter_id: str
    created_at: datetime


@dataclass(frozen=True)
class UpvoteEvent:
    voter_id: str
    report_id: str
    report_owner_id: Optional[str]  # None when the report is gone or out of reach
    created_at: datetime


@dataclass(frozen=True)
class HeroWeights:
    received: int = 2
    reports: int = 1
    given: int = 0

    @classmethod
    def from_settings(cls) -> "HeroWeights":
        return cls(
            received=settings.HERO_WEIGHT_RECEIVED,
            reports=settings.HERO_WEIGHT_REPORTS,
            given=settings.HERO_WEIGHT_GIVEN,
        )


@dataclass
class HeroStat:
    user_id: str
    received: int = 0
    given: int = 0
    reports: int = 0
    hero_score: int = 0
    rank: int = 0
    badge: str = PARTICIPANT_BADGE
    email: str = UNKNOWN_EMAIL

    def to_dict(self) -> Dict[str, object]:
        return {
            "rank": self.rank,
            "user_id": self.user_id,
            "email": self.email,
            "received": self.received,
            "given": self.given,
            "reports": self.reports,
            "hero_score": self.hero_score,
            "badge": self.badge,
        }


def badge_for_rank(rank: int) -> str:
    """Gold/Silver/Bronze for the podium, Participant for everyone else"""
    return PODIUM_BADGES.get(rank, PARTICIPANT_BADGE)


def hero_score(stat: HeroStat, weights: HeroWeights) -> int:
    return (
        weights.received * stat.received
        + weights.reports * stat.reports
        + weights.given * stat.given
    )


def _in_window(created_at: datetime, cutoff: Optional[datetime]) -> bool:
    return cutoff is None or created_at >= cutoff


def compute_leaderboard(
    reports: Iterable[ReportRecord],
    upvotes: Iterable[UpvoteEvent],
    directory: Optional[Mapping[str, str]] = None,
    cutoff: Optional[datetime] = None,
    weights: Optional[HeroWeights] = None,
) -> List[HeroStat]:
    """
    Aggregate votes and reports into a ranked, badged list of heroes.

    Args:
        reports: Reports with their reporter and creation time
        upvotes: Upvote events with voter, resolved report owner and creation time
        directory: user_id -> email, used only for display
        cutoff: Earliest creation time counted; None counts everything
        weights: Hero score weighting (defaults to 2 x received + 1 x reports)

    Returns:
        Stats sorted by hero score descending, ties by user_id ascending,
        with rank 1..N and a badge derived from rank.
    """
    weights = weights or HeroWeights()
    directory = directory or {}
    stats: Dict[str, HeroStat] = {}

    def stat_for(user_id: str) -> HeroStat:
        if user_id not in stats:
            stats[user_id] = HeroStat(user_id=user_id)
        return stats[user_id]

    for vote in upvotes:
        if not _in_window(vote.created_at, cutoff):
            continue
        stat_for(vote.voter_id).given += 1
        if vote.report_owner_id is not None:
            stat_for(vote.report_owner_id).received += 1

    for report in reports:
        if not _in_window(report.created_at, cutoff):
            continue
        stat_for(report.reporter_id).reports += 1

    for stat in stats.values():
        stat.hero_score = hero_score(stat, weights)

    leaderboard = sorted(stats.values(), key=lambda s: (-s.hero_score, s.user_id))

    for idx, stat in enumerate(leaderboard):
        stat.rank = idx + 1
        stat.badge = badge_for_rank(stat.rank)
        stat.email = directory.get(stat.user_id) or UNKNOWN_EMAIL

    return leaderboard
