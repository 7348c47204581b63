"""
Civic Heroes - Python SDK

A thin client for the Civic Heroes API: file civic issue reports,
upvote them, and read the weekly hero leaderboard.

    >>> from civic_client import CivicHeroesClient
    >>>
    >>> client = CivicHeroesClient(
    ...     base_url="http://localhost:8000",
    ...     user_id="amit"
    ... )
    >>> report = client.create_report(
    ...     title="Pothole near main road",
    ...     issue="Pothole near main road",
    ...     description="Large pothole causing traffic issues",
    ...     category="Road & Infrastructure",
    ...     location="Sector 14",
    ...     address="Main Road, Sector 14, Delhi",
    ...     image_uri="file:///photos/pothole.jpg"
    ... )
    >>> client.upvote(report["id"])
    >>> client.get_leaderboard()
"""

import requests
from typing import Optional, Dict, Any, List


class CivicHeroesClient:
    """
    Client for the Civic Heroes API.

    Every call that acts on behalf of a user uses the explicit user_id
    given here; there is no implicit default user.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        user_id: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0
    ):
        """
        Initialize the client.

        Args:
            base_url: Base URL of the API
            user_id: The user this client acts for (votes, reports)
            session: Optional pre-configured requests session
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.user_id = user_id
        self.session = session or requests.Session()
        self.timeout = timeout

    def _require_user(self) -> str:
        if not self.user_id:
            raise ValueError("user_id is required for this operation")
        return self.user_id

    def health(self) -> Dict[str, Any]:
        response = self.session.get(f"{self.base_url}/health", timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def get_leaderboard(self, timeframe: str = "week") -> List[Dict[str, Any]]:
        """
        Get the hero leaderboard.

        Args:
            timeframe: "week", "month" or "all"

        Returns:
            Heroes sorted by rank, each with rank, user_id, email, received,
            given, reports, hero_score and badge
        """
        response = self.session.get(
            f"{self.base_url}/leaderboard",
            params={"timeframe": timeframe},
            timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()

    def register_user(self, email: Optional[str] = None) -> Dict[str, Any]:
        """Register (or update) this client's user in the directory"""
        response = self.session.post(
            f"{self.base_url}/api/v1/users/",
            json={"user_id": self._require_user(), "email": email},
            timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()

    def list_reports(self) -> List[Dict[str, Any]]:
        """Community feed, newest first"""
        response = self.session.get(f"{self.base_url}/api/v1/reports/", timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def create_report(
        self,
        title: str,
        issue: str,
        description: str,
        category: str,
        location: str,
        address: str,
        image_uri: str,
        voice_note_uri: Optional[str] = None,
        lat: Optional[float] = None,
        lon: Optional[float] = None
    ) -> Dict[str, Any]:
        """
        File a new civic issue report as this client's user.

        Args:
            title: Short title
            issue: Issue summary
            description: Longer description
            category: e.g. "Road & Infrastructure"
            location: Area name
            address: Street address
            image_uri: URI of the photo
            voice_note_uri: Optional URI of a recorded voice note
            lat: Optional latitude (sent only together with lon)
            lon: Optional longitude

        Returns:
            The created report
        """
        payload = {
            "user_id": self._require_user(),
            "title": title,
            "issue": issue,
            "description": description,
            "category": category,
            "location": location,
            "address": address,
            "image_uri": image_uri,
        }

        if voice_note_uri:
            payload["voice_note_uri"] = voice_note_uri
        if lat is not None and lon is not None:
            payload["coords"] = {"lat": lat, "lon": lon}

        response = self.session.post(
            f"{self.base_url}/api/v1/reports/",
            json=payload,
            timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()

    def upvote(self, report_id: str) -> Dict[str, Any]:
        """
        Upvote a report as this client's user.

        Returns:
            {"report_id", "upvotes", "voted", "already_voted"}
        """
        response = self.session.post(
            f"{self.base_url}/api/v1/reports/{report_id}/upvote",
            json={"user_id": self._require_user()},
            timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()

    def get_my_votes(self) -> List[str]:
        """Report IDs this client's user has upvoted"""
        response = self.session.get(
            f"{self.base_url}/api/v1/users/{self._require_user()}/votes",
            timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()

    def update_status(self, report_id: str, status: str) -> Dict[str, Any]:
        """Set a report's status: "reported", "in-progress" or "resolved" """
        response = self.session.patch(
            f"{self.base_url}/api/v1/reports/{report_id}/status",
            json={"status": status},
            timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()
