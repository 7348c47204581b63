"""
Application errors
"""


class DataUnavailable(Exception):
    """Upstream read of reports, votes or users failed.

    Surfaces verbatim to clients as HTTP 500 ``{"error": <message>}``.
    """
