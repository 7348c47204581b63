"""
Civic Heroes - Python SDK
"""

from .civic_client import CivicHeroesClient

__version__ = "1.0.0"
__all__ = ["CivicHeroesClient"]
