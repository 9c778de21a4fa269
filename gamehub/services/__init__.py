"""
Service layer: credential handling and game statistics.
"""

from gamehub.services.credential_store import CredentialStore
from gamehub.services.statistics import overall_stats, picture_stats, quiz_stats

__all__ = [
    "CredentialStore",
    "quiz_stats",
    "picture_stats",
    "overall_stats",
]
