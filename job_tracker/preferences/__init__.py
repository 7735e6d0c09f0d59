"""User preference profiles."""
from .profile import DEFAULT_MIN_MATCH_SCORE, PreferenceProfile

__all__ = ["PreferenceProfile", "DEFAULT_MIN_MATCH_SCORE"]
