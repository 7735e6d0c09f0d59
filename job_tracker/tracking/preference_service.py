"""Preference profile persistence."""
import json
import logging
from typing import Optional

from job_tracker.persistence.store import KeyValueStore
from job_tracker.preferences.profile import PreferenceProfile

logger = logging.getLogger(__name__)

DEFAULT_PREFERENCES_KEY = "jobTrackerPreferences"


class PreferenceService:
    """Load and store the single active preference profile."""

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_PREFERENCES_KEY):
        self.store = store
        self.key = key

    def load(self) -> Optional[PreferenceProfile]:
        """
        Load the stored profile.

        Returns:
            The profile, or None when no preferences are set or the stored
            payload is unreadable
        """
        raw = self.store.get(self.key)
        if not raw:
            return None

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Ignoring corrupt preferences under %r: %s", self.key, e)
            return None

        if not isinstance(data, dict):
            logger.warning("Ignoring preferences under %r: expected an object", self.key)
            return None

        return PreferenceProfile.model_validate(data)

    def save(self, profile: PreferenceProfile) -> None:
        """Store a profile, replacing the previous one."""
        self.store.set(self.key, json.dumps(profile.to_storage()))
        logger.info("Saved preferences")

    def clear(self) -> None:
        """Remove the stored profile."""
        self.store.delete(self.key)
        logger.info("Cleared preferences")
