"""User state tracking services."""
from .preference_service import PreferenceService
from .saved_jobs import SavedJobsService

__all__ = ["SavedJobsService", "PreferenceService"]
