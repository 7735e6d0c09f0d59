"""Saved job tracking service."""
import json
import logging
from typing import Iterable

from job_tracker.models import Job
from job_tracker.persistence.store import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_SAVED_JOBS_KEY = "savedJobs"


class SavedJobsService:
    """Service for bookmarking jobs.

    The saved ids are kept as a JSON array under a single store key, in the
    order they were saved.
    """

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_SAVED_JOBS_KEY):
        """
        Initialize saved jobs service.

        Args:
            store: Key-value store holding user state
            key: Store key for the saved id list
        """
        self.store = store
        self.key = key

    def saved_ids(self) -> list[int]:
        """Get saved job ids in save order."""
        raw = self.store.get(self.key)
        if not raw:
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Ignoring corrupt saved jobs under %r: %s", self.key, e)
            return []

        if not isinstance(data, list):
            logger.warning("Ignoring saved jobs under %r: expected a list", self.key)
            return []

        ids = []
        for item in data:
            if isinstance(item, int) and not isinstance(item, bool) and item not in ids:
                ids.append(item)
        return ids

    def is_saved(self, job_id: int) -> bool:
        """Check whether a job is saved."""
        return job_id in self.saved_ids()

    def save(self, job_id: int) -> None:
        """Save a job. Saving an already saved job is a no-op."""
        ids = self.saved_ids()
        if job_id in ids:
            return
        ids.append(job_id)
        self._write(ids)
        logger.debug("Saved job %s", job_id)

    def unsave(self, job_id: int) -> None:
        """Remove a job from the saved list."""
        ids = self.saved_ids()
        if job_id not in ids:
            return
        self._write([i for i in ids if i != job_id])
        logger.debug("Unsaved job %s", job_id)

    def toggle(self, job_id: int) -> bool:
        """
        Flip the saved state of a job.

        Returns:
            True if the job is saved afterwards
        """
        if self.is_saved(job_id):
            self.unsave(job_id)
            return False
        self.save(job_id)
        return True

    def saved_jobs(self, jobs: Iterable[Job]) -> list[Job]:
        """Get the saved jobs from a collection, in collection order."""
        ids = set(self.saved_ids())
        return [job for job in jobs if job.id in ids]

    def _write(self, ids: list[int]) -> None:
        self.store.set(self.key, json.dumps(ids))
