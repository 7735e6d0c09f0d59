"""Job filtering and sorting."""
import logging
from typing import Iterable, Optional

from job_tracker.filtering.criteria import FilterCriteria, SortMode
from job_tracker.filtering.salary import extract_leading_integer
from job_tracker.matching.preference_matcher import PreferenceMatcher
from job_tracker.matching.scorer_protocol import Scorer
from job_tracker.models import Job
from job_tracker.preferences.profile import PreferenceProfile

logger = logging.getLogger(__name__)


def _contains(haystack: str, needle: str) -> bool:
    """Case-insensitive substring test; a blank needle always matches."""
    if not (needle or "").strip():
        return True
    return needle.lower() in (haystack or "").lower()


def _equals(value: str, wanted: str) -> bool:
    """Exact equality test; a blank wanted value always matches."""
    wanted = (wanted or "").strip()
    return not wanted or value == wanted


class JobFilterEngine:
    """Filter and order jobs for display."""

    def __init__(self, scorer: Optional[Scorer] = None):
        """
        Initialize the filter engine.

        Args:
            scorer: Scoring engine used for threshold filtering and match
                sorting. Defaults to PreferenceMatcher.
        """
        self.scorer = scorer or PreferenceMatcher()

    def apply(
        self,
        jobs: Iterable[Job],
        criteria: FilterCriteria,
        profile: Optional[PreferenceProfile] = None,
    ) -> list[Job]:
        """
        Filter and sort jobs.

        Args:
            jobs: Full job collection (not modified)
            criteria: Filters and sort mode for this render
            profile: Active preference profile, or None

        Returns:
            New list of the visible jobs in display order
        """
        scores: dict[int, int] = {}

        def score_of(job: Job) -> int:
            if job.id not in scores:
                scores[job.id] = self.scorer.score(job, profile)
            return scores[job.id]

        visible = [job for job in jobs if self._passes_filters(job, criteria)]

        if criteria.show_only_matches and profile is not None:
            threshold = profile.min_match_score
            visible = [job for job in visible if score_of(job) >= threshold]

        return self._sort(visible, criteria.sort_mode, profile, score_of)

    def top_matches(
        self,
        jobs: Iterable[Job],
        profile: Optional[PreferenceProfile],
        limit: int = 10,
    ) -> list[Job]:
        """
        Get the best matching jobs for a digest.

        Args:
            jobs: Full job collection
            profile: Active preference profile; no profile means no digest
            limit: Maximum number of jobs

        Returns:
            Jobs at or above the profile threshold, best first
        """
        if profile is None or limit <= 0:
            return []

        criteria = FilterCriteria(sort_mode=SortMode.MATCH.value, show_only_matches=True)
        return self.apply(jobs, criteria, profile)[:limit]

    def _passes_filters(self, job: Job, criteria: FilterCriteria) -> bool:
        """Check the hard (profile independent) predicates."""
        keyword_ok = _contains(job.title, criteria.keyword) or _contains(
            job.company, criteria.keyword
        )
        return (
            keyword_ok
            and _contains(job.location, criteria.location)
            and _equals(job.mode, criteria.mode)
            and _equals(job.experience, criteria.experience)
            and _equals(job.source, criteria.source)
        )

    def _sort(self, jobs: list[Job], sort_mode: str, profile, score_of) -> list[Job]:
        """Order jobs by sort mode. Ties fall back to job id ascending."""
        if sort_mode == SortMode.LATEST.value:
            return sorted(jobs, key=lambda job: (job.posted_days_ago, job.id))

        if sort_mode == SortMode.MATCH.value:
            # Every score is 0 without a profile; keep filter order
            if profile is None:
                return jobs
            return sorted(jobs, key=lambda job: (-score_of(job), job.id))

        if sort_mode == SortMode.SALARY.value:
            return sorted(
                jobs,
                key=lambda job: (-extract_leading_integer(job.salary_range), job.id),
            )

        logger.debug("Unknown sort mode %r, keeping filter order", sort_mode)
        return jobs
