"""Scorer protocol for pluggable scoring engines.

Defines the interface the filter engine relies on. PreferenceMatcher is the
rule-based implementation; any object with a compatible score() method can
be passed to JobFilterEngine instead.
"""
from typing import Optional, Protocol, runtime_checkable

from job_tracker.models import Job
from job_tracker.preferences.profile import PreferenceProfile


@runtime_checkable
class Scorer(Protocol):
    """Protocol for job scoring engines."""

    def score(self, job: Job, profile: Optional[PreferenceProfile]) -> int:
        """Score a single job from 0 to 100."""
        ...
