"""Preference matching - additive rule scoring of jobs against a profile."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from job_tracker.models import Job, JobSource
from job_tracker.preferences.profile import PreferenceProfile

# Rule weights. They sum to exactly 100.
TITLE_KEYWORD_POINTS = 25
DESCRIPTION_KEYWORD_POINTS = 15
LOCATION_POINTS = 15
MODE_POINTS = 10
EXPERIENCE_POINTS = 10
SKILL_OVERLAP_POINTS = 15
RECENCY_POINTS = 5
SOURCE_BONUS_POINTS = 5

MAX_SCORE = 100
RECENT_DAYS = 2
BONUS_SOURCE = JobSource.LINKEDIN.value

# Lower bounds of each badge tier / label
FAIR_THRESHOLD = 40
GOOD_THRESHOLD = 60
EXCELLENT_THRESHOLD = 80


class BadgeTier(Enum):
    """Visual tier for a match score badge."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class MatchResult:
    """Result of scoring one job against a profile."""

    score: int  # 0-100
    matched_rules: list[str] = field(default_factory=list)
    matched_keywords: list[str] = field(default_factory=list)
    matched_locations: list[str] = field(default_factory=list)
    matched_skills: list[str] = field(default_factory=list)


def _matching_needles(haystack: str, needles: Iterable[str]) -> list[str]:
    """Return the needles that occur in haystack, case-insensitively."""
    haystack = (haystack or "").lower()
    return [n for n in needles if n and n.strip() and n.lower() in haystack]


def _overlapping_skills(job_skills: Iterable[str], profile_skills: Iterable[str]) -> list[str]:
    """Return job skills that contain, or are contained in, any profile skill."""
    wanted = [s.lower() for s in profile_skills if s and s.strip()]
    overlap = []
    for skill in job_skills:
        if not skill or not skill.strip():
            continue
        lowered = skill.lower()
        if any(lowered in w or w in lowered for w in wanted):
            overlap.append(skill)
    return overlap


class PreferenceMatcher:
    """Score jobs against a user's preference profile.

    Each rule awards a fixed number of points and never subtracts, so a job
    can only gain by matching more preferences:

      title keyword 25, description keyword 15, location 15, skills 15,
      mode 10, experience 10, posted within 2 days 5, LinkedIn 5.

    Without a profile every job scores 0.
    """

    def explain(self, job: Job, profile: Optional[PreferenceProfile]) -> MatchResult:
        """
        Score a job and report which rules fired.

        Args:
            job: Job to score
            profile: Active preference profile, or None if none is set

        Returns:
            MatchResult with the clamped score and match details
        """
        if profile is None:
            return MatchResult(score=0)

        score = 0
        rules: list[str] = []

        title_keywords = _matching_needles(job.title, profile.role_keywords)
        if title_keywords:
            score += TITLE_KEYWORD_POINTS
            rules.append("title_keyword")

        description_keywords = _matching_needles(job.description, profile.role_keywords)
        if description_keywords:
            score += DESCRIPTION_KEYWORD_POINTS
            rules.append("description_keyword")

        locations = _matching_needles(job.location, profile.preferred_locations)
        if locations:
            score += LOCATION_POINTS
            rules.append("location")

        if job.mode and job.mode in profile.preferred_mode:
            score += MODE_POINTS
            rules.append("mode")

        if profile.experience_level is not None and job.experience == profile.experience_level:
            score += EXPERIENCE_POINTS
            rules.append("experience")

        skills = _overlapping_skills(job.skills, profile.skills)
        if skills:
            score += SKILL_OVERLAP_POINTS
            rules.append("skills")

        if 0 <= job.posted_days_ago <= RECENT_DAYS:
            score += RECENCY_POINTS
            rules.append("recent")

        if job.source == BONUS_SOURCE:
            score += SOURCE_BONUS_POINTS
            rules.append("source")

        return MatchResult(
            score=min(MAX_SCORE, score),
            matched_rules=rules,
            matched_keywords=list(dict.fromkeys(title_keywords + description_keywords)),
            matched_locations=locations,
            matched_skills=skills,
        )

    def score(self, job: Job, profile: Optional[PreferenceProfile]) -> int:
        """Return the 0-100 match score of a job."""
        return self.explain(job, profile).score

    @staticmethod
    def badge_tier(score: int) -> BadgeTier:
        """Map a score to its badge tier."""
        if score >= EXCELLENT_THRESHOLD:
            return BadgeTier.HIGH
        if score >= GOOD_THRESHOLD:
            return BadgeTier.MEDIUM
        if score >= FAIR_THRESHOLD:
            return BadgeTier.LOW
        return BadgeTier.NONE

    @staticmethod
    def label(score: int) -> str:
        """Map a score to its human-readable label."""
        if score >= EXCELLENT_THRESHOLD:
            return "Excellent"
        if score >= GOOD_THRESHOLD:
            return "Good"
        if score >= FAIR_THRESHOLD:
            return "Fair"
        return "Low"
