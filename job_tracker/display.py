"""Plain-text formatting of jobs."""
from typing import Optional

from job_tracker.matching.preference_matcher import PreferenceMatcher
from job_tracker.models import Job


def format_posted_date(days_ago: int) -> str:
    """Human-readable posting age."""
    if days_ago == 0:
        return "Today"
    if days_ago == 1:
        return "1 day ago"
    return f"{days_ago} days ago"


def format_job_line(job: Job, score: Optional[int] = None, saved: bool = False) -> str:
    """
    Render a job as one line of text.

    Args:
        job: Job to render
        score: Match score; omitted from the line when None
        saved: Whether to mark the job as saved

    Returns:
        e.g. "[3] Frontend Developer - Acme | Pune | Remote | Today | 6-10 LPA | 85 Excellent"
    """
    parts = [
        f"[{job.id}] {job.title} - {job.company}",
        job.location,
        job.mode,
        format_posted_date(job.posted_days_ago),
        job.salary_range,
    ]
    if score is not None:
        parts.append(f"{score} {PreferenceMatcher.label(score)}")

    line = " | ".join(part for part in parts if part)
    return f"* {line}" if saved else line
