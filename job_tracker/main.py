"""Command-line entry point for Job Tracker.

Usage:
    job-tracker jobs --keyword react --mode Remote --sort match --only-matches
    job-tracker digest
    job-tracker save 3
    job-tracker saved
    job-tracker prefs set --keywords "Frontend Developer, React" --min-score 50

Environment variables:
    DATABASE_URL: Store for saved jobs and preferences (optional)
    JOBS_FILE: Job dataset path (optional)
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from config.settings import settings
from job_tracker.dataset import load_jobs
from job_tracker.display import format_job_line
from job_tracker.exceptions import JobTrackerError, UnknownJobError
from job_tracker.filtering import FilterCriteria, JobFilterEngine, SortMode
from job_tracker.logging_config import setup_logging
from job_tracker.matching import PreferenceMatcher
from job_tracker.models import ExperienceLevel, Job, JobSource, WorkMode
from job_tracker.persistence.store import SqlKeyValueStore
from job_tracker.preferences import PreferenceProfile
from job_tracker.tracking import PreferenceService, SavedJobsService

logger = logging.getLogger(__name__)

# Commands that read the job dataset
JOB_COMMANDS = {"jobs", "digest", "save", "saved"}

# prefs set option -> profile field alias
_PREFERENCE_OPTIONS = {
    "keywords": "roleKeywords",
    "locations": "preferredLocations",
    "modes": "preferredMode",
    "experience": "experienceLevel",
    "skills": "skills",
    "min_score": "minMatchScore",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="job-tracker",
        description="Browse, score and save job postings.",
    )
    parser.add_argument("--jobs-file", help="Job dataset (YAML or JSON)")
    commands = parser.add_subparsers(dest="command", required=True)

    jobs = commands.add_parser("jobs", help="List jobs matching the filters")
    jobs.add_argument("--keyword", default="", help="Search by title or company")
    jobs.add_argument("--location", default="")
    jobs.add_argument("--mode", default="", choices=["", *(m.value for m in WorkMode)])
    jobs.add_argument(
        "--experience", default="", choices=["", *(e.value for e in ExperienceLevel)]
    )
    jobs.add_argument("--source", default="", choices=["", *(s.value for s in JobSource)])
    jobs.add_argument(
        "--sort",
        default=SortMode.LATEST.value,
        choices=[s.value for s in SortMode],
    )
    jobs.add_argument(
        "--only-matches",
        action="store_true",
        help="Hide jobs below the preference threshold",
    )

    digest = commands.add_parser("digest", help="Show the best matches for your preferences")
    digest.add_argument("--limit", type=int, default=None)

    save = commands.add_parser("save", help="Save a job")
    save.add_argument("job_id", type=int)

    unsave = commands.add_parser("unsave", help="Remove a saved job")
    unsave.add_argument("job_id", type=int)

    commands.add_parser("saved", help="List saved jobs")

    prefs = commands.add_parser("prefs", help="Show or change preferences")
    prefs_commands = prefs.add_subparsers(dest="prefs_command", required=True)
    prefs_commands.add_parser("show")
    prefs_commands.add_parser("clear")
    prefs_set = prefs_commands.add_parser("set")
    prefs_set.add_argument("--keywords", help="Comma-separated role keywords")
    prefs_set.add_argument("--locations", help="Comma-separated preferred locations")
    prefs_set.add_argument("--modes", help="Comma-separated work modes")
    prefs_set.add_argument("--experience", help="Experience level")
    prefs_set.add_argument("--skills", help="Comma-separated skills")
    prefs_set.add_argument("--min-score", type=int, help="Threshold for --only-matches")

    return parser


def _print_jobs(
    jobs: Sequence[Job],
    profile: Optional[PreferenceProfile],
    saved: SavedJobsService,
    matcher: PreferenceMatcher,
) -> None:
    saved_ids = set(saved.saved_ids())
    for job in jobs:
        score = matcher.score(job, profile) if profile is not None else None
        print(format_job_line(job, score=score, saved=job.id in saved_ids))


def _print_profile(profile: Optional[PreferenceProfile]) -> None:
    if profile is None:
        print("No preferences set.")
        return
    for name, value in profile.to_storage().items():
        if isinstance(value, list):
            value = ", ".join(value) or "-"
        print(f"{name}: {value if value is not None else '-'}")


def run_command(
    args: argparse.Namespace,
    jobs: Sequence[Job],
    saved: SavedJobsService,
    preferences: PreferenceService,
    digest_limit: int = 10,
) -> int:
    """
    Execute a parsed command.

    Args:
        args: Parsed arguments from build_parser()
        jobs: Job dataset
        saved: Saved jobs service
        preferences: Preference service
        digest_limit: Default number of digest entries

    Returns:
        Process exit code

    Raises:
        UnknownJobError: If saving a job id that is not in the dataset
    """
    matcher = PreferenceMatcher()
    engine = JobFilterEngine(matcher)

    if args.command == "jobs":
        profile = preferences.load()
        criteria = FilterCriteria(
            keyword=args.keyword,
            location=args.location,
            mode=args.mode,
            experience=args.experience,
            source=args.source,
            sort_mode=args.sort,
            show_only_matches=args.only_matches,
        )
        visible = engine.apply(jobs, criteria, profile)
        print(f"{len(visible)} jobs available")
        _print_jobs(visible, profile, saved, matcher)
        return 0

    if args.command == "digest":
        profile = preferences.load()
        if profile is None:
            print("No preferences set. Run 'job-tracker prefs set' to get a digest.")
            return 0
        limit = args.limit if args.limit is not None else digest_limit
        top = engine.top_matches(jobs, profile, limit=limit)
        if not top:
            print("No matching jobs today.")
            return 0
        print(f"Top {len(top)} matches")
        _print_jobs(top, profile, saved, matcher)
        return 0

    if args.command == "save":
        if not any(job.id == args.job_id for job in jobs):
            raise UnknownJobError(args.job_id)
        saved.save(args.job_id)
        print(f"Saved job {args.job_id}")
        return 0

    if args.command == "unsave":
        saved.unsave(args.job_id)
        print(f"Removed job {args.job_id}")
        return 0

    if args.command == "saved":
        saved_jobs = saved.saved_jobs(jobs)
        if not saved_jobs:
            print("No saved jobs yet.")
            return 0
        print(f"{len(saved_jobs)} saved jobs")
        _print_jobs(saved_jobs, preferences.load(), saved, matcher)
        return 0

    if args.command == "prefs":
        if args.prefs_command == "show":
            _print_profile(preferences.load())
        elif args.prefs_command == "clear":
            preferences.clear()
            print("Preferences cleared.")
        else:
            current = preferences.load()
            data = current.to_storage() if current is not None else {}
            for option, alias in _PREFERENCE_OPTIONS.items():
                value = getattr(args, option)
                if value is not None:
                    data[alias] = value
            profile = PreferenceProfile.model_validate(data)
            preferences.save(profile)
            _print_profile(profile)
        return 0

    logger.error("Unknown command: %s", args.command)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, wire up storage and run the command."""
    args = build_parser().parse_args(argv)
    setup_logging()

    # Deferred: importing this module creates the engine
    from job_tracker.persistence.database import get_session, init_db

    try:
        jobs: Sequence[Job] = ()
        if args.command in JOB_COMMANDS:
            jobs = load_jobs(args.jobs_file or settings.jobs_path)

        init_db()
        with get_session() as session:
            store = SqlKeyValueStore(session)
            return run_command(
                args,
                jobs,
                SavedJobsService(store, settings.saved_jobs_key),
                PreferenceService(store, settings.preferences_key),
                digest_limit=settings.digest_limit,
            )
    except JobTrackerError as e:
        logger.error("Error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
