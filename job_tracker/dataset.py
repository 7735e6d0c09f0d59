"""Loading the static job dataset."""
import logging
from pathlib import Path

import yaml

from job_tracker.exceptions import DatasetError
from job_tracker.models import Job

logger = logging.getLogger(__name__)


def load_jobs(path: str | Path) -> tuple[Job, ...]:
    """
    Load jobs from a YAML or JSON file.

    The file holds either a list of job records or a mapping with a
    ``jobs`` list.

    Args:
        path: Path to the dataset file

    Returns:
        Jobs in file order

    Raises:
        DatasetError: If the file is unreadable, malformed or has
            duplicate job ids
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise DatasetError(str(path), f"cannot read file: {e}") from e
    except yaml.YAMLError as e:
        raise DatasetError(str(path), f"cannot parse file: {e}") from e

    return parse_jobs(data, source=str(path))


def parse_jobs(data, source: str = "<data>") -> tuple[Job, ...]:
    """Build jobs from already-decoded dataset content."""
    if isinstance(data, dict):
        data = data.get("jobs")
    if data is None:
        data = []
    if not isinstance(data, list):
        raise DatasetError(source, "expected a list of jobs")

    jobs = []
    seen_ids = set()
    for index, record in enumerate(data):
        try:
            job = Job.from_dict(record)
        except DatasetError as e:
            raise DatasetError(source, f"record {index}: {e.reason}") from e

        if job.id in seen_ids:
            raise DatasetError(source, f"duplicate job id {job.id}")
        seen_ids.add(job.id)
        jobs.append(job)

    logger.info("Loaded %d jobs from %s", len(jobs), source)
    return tuple(jobs)
