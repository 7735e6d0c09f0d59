"""Job posting data model."""
from dataclasses import dataclass, field
from enum import Enum

from job_tracker.exceptions import DatasetError


class WorkMode(Enum):
    """Known work arrangements."""

    REMOTE = "Remote"
    HYBRID = "Hybrid"
    ONSITE = "Onsite"


class ExperienceLevel(Enum):
    """Known experience brackets."""

    FRESHER = "Fresher"
    ZERO_TO_ONE = "0-1"
    ONE_TO_THREE = "1-3"
    THREE_TO_FIVE = "3-5"


class JobSource(Enum):
    """Job boards the dataset is collected from."""

    LINKEDIN = "LinkedIn"
    NAUKRI = "Naukri"
    INDEED = "Indeed"


# Dataset key -> attribute name, for keys that differ
_FIELD_ALIASES = {
    "postedDaysAgo": "posted_days_ago",
    "salaryRange": "salary_range",
    "applyUrl": "apply_url",
}

_REQUIRED_FIELDS = ("id", "title", "company")


def _whole_number(value, name: str) -> int:
    """Parse an integer field, rejecting bools and fractional numbers."""
    if isinstance(value, bool):
        raise DatasetError("record", f"{name} must be a whole number, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise DatasetError("record", f"{name} must be a whole number, got {value!r}")
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise DatasetError("record", f"{name} must be a whole number, got {value!r}") from e


@dataclass(frozen=True)
class Job:
    """A single job posting.

    Enum-like fields (mode, experience, source) hold plain strings so that
    records with values outside WorkMode/ExperienceLevel/JobSource still load
    and simply never match an equality filter.
    """

    id: int
    title: str
    company: str
    location: str = ""
    mode: str = ""
    experience: str = ""
    source: str = ""
    posted_days_ago: int = 0
    salary_range: str = ""
    description: str = ""
    skills: tuple[str, ...] = field(default_factory=tuple)
    apply_url: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Job":
        """
        Build a Job from a dataset record.

        Accepts the browser dataset keys (postedDaysAgo, salaryRange,
        applyUrl) as well as the snake_case attribute names.

        Args:
            data: Mapping for one job record

        Returns:
            Job instance

        Raises:
            DatasetError: If the record is missing required fields or has
                a non-integer id or posting age, or malformed skills
        """
        if not isinstance(data, dict):
            raise DatasetError("record", f"expected a mapping, got {type(data).__name__}")

        values = {_FIELD_ALIASES.get(key, key): value for key, value in data.items()}

        missing = [name for name in _REQUIRED_FIELDS if values.get(name) in (None, "")]
        if missing:
            raise DatasetError("record", f"missing required fields: {', '.join(missing)}")

        job_id = _whole_number(values["id"], "id")
        posted_days_ago = _whole_number(values.get("posted_days_ago") or 0, "postedDaysAgo")

        skills = values.get("skills") or ()
        if isinstance(skills, str):
            skills = skills.split(",")
        if not isinstance(skills, (list, tuple)):
            raise DatasetError(
                "record", f"job {job_id}: skills must be a list or comma-separated string"
            )

        return cls(
            id=job_id,
            title=str(values["title"]),
            company=str(values["company"]),
            location=str(values.get("location") or ""),
            mode=str(values.get("mode") or ""),
            experience=str(values.get("experience") or ""),
            source=str(values.get("source") or ""),
            posted_days_ago=max(0, posted_days_ago),
            salary_range=str(values.get("salary_range") or ""),
            description=str(values.get("description") or ""),
            skills=tuple(str(s).strip() for s in skills if str(s).strip()),
            apply_url=str(values.get("apply_url") or ""),
        )

    def to_dict(self) -> dict:
        """Serialize using the browser dataset keys."""
        return {
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "mode": self.mode,
            "experience": self.experience,
            "source": self.source,
            "postedDaysAgo": self.posted_days_ago,
            "salaryRange": self.salary_range,
            "description": self.description,
            "skills": list(self.skills),
            "applyUrl": self.apply_url,
        }

    def __repr__(self) -> str:
        return f"<Job {self.id}: {self.title} at {self.company}>"
