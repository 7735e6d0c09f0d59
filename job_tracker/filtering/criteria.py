"""Filter criteria for one render of the job list."""
from dataclasses import dataclass
from enum import Enum


class SortMode(Enum):
    """Supported orderings of the visible job list."""

    LATEST = "latest"
    MATCH = "match"
    SALARY = "salary"


@dataclass(frozen=True)
class FilterCriteria:
    """Hard filters plus sort mode.

    Blank text fields are wildcards. keyword and location are
    case-insensitive substring filters; mode, experience and source must
    equal the job's value exactly. show_only_matches only takes effect when
    a preference profile is supplied alongside.
    """

    keyword: str = ""
    location: str = ""
    mode: str = ""
    experience: str = ""
    source: str = ""
    sort_mode: str = SortMode.LATEST.value
    show_only_matches: bool = False
