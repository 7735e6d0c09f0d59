"""Job list filtering and sorting."""
from .criteria import FilterCriteria, SortMode
from .engine import JobFilterEngine
from .salary import extract_leading_integer

__all__ = ["FilterCriteria", "SortMode", "JobFilterEngine", "extract_leading_integer"]
