"""Numeric extraction from free-text salary ranges."""
import re
from typing import Optional

_DIGIT_RUN = re.compile(r"[0-9]+")


def extract_leading_integer(text: Optional[str]) -> int:
    """
    Return the first run of digits in text as an integer.

    Only the first contiguous run counts, so thousands separators end it:
    "$50,000" gives 50 and "6-10 LPA" gives 6. Ranges written in the same
    format still order correctly.

    Args:
        text: Salary range string

    Returns:
        The integer value, or 0 if text has no digits
    """
    if not text:
        return 0
    match = _DIGIT_RUN.search(text)
    return int(match.group()) if match else 0
