"""Job Tracker - filter, score and save job postings."""

__version__ = "0.1.0"
