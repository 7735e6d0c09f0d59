"""Exceptions for Job Tracker."""


class JobTrackerError(Exception):
    """Base exception for Job Tracker errors."""

    pass


class DatasetError(JobTrackerError):
    """Raised when the job dataset cannot be loaded."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid job dataset {source}: {reason}")


class UnknownJobError(JobTrackerError):
    """Raised when a job id is not part of the dataset."""

    def __init__(self, job_id: int):
        self.job_id = job_id
        super().__init__(f"Unknown job id: {job_id}")
