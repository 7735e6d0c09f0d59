"""Application settings using Pydantic."""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Key-value store backing saved jobs and preferences
    database_url: str = Field(
        default="sqlite:///job_tracker.db",
        description="SQLAlchemy database URL",
    )
    saved_jobs_key: str = Field(
        default="savedJobs",
        description="Store key holding the saved job id list",
    )
    preferences_key: str = Field(
        default="jobTrackerPreferences",
        description="Store key holding the preference profile",
    )

    # Dataset
    jobs_file: Optional[Path] = Field(
        default=None,
        description="Path to the job dataset (YAML or JSON). Defaults to config/jobs.yaml",
    )

    # Digest
    digest_limit: int = Field(
        default=10,
        ge=1,
        description="Maximum jobs shown in the digest",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for a rotating log file",
    )

    # Paths
    config_dir: Path = Field(
        default=Path(__file__).parent,
        description="Configuration directory",
    )

    @property
    def jobs_path(self) -> Path:
        """Path to the job dataset file."""
        return self.jobs_file or self.config_dir / "jobs.yaml"


# Global settings instance
settings = Settings()
