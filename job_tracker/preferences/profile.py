"""User preference profile used for match scoring."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from job_tracker.models import WorkMode

DEFAULT_MIN_MATCH_SCORE = 40

_MODE_BY_LOWER = {mode.value.lower(): mode.value for mode in WorkMode}


def _as_unique_strings(v) -> tuple[str, ...]:
    """Coerce a list, comma-separated string or None into unique stripped strings."""
    if v is None:
        return ()
    if isinstance(v, str):
        v = v.split(",")
    if not isinstance(v, (list, tuple, set, frozenset)):
        return ()

    seen = set()
    items = []
    for item in v:
        if not isinstance(item, str):
            continue
        item = item.strip()
        if item and item not in seen:
            seen.add(item)
            items.append(item)
    return tuple(items)


class PreferenceProfile(BaseModel):
    """Preferences a user scores jobs against.

    Every field has a default, so an empty payload is a valid profile that
    scores only the recency and source bonuses. Malformed values are
    normalised here rather than rejected: bad lists become empty, a blank
    experience level becomes None and an unusable threshold falls back to
    the default. Serialised with camelCase aliases to match the browser
    payload.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    role_keywords: tuple[str, ...] = Field(default=(), alias="roleKeywords")
    preferred_locations: tuple[str, ...] = Field(default=(), alias="preferredLocations")
    preferred_mode: tuple[str, ...] = Field(default=(), alias="preferredMode")
    experience_level: Optional[str] = Field(default=None, alias="experienceLevel")
    skills: tuple[str, ...] = Field(default=())
    min_match_score: int = Field(
        default=DEFAULT_MIN_MATCH_SCORE,
        ge=0,
        le=100,
        alias="minMatchScore",
        description="Threshold for the 'only show matches' toggle",
    )

    @field_validator("role_keywords", "preferred_locations", "skills", mode="before")
    @classmethod
    def normalize_string_sets(cls, v):
        """Drop blanks and duplicates; accept comma-separated input."""
        return _as_unique_strings(v)

    @field_validator("preferred_mode", mode="before")
    @classmethod
    def normalize_modes(cls, v):
        """Map known modes to their canonical casing ("remote" -> "Remote")."""
        return tuple(
            dict.fromkeys(_MODE_BY_LOWER.get(m.lower(), m) for m in _as_unique_strings(v))
        )

    @field_validator("experience_level", mode="before")
    @classmethod
    def normalize_experience(cls, v):
        """Blank or non-string experience means no preference."""
        if not isinstance(v, str) or not v.strip():
            return None
        return v.strip()

    @field_validator("min_match_score", mode="before")
    @classmethod
    def normalize_min_match_score(cls, v):
        """Clamp to 0-100; unusable values fall back to the default."""
        if isinstance(v, bool) or v is None or v == "":
            return DEFAULT_MIN_MATCH_SCORE
        try:
            score = int(float(v))
        except (TypeError, ValueError, OverflowError):
            return DEFAULT_MIN_MATCH_SCORE
        return min(100, max(0, score))

    def to_storage(self) -> dict:
        """Serialize to the camelCase JSON-ready payload."""
        return self.model_dump(mode="json", by_alias=True)
