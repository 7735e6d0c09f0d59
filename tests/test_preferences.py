"""Tests for preference profile validation."""
import pytest
from pydantic import ValidationError

from job_tracker.preferences import DEFAULT_MIN_MATCH_SCORE, PreferenceProfile


class TestPreferenceProfile:
    """Tests for PreferenceProfile normalisation."""

    def test_defaults(self):
        """Test an empty payload is a valid, empty profile."""
        profile = PreferenceProfile()

        assert profile.role_keywords == ()
        assert profile.preferred_locations == ()
        assert profile.preferred_mode == ()
        assert profile.experience_level is None
        assert profile.skills == ()
        assert profile.min_match_score == DEFAULT_MIN_MATCH_SCORE == 40

    def test_camel_case_payload(self):
        """Test the browser payload keys are accepted."""
        profile = PreferenceProfile.model_validate(
            {
                "roleKeywords": ["Frontend Developer"],
                "preferredLocations": ["Pune"],
                "preferredMode": ["Hybrid"],
                "experienceLevel": "1-3",
                "skills": ["React"],
                "minMatchScore": 55,
            }
        )

        assert profile.role_keywords == ("Frontend Developer",)
        assert profile.preferred_locations == ("Pune",)
        assert profile.experience_level == "1-3"
        assert profile.min_match_score == 55

    def test_comma_separated_strings(self):
        """Test form-style comma-separated input is split and stripped."""
        profile = PreferenceProfile(role_keywords="Frontend Developer, React Engineer,  ")
        assert profile.role_keywords == ("Frontend Developer", "React Engineer")

    def test_blanks_and_duplicates_dropped(self):
        """Test blank and repeated entries are removed, order kept."""
        profile = PreferenceProfile(skills=["React", "", "  ", "React", "Go"])
        assert profile.skills == ("React", "Go")

    def test_malformed_lists_become_empty(self):
        """Test non-list values degrade to an empty collection."""
        profile = PreferenceProfile.model_validate(
            {"roleKeywords": 42, "skills": None, "preferredLocations": [1, "Delhi"]}
        )

        assert profile.role_keywords == ()
        assert profile.skills == ()
        assert profile.preferred_locations == ("Delhi",)

    def test_mode_casing_normalised(self):
        """Test known modes are mapped to their canonical casing."""
        profile = PreferenceProfile(preferred_mode=["remote", "ONSITE", "Remote", "Flexible"])
        assert profile.preferred_mode == ("Remote", "Onsite", "Flexible")

    @pytest.mark.parametrize("value", ["", "   ", None, 3])
    def test_blank_experience_is_none(self, value):
        """Test unusable experience levels mean no preference."""
        assert PreferenceProfile(experience_level=value).experience_level is None

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, 40),
            ("", 40),
            ("high", 40),
            (True, 40),
            (-5, 0),
            (150, 100),
            ("65", 65),
            (72.9, 72),
        ],
    )
    def test_min_match_score_normalised(self, value, expected):
        """Test the threshold is clamped or defaulted, never rejected."""
        assert PreferenceProfile(min_match_score=value).min_match_score == expected

    def test_frozen(self):
        """Test profiles are immutable values."""
        profile = PreferenceProfile()
        with pytest.raises(ValidationError):
            profile.min_match_score = 10

    def test_to_storage_round_trip(self, sample_profile):
        """Test the storage payload rebuilds an equal profile."""
        payload = sample_profile.to_storage()

        assert payload["roleKeywords"] == ["react"]
        assert payload["minMatchScore"] == 40
        assert PreferenceProfile.model_validate(payload) == sample_profile
