"""Job matching and scoring."""
from .preference_matcher import BadgeTier, MatchResult, PreferenceMatcher
from .scorer_protocol import Scorer

__all__ = ["PreferenceMatcher", "MatchResult", "BadgeTier", "Scorer"]
