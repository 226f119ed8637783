"""
Registry resolution layer.

Turns typo-prone user input into registry items with confidence scoring.

Key components:
- Match / MatchResult: matched item with confidence, and the single/multiple/none union
- Match tiers: Exact, Prefix, Typo (edit distance) and Fuzzy strategies
- ResolutionPolicy: strict first-productive-tier cascade
- RegistryMatcher: per-type resolvers over the registry
"""
from .edit_distance import MAX_EDIT_DISTANCE, edit_distance
from .match import Match, MatchResult, MatchType, ResultKind
from .semantic_resolver import Candidate, MatchStrategy
from .exact_matcher import ExactMatcher
from .prefix_matcher import PrefixMatcher
from .typo_matcher import TypoMatcher
from .fuzzy_matcher import FuzzyMatcher, MIN_FUZZY_SCORE
from .resolution_policy import ResolutionPolicy
from .registry_matcher import RegistryMatcher, format_correction, to_singular

__all__ = [
    "MAX_EDIT_DISTANCE",
    "edit_distance",
    "Match",
    "MatchResult",
    "MatchType",
    "ResultKind",
    "Candidate",
    "MatchStrategy",
    "ExactMatcher",
    "PrefixMatcher",
    "TypoMatcher",
    "FuzzyMatcher",
    "MIN_FUZZY_SCORE",
    "ResolutionPolicy",
    "RegistryMatcher",
    "format_correction",
    "to_singular",
]
