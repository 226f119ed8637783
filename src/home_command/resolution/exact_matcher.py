"""
Exact matching tier.

Fast, deterministic, case-insensitive. The first hit wins outright.
"""
from typing import List, Sequence, TypeVar

from .match import Match
from .semantic_resolver import Candidate, MatchStrategy

T = TypeVar("T")


class ExactMatcher(MatchStrategy):
    """
    Case-insensitive equality against each candidate's exact keys.
    
    Returns at most one match: ties are broken by registry order.
    """
    
    name = "exact"
    
    def collect(
        self,
        user_input: str,
        queries: Sequence[str],
        candidates: Sequence[Candidate[T]],
    ) -> List[Match[T]]:
        for candidate in candidates:
            for key in candidate.exact_keys:
                if key and key.lower() in queries:
                    return [Match.exact(candidate.item, user_input, key)]
        
        return []
