"""
Typo-correction tier using bounded edit distance.
"""
from typing import List, Sequence, TypeVar

from .edit_distance import MAX_EDIT_DISTANCE, edit_distance
from .match import Match
from .semantic_resolver import Candidate, MatchStrategy

T = TypeVar("T")


class TypoMatcher(MatchStrategy):
    """
    Handles near-misses such as "kitchn" -> "kitchen".
    
    A candidate qualifies on the first alias within MAX_EDIT_DISTANCE
    (distance 0 is left to the exact tier). Results are sorted by
    confidence, closest first.
    """
    
    name = "typo"
    
    def collect(
        self,
        user_input: str,
        queries: Sequence[str],
        candidates: Sequence[Candidate[T]],
    ) -> List[Match[T]]:
        matches = []
        
        for candidate in candidates:
            match = self._first_typo(user_input, queries, candidate)
            if match is not None:
                matches.append(match)
        
        return sorted(matches, key=lambda m: m.confidence, reverse=True)
    
    def _first_typo(self, user_input, queries, candidate):
        for alias in candidate.aliases:
            alias_lower = alias.lower()
            for query in queries:
                distance = edit_distance(query, alias_lower)
                if 0 < distance <= MAX_EDIT_DISTANCE:
                    return Match.typo(candidate.item, user_input, alias, distance)
        return None
