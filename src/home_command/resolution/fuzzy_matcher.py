"""
Fuzzy matching tier.

Handles abbreviations and dropped letters ("lvng rm lght" -> "living room light",
"ktch" -> "kitchen") that are too far off for the typo tier.
"""
from typing import Dict, List, Optional, Sequence, TypeVar

from rapidfuzz.distance import LCSseq

from .match import Match
from .semantic_resolver import Candidate, MatchStrategy

T = TypeVar("T")

# Minimum score for fuzzy matches to be considered
MIN_FUZZY_SCORE = 50

# Score awarded per matched input character
SCORE_PER_CHAR = 16

# Alignment bonuses and penalties
BONUS_BOUNDARY = 8
BONUS_CONSECUTIVE = 4
FIRST_CHAR_MULTIPLIER = 2
GAP_START = -3
GAP_EXTENSION = -1

WORD_SEPARATORS = " _."


class FuzzyMatcher(MatchStrategy):
    """
    Subsequence alignment scoring.
    
    An alias is only scored when every input character appears in it in
    order. The best alignment earns SCORE_PER_CHAR per character, a bonus
    for characters that start a word and for runs of adjacent characters,
    and a penalty for each gap. ``len(input) * SCORE_PER_CHAR`` normalizes
    confidence; bonuses may push a score above it.
    """
    
    name = "fuzzy"
    
    def __init__(self, min_score: int = MIN_FUZZY_SCORE):
        """
        Initialize fuzzy matcher.
        
        :param min_score: Minimum score to accept a match
        """
        if min_score < 0:
            raise ValueError(f"min_score must not be negative, got {min_score}")
        
        self.min_score = min_score
    
    def score(self, query: str, alias: str) -> Optional[int]:
        """
        Score one query against one alias.
        
        :param query: Lower-cased query
        :param alias: Alias to score against
        :return: Score, or None when the query is not a subsequence of the alias
        """
        alias_lower = alias.lower()
        if not query or LCSseq.similarity(query, alias_lower) < len(query):
            return None
        
        return _alignment_score(query, alias_lower)
    
    def collect(
        self,
        user_input: str,
        queries: Sequence[str],
        candidates: Sequence[Candidate[T]],
    ) -> List[Match[T]]:
        max_possible_score = len(user_input) * SCORE_PER_CHAR
        matches = []
        
        for candidate in candidates:
            best_score = 0
            best_alias = None
            
            for alias in candidate.aliases:
                for query in queries:
                    score = self.score(query, alias)
                    if score is not None and score > best_score and score >= self.min_score:
                        best_score = score
                        best_alias = alias
            
            if best_alias is not None:
                matches.append(Match.fuzzy(
                    candidate.item,
                    user_input,
                    best_alias,
                    best_score,
                    max_possible_score,
                ))
        
        # Tier first, then confidence
        return sorted(matches, key=lambda m: (m.priority, -m.confidence))


def _boundary_bonus(text: str, index: int) -> int:
    if index == 0 or text[index - 1] in WORD_SEPARATORS:
        return BONUS_BOUNDARY
    return 0


def _alignment_score(query: str, text: str) -> int:
    """
    Best score over all placements of ``query`` as a subsequence of ``text``.
    
    ``text`` must contain ``query`` as a subsequence.
    """
    # Score of the best alignment ending with the current query char at each text index
    previous: Dict[int, int] = {}
    
    for i, char in enumerate(query):
        current: Dict[int, int] = {}
        for j, text_char in enumerate(text):
            if text_char != char:
                continue
            
            bonus = _boundary_bonus(text, j)
            if i == 0:
                current[j] = SCORE_PER_CHAR + bonus * FIRST_CHAR_MULTIPLIER
                continue
            
            best = None
            for k, prev_score in previous.items():
                if k >= j:
                    continue
                gap = j - k - 1
                if gap == 0:
                    step = prev_score + BONUS_CONSECUTIVE
                else:
                    step = prev_score + GAP_START + GAP_EXTENSION * (gap - 1)
                if best is None or step > best:
                    best = step
            
            if best is not None:
                current[j] = best + SCORE_PER_CHAR + bonus
        previous = current
    
    return max(previous.values())
