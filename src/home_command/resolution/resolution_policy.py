"""
Resolution policy for the match-tier cascade.

Implements the escalation logic: exact -> prefix -> typo -> fuzzy.
"""
import logging
from typing import Callable, List, Optional, Sequence, TypeVar

from .exact_matcher import ExactMatcher
from .fuzzy_matcher import FuzzyMatcher
from .match import Match, MatchResult
from .prefix_matcher import PrefixMatcher
from .semantic_resolver import Candidate, MatchStrategy
from .typo_matcher import TypoMatcher

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResolutionPolicy:
    """
    Policy for escalating through match tiers.
    
    Tiers are tried strictly in order and the first tier that accepts at
    least one candidate decides the result. Later tiers never run, so a
    prefix hit always beats a better-scoring fuzzy hit.
    """
    
    def __init__(self, matchers: Optional[List[MatchStrategy]] = None):
        """
        Initialize resolution policy.
        
        :param matchers: Tiers to try in order (defaults to exact, prefix, typo, fuzzy)
        """
        if matchers is None:
            matchers = [ExactMatcher(), PrefixMatcher(), TypoMatcher(), FuzzyMatcher()]
        
        if not matchers:
            raise ValueError("At least one matcher must be provided")
        
        self._matchers = matchers
    
    def resolve(
        self,
        user_input: str,
        queries: Sequence[str],
        candidates: Sequence[Candidate[T]],
        preferred: Optional[Callable[[T], bool]] = None,
    ) -> MatchResult[T]:
        """
        Resolve input by trying tiers in order.
        
        :param user_input: Input as typed by the user
        :param queries: Lower-cased query variants
        :param candidates: Candidates in registry order
        :param preferred: Optional predicate; preferred items lead a multiple result
        :return: MatchResult from the first productive tier, or none
        """
        for matcher in self._matchers:
            matches = matcher.collect(user_input, queries, candidates)
            if not matches:
                continue
            
            logger.debug(
                f"'{user_input}' resolved by {matcher.name} tier: {len(matches)} candidate(s)"
            )
            if preferred is not None and len(matches) > 1:
                matches = self._prefer(matches, preferred)
            return MatchResult.from_matches(matches)
        
        return MatchResult.none()
    
    @staticmethod
    def _prefer(matches: List[Match[T]], preferred: Callable[[T], bool]) -> List[Match[T]]:
        # Stable: preferred items first, each group in tier order
        return sorted(matches, key=lambda m: not preferred(m.item))
