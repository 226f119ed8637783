"""
Match primitives for registry resolution.

Match wraps a matched item with how (and how well) it matched.
MatchResult is a tagged union: a single match, several ambiguous
matches, or nothing.
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")

# A multiple-match winner must beat the runner-up by more than this
CLEAR_WINNER_MARGIN = 0.2


class MatchType(str, Enum):
    """How a match was found."""
    EXACT = "exact"
    PREFIX = "prefix"
    TYPO = "typo"
    FUZZY = "fuzzy"


@dataclass(frozen=True)
class Match(Generic[T]):
    """
    Immutable match of user input against one registry item.
    
    Attributes:
        item: The matched item
        confidence: Confidence score between 0.0 and 1.0
        match_type: Tier that produced the match
        matched_input: The input as the user typed it
        matched_on: The alias of the item that matched
        distance: Edit distance, for typo matches only
    """
    item: T
    confidence: float
    match_type: MatchType
    matched_input: str
    matched_on: str
    distance: Optional[int] = None
    
    def __post_init__(self):
        """Validate confidence score."""
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be between 0.0 and 1.0, got {self.confidence}")
    
    @classmethod
    def exact(cls, item: T, matched_input: str, matched_on: str) -> "Match[T]":
        return cls(item, 1.0, MatchType.EXACT, matched_input, matched_on)
    
    @classmethod
    def prefix(cls, item: T, matched_input: str, matched_on: str) -> "Match[T]":
        return cls(item, 0.9, MatchType.PREFIX, matched_input, matched_on)
    
    @classmethod
    def typo(cls, item: T, matched_input: str, matched_on: str, distance: int) -> "Match[T]":
        if distance == 1:
            confidence = 0.8
        elif distance == 2:
            confidence = 0.6
        else:
            confidence = 0.4
        return cls(item, confidence, MatchType.TYPO, matched_input, matched_on, distance)
    
    @classmethod
    def fuzzy(
        cls,
        item: T,
        matched_input: str,
        matched_on: str,
        score: int,
        max_score: int,
    ) -> "Match[T]":
        if max_score > 0:
            confidence = min(score / max_score, 0.85)
        else:
            confidence = 0.5
        return cls(item, confidence, MatchType.FUZZY, matched_input, matched_on)
    
    @property
    def priority(self) -> int:
        """Sort priority of the match kind (lower is better)."""
        if self.match_type == MatchType.EXACT:
            return 0
        if self.match_type == MatchType.PREFIX:
            return 1
        if self.match_type == MatchType.TYPO:
            if self.distance == 1:
                return 2
            if self.distance == 2:
                return 3
            return 5
        return 4
    
    @property
    def kind_label(self) -> str:
        """Display text for the match kind, e.g. ``Typo(distance=1)``."""
        if self.match_type == MatchType.TYPO:
            return f"Typo(distance={self.distance})"
        return self.match_type.value.capitalize()
    
    def map(self, fn: Callable[[T], U]) -> "Match[U]":
        """Transform the wrapped item, keeping all match metadata."""
        return replace(self, item=fn(self.item))


class ResultKind(str, Enum):
    """Variant tag of a MatchResult."""
    SINGLE = "single"
    MULTIPLE = "multiple"
    NONE = "none"


@dataclass(frozen=True)
class MatchResult(Generic[T]):
    """
    Outcome of resolving one input.
    
    Exactly one of three variants:
    - SINGLE: one unambiguous match
    - MULTIPLE: several possible matches (ambiguous)
    - NONE: nothing matched
    
    Ambiguity is not an error. Callers inspect ``kind`` (or ``is_multiple``)
    before calling ``best()`` when they need to prompt or reject.
    """
    kind: ResultKind
    matches: Tuple[Match[T], ...] = field(default=())
    
    def __post_init__(self):
        expected = {ResultKind.SINGLE: 1, ResultKind.NONE: 0}
        if self.kind in expected and len(self.matches) != expected[self.kind]:
            raise ValueError(f"{self.kind.value} result cannot hold {len(self.matches)} matches")
        if self.kind == ResultKind.MULTIPLE and not self.matches:
            raise ValueError("multiple result needs at least one match")
    
    @classmethod
    def single(cls, match: Match[T]) -> "MatchResult[T]":
        return cls(ResultKind.SINGLE, (match,))
    
    @classmethod
    def multiple(cls, matches: List[Match[T]]) -> "MatchResult[T]":
        return cls(ResultKind.MULTIPLE, tuple(matches))
    
    @classmethod
    def none(cls) -> "MatchResult[T]":
        return cls(ResultKind.NONE)
    
    @classmethod
    def from_matches(cls, matches: List[Match[T]]) -> "MatchResult[T]":
        """Single for one match, Multiple for several, None for none."""
        if not matches:
            return cls.none()
        if len(matches) == 1:
            return cls.single(matches[0])
        return cls.multiple(matches)
    
    @property
    def is_single(self) -> bool:
        return self.kind == ResultKind.SINGLE
    
    @property
    def is_multiple(self) -> bool:
        return self.kind == ResultKind.MULTIPLE
    
    @property
    def is_none(self) -> bool:
        return self.kind == ResultKind.NONE
    
    @property
    def match(self) -> Optional[Match[T]]:
        """The match of a SINGLE result, otherwise None."""
        return self.matches[0] if self.is_single else None
    
    def is_exact(self) -> bool:
        return self.is_single and self.matches[0].match_type == MatchType.EXACT
    
    def best(self) -> Optional[Match[T]]:
        """
        Best match of the result.
        
        SINGLE returns its match. MULTIPLE returns the highest-confidence
        match, whether or not it clearly beats the runner-up (see
        ``has_clear_winner``). NONE returns None.
        """
        if self.is_none:
            return None
        if self.is_single:
            return self.matches[0]
        return self._ranked()[0]
    
    def has_clear_winner(self) -> bool:
        """True when the top match beats the runner-up by more than the margin."""
        if self.is_none:
            return False
        if self.is_single:
            return True
        ranked = self._ranked()
        return ranked[0].confidence > ranked[1].confidence + CLEAR_WINNER_MARGIN
    
    def map(self, fn: Callable[[T], U]) -> "MatchResult[U]":
        """Transform every wrapped item, keeping the variant."""
        return MatchResult(self.kind, tuple(m.map(fn) for m in self.matches))
    
    def _ranked(self) -> List[Match[T]]:
        # sorted() is stable, so equal confidences keep registry order
        return sorted(self.matches, key=lambda m: m.confidence, reverse=True)