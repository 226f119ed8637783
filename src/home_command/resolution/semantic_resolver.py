"""
Core abstractions for registry resolution.

Defines the candidate shape shared by all registry types and the protocol
every match tier implements.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, List, Sequence, TypeVar

from .match import Match

T = TypeVar("T")


@dataclass(frozen=True)
class Candidate(Generic[T]):
    """
    A registry item prepared for matching.
    
    Attributes:
        item: The registry item (entity, area, service or domain string)
        exact_keys: Strings that count as an exact hit (id, short form, names)
        aliases: Search names tried by the prefix, typo and fuzzy tiers
    """
    item: T
    exact_keys: Sequence[str]
    aliases: Sequence[str]


class MatchStrategy(ABC):
    """
    Protocol for one matching tier.
    
    A tier inspects every candidate and returns the ones it accepts, already
    in the order the tier wants them reported.
    """
    
    name: str = "base"
    
    @abstractmethod
    def collect(
        self,
        user_input: str,
        queries: Sequence[str],
        candidates: Sequence[Candidate[T]],
    ) -> List[Match[T]]:
        """
        Match candidates against the input.
        
        :param user_input: The input as typed (recorded on each match)
        :param queries: Lower-cased query variants to compare with
        :param candidates: Candidates in registry order
        :return: Accepted matches, ordered; empty when the tier finds nothing
        """
        pass
