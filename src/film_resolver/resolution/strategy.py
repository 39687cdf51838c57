"""
Core abstraction for resolution strategies.
"""
from abc import ABC, abstractmethod
from typing import List
from ..models import Candidate, LookupInfo, MatchResult


class ResolutionStrategy(ABC):
    """
    One heuristic of the resolution cascade.

    Strategies receive the target item and a candidate list and either
    resolve a film id or report no match. They never raise for "no match".
    """

    name: str = "strategy"

    @abstractmethod
    async def resolve(
        self,
        info: LookupInfo,
        candidates: List[Candidate],
    ) -> MatchResult:
        """
        Try to pick the target film among candidates.

        :param info: Item being resolved
        :param candidates: Candidates to consider, in search order
        :return: MatchResult, succeeded only for a confident match
        """
        pass
