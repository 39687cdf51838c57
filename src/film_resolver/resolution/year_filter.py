"""
Release year filtering of search candidates.
"""
import logging
from typing import List
from .strategy import ResolutionStrategy
from ..models import Candidate, LookupInfo, MatchResult

logger = logging.getLogger(__name__)


def filter_by_year(info: LookupInfo, candidates: List[Candidate]) -> List[Candidate]:
    """
    Keep the candidates released in the target's year.

    Years are compared as strings, exactly. Without a target year nothing
    can be filtered safely and the result is empty.

    :param info: Item being resolved
    :param candidates: Search candidates
    :return: Matching candidates in input order
    """
    if info.year is None:
        logger.debug("Can't filter by year, no year set in metadata")
        return []

    target_year = str(info.year)
    filtered = [candidate for candidate in candidates if candidate.year == target_year]
    logger.debug(f"Filtered by year {target_year}, {len(filtered)} results left")
    return filtered


class YearFiltered(ResolutionStrategy):
    """Runs another strategy over the year-filtered candidates only."""

    def __init__(self, strategy: ResolutionStrategy):
        self._strategy = strategy
        self.name = f"year_filtered_{strategy.name}"

    async def resolve(
        self,
        info: LookupInfo,
        candidates: List[Candidate],
    ) -> MatchResult:
        result = await self._strategy.resolve(info, filter_by_year(info, candidates))
        if result.succeeded:
            return MatchResult.success(result.resolved_id, self.name)
        return MatchResult.failure(self.name)
