"""
Resolution policy for strategy escalation.

Implements the cascade: single year-matched candidate -> IMDb id among
year-matched candidates -> IMDb id among all candidates -> title match.
"""
import logging
from typing import List
from .cross_reference import ImdbCrossReferenceMatcher
from .name_matcher import NameMatcher
from .single_candidate import SingleCandidateMatcher
from .strategy import ResolutionStrategy
from .year_filter import YearFiltered
from ..catalog import CatalogClient
from ..models import Candidate, LookupInfo, MatchResult

logger = logging.getLogger(__name__)


class ResolutionPolicy:
    """
    Policy for escalating through resolution strategies.

    Tries strategies in order and stops at the first match. Each strategy
    runs only if every earlier one found nothing, so the order is a
    confidence ranking.
    """

    def __init__(self, strategies: List[ResolutionStrategy]):
        """
        :param strategies: Strategies to try, most confident first
        """
        if not strategies:
            raise ValueError("At least one strategy must be provided")

        self._strategies = list(strategies)

    @property
    def strategies(self) -> List[ResolutionStrategy]:
        return list(self._strategies)

    async def resolve(
        self,
        info: LookupInfo,
        candidates: List[Candidate],
    ) -> MatchResult:
        """
        Resolve by trying strategies in order.

        :param info: Item being resolved
        :param candidates: Unfiltered search candidates
        :return: First successful MatchResult, or an "exhausted" failure
        """
        for strategy in self._strategies:
            result = await strategy.resolve(info, candidates)
            if result.succeeded:
                logger.debug(f"Strategy '{strategy.name}' resolved '{info.name}' to {result.resolved_id}")
                return result
            logger.debug(f"Strategy '{strategy.name}' found no match for '{info.name}'")

        return MatchResult.failure("exhausted")


def default_policy(catalog: CatalogClient) -> ResolutionPolicy:
    """
    Build the standard resolution cascade.

    :param catalog: Catalog client used by enriching strategies
    :return: ResolutionPolicy
    """
    return ResolutionPolicy(
        strategies=[
            YearFiltered(SingleCandidateMatcher()),
            YearFiltered(ImdbCrossReferenceMatcher(catalog)),
            ImdbCrossReferenceMatcher(catalog),
            NameMatcher(catalog),
        ]
    )
