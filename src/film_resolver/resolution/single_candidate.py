import logging
from typing import List
from .strategy import ResolutionStrategy
from ..models import Candidate, LookupInfo, MatchResult

logger = logging.getLogger(__name__)


class SingleCandidateMatcher(ResolutionStrategy):
    """
    Accepts a candidate list of exactly one film.

    Only meaningful after year filtering: a lone raw search result is not
    trusted on its own.
    """

    name = "single_candidate"

    async def resolve(
        self,
        info: LookupInfo,
        candidates: List[Candidate],
    ) -> MatchResult:
        if len(candidates) != 1:
            return MatchResult.failure(self.name)

        film_id = candidates[0].film_id
        logger.debug(f"There is single candidate left, resolved '{info.name}' to {film_id}")
        return MatchResult.success(film_id, self.name)
