"""
Last-resort matching by title similarity.
"""
import logging
from typing import List
from .enrichment import fetch_full_record
from .similarity import is_title_match
from .strategy import ResolutionStrategy
from ..catalog import CatalogClient
from ..models import Candidate, LookupInfo, MatchResult

logger = logging.getLogger(__name__)


# Candidates enriched at most, caps network calls for weak lookups
NAME_MATCH_LIMIT = 4


class NameMatcher(ResolutionStrategy):
    """
    Resolves the first top-ranked candidate whose search name matches the
    localized name of its full record.

    Only the first NAME_MATCH_LIMIT candidates are examined.
    """

    name = "name"

    def __init__(self, catalog: CatalogClient):
        """
        :param catalog: Catalog client used to fetch full records
        """
        self._catalog = catalog

    async def resolve(
        self,
        info: LookupInfo,
        candidates: List[Candidate],
    ) -> MatchResult:
        for candidate in candidates[:NAME_MATCH_LIMIT]:
            film = await fetch_full_record(self._catalog, candidate)
            if film is None:
                continue

            if is_title_match(candidate.name, film.local_name):
                logger.debug(f"Found match: {candidate.film_id} '{film.local_name}'")
                return MatchResult.success(candidate.film_id, self.name)

            logger.debug(f"Skipping {candidate.film_id} '{film.local_name}'")

        return MatchResult.failure(self.name)
