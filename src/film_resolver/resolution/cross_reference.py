"""
Cross-reference matching against the IMDb id of the target item.
"""
import logging
from typing import List
from .enrichment import fetch_full_record
from .strategy import ResolutionStrategy
from ..catalog import CatalogClient
from ..models import Candidate, LookupInfo, MatchResult, Provider

logger = logging.getLogger(__name__)


class ImdbCrossReferenceMatcher(ResolutionStrategy):
    """
    Resolves the candidate whose full record carries the target's IMDb id.

    Every candidate is enriched in order until one matches; candidates
    whose record cannot be fetched are skipped.
    """

    name = "imdb_cross_reference"

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
        imdb_id = info.get_provider_id(Provider.IMDB)
        if imdb_id is None:
            return MatchResult.failure(self.name)

        logger.debug(f"Trying to find result with ImdbId '{imdb_id}'")
        remaining = len(candidates)
        for candidate in candidates:
            remaining -= 1
            film = await fetch_full_record(self._catalog, candidate)
            if film is None:
                continue

            if film.imdb_id == imdb_id:
                logger.debug(
                    f"Found match: {candidate.film_id} '{film.local_name}', "
                    f"ImdbId '{film.imdb_id}'"
                )
                return MatchResult.success(candidate.film_id, self.name)

            logger.debug(
                f"Film {candidate.film_id} '{film.local_name}' has ImdbId '{film.imdb_id}', "
                f"skipping, {remaining} candidates left"
            )

        return MatchResult.failure(self.name)
