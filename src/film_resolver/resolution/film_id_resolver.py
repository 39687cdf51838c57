"""
Film id resolution for items known only by name, year and foreign ids.
"""
import logging
from typing import Awaitable, Callable, Optional
from .resolution_policy import ResolutionPolicy, default_policy
from .standard_lookup import ProviderIdLookup
from ..catalog import CatalogClient
from ..models import LookupInfo, MatchResult

logger = logging.getLogger(__name__)


StandardLookup = Callable[[LookupInfo], Awaitable[MatchResult]]


class FilmIdResolver:
    """
    Resolves the catalog id of a film.

    Combines:
    - a standard lookup of ids the item already carries
    - a keyword search producing ambiguous candidates
    - ResolutionPolicy (escalation over the candidates)

    Usage:
        resolver = FilmIdResolver(KinopoiskApiClient(api_key))
        result = await resolver.resolve(LookupInfo("Inception", 2010))
        if result.succeeded:
            film_id = result.resolved_id

    The resolver holds no per-call state and can serve concurrent
    resolutions. A failing keyword search propagates its exception, and
    cancellation propagates as asyncio.CancelledError; "no match" is a
    failed MatchResult.
    """

    def __init__(
        self,
        catalog: CatalogClient,
        standard_lookup: Optional[StandardLookup] = None,
        policy: Optional[ResolutionPolicy] = None,
    ):
        """
        :param catalog: Catalog client used for search and enrichment
        :param standard_lookup: Coroutine tried before searching, defaults to ProviderIdLookup
        :param policy: Candidate cascade, defaults to default_policy(catalog)
        """
        if catalog is None:
            raise ValueError("catalog must be provided")

        self._catalog = catalog
        self._standard_lookup = standard_lookup or ProviderIdLookup()
        self._policy = policy or default_policy(catalog)

    @property
    def catalog(self) -> CatalogClient:
        return self._catalog

    async def resolve(self, info: LookupInfo) -> MatchResult:
        """
        Resolve the film id of an item.

        :param info: Item metadata
        :return: MatchResult with the resolved id, or a failure
        :raises: Whatever the keyword search raises
        """
        result = await self._standard_lookup(info)
        if result.succeeded:
            return result

        if not info.name or not info.name.strip():
            logger.debug("Film name is empty, skipping catalog search")
            return MatchResult.failure("empty_name")

        logger.debug(f"Trying to get suitable film with name '{info.name}'")
        search_result = await self._catalog.search_by_keyword(info.name, page=1)
        if search_result.total_count < 1 or not search_result.candidates:
            logger.debug("Received empty search result")
            return MatchResult.failure("empty_search")

        candidates = list(search_result.candidates)
        logger.debug(f"Received {len(candidates)} results, trying to filter and match")

        result = await self._policy.resolve(info, candidates)
        if not result.succeeded:
            logger.debug(f"Suitable result not found for '{info.name}'")
        return result
