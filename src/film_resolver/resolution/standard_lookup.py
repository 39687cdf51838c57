import logging
from ..models import LookupInfo, MatchResult, Provider

logger = logging.getLogger(__name__)


class ProviderIdLookup:
    """
    Resolves items that already carry the catalog's own provider id.

    Runs before any search; a parsed id is trusted without verification.
    """

    name = "provider_id"

    def __init__(self, provider: str = Provider.KINOPOISK):
        self._provider = provider

    async def __call__(self, info: LookupInfo) -> MatchResult:
        raw_id = info.get_provider_id(self._provider)
        if raw_id is None:
            return MatchResult.failure(self.name)

        try:
            film_id = int(raw_id)
        except ValueError:
            logger.debug(f"Ignoring malformed {self._provider} id '{raw_id}'")
            return MatchResult.failure(self.name)

        if film_id <= 0:
            logger.debug(f"Ignoring non-positive {self._provider} id '{raw_id}'")
            return MatchResult.failure(self.name)

        logger.debug(f"Using known {self._provider} id {film_id} for '{info.name}'")
        return MatchResult.success(film_id, self.name)
