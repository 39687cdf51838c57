"""
Abstract catalog client used by the resolution pipeline.
"""
from abc import ABC, abstractmethod
from ..models import FullRecord, SearchResult


class CatalogClient(ABC):
    """
    Read-only access to the film catalog.

    Implementations must be safe to share between concurrent resolutions.
    """

    @abstractmethod
    async def search_by_keyword(self, keyword: str, page: int = 1) -> SearchResult:
        """
        Search films by free-text keyword.

        :param keyword: Text to search for, usually the film name
        :param page: 1-based result page
        :return: SearchResult with ambiguous candidates
        :raises: CatalogError on transport or parse failure
        """
        pass

    @abstractmethod
    async def get_single_film(self, film_id: int) -> FullRecord:
        """
        Fetch the full record of one film.

        :param film_id: Catalog id
        :return: FullRecord of the film
        :raises: FilmNotFoundError if the id is unknown, CatalogError otherwise
        """
        pass
