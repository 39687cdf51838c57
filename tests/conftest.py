"""
Shared fixtures: an in-memory catalog standing in for the Kinopoisk API.
"""
import pytest

from film_resolver.catalog import CatalogClient
from film_resolver.exceptions import FilmNotFoundError
from film_resolver.models import Candidate, FullRecord, SearchResult


class FakeCatalog(CatalogClient):
    """
    Catalog returning canned data and recording every call.

    records maps film id -> FullRecord, or an exception to raise when
    that film is fetched. Unknown ids raise FilmNotFoundError.
    """

    def __init__(self, candidates=None, records=None, search_error=None, total_count=None):
        candidates = list(candidates or [])
        self.search_result = SearchResult(
            total_count=len(candidates) if total_count is None else total_count,
            candidates=candidates,
        )
        self.records = dict(records or {})
        self.search_error = search_error
        self.search_calls = []
        self.fetch_calls = []
        self.closed = False

    async def search_by_keyword(self, keyword, page=1):
        self.search_calls.append((keyword, page))
        if self.search_error is not None:
            raise self.search_error
        return self.search_result

    async def get_single_film(self, film_id):
        self.fetch_calls.append(film_id)
        record = self.records.get(film_id)
        if record is None:
            raise FilmNotFoundError(film_id)
        if isinstance(record, BaseException):
            raise record
        return record

    async def close(self):
        self.closed = True


@pytest.fixture
def make_catalog():
    """Factory for FakeCatalog instances."""
    return FakeCatalog


@pytest.fixture
def inception_candidates():
    """Search result rows for 'Inception' with one same-year remake."""
    return [
        Candidate(film_id=447301, name="Начало", year="2010"),
        Candidate(film_id=1000, name="Inception: The Cobol Job", year="2010"),
        Candidate(film_id=2000, name="Inception Documentary", year="2011"),
    ]


@pytest.fixture
def inception_record():
    return FullRecord(
        film_id=447301,
        name_ru="Начало",
        name_en=None,
        name_original="Inception",
        imdb_id="tt1375666",
        year=2010,
    )
