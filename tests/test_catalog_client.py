"""
Tests for KinopoiskApiClient against a local aiohttp server.
"""
import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp import test_utils

from film_resolver.catalog import KinopoiskApiClient
from film_resolver.exceptions import CatalogRequestError, CatalogResponseError, FilmNotFoundError
from film_resolver.models import Candidate, FullRecord


API_KEY = "test-api-key-123456"

SEARCH_PAYLOAD = {
    "keyword": "Inception",
    "pagesCount": 1,
    "searchFilmsCountResult": 3,
    "films": [
        {"filmId": 447301, "nameRu": "Начало", "nameEn": "Inception", "type": "FILM", "year": "2010"},
        {"filmId": 1000, "nameEn": "Inception: The Cobol Job", "type": "VIDEO", "year": 2010},
        {"filmId": 2000, "nameRu": "Начало", "type": "TV_SERIES", "year": "null", "rating": "7.1"},
    ],
}

FILM_PAYLOAD = {
    "kinopoiskId": 447301,
    "imdbId": "tt1375666",
    "nameRu": "Начало",
    "nameEn": None,
    "nameOriginal": "Inception",
    "year": 2010,
    "ratingKinopoisk": 8.7,
}


async def _search(request):
    if request.headers.get("X-API-KEY") != API_KEY:
        return web.json_response({"message": "unauthorized"}, status=401)
    assert request.query["keyword"] == "Inception"
    assert request.query["page"] == "1"
    return web.json_response(SEARCH_PAYLOAD)


async def _film(request):
    film_id = int(request.match_info["film_id"])
    if film_id == 447301:
        return web.json_response(FILM_PAYLOAD)
    if film_id == 500:
        return web.Response(status=500, text="internal error")
    if film_id == 601:
        return web.Response(text="<html>not json</html>")
    if film_id == 602:
        return web.json_response({"nameRu": "missing id"})
    return web.json_response({"message": "not found"}, status=404)


@pytest_asyncio.fixture
async def api_server():
    """Local stand-in for kinopoiskapiunofficial.tech."""
    app = web.Application()
    app.router.add_get("/api/v2.1/films/search-by-keyword", _search)
    app.router.add_get("/api/v2.2/films/{film_id}", _film)
    server = test_utils.TestServer(app)
    await server.start_server()
    yield str(server.make_url("")).rstrip("/")
    await server.close()


@pytest_asyncio.fixture
async def client(api_server):
    async with KinopoiskApiClient(API_KEY, base_url=api_server, timeout_s=5) as client:
        yield client


class TestSearchByKeyword:
    """Tests for search_by_keyword."""

    @pytest.mark.asyncio
    async def test_parses_candidates(self, client):
        """Test that rows become candidates with string years."""
        result = await client.search_by_keyword("Inception")

        assert result.total_count == 3
        assert result.candidates == [
            Candidate(film_id=447301, name="Начало", year="2010"),
            Candidate(film_id=1000, name="Inception: The Cobol Job", year="2010"),
            Candidate(film_id=2000, name="Начало", year=None),
        ]

    @pytest.mark.asyncio
    async def test_bad_api_key_raises(self, api_server):
        """Test that HTTP errors surface as request errors."""
        async with KinopoiskApiClient("wrong-key-00000000", base_url=api_server) as client:
            with pytest.raises(CatalogRequestError) as excinfo:
                await client.search_by_keyword("Inception")

        assert excinfo.value.status == 401

    @pytest.mark.asyncio
    async def test_unreachable_server_raises(self):
        """Test that transport failures surface as request errors."""
        async with KinopoiskApiClient(API_KEY, base_url="http://127.0.0.1:1", timeout_s=2) as client:
            with pytest.raises(CatalogRequestError):
                await client.search_by_keyword("Inception")


class TestGetSingleFilm:
    """Tests for get_single_film."""

    @pytest.mark.asyncio
    async def test_parses_full_record(self, client):
        record = await client.get_single_film(447301)

        assert record == FullRecord(
            film_id=447301,
            name_ru="Начало",
            name_en=None,
            name_original="Inception",
            imdb_id="tt1375666",
            year=2010,
        )

    @pytest.mark.asyncio
    async def test_unknown_film_raises_not_found(self, client):
        with pytest.raises(FilmNotFoundError) as excinfo:
            await client.get_single_film(404)

        assert excinfo.value.film_id == 404

    @pytest.mark.asyncio
    async def test_server_error_raises_request_error(self, client):
        with pytest.raises(CatalogRequestError) as excinfo:
            await client.get_single_film(500)

        assert excinfo.value.status == 500

    @pytest.mark.asyncio
    @pytest.mark.parametrize("film_id", [601, 602])
    async def test_malformed_payload_raises_response_error(self, client, film_id):
        with pytest.raises(CatalogResponseError):
            await client.get_single_film(film_id)


class TestSessionLifecycle:
    """Tests for session handling."""

    def test_api_key_required(self):
        with pytest.raises(ValueError):
            KinopoiskApiClient("")

    @pytest.mark.asyncio
    async def test_session_is_reused_and_closed(self, api_server):
        """Test that one session serves all requests until close()."""
        client = KinopoiskApiClient(API_KEY, base_url=api_server)
        first = await client._get_session()
        await client.get_single_film(447301)
        second = await client._get_session()

        assert first is second

        await client.close()
        assert first.closed
        await client.close()
