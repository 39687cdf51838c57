"""
Async HTTP client for the Kinopoisk Unofficial API.
"""
import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp
from pydantic import ValidationError

from .base import CatalogClient
from .schemas import FilmResponse, SearchByKeywordResponse
from ..config import DEFAULT_BASE_URL
from ..exceptions import CatalogRequestError, CatalogResponseError, FilmNotFoundError
from ..models import FullRecord, SearchResult

logger = logging.getLogger(__name__)


class KinopoiskApiClient(CatalogClient):
    """
    Catalog client backed by kinopoiskapiunofficial.tech.

    The aiohttp session is created lazily on first request and shared by
    every coroutine using this client. Call close() (or use the client as
    an async context manager) to release it.
    """

    SEARCH_PATH = "/api/v2.1/films/search-by-keyword"
    FILM_PATH = "/api/v2.2/films/{film_id}"

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_s: float = 10.0,
    ):
        """
        :param api_key: Value of the X-API-KEY header
        :param base_url: API root without trailing slash
        :param timeout_s: Total timeout of a single request in seconds
        """
        if not api_key:
            raise ValueError("api_key must not be empty")
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout_s = float(timeout_s)
        self._session: Optional[aiohttp.ClientSession] = None
        self._lock = asyncio.Lock()

    async def __aenter__(self) -> "KinopoiskApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def _headers(self) -> Dict[str, str]:
        return {"X-API-KEY": self._api_key, "accept": "application/json"}

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is not None and not self._session.closed:
            return self._session

        async with self._lock:
            if self._session is not None and not self._session.closed:
                return self._session

            timeout = aiohttp.ClientTimeout(total=self._timeout_s)
            self._session = aiohttp.ClientSession(timeout=timeout)
            return self._session

    async def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        session = await self._get_session()
        url = f"{self._base_url}{path}"
        logger.debug(f"GET {url} params={params}")

        try:
            async with session.get(url, params=params, headers=self._headers()) as resp:
                if resp.status >= 400:
                    error_text = await resp.text()
                    raise CatalogRequestError(
                        f"GET {path} failed ({resp.status}): {error_text[:200]}",
                        status=resp.status,
                    )
                return await resp.json(content_type=None)
        except asyncio.TimeoutError as e:
            raise CatalogRequestError(f"GET {path} timed out after {self._timeout_s}s") from e
        except aiohttp.ClientError as e:
            raise CatalogRequestError(f"GET {path} failed: {e}") from e
        except ValueError as e:
            raise CatalogResponseError(f"GET {path} returned invalid JSON: {e}") from e

    async def search_by_keyword(self, keyword: str, page: int = 1) -> SearchResult:
        data = await self._get_json(self.SEARCH_PATH, params={"keyword": keyword, "page": page})
        try:
            response = SearchByKeywordResponse.model_validate(data)
        except ValidationError as e:
            raise CatalogResponseError(f"Unexpected search response for '{keyword}': {e}") from e
        return response.to_search_result()

    async def get_single_film(self, film_id: int) -> FullRecord:
        try:
            data = await self._get_json(self.FILM_PATH.format(film_id=film_id))
        except CatalogRequestError as e:
            if e.status == 404:
                raise FilmNotFoundError(film_id) from e
            raise

        try:
            response = FilmResponse.model_validate(data)
        except ValidationError as e:
            raise CatalogResponseError(f"Unexpected film response for {film_id}: {e}") from e
        return response.to_full_record()

    async def close(self) -> None:
        """Close the HTTP session and release resources."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None
