"""
Film catalog access.

- CatalogClient: abstract read-only catalog used by the resolver
- KinopoiskApiClient: aiohttp implementation for the Kinopoisk Unofficial API
"""
from .base import CatalogClient
from .client import KinopoiskApiClient

__all__ = [
    "CatalogClient",
    "KinopoiskApiClient",
]
