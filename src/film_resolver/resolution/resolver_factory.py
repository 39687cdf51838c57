"""
Factory for creating film id resolvers from configuration.
"""
from typing import Optional
from .film_id_resolver import FilmIdResolver
from ..catalog import KinopoiskApiClient
from ..config import ResolverConfig
from ..config_loader import load_config_from_env


def create_film_resolver(config: Optional[ResolverConfig] = None) -> FilmIdResolver:
    """
    Factory function to create a FilmIdResolver backed by the Kinopoisk API.

    The caller owns the returned resolver's client and should close it:

        resolver = create_film_resolver(config)
        try:
            result = await resolver.resolve(info)
        finally:
            await resolver.catalog.close()

    :param config: ResolverConfig instance, loaded from the environment if None
    :return: FilmIdResolver
    :raises: ConfigurationError if config is None and the environment is invalid
    """
    if config is None:
        config = load_config_from_env()

    client = KinopoiskApiClient(
        api_key=config.api_key,
        base_url=config.base_url,
        timeout_s=config.timeout_s,
    )
    return FilmIdResolver(client)
