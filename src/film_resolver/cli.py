"""
Command-line entry point: resolve the catalog id of one film.

Usage:
    film-resolver "Inception" --year 2010 --imdb-id tt1375666
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .config_loader import configure_logging, load_config_from_env
from .exceptions import FilmResolverError
from .models import LookupInfo, MatchResult, Provider
from .resolution import create_film_resolver

logger = logging.getLogger(__name__)


EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="film-resolver",
        description="Resolve the Kinopoisk id of a film from its name, year and IMDb id.",
    )
    parser.add_argument("name", help="Film name as shown in the library")
    parser.add_argument("--year", type=int, default=None, help="Release year")
    parser.add_argument("--imdb-id", default=None, help="IMDb id, e.g. tt1375666")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every resolution step")
    return parser


async def _resolve(info: LookupInfo, config) -> MatchResult:
    resolver = create_film_resolver(config)
    try:
        return await resolver.resolve(info)
    finally:
        await resolver.catalog.close()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config_from_env()
    except FilmResolverError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.verbose:
        config.log_level = "DEBUG"
    configure_logging(config)

    provider_ids = {}
    if args.imdb_id:
        provider_ids[Provider.IMDB] = args.imdb_id
    info = LookupInfo(name=args.name, year=args.year, provider_ids=provider_ids)

    try:
        result = asyncio.run(_resolve(info, config))
    except FilmResolverError as e:
        logger.error(f"Resolution of '{args.name}' failed: {e}")
        return EXIT_ERROR

    if not result.succeeded:
        print("not found")
        return EXIT_NOT_FOUND

    print(result.resolved_id)
    return EXIT_FOUND


if __name__ == "__main__":
    sys.exit(main())
