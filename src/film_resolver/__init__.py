from .models import Candidate, FullRecord, LookupInfo, MatchResult, Provider, SearchResult
from .resolution import FilmIdResolver, create_film_resolver

__all__ = [
    "Candidate",
    "FullRecord",
    "LookupInfo",
    "MatchResult",
    "Provider",
    "SearchResult",
    "FilmIdResolver",
    "create_film_resolver",
]
