"""
Film id resolution layer.

Turns an item's name, optional year and foreign ids plus an ambiguous
catalog search into one confident catalog id, or a definitive failure.

Key components:
- ResolutionStrategy: Protocol for the cascade's heuristics
- Strategies: SingleCandidate, ImdbCrossReference, Name, YearFiltered wrapper
- ResolutionPolicy: Escalation logic over the strategies
- FilmIdResolver: Standard lookup, search and policy combined
"""
from .similarity import lcs_length, is_title_match
from .strategy import ResolutionStrategy
from .year_filter import filter_by_year, YearFiltered
from .single_candidate import SingleCandidateMatcher
from .cross_reference import ImdbCrossReferenceMatcher
from .name_matcher import NameMatcher, NAME_MATCH_LIMIT
from .resolution_policy import ResolutionPolicy, default_policy
from .standard_lookup import ProviderIdLookup
from .film_id_resolver import FilmIdResolver
from .resolver_factory import create_film_resolver

__all__ = [
    "lcs_length",
    "is_title_match",
    "ResolutionStrategy",
    "filter_by_year",
    "YearFiltered",
    "SingleCandidateMatcher",
    "ImdbCrossReferenceMatcher",
    "NameMatcher",
    "NAME_MATCH_LIMIT",
    "ResolutionPolicy",
    "default_policy",
    "ProviderIdLookup",
    "FilmIdResolver",
    "create_film_resolver",
]
