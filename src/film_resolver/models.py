"""
Value types shared by the catalog client and the resolution pipeline.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional


class Provider:
    """Provider id keys understood by the resolver."""
    IMDB = "Imdb"
    KINOPOISK = "KinopoiskUnofficial"


@dataclass(frozen=True)
class LookupInfo:
    """
    Metadata of the media item whose catalog id is unknown.

    Attributes:
        name: Display name, may be empty
        year: Release year, if known
        provider_ids: Provider name -> external id (e.g. {"Imdb": "tt1375666"})
    """
    name: str
    year: Optional[int] = None
    provider_ids: Dict[str, str] = field(default_factory=dict)

    def get_provider_id(self, provider: str) -> Optional[str]:
        """
        Look up an external id by provider name (case-insensitive).

        :param provider: Provider key, see Provider
        :return: Stripped id, or None if missing or blank
        """
        wanted = provider.lower()
        for key, value in self.provider_ids.items():
            if key.lower() == wanted and value and value.strip():
                return value.strip()
        return None


@dataclass(frozen=True)
class Candidate:
    film_id: int
    name: str
    year: Optional[str] = None


@dataclass(frozen=True)
class SearchResult:
    total_count: int
    candidates: List[Candidate] = field(default_factory=list)


@dataclass(frozen=True)
class FullRecord:
    film_id: int
    name_ru: Optional[str] = None
    name_en: Optional[str] = None
    name_original: Optional[str] = None
    imdb_id: Optional[str] = None
    year: Optional[int] = None

    @property
    def local_name(self) -> str:
        """Localized name, falling back to English and original names."""
        for name in (self.name_ru, self.name_en, self.name_original):
            if name:
                return name
        return ""


@dataclass(frozen=True)
class MatchResult:
    """
    Outcome of a resolution stage or of the whole pipeline.

    Attributes:
        succeeded: Whether a film id was resolved
        resolved_id: Catalog id, meaningful only when succeeded
        strategy_used: Name of the stage that produced this result
    """
    succeeded: bool
    resolved_id: int = 0
    strategy_used: str = "none"

    def __post_init__(self):
        """Validate resolved id of successful results."""
        if self.succeeded and self.resolved_id <= 0:
            raise ValueError(f"Successful match needs a positive id, got {self.resolved_id}")

    @classmethod
    def success(cls, film_id: int, strategy: str) -> "MatchResult":
        return cls(succeeded=True, resolved_id=film_id, strategy_used=strategy)

    @classmethod
    def failure(cls, strategy: str = "none") -> "MatchResult":
        return cls(succeeded=False, resolved_id=0, strategy_used=strategy)
