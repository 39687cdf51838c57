"""
Payload schemas of the Kinopoisk Unofficial API.

Only the fields the resolver reads are declared; everything else in the
responses is ignored.
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import Candidate, FullRecord, SearchResult


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SearchFilm(_ApiModel):
    film_id: int = Field(alias="filmId")
    name_ru: Optional[str] = Field(default=None, alias="nameRu")
    name_en: Optional[str] = Field(default=None, alias="nameEn")
    year: Optional[str] = None

    @field_validator("year", mode="before")
    @classmethod
    def _year_as_string(cls, value):
        # The search endpoint sends "2010", "2010-2012" or "null"
        if value is None:
            return None
        value = str(value).strip()
        return None if value in ("", "null") else value

    def to_candidate(self) -> Candidate:
        return Candidate(
            film_id=self.film_id,
            name=self.name_ru or self.name_en or "",
            year=self.year,
        )


class SearchByKeywordResponse(_ApiModel):
    keyword: Optional[str] = None
    pages_count: int = Field(default=0, alias="pagesCount")
    search_films_count_result: int = Field(default=0, alias="searchFilmsCountResult")
    films: List[SearchFilm] = Field(default_factory=list)

    def to_search_result(self) -> SearchResult:
        return SearchResult(
            total_count=self.search_films_count_result,
            candidates=[film.to_candidate() for film in self.films],
        )


class FilmResponse(_ApiModel):
    kinopoisk_id: int = Field(alias="kinopoiskId")
    imdb_id: Optional[str] = Field(default=None, alias="imdbId")
    name_ru: Optional[str] = Field(default=None, alias="nameRu")
    name_en: Optional[str] = Field(default=None, alias="nameEn")
    name_original: Optional[str] = Field(default=None, alias="nameOriginal")
    year: Optional[int] = None

    def to_full_record(self) -> FullRecord:
        return FullRecord(
            film_id=self.kinopoisk_id,
            name_ru=self.name_ru,
            name_en=self.name_en,
            name_original=self.name_original,
            imdb_id=self.imdb_id,
            year=self.year,
        )
