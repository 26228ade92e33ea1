"""
Pydantic schemas for catalog movies.

Field aliases follow the OMDb JSON keys so API payloads validate directly;
Python names are accepted too.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class Candidate(BaseModel):
    """A search hit from the catalog."""

    id: str = Field(..., alias="imdbID")
    title: str = Field(..., alias="Title")
    year: str = Field("", alias="Year")
    poster: str = Field("", alias="Poster")

    class Config:
        populate_by_name = True
        frozen = True


class SearchResult(BaseModel):
    """Outcome of one catalog search."""

    results: list[Candidate] = Field(default_factory=list)
    loading: bool = False
    error: Optional[str] = None


class MovieDetail(BaseModel):
    """Full catalog record for one movie, as shown in the detail view."""

    id: str = Field(..., alias="imdbID")
    title: str = Field("", alias="Title")
    year: str = Field("", alias="Year")
    poster: str = Field("", alias="Poster")
    released: str = Field("", alias="Released")
    runtime: str = Field("", alias="Runtime")
    genre: str = Field("", alias="Genre")
    plot: str = Field("", alias="Plot")
    director: str = Field("", alias="Director")
    actors: str = Field("", alias="Actors")
    imdb_rating: float = Field(0.0, alias="imdbRating", ge=0.0, le=10.0)

    class Config:
        populate_by_name = True
        frozen = True

    @field_validator("imdb_rating", mode="before")
    @classmethod
    def _missing_rating_is_zero(cls, value):
        # OMDb reports unrated titles as "N/A"
        if value is None or value in ("", "N/A"):
            return 0.0
        return value
