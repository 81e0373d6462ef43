from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from movie_catalog.domain.models.movie import Movie
from movie_catalog.domain.models.runtime import Runtime, encode_runtime

MOVIE_FIELDS = ("title", "year", "runtime", "genres")


class MovieInput(BaseModel):
    """Body of a create request; missing fields are left at zero and caught by validation."""

    model_config = ConfigDict(extra="forbid", strict=True)

    title: str = ""
    year: int = 0
    runtime: Runtime = 0
    genres: List[str] = []

    def to_domain(self) -> Movie:
        return Movie(title=self.title, year=self.year, runtime=self.runtime, genres=list(self.genres))


class MoviePatch(BaseModel):
    """Sparse update document.

    A field counts as present only when its key appears in the request body
    with a non-null value, so an explicit ``""``, ``0`` or ``[]`` still
    overwrites the stored value.
    """

    model_config = ConfigDict(extra="forbid", strict=True)

    title: Optional[str] = None
    year: Optional[int] = None
    runtime: Optional[Runtime] = None
    genres: Optional[List[str]] = None

    def changes(self) -> Dict[str, Any]:
        return {
            name: getattr(self, name)
            for name in MOVIE_FIELDS
            if name in self.model_fields_set and getattr(self, name) is not None
        }

    def apply_to(self, movie: Movie) -> Movie:
        for name, value in self.changes().items():
            setattr(movie, name, list(value) if name == "genres" else value)
        return movie


def serialize_movie(movie: Movie) -> Dict[str, Any]:
    document: Dict[str, Any] = {"id": movie.id, "title": movie.title}
    if movie.year:
        document["year"] = movie.year
    runtime = encode_runtime(movie.runtime)
    if runtime is not None:
        document["runtime"] = runtime
    if movie.genres:
        document["genres"] = list(movie.genres)
    document["version"] = movie.version
    return document


def movie_envelope(movie: Movie) -> Dict[str, Any]:
    return {"movie": serialize_movie(movie)}
