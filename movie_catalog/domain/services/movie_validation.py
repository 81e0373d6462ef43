from datetime import datetime
from typing import Dict, Optional

from movie_catalog.domain.exceptions import ValidationError
from movie_catalog.domain.models.movie import Movie

MAX_TITLE_BYTES = 500
EARLIEST_YEAR = 1888
MAX_GENRES = 5


class _Errors:
    """Collects one message per field; the first failed check for a field wins."""

    def __init__(self):
        self.errors: Dict[str, str] = {}

    def check(self, ok: bool, field: str, message: str) -> None:
        if not ok and field not in self.errors:
            self.errors[field] = message


def movie_validation_errors(movie: Movie, current_year: Optional[int] = None) -> Dict[str, str]:
    if current_year is None:
        current_year = datetime.now().year

    v = _Errors()

    v.check(movie.title != "", "title", "must be provided")
    v.check(len(movie.title.encode("utf-8")) <= MAX_TITLE_BYTES, "title", f"must not be more than {MAX_TITLE_BYTES} bytes long")

    v.check(movie.year != 0, "year", "must be provided")
    v.check(movie.year >= EARLIEST_YEAR, "year", f"must be greater than {EARLIEST_YEAR}")
    v.check(movie.year <= current_year, "year", "must not be in the future")

    # zero means the runtime is unknown
    v.check(movie.runtime >= 0, "runtime", "must be a positive integer")

    v.check(len(movie.genres) >= 1, "genres", "must contain at least 1 genre")
    v.check(len(movie.genres) <= MAX_GENRES, "genres", f"must not contain more than {MAX_GENRES} genres")
    v.check(len(set(movie.genres)) == len(movie.genres), "genres", "must not contain duplicate values")

    return v.errors


def validate_movie(movie: Movie, current_year: Optional[int] = None) -> None:
    errors = movie_validation_errors(movie, current_year)
    if errors:
        raise ValidationError(errors)
