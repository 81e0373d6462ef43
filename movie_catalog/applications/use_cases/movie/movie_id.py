from typing import Union

from movie_catalog.domain.exceptions import NotFoundError


def parse_movie_id(raw: Union[str, int]) -> int:
    """Malformed and non-positive ids are reported exactly like missing movies."""
    if isinstance(raw, int):
        movie_id = raw
    elif raw.isascii() and raw.isdigit():
        movie_id = int(raw)
    else:
        raise NotFoundError(f"Movie with id {raw!r} not found")

    if movie_id < 1:
        raise NotFoundError(f"Movie with id {movie_id} not found")
    return movie_id
