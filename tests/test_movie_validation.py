import pytest

from movie_catalog.domain.exceptions import ValidationError
from movie_catalog.domain.services.movie_validation import movie_validation_errors, validate_movie

from .factories import movie_factory


class TestMovieValidation:
    def test_valid_movie_has_no_errors(self):
        movie = movie_factory.create_domain_movie()
        assert movie_validation_errors(movie, current_year=2024) == {}
        validate_movie(movie, current_year=2024)

    def test_reports_every_violated_field(self):
        movie = movie_factory.create_domain_movie(title="", genres=[], year=1700)

        with pytest.raises(ValidationError) as exc_info:
            validate_movie(movie, current_year=2024)

        assert exc_info.value.errors == {
            "title": "must be provided",
            "year": "must be greater than 1888",
            "genres": "must contain at least 1 genre",
        }

    def test_title_over_500_bytes(self):
        # 250 two-byte characters plus one more byte
        movie = movie_factory.create_domain_movie(title="é" * 250 + "a")
        assert movie_validation_errors(movie)["title"] == "must not be more than 500 bytes long"

    def test_title_of_exactly_500_bytes_is_valid(self):
        movie = movie_factory.create_domain_movie(title="a" * 500)
        assert "title" not in movie_validation_errors(movie)

    def test_missing_year(self):
        movie = movie_factory.create_domain_movie(year=0)
        assert movie_validation_errors(movie)["year"] == "must be provided"

    def test_future_year(self):
        movie = movie_factory.create_domain_movie(year=2031)
        assert movie_validation_errors(movie, current_year=2030)["year"] == "must not be in the future"

    def test_current_year_is_valid(self):
        movie = movie_factory.create_domain_movie(year=2030)
        assert movie_validation_errors(movie, current_year=2030) == {}

    def test_unknown_runtime_is_valid(self):
        movie = movie_factory.create_domain_movie(runtime=0)
        assert movie_validation_errors(movie) == {}

    def test_negative_runtime(self):
        movie = movie_factory.create_domain_movie(runtime=-1)
        assert movie_validation_errors(movie)["runtime"] == "must be a positive integer"

    def test_too_many_genres(self):
        movie = movie_factory.create_domain_movie(genres=["a", "b", "c", "d", "e", "f"])
        assert movie_validation_errors(movie)["genres"] == "must not contain more than 5 genres"

    def test_duplicate_genres(self):
        movie = movie_factory.create_domain_movie(genres=["drama", "drama"])
        assert movie_validation_errors(movie)["genres"] == "must not contain duplicate values"
