"""Tests for the MovieCatalog aggregate."""

import pytest

from box_office.domain.catalog import MovieCatalog
from box_office.domain.movie import Movie
from box_office.exceptions import DuplicateTitleError, MovieNotFoundError


class TestAdd:
    """Test adding movies."""

    def test_add_returns_movie(self):
        catalog = MovieCatalog()
        movie = catalog.add("Movie 1", "Director 1", "Genre 1", 2020, 1000000)
        assert movie == Movie("Movie 1", "Director 1", "Genre 1", 2020, 1000000.0)
        assert len(catalog) == 1
        assert "Movie 1" in catalog

    def test_add_then_find(self):
        catalog = MovieCatalog()
        added = catalog.add("Movie 1", "Director 1", "Genre 1", 2020, 1000000)
        assert catalog.find_by_title("Movie 1") == added

    def test_duplicate_title_raises(self, sample_catalog):
        with pytest.raises(DuplicateTitleError, match="'Movie 2' already exists"):
            sample_catalog.add("Movie 2", "Someone", "Drama", 1999, 5.0)

    def test_duplicate_leaves_catalog_unchanged(self, sample_catalog):
        before = list(sample_catalog)
        with pytest.raises(DuplicateTitleError):
            sample_catalog.add_movie(Movie("Movie 2", "Someone", "Drama", 1999, 5.0))
        assert list(sample_catalog) == before
        assert sample_catalog.find_by_title("Movie 2").director == "Director 2"

    def test_duplicate_error_carries_title(self, sample_catalog):
        with pytest.raises(DuplicateTitleError) as exc_info:
            sample_catalog.add("Movie 1", "D", "G", 2000, 1.0)
        assert exc_info.value.title == "Movie 1"


class TestAddAll:
    """Test adding several movies at once."""

    def test_add_all(self):
        catalog = MovieCatalog()
        added = catalog.add_all([Movie("A", "d", "g", 2000, 1.0), Movie("B", "d", "g", 2001, 2.0)])
        assert [m.title for m in added] == ["A", "B"]
        assert catalog.titles() == ["A", "B"]

    def test_clash_with_catalog_adds_nothing(self, sample_catalog):
        with pytest.raises(DuplicateTitleError, match="Movie 4"):
            sample_catalog.add_all([Movie("New", "d", "g", 2000, 1.0), Movie("Movie 4", "d", "g", 2000, 1.0)])
        assert "New" not in sample_catalog
        assert len(sample_catalog) == 5

    def test_repeat_within_batch_adds_nothing(self):
        catalog = MovieCatalog()
        with pytest.raises(DuplicateTitleError):
            catalog.add_all([Movie("A", "d", "g", 2000, 1.0), Movie("A", "x", "g", 2001, 2.0)])
        assert len(catalog) == 0


class TestRemove:
    """Test removing movies."""

    def test_remove_present(self, sample_catalog):
        removed = sample_catalog.remove("Movie 3")
        assert removed.title == "Movie 3"
        assert len(sample_catalog) == 4
        assert sample_catalog.find_by_title("Movie 3") is None

    def test_remove_absent_raises(self, sample_catalog):
        with pytest.raises(MovieNotFoundError, match="'Nope' not found"):
            sample_catalog.remove("Nope")
        assert len(sample_catalog) == 5


class TestQueries:
    """Test lookup, ordering and display."""

    def test_find_missing_returns_none(self, sample_catalog):
        assert sample_catalog.find_by_title("Missing") is None

    def test_sorted_by_earnings(self, sample_catalog):
        titles = [m.title for m in sample_catalog.sorted_by_earnings()]
        assert titles == ["Movie 5", "Movie 2", "Movie 4", "Movie 3", "Movie 1"]

    def test_sorted_ties_keep_insertion_order(self):
        catalog = MovieCatalog()
        catalog.add("B", "d", "g", 2000, 10)
        catalog.add("A", "d", "g", 2000, 20)
        catalog.add("C", "d", "g", 2000, 10)
        catalog.add("D", "d", "g", 2000, 20)
        assert [m.title for m in catalog.sorted_by_earnings()] == ["A", "D", "B", "C"]

    def test_sorted_does_not_reorder_catalog(self, sample_catalog):
        sample_catalog.sorted_by_earnings()
        assert sample_catalog.titles() == ["Movie 1", "Movie 2", "Movie 3", "Movie 4", "Movie 5"]

    def test_sorted_empty(self):
        assert MovieCatalog().sorted_by_earnings() == []

    def test_describe_present(self, sample_catalog):
        text = sample_catalog.describe("Movie 2")
        assert text.splitlines()[0] == "Title: Movie 2"
        assert "Box Office Earnings: 2500000.0" in text

    def test_describe_missing(self, sample_catalog):
        assert sample_catalog.describe("Nope") == "Movie with title 'Nope' not found"

    def test_describe_all(self, sample_catalog):
        lines = sample_catalog.describe_all()
        assert len(lines) == 5
        assert lines[0] == (
            "Title: Movie 1, Director: Director 1, Genre: Genre 1, "
            "Year Released: 2020, Box Office Earnings: 1000000.0"
        )


class TestContainerProtocol:
    """Test iteration and equality."""

    def test_iteration_order(self, sample_catalog):
        assert [m.title for m in sample_catalog] == sample_catalog.titles()

    def test_iteration_snapshot_allows_removal(self, sample_catalog):
        for movie in sample_catalog:
            sample_catalog.remove(movie.title)
        assert len(sample_catalog) == 0

    def test_equality(self, sample_catalog):
        other = MovieCatalog()
        for movie in sample_catalog:
            other.add_movie(movie)
        assert other == sample_catalog
        other.remove("Movie 1")
        assert other != sample_catalog

    def test_repr(self, sample_catalog):
        assert repr(sample_catalog) == "MovieCatalog(5 movies)"
