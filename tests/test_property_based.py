"""Property-based tests for the movie catalog.

Uses Hypothesis to check catalog invariants and codec round-trips over
generated movies.
"""

from __future__ import annotations

from collections import Counter

import pytest
from hypothesis import given, strategies as st

from box_office.domain.catalog import MovieCatalog
from box_office.domain.movie import Movie
from box_office.exceptions import DuplicateTitleError, MovieNotFoundError
from box_office.infrastructure.codecs import delimited, document


# Fields free of the delimiter and line breaks, so delimited lines stay at five fields
field_text = st.text(
    alphabet=st.characters(whitelist_categories=("L", "N", "P", "Zs"), blacklist_characters=","),
    min_size=1,
    max_size=30,
).filter(lambda s: s.strip() != "")

years = st.integers(min_value=1888, max_value=2100)
earnings = st.floats(min_value=0, max_value=1e12, allow_nan=False, allow_infinity=False)

movies = st.builds(Movie, field_text, field_text, field_text, years, earnings)

catalogs = st.lists(movies, max_size=20, unique_by=lambda m: m.title)


def _catalog_of(items: list[Movie]) -> MovieCatalog:
    catalog = MovieCatalog()
    for movie in items:
        catalog.add_movie(movie)
    return catalog


@given(movies)
def test_add_then_find_returns_equal_movie(movie: Movie) -> None:
    catalog = MovieCatalog()
    catalog.add(movie.title, movie.director, movie.genre, movie.year_released, movie.box_office_earnings)
    assert catalog.find_by_title(movie.title) == movie


@given(catalogs, movies)
def test_duplicate_add_leaves_catalog_unchanged(items: list[Movie], extra: Movie) -> None:
    catalog = _catalog_of(items)
    if items:
        clash = Movie(items[0].title, extra.director, extra.genre, extra.year_released, extra.box_office_earnings)
        before = list(catalog)
        with pytest.raises(DuplicateTitleError):
            catalog.add_movie(clash)
        assert list(catalog) == before


@given(catalogs, st.data())
def test_remove_present_removes_exactly_one(items: list[Movie], data: st.DataObject) -> None:
    catalog = _catalog_of(items)
    if not items:
        with pytest.raises(MovieNotFoundError):
            catalog.remove("anything")
        return

    victim = data.draw(st.sampled_from(items))
    catalog.remove(victim.title)
    assert len(catalog) == len(items) - 1
    assert victim.title not in catalog


@given(catalogs, field_text)
def test_remove_absent_raises_and_keeps_state(items: list[Movie], title: str) -> None:
    catalog = _catalog_of(items)
    if title in catalog:
        return
    with pytest.raises(MovieNotFoundError):
        catalog.remove(title)
    assert len(catalog) == len(items)


@given(catalogs)
def test_sorted_by_earnings_is_non_increasing_permutation(items: list[Movie]) -> None:
    ranking = _catalog_of(items).sorted_by_earnings()
    for first, second in zip(ranking, ranking[1:]):
        assert first.box_office_earnings >= second.box_office_earnings
    assert Counter(ranking) == Counter(items)


@given(catalogs)
def test_delimited_round_trip(items: list[Movie]) -> None:
    original = _catalog_of(items)
    restored = MovieCatalog()
    report = delimited.load_into(restored, delimited.encode(original).splitlines(keepends=True))
    assert not report.has_skipped
    assert restored == original


@given(catalogs)
def test_document_round_trip(items: list[Movie]) -> None:
    original = _catalog_of(items)
    assert document.loads(document.dumps(original)) == original
