"""
Demonstration scenario.

Populate a catalog with five sample movies, persist it, reload it into a
fresh catalog, look one title up, remove another and list the rest by
earnings.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from .domain.catalog import MovieCatalog
from .domain.movie import Movie
from .domain.result import Result
from .exceptions import CatalogIOError
from .infrastructure.storage import CatalogFileStore

logger = logging.getLogger(__name__)

SAMPLE_MOVIES: Tuple[Tuple[str, str, str, int, float], ...] = (
    ("Movie 1", "Director 1", "Genre 1", 2020, 1000000),
    ("Movie 2", "Director 2", "Genre 2", 2021, 2500000),
    ("Movie 3", "Director 3", "Genre 3", 2022, 1500000),
    ("Movie 4", "Director 4", "Genre 4", 2023, 2000000),
    ("Movie 5", "Director 5", "Genre 5", 2024, 3000000),
)

SEARCH_TITLE = "Movie 2"
REMOVE_TITLE = "Movie 3"

FORMATS = ("json", "text")


@dataclass
class DemoOutcome:
    """What the demonstration did, for display."""
    saved: Result[Path, CatalogIOError]
    loaded: Result[MovieCatalog, CatalogIOError]
    catalog: MovieCatalog
    search_title: str
    found: Optional[Movie]
    removed: Movie
    ranking: List[Movie]


def build_sample_catalog() -> MovieCatalog:
    catalog = MovieCatalog()
    for fields in SAMPLE_MOVIES:
        catalog.add(*fields)
    return catalog


def run_demo(store: CatalogFileStore, fmt: str = "json") -> DemoOutcome:
    """Run the scenario against the store's configured files.

    A failed save or load is logged and the scenario continues with an
    empty catalog, so removing the sample title then raises
    MovieNotFoundError.
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unknown format {fmt!r}, expected one of {FORMATS}")

    original = build_sample_catalog()
    if fmt == "json":
        saved = store.save_document(original)
        loaded = store.load_document()
    else:
        saved = store.save_delimited(original)
        loaded = store.load_delimited()

    catalog = loaded.or_else(MovieCatalog())
    found = catalog.find_by_title(SEARCH_TITLE)
    removed = catalog.remove(REMOVE_TITLE)
    logger.info("Demo removed %r", removed.title)

    return DemoOutcome(
        saved=saved,
        loaded=loaded,
        catalog=catalog,
        search_title=SEARCH_TITLE,
        found=found,
        removed=removed,
        ranking=catalog.sorted_by_earnings(),
    )
