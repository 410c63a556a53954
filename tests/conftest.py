"""Shared fixtures for box office tests."""

import pytest

from box_office.config import CatalogConfig
from box_office.domain.catalog import MovieCatalog
from box_office.infrastructure.storage import CatalogFileStore


SAMPLE_ROWS = [
    ("Movie 1", "Director 1", "Genre 1", 2020, 1000000),
    ("Movie 2", "Director 2", "Genre 2", 2021, 2500000),
    ("Movie 3", "Director 3", "Genre 3", 2022, 1500000),
    ("Movie 4", "Director 4", "Genre 4", 2023, 2000000),
    ("Movie 5", "Director 5", "Genre 5", 2024, 3000000),
]


@pytest.fixture
def sample_catalog():
    """A catalog holding the five sample movies."""
    catalog = MovieCatalog()
    for row in SAMPLE_ROWS:
        catalog.add(*row)
    return catalog


@pytest.fixture
def store(tmp_path):
    """A file store rooted in a temporary directory."""
    return CatalogFileStore(CatalogConfig(data_dir=tmp_path))
