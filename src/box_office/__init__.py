"""Box Office Catalog

An in-memory catalog of movies and their box office earnings, with
persistence to delimited text and JSON documents.
"""

__version__ = "0.1.0"

from .domain.movie import Movie
from .domain.catalog import MovieCatalog
from .domain.result import Result, Success, Failure
from .config import CatalogConfig, load_config, save_config
from .infrastructure.storage import CatalogFileStore
from .exceptions import (
    BoxOfficeError,
    DuplicateTitleError,
    MovieNotFoundError,
    InvalidMovieError,
    CatalogIOError,
    MalformedDocumentError,
    MalformedLineError,
    ConfigurationError,
)

__all__ = [
    # Domain
    "Movie",
    "MovieCatalog",
    "Result",
    "Success",
    "Failure",

    # Configuration and storage
    "CatalogConfig",
    "load_config",
    "save_config",
    "CatalogFileStore",

    # Errors
    "BoxOfficeError",
    "DuplicateTitleError",
    "MovieNotFoundError",
    "InvalidMovieError",
    "CatalogIOError",
    "MalformedDocumentError",
    "MalformedLineError",
    "ConfigurationError",
]
