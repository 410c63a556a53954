"""
Domain layer: the movie value object, the catalog aggregate and the
Result type used to report persistence outcomes.
"""

from .movie import Movie, FIELD_NAMES
from .catalog import MovieCatalog
from .result import Result, Success, Failure, success, failure

__all__ = [
    "Movie",
    "FIELD_NAMES",
    "MovieCatalog",
    "Result",
    "Success",
    "Failure",
    "success",
    "failure",
]
