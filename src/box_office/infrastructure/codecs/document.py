"""
Structured-document codec.

A catalog is stored as one JSON object::

    {"movies": [{"title": "...", "director": "...", "genre": "...",
                 "yearReleased": 2020, "boxOfficeEarnings": 1000000.0}]}

The json module writes floats with their shortest round-trip repr, so
earnings survive a save/load cycle exactly. On load, an integer
``boxOfficeEarnings`` is accepted and widened to float.
"""

import json
import logging
import math
from typing import Any, Dict, List, Optional

from ...domain.catalog import MovieCatalog
from ...domain.movie import FIELD_NAMES, Movie
from ...exceptions import MalformedDocumentError

logger = logging.getLogger(__name__)

MOVIES_KEY = "movies"

JSON_KEYS = ("title", "director", "genre", "yearReleased", "boxOfficeEarnings")

# JSON key -> Movie attribute
_KEY_MAP = dict(zip(JSON_KEYS, FIELD_NAMES))


def movie_to_dict(movie: Movie) -> Dict[str, Any]:
    fields = movie.to_dict()
    return {key: fields[attr] for key, attr in _KEY_MAP.items()}


def to_document(catalog: MovieCatalog) -> Dict[str, Any]:
    """Build the document for a catalog, keeping catalog order."""
    return {MOVIES_KEY: [movie_to_dict(movie) for movie in catalog]}


def dumps(catalog: MovieCatalog, indent: Optional[int] = None) -> str:
    return json.dumps(to_document(catalog), indent=indent, ensure_ascii=False, allow_nan=False)


def _expect_str(entry: Dict[str, Any], key: str, index: int) -> str:
    value = entry.get(key)
    if not isinstance(value, str):
        raise MalformedDocumentError(f"movies[{index}].{key} must be a string")
    return value


def movie_from_dict(entry: Any, index: int = 0) -> Movie:
    """Validate one entry of the ``movies`` array and build a Movie."""
    if not isinstance(entry, dict):
        raise MalformedDocumentError(f"movies[{index}] must be an object")

    missing = [key for key in _KEY_MAP if key not in entry]
    if missing:
        raise MalformedDocumentError(
            f"movies[{index}] is missing {', '.join(missing)}"
        )

    year = entry["yearReleased"]
    if isinstance(year, bool) or not isinstance(year, int):
        raise MalformedDocumentError(f"movies[{index}].yearReleased must be an integer")

    earnings = entry["boxOfficeEarnings"]
    if isinstance(earnings, bool) or not isinstance(earnings, (int, float)):
        raise MalformedDocumentError(f"movies[{index}].boxOfficeEarnings must be a number")
    if isinstance(earnings, float) and not math.isfinite(earnings):
        raise MalformedDocumentError(f"movies[{index}].boxOfficeEarnings must be finite")

    return Movie(
        title=_expect_str(entry, "title", index),
        director=_expect_str(entry, "director", index),
        genre=_expect_str(entry, "genre", index),
        year_released=year,
        box_office_earnings=float(earnings),
    )


def _movie_entries(data: Any) -> List[Any]:
    if not isinstance(data, dict):
        raise MalformedDocumentError("Catalog document must be a JSON object")
    if MOVIES_KEY not in data:
        raise MalformedDocumentError(f"Catalog document has no '{MOVIES_KEY}' field")
    entries = data[MOVIES_KEY]
    if not isinstance(entries, list):
        raise MalformedDocumentError(f"'{MOVIES_KEY}' must be an array")
    return entries


def from_document(data: Any, catalog: Optional[MovieCatalog] = None) -> MovieCatalog:
    """Add every movie in a parsed document to a catalog.

    The catalog is left unchanged if any entry is invalid or any title
    clashes.

    Raises:
        MalformedDocumentError: If the document shape or a field type is wrong.
        DuplicateTitleError: If a title repeats or is already in the catalog.
    """
    if catalog is None:
        catalog = MovieCatalog()

    movies = [movie_from_dict(entry, index) for index, entry in enumerate(_movie_entries(data))]
    catalog.add_all(movies)

    logger.debug("Loaded %d movies from document", len(movies))
    return catalog


def loads(text: str, catalog: Optional[MovieCatalog] = None) -> MovieCatalog:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedDocumentError(f"Invalid JSON: {e}") from e
    return from_document(data, catalog)
