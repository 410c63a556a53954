"""
Delimited-line codec.

Each movie is one line of five comma-separated fields::

    title,director,genre,yearReleased,boxOfficeEarnings

There is no header and no quoting. A title or other field that contains
a comma produces a line with more than five fields, which the decoder
treats as malformed. This is a known limitation of the format.

Parsing policy:

- blank lines are ignored;
- a line that does not split into exactly five fields is skipped in
  lenient mode (the default) and recorded in the report, or raises
  MalformedLineError in strict mode;
- a line with five fields whose year or earnings is not a number always
  raises MalformedLineError.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ...domain.catalog import MovieCatalog
from ...domain.movie import Movie
from ...exceptions import MalformedLineError

logger = logging.getLogger(__name__)

DELIMITER = ","
FIELD_COUNT = 5


@dataclass(frozen=True)
class SkippedLine:
    """A line the lenient decoder left out."""
    line_number: int
    text: str
    reason: str


@dataclass
class DecodeReport:
    """Movies decoded from a stream plus the lines that were skipped."""
    movies: List[Movie] = field(default_factory=list)
    skipped: List[SkippedLine] = field(default_factory=list)

    @property
    def has_skipped(self) -> bool:
        return bool(self.skipped)


def encode_line(movie: Movie) -> str:
    """Render a movie as one line, without the trailing newline.

    repr() of a float is locale independent and round-trips exactly.
    """
    return DELIMITER.join([
        movie.title,
        movie.director,
        movie.genre,
        str(movie.year_released),
        repr(movie.box_office_earnings),
    ])


def encode(movies: Iterable[Movie]) -> str:
    return "".join(f"{encode_line(movie)}\n" for movie in movies)


def split_line(line: str) -> List[str]:
    return line.rstrip("\r\n").split(DELIMITER)


def decode_line(line: str, line_number: Optional[int] = None) -> Optional[Movie]:
    """Parse one line.

    Returns:
        The Movie, or None if the line does not have exactly five fields.

    Raises:
        MalformedLineError: If year or earnings cannot be parsed.
    """
    parts = split_line(line)
    if len(parts) != FIELD_COUNT:
        return None

    title, director, genre, year_text, earnings_text = parts
    try:
        year_released = int(year_text)
    except ValueError:
        raise MalformedLineError(
            f"invalid yearReleased {year_text!r}", line, line_number
        ) from None
    try:
        box_office_earnings = float(earnings_text)
    except ValueError:
        raise MalformedLineError(
            f"invalid boxOfficeEarnings {earnings_text!r}", line, line_number
        ) from None
    if not math.isfinite(box_office_earnings):
        raise MalformedLineError(
            f"invalid boxOfficeEarnings {earnings_text!r}", line, line_number
        )

    return Movie(title, director, genre, year_released, box_office_earnings)


def decode(lines: Iterable[str], strict: bool = False) -> DecodeReport:
    """Decode a stream of lines into a DecodeReport.

    Args:
        lines: Lines with or without trailing newlines, e.g. an open file.
        strict: Raise on lines with the wrong number of fields instead of
            skipping them.
    """
    report = DecodeReport()

    for line_number, line in enumerate(lines, start=1):
        text = line.rstrip("\r\n")
        if not text.strip():
            continue

        movie = decode_line(text, line_number)
        if movie is not None:
            report.movies.append(movie)
            continue

        field_count = len(split_line(text))
        reason = f"expected {FIELD_COUNT} fields, got {field_count}"
        if strict:
            raise MalformedLineError(reason, text, line_number)

        logger.warning("Skipping line %d: %s", line_number, reason)
        report.skipped.append(SkippedLine(line_number, text, reason))

    return report


def load_into(catalog: MovieCatalog, lines: Iterable[str], strict: bool = False) -> DecodeReport:
    """Decode lines and add every movie to the catalog.

    Nothing is added unless every line decodes and no title clashes.

    Raises:
        DuplicateTitleError: If a decoded title is already in the catalog.
    """
    report = decode(lines, strict=strict)
    catalog.add_all(report.movies)
    return report
