"""
Movie value object.

A Movie is immutable and compared by value: two movies with the same
fields are equal regardless of where they came from.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, asdict
from typing import Any, Dict, Tuple

from ..exceptions import InvalidMovieError


FIELD_NAMES: Tuple[str, ...] = (
    "title",
    "director",
    "genre",
    "year_released",
    "box_office_earnings",
)


@dataclass(frozen=True, slots=True)
class Movie:
    """
    A single movie record.

    The title is the catalog key. Earnings are always stored as a float,
    so ``Movie(..., 1000000)`` and ``Movie(..., 1000000.0)`` are equal.
    """

    title: str
    director: str
    genre: str
    year_released: int
    box_office_earnings: float

    def __post_init__(self) -> None:
        for name in ("title", "director", "genre"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise InvalidMovieError(f"{name} must be str, got {type(value).__name__}")

        # bool is an int subclass but never a valid year
        if isinstance(self.year_released, bool) or not isinstance(self.year_released, int):
            raise InvalidMovieError(
                f"year_released must be int, got {type(self.year_released).__name__}"
            )

        earnings = self.box_office_earnings
        if isinstance(earnings, bool) or not isinstance(earnings, (int, float)):
            raise InvalidMovieError(
                f"box_office_earnings must be a number, got {type(earnings).__name__}"
            )
        try:
            value = float(earnings)
        except OverflowError:
            value = math.inf
        if not math.isfinite(value):
            raise InvalidMovieError(f"box_office_earnings must be finite, got {earnings!r}")
        object.__setattr__(self, "box_office_earnings", value)

    @property
    def earnings_display(self) -> str:
        """Earnings rendered the same way they are persisted."""
        return repr(self.box_office_earnings)

    def describe(self) -> str:
        """Multi-line, one field per line."""
        return "\n".join([
            f"Title: {self.title}",
            f"Director: {self.director}",
            f"Genre: {self.genre}",
            f"Year Released: {self.year_released}",
            f"Box Office Earnings: {self.earnings_display}",
        ])

    def summary(self) -> str:
        """Single-line description."""
        return (
            f"Title: {self.title}, Director: {self.director}, "
            f"Genre: {self.genre}, Year Released: {self.year_released}, "
            f"Box Office Earnings: {self.earnings_display}"
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
