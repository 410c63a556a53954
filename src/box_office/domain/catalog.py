"""
Movie catalog aggregate.

The catalog owns a title-keyed, insertion-ordered collection of Movie
values. Mutations that break the title contract raise; lookups return
None on a miss.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional

from .movie import Movie
from ..exceptions import DuplicateTitleError, MovieNotFoundError

logger = logging.getLogger(__name__)


class MovieCatalog:
    """In-memory catalog of movies keyed by title."""

    def __init__(self) -> None:
        self._movies: Dict[str, Movie] = {}

    def add(
        self,
        title: str,
        director: str,
        genre: str,
        year_released: int,
        box_office_earnings: float,
    ) -> Movie:
        """Create a movie from its fields and add it.

        Raises:
            DuplicateTitleError: If the title is already in the catalog.
            InvalidMovieError: If a field has the wrong type.
        """
        return self.add_movie(
            Movie(title, director, genre, year_released, box_office_earnings)
        )

    def add_movie(self, movie: Movie) -> Movie:
        """Add an existing Movie value."""
        if movie.title in self._movies:
            raise DuplicateTitleError(movie.title)
        self._movies[movie.title] = movie
        logger.debug("Added movie %r", movie.title)
        return movie

    def add_all(self, movies: Iterable[Movie]) -> List[Movie]:
        """Add several movies, all or none.

        Raises:
            DuplicateTitleError: If a title is already in the catalog or
                repeats within movies. The catalog is left unchanged.
        """
        batch = list(movies)
        seen = set(self._movies)
        for movie in batch:
            if movie.title in seen:
                raise DuplicateTitleError(movie.title)
            seen.add(movie.title)

        for movie in batch:
            self._movies[movie.title] = movie
        logger.debug("Added %d movies", len(batch))
        return batch

    def remove(self, title: str) -> Movie:
        """Remove a movie and return it.

        Raises:
            MovieNotFoundError: If no movie has this title.
        """
        try:
            movie = self._movies.pop(title)
        except KeyError:
            raise MovieNotFoundError(title) from None
        logger.debug("Removed movie %r", title)
        return movie

    def find_by_title(self, title: str) -> Optional[Movie]:
        return self._movies.get(title)

    def sorted_by_earnings(self) -> List[Movie]:
        """All movies, highest earnings first.

        sorted() is stable, so equal earnings keep insertion order.
        """
        return sorted(
            self._movies.values(),
            key=lambda movie: movie.box_office_earnings,
            reverse=True,
        )

    def describe(self, title: str) -> str:
        movie = self.find_by_title(title)
        if movie is None:
            return f"Movie with title '{title}' not found"
        return movie.describe()

    def describe_all(self) -> List[str]:
        return [movie.summary() for movie in self]

    def titles(self) -> List[str]:
        return list(self._movies)

    def __len__(self) -> int:
        return len(self._movies)

    def __iter__(self) -> Iterator[Movie]:
        return iter(list(self._movies.values()))

    def __contains__(self, title: object) -> bool:
        return title in self._movies

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MovieCatalog):
            return NotImplemented
        return list(self._movies.items()) == list(other._movies.items())

    def __repr__(self) -> str:
        return f"MovieCatalog({len(self)} movies)"
