"""
File-based catalog storage.

CatalogFileStore saves and loads whole catalogs in either encoding, and
works on a delimited file one record at a time without building a
catalog first. Opening, reading or writing a file can fail; those
failures are logged and returned as Failure(CatalogIOError). Contract
errors such as duplicate titles or malformed documents still raise.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..config import CatalogConfig
from ..domain.catalog import MovieCatalog
from ..domain.movie import Movie
from ..domain.result import Result, success, failure
from ..exceptions import CatalogIOError
from .codecs import delimited, document

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Undecodable bytes are a read failure, not a malformed record
READ_ERRORS = (OSError, UnicodeDecodeError)


class CatalogFileStore:
    """Reads and writes movie catalogs on disk."""

    def __init__(self, config: Optional[CatalogConfig] = None):
        self.config = config or CatalogConfig()

    def _io_failure(self, action: str, path: Path, error: Exception) -> Result:
        logger.error("Failed to %s %s: %s", action, path, error)
        return failure(CatalogIOError(path, error))

    def _write_text(self, path: Path, text: str, mode: str = "w") -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, mode, encoding=self.config.encoding, newline="\n") as f:
            f.write(text)

    def _delimited_path(self, path: Optional[PathLike]) -> Path:
        return Path(path) if path is not None else self.config.delimited_path

    def _document_path(self, path: Optional[PathLike]) -> Path:
        return Path(path) if path is not None else self.config.document_path

    # Whole-catalog persistence

    def save_delimited(self, catalog: MovieCatalog, path: Optional[PathLike] = None) -> Result[Path, CatalogIOError]:
        """Write every movie as one delimited line, replacing the file."""
        target = self._delimited_path(path)
        try:
            self._write_text(target, delimited.encode(catalog))
        except OSError as e:
            return self._io_failure("save", target, e)

        logger.info("Saved %d movies to %s", len(catalog), target)
        return success(target)

    def load_delimited(
        self,
        path: Optional[PathLike] = None,
        catalog: Optional[MovieCatalog] = None,
        strict: Optional[bool] = None,
    ) -> Result[MovieCatalog, CatalogIOError]:
        """Load a delimited file into a catalog (a new one by default).

        Raises:
            MalformedLineError: On unparseable numbers, or any malformed
                line when strict.
            DuplicateTitleError: If a title is already in the catalog.
        """
        source = self._delimited_path(path)
        if catalog is None:
            catalog = MovieCatalog()
        if strict is None:
            strict = self.config.strict_lines

        try:
            with open(source, "r", encoding=self.config.encoding) as f:
                report = delimited.load_into(catalog, f, strict=strict)
        except READ_ERRORS as e:
            return self._io_failure("load", source, e)

        logger.info(
            "Loaded %d movies from %s (%d lines skipped)",
            len(report.movies), source, len(report.skipped),
        )
        return success(catalog)

    def save_document(self, catalog: MovieCatalog, path: Optional[PathLike] = None) -> Result[Path, CatalogIOError]:
        """Write the catalog as a JSON document."""
        target = self._document_path(path)
        text = document.dumps(catalog, indent=self.config.json_indent)
        try:
            self._write_text(target, text)
        except OSError as e:
            return self._io_failure("save", target, e)

        logger.info("Saved %d movies to %s", len(catalog), target)
        return success(target)

    def load_document(
        self,
        path: Optional[PathLike] = None,
        catalog: Optional[MovieCatalog] = None,
    ) -> Result[MovieCatalog, CatalogIOError]:
        """Load a JSON document into a catalog (a new one by default).

        Raises:
            MalformedDocumentError: If the file is not a valid catalog document.
            DuplicateTitleError: If a title repeats.
        """
        source = self._document_path(path)
        try:
            with open(source, "r", encoding=self.config.encoding) as f:
                text = f.read()
        except READ_ERRORS as e:
            return self._io_failure("load", source, e)

        catalog = document.loads(text, catalog)
        logger.info("Loaded %d movies from %s", len(catalog), source)
        return success(catalog)

    # Single-record operations on a delimited file

    def append_movie(self, movie: Movie, path: Optional[PathLike] = None) -> Result[Movie, CatalogIOError]:
        """Append one line for a movie. Titles already in the file are not checked."""
        target = self._delimited_path(path)
        try:
            self._write_text(target, f"{delimited.encode_line(movie)}\n", mode="a")
        except OSError as e:
            return self._io_failure("append to", target, e)

        logger.debug("Appended %r to %s", movie.title, target)
        return success(movie)

    def find_movie(self, title: str, path: Optional[PathLike] = None) -> Result[Optional[Movie], CatalogIOError]:
        """Scan a delimited file and return the first movie with this title.

        Lines with the wrong field count are passed over. A matching line
        with bad numbers raises MalformedLineError.
        """
        source = self._delimited_path(path)
        try:
            with open(source, "r", encoding=self.config.encoding) as f:
                for line_number, line in enumerate(f, start=1):
                    parts = delimited.split_line(line)
                    if len(parts) == delimited.FIELD_COUNT and parts[0] == title:
                        return success(delimited.decode_line(line, line_number))
        except READ_ERRORS as e:
            return self._io_failure("search", source, e)

        return success(None)

    def remove_movie(self, title: str, path: Optional[PathLike] = None) -> Result[int, CatalogIOError]:
        """Rewrite a delimited file without the lines for a title.

        Only well-formed lines are kept, so lines with the wrong field
        count are dropped as well. The file is left untouched if it
        cannot be read.

        Returns:
            Number of lines removed for the title.
        """
        source = self._delimited_path(path)
        kept: List[str] = []
        removed = 0
        try:
            with open(source, "r", encoding=self.config.encoding) as f:
                for line in f:
                    parts = delimited.split_line(line)
                    if len(parts) != delimited.FIELD_COUNT:
                        continue
                    if parts[0] == title:
                        removed += 1
                    else:
                        kept.append(line.rstrip("\r\n"))
        except READ_ERRORS as e:
            return self._io_failure("read", source, e)

        try:
            self._write_text(source, "".join(f"{line}\n" for line in kept))
        except OSError as e:
            return self._io_failure("rewrite", source, e)

        logger.debug("Removed %d line(s) for %r from %s", removed, title, source)
        return success(removed)
