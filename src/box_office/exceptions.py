"""Custom exceptions for the box office catalog."""

from pathlib import Path
from typing import Optional, Union


class BoxOfficeError(Exception):
    """Base exception for box office catalog errors."""
    pass


class DuplicateTitleError(BoxOfficeError):
    """Raised when a movie with the same title is already in the catalog."""

    def __init__(self, title: str):
        super().__init__(f"Movie with title '{title}' already exists")
        self.title = title


class MovieNotFoundError(BoxOfficeError):
    """Raised when a movie that must be present is missing."""

    def __init__(self, title: str):
        super().__init__(f"Movie with title '{title}' not found")
        self.title = title


class InvalidMovieError(BoxOfficeError, ValueError):
    """Raised when movie fields have the wrong type."""
    pass


class CatalogIOError(BoxOfficeError):
    """Raised when a catalog file cannot be opened, read or written."""

    def __init__(self, path: Union[str, Path], cause: Optional[Exception] = None):
        message = f"I/O failure on {path}"
        if cause is not None:
            message = f"{message}: {getattr(cause, 'strerror', None) or cause}"
        super().__init__(message)
        self.path = Path(path)
        self.cause = cause


class MalformedDocumentError(BoxOfficeError):
    """Raised when a JSON catalog document does not have the expected shape."""
    pass


class MalformedLineError(BoxOfficeError, ValueError):
    """Raised when a delimited line cannot be turned into a movie."""

    def __init__(self, message: str, line: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line = line
        self.line_number = line_number


class ConfigurationError(BoxOfficeError):
    """Raised when there's an error in configuration."""
    pass
