"""
Catalog encodings.

- ``delimited``: one comma-separated line per movie
- ``document``: a JSON object with a single ``movies`` array
"""

from . import delimited, document
from .delimited import DecodeReport, SkippedLine

__all__ = ["delimited", "document", "DecodeReport", "SkippedLine"]
