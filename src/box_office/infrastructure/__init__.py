"""
Infrastructure layer - codecs and file storage for movie catalogs.
"""

from .storage import CatalogFileStore

__all__ = ["CatalogFileStore"]
