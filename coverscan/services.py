"""
Book metadata search interface.

The pipeline never talks to a metadata API directly; the host
application passes in a BookSearchService implementation (Google Books,
Open Library, a local catalogue, or a fake in tests).
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from coverscan.models import BookMetadata


class BookSearchService(ABC):
    """Abstract base for metadata search services."""

    name: str = "base"

    @abstractmethod
    async def lookup_by_isbn(self, isbn: str) -> BookMetadata | None:
        """Look up one book by ISBN. Returns None when it is unknown."""
        pass

    @abstractmethod
    async def search(self, title: str, author: str | None = None) -> list[BookMetadata]:
        """Search by free-text title query and optional author.

        Should return an empty list (not raise) when nothing matches.
        """
        pass
