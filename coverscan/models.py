"""
Data models for coverscan.

These models carry a photo from recognized text blocks to the
search results handed back to the host application.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class RecognizedTextBlock:
    """
    One span of text returned by the text-recognition engine.

    Geometry is normalized to the image: ``bounding_box_height`` is a
    fraction of the image height and ``vertical_center`` runs from
    0 (top) to 1 (bottom).
    """

    text: str
    bounding_box_height: float
    vertical_center: float


@dataclass(frozen=True)
class NameCandidate:
    """A line judged name-shaped by the fallback finder."""

    text: str
    score: int
    index: int  # Encounter order, used to break score ties


@dataclass(frozen=True)
class ExtractionResult:
    """
    Best-effort guess of what book a cover shows.

    At most one of ``isbn`` or ``(title, author)`` is populated.
    """

    isbn: str | None = None
    title: str | None = None
    author: str | None = None

    @property
    def is_empty(self) -> bool:
        """True when nothing usable was extracted."""
        return not (self.isbn or self.title or self.author)

    @property
    def display_query(self) -> str | None:
        """Human-readable form of what will be searched for."""
        if self.isbn:
            return self.isbn
        if self.title and self.author:
            return f"{self.title} by {self.author}"
        return self.title

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"isbn": self.isbn, "title": self.title, "author": self.author}


@dataclass
class BookMetadata:
    """A book record returned by the metadata search service."""

    isbn: str
    title: str
    authors: list[str] = field(default_factory=list)
    publisher: str | None = None
    publish_date: str | None = None
    page_count: int | None = None
    description: str | None = None
    cover_url: str | None = None


class ScanState(Enum):
    """States of one photo-to-query attempt."""

    IDLE = "idle"
    PROCESSING = "processing"
    SEARCHING = "searching"
    FOUND = "found"
    ERROR = "error"


@dataclass(frozen=True)
class ScanStatus:
    """
    Current state of the scan pipeline, as shown to the user.

    ``query`` is set while searching, ``count`` once results are
    found and ``message`` when the attempt ended in an error.
    """

    state: ScanState = ScanState.IDLE
    query: str | None = None
    count: int | None = None
    message: str | None = None

    @classmethod
    def idle(cls) -> "ScanStatus":
        return cls()

    @classmethod
    def processing(cls) -> "ScanStatus":
        return cls(state=ScanState.PROCESSING)

    @classmethod
    def searching(cls, query: str) -> "ScanStatus":
        return cls(state=ScanState.SEARCHING, query=query)

    @classmethod
    def found(cls, count: int) -> "ScanStatus":
        return cls(state=ScanState.FOUND, count=count)

    @classmethod
    def error(cls, message: str) -> "ScanStatus":
        return cls(state=ScanState.ERROR, message=message)


@dataclass
class ScanOutcome:
    """
    Result of one scan attempt.

    Example:
        >>> outcome = await pipeline.scan(image)
        >>> if outcome.succeeded:
        ...     print(outcome.results[0].title)
        ... else:
        ...     print(outcome.error)
    """

    extraction: ExtractionResult = field(default_factory=ExtractionResult)
    query: str | None = None  # Last query handed to the search service
    results: list[BookMetadata] = field(default_factory=list)
    error: str | None = None
    superseded: bool = False  # A newer scan started before this one finished
    processing_log: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.error is None and bool(self.results)
