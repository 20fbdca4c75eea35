"""
coverscan: Identify a book from a photo of its cover.

Given the text a recognizer finds on a cover photo, coverscan guesses
the ISBN, or else the title and author, and drives a metadata search
with it, falling back to name-only searches when the first guess fails.

Example:
    >>> import coverscan
    >>> pipeline = coverscan.CoverScanPipeline(
    ...     coverscan.TesseractRecognizer(), my_search_service
    ... )
    >>> outcome = await pipeline.scan("cover.jpg")
    >>> outcome.extraction.display_query
    'Tomorrow and Tomorrow and Tomorrow by GABRIELLE ZEVIN'
"""

from coverscan.config import ScanConfig
from coverscan.exceptions import (
    ConfigurationError,
    CoverScanError,
    InvalidImageError,
    NoInformationFoundError,
    NoSearchResultsError,
    RecognitionError,
)
from coverscan.extractors import (
    FallbackNameFinder,
    TitleAuthorSegmenter,
    extract_isbn,
    extract_title_and_author,
    find_potential_author_names,
)
from coverscan.models import (
    BookMetadata,
    ExtractionResult,
    NameCandidate,
    RecognizedTextBlock,
    ScanOutcome,
    ScanState,
    ScanStatus,
)
from coverscan.normalizers import ConfusionCorrector, correct_confusions
from coverscan.pipeline import CoverScanPipeline
from coverscan.readers import TesseractRecognizer, TextRecognizer, linearize, select_lines
from coverscan.services import BookSearchService
from coverscan.vocabulary import CoverVocabulary, load_vocabulary

__version__ = "0.1.0"
__all__ = [
    # Main API
    "CoverScanPipeline",
    "ScanConfig",
    # Collaborators
    "TextRecognizer",
    "TesseractRecognizer",
    "BookSearchService",
    # Components
    "linearize",
    "select_lines",
    "extract_isbn",
    "ConfusionCorrector",
    "correct_confusions",
    "TitleAuthorSegmenter",
    "extract_title_and_author",
    "FallbackNameFinder",
    "find_potential_author_names",
    # Vocabulary
    "CoverVocabulary",
    "load_vocabulary",
    # Models
    "RecognizedTextBlock",
    "NameCandidate",
    "ExtractionResult",
    "BookMetadata",
    "ScanState",
    "ScanStatus",
    "ScanOutcome",
    # Exceptions
    "CoverScanError",
    "InvalidImageError",
    "RecognitionError",
    "NoInformationFoundError",
    "NoSearchResultsError",
    "ConfigurationError",
]
