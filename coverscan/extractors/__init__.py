"""
Cover information extraction.

Implements the heuristic cascade for cover text:
- ISBN: regex cascade, tried first
- Title/author: marketing filters, ordered author strategies, query building
- Fallback names: scored full-name lines, then isolated capitalized words

None of these raise on unusual text; a non-match falls through to the
next strategy.
"""

from coverscan.extractors.fallback import (
    FallbackNameFinder,
    find_potential_author_names,
)
from coverscan.extractors.isbn import (
    extract_isbn,
    looks_like_isbn,
    normalize_isbn,
)
from coverscan.extractors.segmenter import (
    SegmentationResult,
    TitleAuthorSegmenter,
    extract_title_and_author,
)
from coverscan.extractors.strategies import (
    AdjacentNamePartsStrategy,
    AuthorMatch,
    AuthorStrategy,
    FullNameLineStrategy,
    SingleNamePairStrategy,
    default_strategies,
    looks_like_author_name,
    looks_like_single_name_part,
)

__all__ = [
    # ISBN
    "extract_isbn",
    "normalize_isbn",
    "looks_like_isbn",
    # Segmentation
    "TitleAuthorSegmenter",
    "SegmentationResult",
    "extract_title_and_author",
    # Author strategies
    "AuthorStrategy",
    "AuthorMatch",
    "SingleNamePairStrategy",
    "AdjacentNamePartsStrategy",
    "FullNameLineStrategy",
    "default_strategies",
    "looks_like_single_name_part",
    "looks_like_author_name",
    # Fallback
    "FallbackNameFinder",
    "find_potential_author_names",
]
