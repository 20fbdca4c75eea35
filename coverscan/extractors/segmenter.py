"""
Title/author segmentation of cover text.

The segmenter:
1. Cleans lines and drops cover marketing ("A NOVEL", "NEW YORK TIMES
   BESTSELLER", review quotes, publisher marks)
2. Runs the author strategies in order until one proposes an author
3. Builds a search-query title from the words of the remaining lines

Nothing here raises on odd input: a line that matches no rule simply
falls through to the next step.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from coverscan.config import ScanConfig
from coverscan.extractors.strategies import AuthorStrategy, default_strategies
from coverscan.normalizers.text import clean_line, split_lines, split_words, trim_punctuation
from coverscan.vocabulary import CoverVocabulary, default_vocabulary

logger = logging.getLogger(__name__)

MIN_LINE_LENGTH = 2
MIN_WORD_LENGTH = 2


@dataclass
class SegmentationResult:
    """Result of title/author segmentation."""

    title: str | None
    author: str | None
    author_strategy: str | None = None  # Name of the strategy that found the author
    cleaned_lines: list[str] = field(default_factory=list)
    processing_log: list[str] = field(default_factory=list)


class TitleAuthorSegmenter:
    """Splits corrected cover text into a title query and an author guess.

    Usage:
        segmenter = TitleAuthorSegmenter()
        result = segmenter.segment("GABRIELLE\\nZEVIN\\nTomorrow, and Tomorrow, and Tomorrow")
        print(result.title, "/", result.author)
    """

    def __init__(
        self,
        *,
        vocabulary: CoverVocabulary | None = None,
        strategies: list[AuthorStrategy] | None = None,
        config: ScanConfig | None = None,
    ):
        """Initialize the segmenter.

        Args:
            vocabulary: Word tables (default: packaged vocabulary).
            strategies: Author strategies in priority order (default cascade).
            config: Query length limits (default ScanConfig()).
        """
        self.vocabulary = vocabulary or default_vocabulary()
        if strategies is None:
            strategies = default_strategies(self.vocabulary)
        self.strategies = strategies
        self.config = config or ScanConfig()

    def segment(self, text: str) -> SegmentationResult:
        """Segment corrected cover text.

        Args:
            text: Newline-delimited lines in reading order.

        Returns:
            SegmentationResult; ``title`` is None only when no words survive cleaning.
        """
        log: list[str] = []

        lines = self.clean_lines(split_lines(text), log)

        # Step 1: Author cascade
        author = None
        author_strategy = None
        consumed: frozenset[int] = frozenset()
        for strategy in self.strategies:
            match = strategy.detect(lines)
            if match is not None:
                author = match.author
                author_strategy = match.strategy
                consumed = match.line_indices
                log.append(f"Author {author!r} from {strategy.name}")
                break
        else:
            log.append("No author detected")

        # Step 2: Title from everything the author did not consume
        words = self.word_pool(lines, consumed)
        title = self.build_search_query(words)
        log.append(f"Title query {title!r} from {len(words)} pooled words")

        logger.debug("Segmented cover: title=%r author=%r", title, author)
        return SegmentationResult(
            title=title,
            author=author,
            author_strategy=author_strategy,
            cleaned_lines=lines,
            processing_log=log,
        )

    def clean_lines(self, lines: Sequence[str], log: list[str] | None = None) -> list[str]:
        """Strip decorations and drop marketing lines."""
        cleaned = []
        for line in lines:
            candidate = clean_line(line)
            lower = candidate.lower()

            if lower in self.vocabulary.exact_exclusions:
                reason = "exact exclusion"
            elif any(phrase in lower for phrase in self.vocabulary.contains_exclusions):
                reason = "contains exclusion"
            elif len(candidate) < MIN_LINE_LENGTH:
                reason = "too short"
            else:
                cleaned.append(candidate)
                continue

            if log is not None:
                log.append(f"Dropped line {line!r} ({reason})")

        return cleaned

    def word_pool(self, lines: Sequence[str], consumed: frozenset[int] = frozenset()) -> list[str]:
        """Words of unconsumed lines, punctuation-trimmed, marketing words removed."""
        words = []
        for index, line in enumerate(lines):
            if index in consumed:
                continue
            for raw in split_words(line):
                word = trim_punctuation(raw)
                if len(word) < MIN_WORD_LENGTH:
                    continue
                if word.lower() in self.vocabulary.exact_exclusions:
                    continue
                words.append(word)
        return words

    def build_search_query(self, words: Sequence[str]) -> str | None:
        """Join the first significant words into a search query.

        "and" is kept only when it occurs at least twice, which marks it as
        part of the title ("Tomorrow, and Tomorrow, and Tomorrow"). When
        every word is filler, the first raw words are used instead.
        """
        if not words:
            return None

        keep_and = sum(1 for w in words if w.lower() == "and") >= 2

        significant = []
        for word in words:
            lower = word.lower()
            if lower == "and":
                if keep_and:
                    significant.append(word)
            elif lower not in self.vocabulary.title_stopwords:
                significant.append(word)

        query_words = significant[: self.config.max_title_words]
        if not query_words:
            return " ".join(words[: self.config.raw_title_words])
        return " ".join(query_words)


def extract_title_and_author(
    text: str,
    vocabulary: CoverVocabulary | None = None,
) -> tuple[str | None, str | None]:
    """Convenience function for segmentation.

    Args:
        text: Corrected, newline-delimited cover text.
        vocabulary: Word tables (default: packaged vocabulary).

    Returns:
        (title, author) tuple.
    """
    result = TitleAuthorSegmenter(vocabulary=vocabulary).segment(text)
    return result.title, result.author
