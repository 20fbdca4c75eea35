"""
Cover scan orchestrator.

This module provides the pipeline that turns one cover photo into
search results by wiring together:
- TextRecognizer (external, awaited)
- Text block selection (reading order)
- ISBN extraction
- Confusion correction, title/author segmentation and fallback names
- BookSearchService (external, awaited)

Each attempt moves through idle -> processing -> searching(query) ->
found(count) | error(message) -> idle. Failures never escape scan():
they end the attempt in the error state, which clears itself after a
short pause.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from typing import Any

from coverscan.config import ScanConfig
from coverscan.exceptions import (
    CoverScanError,
    NoInformationFoundError,
    NoSearchResultsError,
)
from coverscan.extractors.fallback import FallbackNameFinder
from coverscan.extractors.isbn import extract_isbn, looks_like_isbn, normalize_isbn
from coverscan.extractors.segmenter import TitleAuthorSegmenter
from coverscan.models import (
    BookMetadata,
    ExtractionResult,
    RecognizedTextBlock,
    ScanOutcome,
    ScanStatus,
)
from coverscan.normalizers.confusion import ConfusionCorrector
from coverscan.readers.recognizer import TextRecognizer
from coverscan.readers.selector import linearize
from coverscan.services import BookSearchService
from coverscan.vocabulary import CoverVocabulary, load_vocabulary

logger = logging.getLogger(__name__)

StatusListener = Callable[[ScanStatus], Any]

# Errors that are expected outcomes of a scan, shown without a prefix
TERMINAL_ERRORS = (NoInformationFoundError, NoSearchResultsError)


class CoverScanPipeline:
    """
    Orchestrates one photo-to-search attempt.

    Usage:
        pipeline = CoverScanPipeline(TesseractRecognizer(), my_search_service)
        pipeline.add_listener(lambda status: print(status.state.value))
        outcome = await pipeline.scan("cover.jpg")
        for book in outcome.results:
            print(book.title)

    Only the most recent scan may update ``status``; an older attempt that
    finishes late is marked ``superseded`` and its updates are dropped.
    """

    def __init__(
        self,
        recognizer: TextRecognizer,
        search_service: BookSearchService,
        *,
        config: ScanConfig | None = None,
        vocabulary: CoverVocabulary | None = None,
    ):
        """Initialize the pipeline.

        Args:
            recognizer: Turns an image into RecognizedTextBlocks.
            search_service: Metadata lookup used for ISBN and title searches.
            config: Thresholds and UI pacing (default ScanConfig()).
            vocabulary: Word tables (default: packaged, extended by
                config.vocabulary_path when set).
        """
        self.recognizer = recognizer
        self.search_service = search_service
        self.config = config or ScanConfig()
        self.vocabulary = vocabulary or load_vocabulary(self.config.vocabulary_path)

        self.corrector = ConfusionCorrector(self.vocabulary.confusion_pairs)
        self.segmenter = TitleAuthorSegmenter(vocabulary=self.vocabulary, config=self.config)
        self.fallback = FallbackNameFinder(
            vocabulary=self.vocabulary, corrector=self.corrector, config=self.config
        )

        self.status = ScanStatus.idle()
        self._listeners: list[StatusListener] = []
        self._generation = 0

    # -------------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------------

    def add_listener(self, listener: StatusListener) -> None:
        """Call ``listener`` with every new status."""
        self._listeners.append(listener)

    def remove_listener(self, listener: StatusListener) -> None:
        self._listeners.remove(listener)

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    def _set_status(self, status: ScanStatus, generation: int) -> None:
        if not self._is_current(generation):
            return
        self.status = status
        logger.info("Scan status: %s", status.state.value)
        for listener in list(self._listeners):
            try:
                listener(status)
            except Exception:
                logger.exception("Status listener %r failed", listener)

    # -------------------------------------------------------------------------
    # Pure interpretation
    # -------------------------------------------------------------------------

    def interpret_text(self, text: str) -> ExtractionResult:
        """Extract an ISBN, or else a title and author, from linearized text."""
        isbn = extract_isbn(text)
        if isbn:
            return ExtractionResult(isbn=isbn)
        segmentation = self.segmenter.segment(self.corrector.correct(text))
        return ExtractionResult(title=segmentation.title, author=segmentation.author)

    def interpret(self, blocks: Sequence[RecognizedTextBlock]) -> ExtractionResult:
        """Select and order recognized blocks, then interpret their text."""
        return self.interpret_text(linearize(blocks, self.config))

    # -------------------------------------------------------------------------
    # Scanning
    # -------------------------------------------------------------------------

    async def scan(self, image: Any) -> ScanOutcome:
        """Run one photo through recognition, extraction and search.

        Args:
            image: Whatever the configured recognizer accepts.

        Returns:
            ScanOutcome with results, or with ``error`` set. Never raises
            for recognizer or search failures.
        """
        self._generation += 1
        generation = self._generation
        outcome = ScanOutcome()
        log = outcome.processing_log

        self._set_status(ScanStatus.processing(), generation)

        try:
            blocks = await self.recognizer.recognize(image)
            text = linearize(blocks, self.config)
            log.append(f"Recognized {len(blocks)} blocks, kept {len(text.splitlines())} lines")

            # Step 1: ISBN short-circuit
            isbn = extract_isbn(text)
            if isbn:
                log.append(f"Found ISBN {isbn}")
                outcome.extraction = ExtractionResult(isbn=isbn)
                outcome.query = isbn
                self._set_status(ScanStatus.searching(isbn), generation)
                book = await self.search_service.lookup_by_isbn(isbn)
                outcome.results = [book] if book is not None else []
                self._set_status(ScanStatus.idle(), generation)
                return self._finish(outcome, generation)

            # Step 2: Correct and segment
            corrected = self.corrector.correct(text)
            segmentation = self.segmenter.segment(corrected)
            log.extend(segmentation.processing_log)
            outcome.extraction = ExtractionResult(
                title=segmentation.title, author=segmentation.author
            )
            names = self.fallback.find(corrected)
            if names:
                log.append(f"Fallback names: {names}")

            # Step 3: Search
            if not segmentation.title:
                results = await self._search_names(names, outcome, generation)
                if not results:
                    raise NoInformationFoundError()
            else:
                results = await self._search_title(
                    segmentation.title, segmentation.author, outcome, generation
                )
                if not results and names:
                    log.append("Primary search empty, retrying with fallback names")
                    results = await self._search_names(names, outcome, generation)
                if not results:
                    raise NoSearchResultsError()

            outcome.results = results
            self._set_status(ScanStatus.found(len(results)), generation)
            await asyncio.sleep(self.config.found_delay)
            self._set_status(ScanStatus.idle(), generation)

        except TERMINAL_ERRORS as e:
            await self._fail(outcome, str(e), generation)
        except CoverScanError as e:
            logger.warning("Scan failed: %s", e)
            await self._fail(outcome, f"Search failed: {e}", generation)
        except Exception as e:
            logger.warning("Scan failed: %s", e, exc_info=True)
            await self._fail(outcome, f"Search failed: {e}", generation)

        return self._finish(outcome, generation)

    async def _search_title(
        self,
        title: str,
        author: str | None,
        outcome: ScanOutcome,
        generation: int,
    ) -> list[BookMetadata]:
        query = f"{title} by {author}" if author else title
        outcome.query = query
        self._set_status(ScanStatus.searching(query), generation)
        return await self.search_service.search(title, author)

    async def _search_names(
        self,
        names: list[str],
        outcome: ScanOutcome,
        generation: int,
    ) -> list[BookMetadata]:
        if not names:
            return []
        query = " ".join(names)
        outcome.query = query
        self._set_status(ScanStatus.searching(query), generation)
        return await self.search_service.search(query, None)

    async def _fail(self, outcome: ScanOutcome, message: str, generation: int) -> None:
        outcome.error = message
        outcome.processing_log.append(f"Error: {message}")
        self._set_status(ScanStatus.error(message), generation)
        await asyncio.sleep(self.config.error_delay)
        self._set_status(ScanStatus.idle(), generation)

    def _finish(self, outcome: ScanOutcome, generation: int) -> ScanOutcome:
        if not self._is_current(generation):
            outcome.superseded = True
            logger.info("Discarding superseded scan attempt %d", generation)
        return outcome

    async def search_manual(self, text: str) -> list[BookMetadata]:
        """Search for a typed query: all-digit text is treated as an ISBN."""
        query = text.strip()
        if not query:
            return []
        if looks_like_isbn(query):
            book = await self.search_service.lookup_by_isbn(normalize_isbn(query))
            return [book] if book is not None else []
        return await self.search_service.search(query, None)
