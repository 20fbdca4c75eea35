#!/usr/bin/env python3
"""
Basic coverscan Usage Example

This example demonstrates the core workflow:
1. Interpret recognized cover text without any I/O
2. Plug in a search service and follow the scan status
3. Scan a real photo with Tesseract (if a path is given)
4. Search for a typed query
"""

import asyncio
import logging
import sys

from coverscan import (
    BookMetadata,
    BookSearchService,
    CoverScanPipeline,
    RecognizedTextBlock,
    ScanConfig,
    TesseractRecognizer,
    TextRecognizer,
)

CATALOGUE = [
    BookMetadata(
        isbn="9780593321201",
        title="Tomorrow, and Tomorrow, and Tomorrow",
        authors=["Gabrielle Zevin"],
        publisher="Knopf",
        publish_date="2022",
    ),
    BookMetadata(
        isbn="9780525559474",
        title="The Midnight Library",
        authors=["Matt Haig"],
        publisher="Viking",
        publish_date="2020",
    ),
]


class CatalogueSearch(BookSearchService):
    """Naive in-memory search over CATALOGUE."""

    name = "catalogue"

    async def lookup_by_isbn(self, isbn):
        return next((b for b in CATALOGUE if b.isbn == isbn), None)

    async def search(self, title, author=None):
        terms = title.lower().split()
        if author:
            terms += author.lower().split()
        return [
            book
            for book in CATALOGUE
            if all(t in f"{book.title} {' '.join(book.authors)}".lower() for t in terms)
        ]


class CannedRecognizer(TextRecognizer):
    """Stands in for a platform OCR service."""

    name = "canned"

    async def recognize(self, image):
        return [
            RecognizedTextBlock("NEW YORK TIMES BESTSELLER", 0.02, 0.05),
            RecognizedTextBlock("GABRIELLE", 0.07, 0.15),
            RecognizedTextBlock("ZEVIN", 0.07, 0.25),
            RecognizedTextBlock("Tomorrow, and Tomorrow, and Tomorrow", 0.08, 0.55),
            RecognizedTextBlock("A NOVEL", 0.05, 0.85),
        ]


async def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # ─────────────────────────────────────────────────────────────────────────
    # 1. Pure interpretation
    # ─────────────────────────────────────────────────────────────────────────

    pipeline = CoverScanPipeline(CannedRecognizer(), CatalogueSearch())
    blocks = await pipeline.recognizer.recognize(None)
    result = pipeline.interpret(blocks)
    print(f"Interpreted: {result.display_query}")

    # ─────────────────────────────────────────────────────────────────────────
    # 2. Full scan with status updates
    # ─────────────────────────────────────────────────────────────────────────

    pipeline.add_listener(lambda status: print(f"  status: {status.state.value}"))
    outcome = await pipeline.scan(None)

    if outcome.succeeded:
        for book in outcome.results:
            print(f"Found: {book.title} by {', '.join(book.authors)}")
    else:
        print(f"Failed: {outcome.error}")

    for entry in outcome.processing_log:
        print(f"  log: {entry}")

    # ─────────────────────────────────────────────────────────────────────────
    # 3. Real photo
    # ─────────────────────────────────────────────────────────────────────────

    if len(sys.argv) > 1:
        recognizer = TesseractRecognizer()
        if not recognizer.is_available:
            print("Tesseract is not installed; skipping photo scan")
        else:
            photo_pipeline = CoverScanPipeline(
                recognizer, CatalogueSearch(), config=ScanConfig(found_delay=0.0)
            )
            outcome = await photo_pipeline.scan(sys.argv[1])
            print(f"Photo query: {outcome.query!r}, {len(outcome.results)} result(s)")

    # ─────────────────────────────────────────────────────────────────────────
    # 4. Typed query
    # ─────────────────────────────────────────────────────────────────────────

    for query in ("9780525559474", "midnight library"):
        books = await pipeline.search_manual(query)
        print(f"Manual {query!r}: {[b.title for b in books]}")


if __name__ == "__main__":
    asyncio.run(main())
