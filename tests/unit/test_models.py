"""Tests for coverscan data models."""

import dataclasses

import pytest

from coverscan.models import (
    BookMetadata,
    ExtractionResult,
    RecognizedTextBlock,
    ScanOutcome,
    ScanState,
    ScanStatus,
)


class TestRecognizedTextBlock:
    """Test RecognizedTextBlock."""

    def test_block_is_immutable(self):
        """Blocks cannot be modified after recognition."""
        block = RecognizedTextBlock(text="ZEVIN", bounding_box_height=0.1, vertical_center=0.2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            block.text = "OTHER"


class TestExtractionResult:
    """Test ExtractionResult."""

    def test_empty_result(self):
        """Default result has nothing in it."""
        result = ExtractionResult()
        assert result.is_empty
        assert result.display_query is None

    def test_display_query_with_author(self):
        """Title and author are shown as 'title by author'."""
        result = ExtractionResult(title="Tomorrow and Tomorrow", author="GABRIELLE ZEVIN")
        assert result.display_query == "Tomorrow and Tomorrow by GABRIELLE ZEVIN"
        assert not result.is_empty

    def test_display_query_title_only(self):
        """Title alone is shown as is."""
        assert ExtractionResult(title="Circe").display_query == "Circe"

    def test_display_query_isbn(self):
        """ISBN results display the ISBN."""
        assert ExtractionResult(isbn="9780545010221").display_query == "9780545010221"

    def test_to_dict(self):
        """Serializes all three fields."""
        result = ExtractionResult(title="Circe", author="Madeline Miller")
        assert result.to_dict() == {"isbn": None, "title": "Circe", "author": "Madeline Miller"}


class TestScanStatus:
    """Test ScanStatus factories."""

    def test_default_is_idle(self):
        """A fresh status is idle."""
        assert ScanStatus().state == ScanState.IDLE
        assert ScanStatus.idle() == ScanStatus()

    def test_searching_carries_query(self):
        """Searching status records the query."""
        status = ScanStatus.searching("Circe")
        assert status.state == ScanState.SEARCHING
        assert status.query == "Circe"

    def test_found_carries_count(self):
        """Found status records the result count."""
        status = ScanStatus.found(3)
        assert status.state == ScanState.FOUND
        assert status.count == 3

    def test_error_carries_message(self):
        """Error status records the message."""
        status = ScanStatus.error("boom")
        assert status.state == ScanState.ERROR
        assert status.message == "boom"


class TestScanOutcome:
    """Test ScanOutcome."""

    def test_succeeded_with_results(self):
        """Results without an error count as success."""
        outcome = ScanOutcome(results=[BookMetadata(isbn="1", title="Circe")])
        assert outcome.succeeded

    def test_not_succeeded_on_error(self):
        """An error is never a success."""
        outcome = ScanOutcome(error="No books found. Try taking a clearer photo.")
        assert not outcome.succeeded

    def test_not_succeeded_without_results(self):
        """No results is not a success."""
        assert not ScanOutcome().succeeded
