"""Tests for ISBN extraction."""

import pytest

from coverscan.extractors import extract_isbn, looks_like_isbn, normalize_isbn


class TestExtractISBN:
    """Tests for extract_isbn."""

    def test_labeled_isbn13(self):
        """Labeled ISBN-13 with hyphens."""
        assert extract_isbn("ISBN-13: 978-0-545-01022-1") == "9780545010221"

    def test_labeled_isbn10(self):
        """Labeled ISBN-10 with hyphens."""
        assert extract_isbn("ISBN-10: 0-306-40615-2") == "0306406152"

    def test_unlabeled_isbn(self):
        """Plain 'ISBN:' prefix."""
        assert extract_isbn("ISBN: 0-306-40615-2") == "0306406152"

    def test_case_insensitive_label(self):
        """Label and check character match in any case."""
        assert extract_isbn("isbn 030640615x") == "030640615X"

    def test_bare_978_with_spaces(self):
        """Bare 978-prefixed number with space separators."""
        text = "Some blurb 978 1 4028 9462 6 more text"
        assert extract_isbn(text) == "9781402894626"

    def test_bare_isbn10(self):
        """Bare ten-character number ending in X."""
        assert extract_isbn("code 030640615X here") == "030640615X"

    def test_multiline_text(self):
        """ISBN on a later line of a multi-line block."""
        text = "TOMORROW, AND TOMORROW\nGABRIELLE ZEVIN\nISBN 978-0-593-32120-1"
        assert extract_isbn(text) == "9780593321201"

    def test_wrong_length_rejected(self):
        """A labeled number of the wrong length is not an ISBN."""
        assert extract_isbn("ISBN 123456789012") is None

    def test_inner_x_rejected(self):
        """X is only valid as the last character of an ISBN-10."""
        assert extract_isbn("ISBN: 0-30X-40615-2") is None

    def test_malformed_label_falls_through(self):
        """A rejected labeled candidate lets later patterns match."""
        text = "ISBN: 0-30X-40615-2\n978-0-593-32120-1"
        assert extract_isbn(text) == "9780593321201"

    @pytest.mark.parametrize("text", ["", "No numbers here", "Published 1999", "12345"])
    def test_no_match(self, text):
        """Text without an ISBN yields None."""
        assert extract_isbn(text) is None

    @pytest.mark.parametrize(
        "text",
        [
            "ISBN-13: 978-0-545-01022-1",
            "ISBN: 0-306-40615-2",
            "978 1 4028 9462 6",
            "030640615X",
            "ISBN 97805450102211234",
        ],
    )
    def test_length_invariant(self, text):
        """Anything returned has exactly 10 or 13 characters."""
        isbn = extract_isbn(text)
        assert isbn is None or len(isbn) in (10, 13)


class TestISBNHelpers:
    """Tests for barcode normalization and manual query routing."""

    def test_normalize_keeps_digits(self):
        """Barcode payloads keep only digits."""
        assert normalize_isbn("978-0-545-01022-1") == "9780545010221"

    def test_looks_like_isbn(self):
        """All-digit queries are routed to ISBN lookup."""
        assert looks_like_isbn("9780545010221")
        assert not looks_like_isbn("978-0-545")
        assert not looks_like_isbn("Circe")
        assert not looks_like_isbn("")
