"""Tests for text block selection and reading order."""

import pytest

from coverscan.config import ScanConfig
from coverscan.models import RecognizedTextBlock
from coverscan.readers import linearize, select_blocks, select_lines, size_threshold


def block(text, height, center):
    return RecognizedTextBlock(text=text, bounding_box_height=height, vertical_center=center)


class TestSizeThreshold:
    """Tests for the small-print threshold."""

    def test_empty(self):
        """No blocks, no threshold."""
        assert size_threshold([], ScanConfig()) == 0.0

    def test_max_ratio_dominates(self):
        """With one huge block, 35% of the maximum wins."""
        blocks = [block("TITLE", 0.4, 0.2), block("a", 0.01, 0.5), block("b", 0.01, 0.6)]
        # max * 0.35 = 0.14, avg * 0.8 = 0.112
        assert size_threshold(blocks, ScanConfig()) == pytest.approx(0.14)

    def test_average_ratio_dominates(self):
        """With similar blocks, 80% of the average wins."""
        blocks = [block("A", 0.1, 0.2), block("B", 0.1, 0.5)]
        assert size_threshold(blocks, ScanConfig()) == pytest.approx(0.08)


class TestSelectBlocks:
    """Tests for select_blocks / select_lines."""

    def test_empty_input(self):
        """Empty input yields empty output without error."""
        assert select_blocks([]) == []
        assert select_lines([]) == []
        assert linearize([]) == ""

    def test_small_print_dropped(self):
        """Blurbs far smaller than the title are discarded."""
        blocks = [
            block("TITLE", 0.1, 0.2),
            block("AUTHOR", 0.08, 0.8),
            block("a tour de force - some reviewer", 0.01, 0.5),
        ]
        assert select_lines(blocks) == ["TITLE", "AUTHOR"]

    def test_top_to_bottom(self):
        """Blocks are ordered from the top of the cover down."""
        blocks = [
            block("AUTHOR", 0.1, 0.8),
            block("TITLE", 0.1, 0.2),
            block("SUBTITLE", 0.1, 0.5),
        ]
        assert select_lines(blocks) == ["TITLE", "SUBTITLE", "AUTHOR"]

    def test_taller_first_on_same_row(self):
        """Blocks within the tie tolerance put the taller one first."""
        blocks = [
            block("small", 0.08, 0.30),
            block("BIG", 0.09, 0.32),
        ]
        assert select_lines(blocks) == ["BIG", "small"]

    def test_identical_heights_positional(self):
        """Equal heights fall back to pure position."""
        blocks = [block(str(i), 0.05, c) for i, c in enumerate([0.9, 0.1, 0.5, 0.3])]
        assert select_lines(blocks) == ["1", "3", "2", "0"]

    def test_equal_heights_inside_tolerance_positional(self):
        """Equal heights on the same row are ordered by position, not input order."""
        blocks = [block("lower", 0.1, 0.52), block("upper", 0.1, 0.50)]
        assert select_lines(blocks) == ["upper", "lower"]

    def test_blank_blocks_omitted(self):
        """Blocks with no text do not produce empty lines."""
        blocks = [block("TITLE", 0.1, 0.2), block("   ", 0.1, 0.5)]
        assert select_lines(blocks) == ["TITLE"]

    def test_custom_tolerance(self):
        """A zero tolerance orders strictly by position."""
        blocks = [block("small", 0.08, 0.30), block("BIG", 0.09, 0.32)]
        config = ScanConfig(vertical_tie_tolerance=0.0)
        assert select_lines(blocks, config) == ["small", "BIG"]

    def test_order_non_decreasing_outside_ties(self):
        """Outside size tie-breaks, output never moves back up the cover."""
        blocks = [
            block("e", 0.1, 0.95),
            block("a", 0.1, 0.05),
            block("c", 0.12, 0.50),
            block("b", 0.1, 0.25),
            block("d", 0.11, 0.75),
        ]
        selected = select_blocks(blocks)
        centers = [b.vertical_center for b in selected]
        for earlier, later in zip(centers, centers[1:]):
            assert later >= earlier or abs(later - earlier) < 0.05

    def test_linearize_joins_lines(self):
        """linearize() produces newline-delimited text."""
        blocks = [block("ZEVIN", 0.1, 0.8), block("GABRIELLE", 0.1, 0.7)]
        assert linearize(blocks) == "GABRIELLE\nZEVIN"
