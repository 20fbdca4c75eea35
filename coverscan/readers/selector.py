"""
Text block selection: approximate the reading order of a cover.

Covers mix a large title and author with small print (blurbs, review
quotes, publisher marks). The selector keeps only blocks whose height is
close to the most prominent text and orders them top to bottom, with
the taller block first when two blocks sit on roughly the same row.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import cmp_to_key

from coverscan.config import ScanConfig
from coverscan.models import RecognizedTextBlock

logger = logging.getLogger(__name__)


def size_threshold(blocks: Sequence[RecognizedTextBlock], config: ScanConfig) -> float:
    """Minimum block height kept: max(tallest * 0.35, average * 0.8) by default."""
    if not blocks:
        return 0.0
    heights = [b.bounding_box_height for b in blocks]
    max_height = max(heights)
    avg_height = sum(heights) / len(heights)
    return max(max_height * config.size_ratio_of_max, avg_height * config.size_ratio_of_average)


def _reading_order(tolerance: float):
    def compare(a: RecognizedTextBlock, b: RecognizedTextBlock) -> int:
        # vertical_center is top-origin: smaller values are higher on the cover
        if abs(a.vertical_center - b.vertical_center) < tolerance:
            if a.bounding_box_height > b.bounding_box_height:
                return -1
            if a.bounding_box_height < b.bounding_box_height:
                return 1
            # Equal heights fall through to position
        if a.vertical_center < b.vertical_center:
            return -1
        if a.vertical_center > b.vertical_center:
            return 1
        return 0

    return cmp_to_key(compare)


def select_blocks(
    blocks: Sequence[RecognizedTextBlock],
    config: ScanConfig | None = None,
) -> list[RecognizedTextBlock]:
    """Drop small-print blocks and sort the rest into reading order.

    Args:
        blocks: Blocks from the text recognizer, in any order.
        config: Thresholds to use (defaults to ScanConfig()).

    Returns:
        Surviving blocks, top to bottom.
    """
    config = config or ScanConfig()
    if not blocks:
        return []

    threshold = size_threshold(blocks, config)
    significant = [b for b in blocks if b.bounding_box_height >= threshold]
    logger.debug(
        "Kept %d of %d blocks (height threshold %.4f)", len(significant), len(blocks), threshold
    )
    return sorted(significant, key=_reading_order(config.vertical_tie_tolerance))


def select_lines(
    blocks: Sequence[RecognizedTextBlock],
    config: ScanConfig | None = None,
) -> list[str]:
    """Text of the selected blocks in reading order, blank blocks omitted."""
    return [b.text for b in select_blocks(blocks, config) if b.text.strip()]


def linearize(
    blocks: Sequence[RecognizedTextBlock],
    config: ScanConfig | None = None,
) -> str:
    """Newline-joined text of the selected blocks, ready for extraction."""
    return "\n".join(select_lines(blocks, config))
