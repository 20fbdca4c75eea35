"""
Normalizers for recognized cover text.

- ConfusionCorrector: ordered table of known OCR misreadings
- clean_line / trim_punctuation: line and word cleanup shared by the extractors
"""

from coverscan.normalizers.confusion import (
    ConfusionCorrector,
    correct_confusions,
    default_corrector,
)
from coverscan.normalizers.text import (
    capitalize_name,
    clean_line,
    split_lines,
    trim_punctuation,
)

__all__ = [
    "ConfusionCorrector",
    "correct_confusions",
    "default_corrector",
    "capitalize_name",
    "clean_line",
    "split_lines",
    "trim_punctuation",
]
