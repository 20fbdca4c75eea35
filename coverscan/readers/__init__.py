"""Text recognition adapters and reading-order selection.

The recognizer is an external collaborator; TesseractRecognizer is a
ready-made adapter. The selector turns its blocks into ordered lines.
"""

from coverscan.readers.recognizer import (
    TesseractRecognizer,
    TextRecognizer,
    load_image,
)
from coverscan.readers.selector import (
    linearize,
    select_blocks,
    select_lines,
    size_threshold,
)

__all__ = [
    # Recognizers
    "TextRecognizer",
    "TesseractRecognizer",
    "load_image",
    # Selection
    "select_blocks",
    "select_lines",
    "linearize",
    "size_threshold",
]
