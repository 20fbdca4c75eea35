"""
Text recognition adapters.

The pipeline only needs an object that turns an image into
RecognizedTextBlocks. TextRecognizer is that interface; the host
application usually supplies its own (a platform OCR service).
TesseractRecognizer is a ready-made adapter over pytesseract for
desktop use and testing against photo fixtures.
"""

from __future__ import annotations

import asyncio
import io
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from PIL import Image, UnidentifiedImageError

from coverscan.exceptions import InvalidImageError, RecognitionError
from coverscan.models import RecognizedTextBlock

logger = logging.getLogger(__name__)

ImageInput = Image.Image | bytes | str | Path


class TextRecognizer(ABC):
    """Abstract base for text-recognition engines."""

    name: str = "base"

    @abstractmethod
    async def recognize(self, image: Any) -> list[RecognizedTextBlock]:
        """Recognize text blocks in an image.

        Should raise InvalidImageError for unusable input and
        RecognitionError for engine failures.
        """
        pass


def _check_tesseract_available() -> bool:
    """Check if the Tesseract binary can be found."""
    try:
        import pytesseract

        pytesseract.get_tesseract_version()
        return True
    except ImportError:
        logger.debug("pytesseract not installed")
        return False
    except pytesseract.TesseractNotFoundError:
        logger.debug("Tesseract binary not found")
        return False


def load_image(image: ImageInput) -> Image.Image:
    """Open an image from a PIL image, raw bytes or a file path.

    Raises:
        InvalidImageError: If there is no decodable raster data.
    """
    if isinstance(image, Image.Image):
        loaded = image
    elif isinstance(image, (bytes, bytearray)):
        if not image:
            raise InvalidImageError()
        try:
            loaded = Image.open(io.BytesIO(image))
            loaded.load()
        except (UnidentifiedImageError, OSError) as e:
            raise InvalidImageError() from e
    elif isinstance(image, (str, Path)):
        try:
            loaded = Image.open(image)
            loaded.load()
        except (UnidentifiedImageError, OSError) as e:
            raise InvalidImageError() from e
    else:
        raise InvalidImageError()

    if loaded.width == 0 or loaded.height == 0:
        raise InvalidImageError()
    return loaded


@dataclass
class _LineBox:
    words: list[str]
    top: int
    bottom: int


class TesseractRecognizer(TextRecognizer):
    """
    Recognize cover text with Tesseract.

    Words from ``pytesseract.image_to_data`` are grouped into lines
    (block, paragraph, line) and each line becomes one block whose
    geometry is normalized to the image height.

    Example:
        >>> recognizer = TesseractRecognizer()
        >>> blocks = await recognizer.recognize("cover.jpg")
        >>> [b.text for b in blocks]
        ['TOMORROW, AND TOMORROW,', 'AND TOMORROW', 'GABRIELLE ZEVIN']
    """

    name = "tesseract"

    def __init__(self, lang: str = "eng", min_word_confidence: float = 0.0):
        """Initialize the recognizer.

        Args:
            lang: Tesseract language code(s).
            min_word_confidence: Words below this confidence (0-100) are dropped.
        """
        self.lang = lang
        self.min_word_confidence = min_word_confidence

    @property
    def is_available(self) -> bool:
        return _check_tesseract_available()

    async def recognize(self, image: ImageInput) -> list[RecognizedTextBlock]:
        loaded = load_image(image)
        return await asyncio.to_thread(self._recognize_sync, loaded)

    def _recognize_sync(self, image: Image.Image) -> list[RecognizedTextBlock]:
        import pytesseract

        try:
            data = pytesseract.image_to_data(
                image, lang=self.lang, output_type=pytesseract.Output.DICT
            )
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError) as e:
            raise RecognitionError(f"Tesseract failed: {e}") from e

        blocks = self.blocks_from_data(data, image.height)
        logger.debug("Tesseract found %d lines", len(blocks))
        return blocks

    def blocks_from_data(
        self, data: dict[str, list], image_height: int
    ) -> list[RecognizedTextBlock]:
        """Group image_to_data word rows into normalized line blocks."""
        if image_height <= 0:
            raise InvalidImageError()

        lines: dict[tuple[int, int, int], _LineBox] = {}
        for i, text in enumerate(data.get("text", [])):
            word = (text or "").strip()
            if not word:
                continue
            conf = float(data["conf"][i])
            if conf < 0 or conf < self.min_word_confidence:
                continue

            key = (data["block_num"][i], data["par_num"][i], data["line_num"][i])
            top = int(data["top"][i])
            bottom = top + int(data["height"][i])
            box = lines.get(key)
            if box is None:
                lines[key] = _LineBox(words=[word], top=top, bottom=bottom)
            else:
                box.words.append(word)
                box.top = min(box.top, top)
                box.bottom = max(box.bottom, bottom)

        return [
            RecognizedTextBlock(
                text=" ".join(box.words),
                bounding_box_height=(box.bottom - box.top) / image_height,
                vertical_center=(box.top + box.bottom) / 2 / image_height,
            )
            for box in lines.values()
        ]
