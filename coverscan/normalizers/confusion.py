"""
OCR confusion correction for cover text.

Cover typography is often stylized enough that the recognizer reads
letters as digits or as other letters (G as C, I as 1 or J, Z as 2).
The corrector applies a curated, ordered table of known misreadings.

The table is plain data (see CoverVocabulary.confusion_pairs), so new
misreadings can be added without touching this module. No entry maps
a corrected form to something else, so correction is idempotent.

Example:
    >>> from coverscan.normalizers.confusion import correct_confusions
    >>> correct_confusions("CABRIELLE ZEV1N")
    'GABRIELLE ZEVIN'
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import lru_cache

from coverscan.vocabulary import default_vocabulary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfusionCorrector:
    """
    Applies ordered (wrong, right) substitutions case-insensitively.

    Each pair is applied over the whole string before the next pair,
    so order only matters when patterns overlap.

    Attributes:
        pairs: Ordered (wrong, right) substitutions.
    """

    pairs: tuple[tuple[str, str], ...]
    _patterns: tuple[tuple[re.Pattern[str], str], ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        compiled = tuple(
            (re.compile(re.escape(wrong), re.IGNORECASE), right) for wrong, right in self.pairs
        )
        object.__setattr__(self, "_patterns", compiled)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> ConfusionCorrector:
        return cls(tuple((wrong, right) for wrong, right in pairs))

    def correct(self, text: str) -> str:
        """Return ``text`` with every known misreading replaced."""
        corrected = text
        for pattern, right in self._patterns:
            # Callable replacement: corrections are literal text, never templates
            corrected, count = pattern.subn(lambda _m, r=right: r, corrected)
            if count:
                logger.debug("Corrected %d x %r -> %r", count, pattern.pattern, right)
        return corrected

    __call__ = correct


@lru_cache(maxsize=1)
def default_corrector() -> ConfusionCorrector:
    """Corrector built from the packaged confusion table."""
    return ConfusionCorrector(default_vocabulary().confusion_pairs)


def correct_confusions(text: str) -> str:
    """Correct known OCR misreadings using the packaged table."""
    return default_corrector().correct(text)
