"""
Fallback author-name detection.

Used when segmentation produces no usable title, or when the search
built from it returns nothing. Two passes:

1. Score whole lines shaped like "FIRST LAST" (base 10, +5 if the
   line is all caps, +3 for exactly two words) and return the words of
   the best one.
2. Otherwise collect capitalized, name-like words one by one and
   return the first two.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from coverscan.config import ScanConfig
from coverscan.models import NameCandidate
from coverscan.normalizers.confusion import ConfusionCorrector
from coverscan.normalizers.text import (
    capitalize_name,
    is_all_caps,
    split_lines,
    split_words,
    trim_punctuation,
)
from coverscan.vocabulary import CoverVocabulary, default_vocabulary

logger = logging.getLogger(__name__)

# Scoring weights for full-name lines
BASE_SCORE = 10
ALL_CAPS_BONUS = 5
TWO_WORD_BONUS = 3

MIN_NAME_WORD_LENGTH = 3  # Words of a full-name line
MIN_SINGLE_NAME_LENGTH = 4  # Isolated words in the second pass


@dataclass
class FallbackNameFinder:
    """
    Lower-confidence pass that guesses author names from cover text.

    Attributes:
        vocabulary: Word tables (stoplist and confusion pairs).
        corrector: Corrector applied to each returned word.
        config: Limits the number of isolated words returned.

    Example:
        >>> finder = FallbackNameFinder()
        >>> finder.find("HARUKI MURAKAMI")
        ['Haruki', 'Murakami']
    """

    vocabulary: CoverVocabulary = field(default_factory=default_vocabulary)
    corrector: ConfusionCorrector | None = None
    config: ScanConfig = field(default_factory=ScanConfig)

    def __post_init__(self) -> None:
        if self.corrector is None:
            self.corrector = ConfusionCorrector(self.vocabulary.confusion_pairs)

    def candidates(self, text: str) -> list[NameCandidate]:
        """Score every line shaped like a full name, best first.

        Ties keep encounter order.
        """
        found = []
        for index, line in enumerate(split_lines(text)):
            cleaned = trim_punctuation(line).strip()
            words = split_words(cleaned)
            if not 2 <= len(words) <= 3:
                continue
            if not all(self._is_name_word(w) for w in words):
                continue

            score = BASE_SCORE
            if is_all_caps(cleaned):
                score += ALL_CAPS_BONUS
            if len(words) == 2:
                score += TWO_WORD_BONUS
            found.append(NameCandidate(text=cleaned, score=score, index=index))

        return sorted(found, key=lambda c: (-c.score, c.index))

    def find(self, text: str) -> list[str]:
        """Return 0-2 capitalized name words, or the words of the best full-name line."""
        ranked = self.candidates(text)
        if ranked:
            best = ranked[0]
            logger.debug("Fallback full-name line %r (score %d)", best.text, best.score)
            return [capitalize_name(self.corrector.correct(w)) for w in split_words(best.text)]

        names: list[str] = []
        for line in split_lines(text):
            for raw in split_words(line):
                word = trim_punctuation(raw)
                if not self._is_single_name(word):
                    continue
                corrected = self.corrector.correct(word)
                if len(corrected) < MIN_SINGLE_NAME_LENGTH or not corrected[0].isupper():
                    continue
                normalized = capitalize_name(corrected)
                if normalized not in names:
                    names.append(normalized)

        if names:
            logger.debug("Fallback isolated names %s", names[: self.config.max_fallback_names])
        return names[: self.config.max_fallback_names]

    def _is_name_word(self, word: str) -> bool:
        return (
            word.lower() not in self.vocabulary.fallback_stoplist
            and len(word) >= MIN_NAME_WORD_LENGTH
            and word.isalpha()
        )

    def _is_single_name(self, word: str) -> bool:
        if word.lower() in self.vocabulary.fallback_stoplist:
            return False
        if len(word) < MIN_SINGLE_NAME_LENGTH:
            return False
        if word.isdigit():
            return False
        # One stray non-letter (an OCR digit) is tolerated
        letters = sum(1 for ch in word if ch.isalpha())
        if letters < len(word) - 1:
            return False
        return word[0].isupper()


def find_potential_author_names(
    text: str,
    vocabulary: CoverVocabulary | None = None,
) -> list[str]:
    """Convenience function for the fallback name pass."""
    finder = FallbackNameFinder(vocabulary=vocabulary or default_vocabulary())
    return finder.find(text)
