"""
Author detection strategies.

Each strategy looks at the cleaned cover lines and proposes an author,
together with the lines it consumed. The segmenter tries them in order
and keeps the first hit:

- SingleNamePairStrategy: exactly two one-word name lines anywhere
  (covers that stack FIRST / LAST on separate lines)
- AdjacentNamePartsStrategy: more than two such lines, take the first
  adjacent pair
- FullNameLineStrategy: first line shaped like "FIRST LAST"
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from coverscan.normalizers.text import is_all_caps, split_words, trim_punctuation
from coverscan.vocabulary import CoverVocabulary


@dataclass(frozen=True)
class AuthorMatch:
    """An author proposed by a strategy."""

    author: str
    line_indices: frozenset[int]  # Lines to keep out of the title pool
    strategy: str


def looks_like_single_name_part(text: str, vocabulary: CoverVocabulary) -> bool:
    """True for a line holding one capitalized, name-like word ("ZEVIN", "Murakami")."""
    words = split_words(text)
    if len(words) != 1:
        return False

    word = words[0]
    if not word.isalpha() or len(word) < 3:
        return False

    is_title_case = word[0].isupper() and len(word) >= 4
    if not (is_all_caps(word) or is_title_case):
        return False

    return word.lower() not in vocabulary.name_part_stoplist


def looks_like_author_name(text: str, vocabulary: CoverVocabulary) -> bool:
    """True for a 2-4 word line shaped like a personal name."""
    words = split_words(text)
    if not 2 <= len(words) <= 4:
        return False

    if text.lower() in vocabulary.not_author_phrases:
        return False

    all_letters = True
    has_caps_word = False
    for word in words:
        clean = trim_punctuation(word)
        if clean.lower() in vocabulary.not_author_words:
            return False
        if not clean.isalpha():
            all_letters = False
        if len(clean) < 2:
            return False
        if is_all_caps(clean) and len(clean) > 2:
            has_caps_word = True

    if has_caps_word and all_letters:
        return True
    return all_letters and 2 <= len(words) <= 3


class AuthorStrategy(ABC):
    """Abstract base for author detection strategies."""

    name: str = "base"

    def __init__(self, vocabulary: CoverVocabulary):
        self.vocabulary = vocabulary

    @abstractmethod
    def detect(self, lines: Sequence[str]) -> AuthorMatch | None:
        """Propose an author from cleaned lines.

        Should return None when the strategy does not apply
        (the segmenter then tries the next one).
        """
        pass

    def _name_part_indices(self, lines: Sequence[str]) -> list[int]:
        return [
            i for i, line in enumerate(lines) if looks_like_single_name_part(line, self.vocabulary)
        ]


class SingleNamePairStrategy(AuthorStrategy):
    """Exactly two single-word name lines: join them in encounter order."""

    name = "single_name_pair"

    def detect(self, lines: Sequence[str]) -> AuthorMatch | None:
        indices = self._name_part_indices(lines)
        if len(indices) != 2:
            return None
        first, second = indices
        return AuthorMatch(
            author=f"{lines[first]} {lines[second]}",
            line_indices=frozenset(indices),
            strategy=self.name,
        )


class AdjacentNamePartsStrategy(AuthorStrategy):
    """More than two single-word name lines: first adjacent pair wins."""

    name = "adjacent_name_parts"

    def detect(self, lines: Sequence[str]) -> AuthorMatch | None:
        indices = self._name_part_indices(lines)
        if len(indices) <= 2:
            return None

        parts = set(indices)
        for i in indices:
            if i + 1 in parts:
                return AuthorMatch(
                    author=f"{lines[i]} {lines[i + 1]}",
                    line_indices=frozenset((i, i + 1)),
                    strategy=self.name,
                )
        return None


class FullNameLineStrategy(AuthorStrategy):
    """First line that looks like a full author name."""

    name = "full_name_line"

    def detect(self, lines: Sequence[str]) -> AuthorMatch | None:
        for i, line in enumerate(lines):
            if looks_like_author_name(line, self.vocabulary):
                return AuthorMatch(author=line, line_indices=frozenset((i,)), strategy=self.name)
        return None


def default_strategies(vocabulary: CoverVocabulary) -> list[AuthorStrategy]:
    """The standard cascade, in priority order."""
    return [
        SingleNamePairStrategy(vocabulary),
        AdjacentNamePartsStrategy(vocabulary),
        FullNameLineStrategy(vocabulary),
    ]
