"""
Word tables used by the cover heuristics.

The tables are curated against real cover photos: marketing phrases,
stopwords, name stoplists and known OCR misreadings. They ship as
``coverscan/data/vocabulary.yaml``, are loaded once and cached, and are
passed into each component as an immutable CoverVocabulary.

Example:
    >>> from coverscan.vocabulary import load_vocabulary
    >>> vocab = load_vocabulary("my_covers.yaml")  # extends the defaults
    >>> "bestseller" in vocab.exact_exclusions
    True
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from coverscan.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_VOCABULARY_RESOURCE = "vocabulary.yaml"


@dataclass(frozen=True)
class CoverVocabulary:
    """Immutable word tables for cover interpretation.

    All word sets hold lowercase entries.

    Attributes:
        confusion_pairs: Ordered (wrong, right) OCR substitutions.
        exact_exclusions: Marketing lines/words dropped when matched exactly.
        contains_exclusions: A line containing any of these is dropped.
        title_stopwords: Filler dropped from the search query.
        name_part_stoplist: Single words that are never half an author name.
        not_author_words: Words that rule out an author-name line.
        not_author_phrases: Name-shaped lines that are not names.
        fallback_stoplist: Words the fallback name finder ignores.
    """

    confusion_pairs: tuple[tuple[str, str], ...] = ()
    exact_exclusions: frozenset[str] = frozenset()
    contains_exclusions: tuple[str, ...] = ()
    title_stopwords: frozenset[str] = frozenset()
    name_part_stoplist: frozenset[str] = frozenset()
    not_author_words: frozenset[str] = frozenset()
    not_author_phrases: frozenset[str] = frozenset()
    fallback_stoplist: frozenset[str] = frozenset()

    def merged_with(self, other: CoverVocabulary) -> CoverVocabulary:
        """Return a vocabulary with ``other``'s entries added to this one's."""
        contains = self.contains_exclusions + tuple(
            p for p in other.contains_exclusions if p not in self.contains_exclusions
        )
        return CoverVocabulary(
            confusion_pairs=self.confusion_pairs + other.confusion_pairs,
            exact_exclusions=self.exact_exclusions | other.exact_exclusions,
            contains_exclusions=contains,
            title_stopwords=self.title_stopwords | other.title_stopwords,
            name_part_stoplist=self.name_part_stoplist | other.name_part_stoplist,
            not_author_words=self.not_author_words | other.not_author_words,
            not_author_phrases=self.not_author_phrases | other.not_author_phrases,
            fallback_stoplist=self.fallback_stoplist | other.fallback_stoplist,
        )


def _word_list(data: dict[str, Any], key: str, source: str) -> list[str]:
    value = data.get(key, [])
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigurationError(f"Vocabulary file {source}: {key!r} must be a list")

    words = []
    for item in value:
        # YAML 1.1 reads bare on/off/yes/no as booleans; such words must be quoted
        if not isinstance(item, str):
            raise ConfigurationError(
                f"Vocabulary file {source}: {key!r} entry {item!r} is not a string "
                "(quote words such as \"on\" or \"no\")"
            )
        word = item.strip().lower()
        if word:
            words.append(word)
    return words


def _confusion_pairs(data: dict[str, Any], source: str) -> tuple[tuple[str, str], ...]:
    value = data.get("confusion_pairs", []) or []
    if not isinstance(value, list):
        raise ConfigurationError(f"Vocabulary file {source}: 'confusion_pairs' must be a list")

    pairs = []
    for entry in value:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ConfigurationError(
                f"Vocabulary file {source}: confusion pair {entry!r} must be [wrong, right]"
            )
        wrong, right = str(entry[0]), str(entry[1])
        if not wrong:
            raise ConfigurationError(f"Vocabulary file {source}: empty confusion pattern")
        pairs.append((wrong, right))
    return tuple(pairs)


def parse_vocabulary(data: dict[str, Any], source: str = "<memory>") -> CoverVocabulary:
    """Build a CoverVocabulary from a parsed YAML mapping.

    Args:
        data: Mapping with the keys of CoverVocabulary.
        source: Name used in error messages.

    Returns:
        The vocabulary described by ``data``.

    Raises:
        ConfigurationError: If ``data`` has unknown keys or malformed entries.
    """
    if not isinstance(data, dict):
        raise ConfigurationError(f"Vocabulary file {source}: top level must be a mapping")

    known = {f.name for f in fields(CoverVocabulary)}
    unknown = set(data) - known
    if unknown:
        raise ConfigurationError(
            f"Vocabulary file {source}: unknown keys {sorted(unknown)}"
        )

    contains: list[str] = []
    for phrase in _word_list(data, "contains_exclusions", source):
        if phrase not in contains:
            contains.append(phrase)

    return CoverVocabulary(
        confusion_pairs=_confusion_pairs(data, source),
        exact_exclusions=frozenset(_word_list(data, "exact_exclusions", source)),
        contains_exclusions=tuple(contains),
        title_stopwords=frozenset(_word_list(data, "title_stopwords", source)),
        name_part_stoplist=frozenset(_word_list(data, "name_part_stoplist", source)),
        not_author_words=frozenset(_word_list(data, "not_author_words", source)),
        not_author_phrases=frozenset(_word_list(data, "not_author_phrases", source)),
        fallback_stoplist=frozenset(_word_list(data, "fallback_stoplist", source)),
    )


def _read_yaml(text: str, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Vocabulary file {source}: invalid YAML: {e}") from e
    return data or {}


@lru_cache(maxsize=1)
def default_vocabulary() -> CoverVocabulary:
    """Return the packaged vocabulary (loaded once per process)."""
    resource = resources.files("coverscan") / "data" / DEFAULT_VOCABULARY_RESOURCE
    text = resource.read_text(encoding="utf-8")
    source = DEFAULT_VOCABULARY_RESOURCE
    vocab = parse_vocabulary(_read_yaml(text, source), source)
    logger.debug(
        "Loaded default vocabulary: %d confusion pairs, %d exact exclusions",
        len(vocab.confusion_pairs),
        len(vocab.exact_exclusions),
    )
    return vocab


def load_vocabulary(path: str | Path | None = None) -> CoverVocabulary:
    """Load the vocabulary, optionally extended by a custom YAML file.

    Args:
        path: Custom vocabulary file. Its entries are added to the defaults.

    Returns:
        The default vocabulary, or the defaults merged with ``path``.

    Raises:
        ConfigurationError: If the file is missing or malformed.
    """
    base = default_vocabulary()
    if path is None:
        return base

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Vocabulary file {path}: cannot read: {e}") from e

    custom = parse_vocabulary(_read_yaml(text, str(path)), str(path))
    logger.info("Extending default vocabulary with %s", path)
    return base.merged_with(custom)
