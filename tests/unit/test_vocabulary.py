"""Tests for the cover vocabulary loader."""

import dataclasses

import pytest

from coverscan import ConfigurationError, CoverScanPipeline, ScanConfig
from coverscan.vocabulary import CoverVocabulary, load_vocabulary, parse_vocabulary


class TestDefaultVocabulary:
    """Tests for the packaged word tables."""

    def test_tables_loaded(self, vocabulary):
        """Every table has entries."""
        for f in dataclasses.fields(CoverVocabulary):
            assert getattr(vocabulary, f.name), f.name

    def test_known_entries(self, vocabulary):
        """Spot-check entries the heuristics depend on."""
        assert ("CABRIELLE", "GABRIELLE") in vocabulary.confusion_pairs
        assert "#1" in vocabulary.exact_exclusions
        assert "a novel" in vocabulary.exact_exclusions
        assert "new york times" in vocabulary.contains_exclusions
        assert "the" in vocabulary.title_stopwords
        assert "and" not in vocabulary.title_stopwords
        assert "between" in vocabulary.not_author_words
        assert "national bestseller" in vocabulary.not_author_phrases
        assert "york" in vocabulary.fallback_stoplist

    def test_entries_lowercase(self, vocabulary):
        """Word sets are stored lowercase."""
        assert all(w == w.lower() for w in vocabulary.exact_exclusions)
        assert all(w == w.lower() for w in vocabulary.name_part_stoplist)

    def test_cached(self, vocabulary):
        """load_vocabulary() without a path returns the cached defaults."""
        assert load_vocabulary() is vocabulary

    @pytest.mark.parametrize(
        "table", ["title_stopwords", "not_author_words", "fallback_stoplist"]
    )
    def test_on_is_a_word(self, vocabulary, table):
        """'on' is kept as a word, not read as a YAML boolean."""
        words = getattr(vocabulary, table)
        assert "on" in words
        assert "true" not in words

    def test_frozen(self, vocabulary):
        """Vocabularies cannot be modified in place."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            vocabulary.exact_exclusions = frozenset()


class TestCustomVocabulary:
    """Tests for extending the defaults with a YAML file."""

    def test_extends_defaults(self, tmp_path, vocabulary):
        """Custom entries are added; defaults stay."""
        path = tmp_path / "covers.yaml"
        path.write_text(
            "confusion_pairs:\n"
            "  - [MURAKAMl, MURAKAMI]\n"
            "exact_exclusions:\n"
            "  - Book Club Pick\n"
            "contains_exclusions:\n"
            "  - now a major motion picture\n"
            "  - praise for\n",
            encoding="utf-8",
        )

        custom = load_vocabulary(path)

        assert custom.confusion_pairs[-1] == ("MURAKAMl", "MURAKAMI")
        assert custom.confusion_pairs[:-1] == vocabulary.confusion_pairs
        assert "book club pick" in custom.exact_exclusions
        assert vocabulary.exact_exclusions < custom.exact_exclusions
        assert custom.contains_exclusions.count("praise for") == 1
        assert custom.contains_exclusions[-1] == "now a major motion picture"

    def test_empty_file(self, tmp_path, vocabulary):
        """An empty file changes nothing."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_vocabulary(path) == vocabulary

    def test_missing_file(self, tmp_path):
        """A missing file is a configuration error."""
        with pytest.raises(ConfigurationError, match="cannot read"):
            load_vocabulary(tmp_path / "missing.yaml")

    def test_bare_yaml_boolean_rejected(self, tmp_path):
        """An unquoted on/no in a word list is reported, not stored as 'true'."""
        path = tmp_path / "covers.yaml"
        path.write_text("title_stopwords:\n  - on\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="not a string"):
            load_vocabulary(path)

    def test_invalid_yaml(self, tmp_path):
        """Unparseable YAML is a configuration error."""
        path = tmp_path / "bad.yaml"
        path.write_text("exact_exclusions: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="invalid YAML"):
            load_vocabulary(path)

    @pytest.mark.parametrize(
        "data, message",
        [
            (["a", "b"], "top level must be a mapping"),
            ({"stopwords": ["x"]}, "unknown keys"),
            ({"exact_exclusions": "times"}, "must be a list"),
            ({"confusion_pairs": [["ZEV1N"]]}, "must be \\[wrong, right\\]"),
            ({"confusion_pairs": [["", "X"]]}, "empty confusion pattern"),
            ({"title_stopwords": ["the", True]}, "not a string"),
        ],
    )
    def test_malformed(self, data, message):
        """Malformed mappings are rejected with the offending key."""
        with pytest.raises(ConfigurationError, match=message):
            parse_vocabulary(data, "custom.yaml")

    def test_pipeline_uses_configured_file(self, tmp_path):
        """ScanConfig.vocabulary_path reaches the pipeline's components."""
        path = tmp_path / "covers.yaml"
        path.write_text("confusion_pairs:\n  - [MURAKAMl, MURAKAMI]\n", encoding="utf-8")
        config = ScanConfig(vocabulary_path=path)

        pipeline = CoverScanPipeline(recognizer=None, search_service=None, config=config)
        result = pipeline.interpret_text("HARUKI MURAKAMl")

        assert result.author == "HARUKI MURAKAMI"
        assert pipeline.fallback.find("HARUKI MURAKAMl") == ["Haruki", "Murakami"]

    def test_merged_with(self):
        """merged_with keeps pair order and de-duplicates phrases."""
        base = CoverVocabulary(confusion_pairs=(("A1", "AI"),), contains_exclusions=("x",))
        extra = CoverVocabulary(confusion_pairs=(("B1", "BI"),), contains_exclusions=("x", "y"))

        merged = base.merged_with(extra)

        assert merged.confusion_pairs == (("A1", "AI"), ("B1", "BI"))
        assert merged.contains_exclusions == ("x", "y")
