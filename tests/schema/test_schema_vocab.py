"""
Test suite for lexisplit.schema.vocab module.

Tests vocabulary schemas including:
- VocabEntry validation and JSON round trips
- VocabStats built from a table and its summary
- SplitRecord defaults
"""

import json

import pytest
from pydantic import ValidationError

from lexisplit.schema import SplitRecord, VocabEntry, VocabStats
from lexisplit.vocab import Vocabulary, from_words


class TestVocabEntry:
    """Test VocabEntry schema."""

    def test_valid_creation(self):
        entry = VocabEntry(word="rabbit", id=3, freq=2)
        assert entry.word == "rabbit"
        assert entry.id == 3
        assert entry.freq == 2

    def test_negative_id_rejected(self):
        with pytest.raises(ValidationError, match="greater than or equal to 0"):
            VocabEntry(word="x", id=-1, freq=1)

    def test_empty_word_allowed(self):
        # the NULL sentinel is an empty string
        assert VocabEntry(word="", id=0, freq=1).word == ""

    def test_json_round_trip(self):
        entry = VocabEntry(word="中文", id=7, freq=12)
        data = json.loads(entry.model_dump_json())
        assert data == {"word": "中文", "id": 7, "freq": 12}
        assert VocabEntry.model_validate(data) == entry

    def test_missing_field(self):
        with pytest.raises(ValidationError):
            VocabEntry(word="x", id=0)


class TestVocabStats:
    """Test VocabStats schema."""

    def test_from_vocabulary(self):
        vocab = Vocabulary()
        for w in ["white", "rabbit", "white"]:
            vocab.add(w)

        stats = VocabStats.from_vocabulary(vocab)

        assert stats.size == 5
        assert stats.total_frequency == 6
        assert stats.max_word_length == 6
        assert stats.aliases == 0

    def test_from_vocabulary_counts_aliases(self):
        vocab = from_words(["Hello"])
        vocab.replace("Hello", "Bye")
        assert VocabStats.from_vocabulary(vocab).aliases == 1

    def test_summary(self):
        stats = VocabStats(size=1234, total_frequency=56789, max_word_length=11)
        summary = stats.summary()
        assert "VOCABULARY SUMMARY" in summary
        assert "1,234 words" in summary
        assert "56,789" in summary
        assert "aliases" not in summary

        stats = VocabStats(size=3, total_frequency=3, max_word_length=2, aliases=2)
        assert "Renamed aliases: 2" in stats.summary()

    def test_negative_size_rejected(self):
        with pytest.raises(ValidationError):
            VocabStats(size=-1, total_frequency=0, max_word_length=0)


class TestSplitRecord:
    """Test SplitRecord schema."""

    def test_defaults(self):
        rec = SplitRecord(text="abc")
        assert rec.words == []

    def test_json(self):
        rec = SplitRecord(text="WhiteRabbit", words=["white", "rabbit"])
        assert json.loads(rec.model_dump_json()) == {"text": "WhiteRabbit", "words": ["white", "rabbit"]}
