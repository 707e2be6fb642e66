"""
Test suite for lexisplit.vocab.validation module.
"""

import pytest

from lexisplit.vocab import (
    CorruptMappingError,
    Vocabulary,
    from_ordered_words,
    from_words,
    validate_segmentation_consistency,
    validate_vocabulary_structure
)


class TestValidateVocabularyStructure:
    """Test table consistency checks."""

    def test_valid_vocabulary(self):
        vocab = Vocabulary()
        vocab.add("hello")
        stats = validate_vocabulary_structure(vocab)
        assert stats["size"] == 4
        assert stats["aliases"] == 0
        assert stats["total_frequency"] == 4

    def test_aliases_are_counted(self):
        vocab = from_words(["Hello", "World"])
        vocab.replace("Hello", "Bye")
        stats = validate_vocabulary_structure(vocab)
        assert stats["aliases"] == 1

    def test_ordered_duplicates_are_valid(self):
        stats = validate_vocabulary_structure(from_ordered_words(["a", "b", "a"]))
        assert stats["size"] == 3

    def test_empty_vocabulary(self):
        stats = validate_vocabulary_structure(Vocabulary(sentinels=False))
        assert stats["size"] == 0
        assert stats["avg_length"] == 0.0

    def test_length_mismatch(self):
        vocab = from_words(["a", "b"])
        vocab.frequencies.pop()
        with pytest.raises(CorruptMappingError, match="frequencies"):
            validate_vocabulary_structure(vocab)

    def test_max_id_mismatch(self):
        vocab = from_words(["a", "b"])
        vocab.max_id = 5
        with pytest.raises(CorruptMappingError, match="max ID"):
            validate_vocabulary_structure(vocab)

    def test_missing_word(self):
        vocab = from_words(["a", "b"])
        del vocab.ids["b"]
        with pytest.raises(CorruptMappingError, match="missing"):
            validate_vocabulary_structure(vocab)

    def test_word_mapped_to_another_slot(self):
        vocab = from_words(["a", "b", "c"])
        vocab.ids["c"] = 0
        with pytest.raises(CorruptMappingError, match="maps to ID 0"):
            validate_vocabulary_structure(vocab)

    def test_renamed_ordered_duplicate_is_valid(self):
        vocab = from_ordered_words(["a", "b", "a"])
        vocab.replace("a", "c")
        stats = validate_vocabulary_structure(vocab)
        assert stats["size"] == 3


class TestValidateSegmentationConsistency:
    """Test the concatenation check over many inputs."""

    def test_consistent(self, corpus_vocab):
        stats = validate_segmentation_consistency(
            ["WhiteRabbit", "twoindividuals", "zzz"], corpus_vocab
        )
        assert stats["total_segments"] == 3
        assert stats["known_words"] >= 4
        assert stats["total_words"] >= stats["known_words"]

    def test_degenerate_vocabulary_propagates(self):
        from lexisplit.vocab import DegenerateModelError

        with pytest.raises(DegenerateModelError):
            validate_segmentation_consistency(["abc"], Vocabulary(sentinels=False))
