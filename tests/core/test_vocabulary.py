"""
Test suite for lexisplit.vocab.core module.

Covers:
- Sentinel initialization
- Add / lookup round trips and frequency bookkeeping
- Out-of-range and negative ID handling
- Word probabilities, including the zero-mass table
- Merge of two tables
- Renames via replace / replace_word and the aliases they leave behind
"""

import pytest

from lexisplit.vocab import (
    Vocabulary,
    WordExistsError,
    WordNotFoundError,
    SENTINEL_WORDS
)


class TestVocabularyBasics:
    """Test construction, add and lookups."""

    def test_new_vocabulary_has_sentinels(self):
        vocab = Vocabulary()

        assert vocab.words == ["", "-UNKNOWN-", "-ROOT-"]
        assert vocab.ids == {"": 0, "-UNKNOWN-": 1, "-ROOT-": 2}
        assert vocab.frequencies == [1, 1, 1]
        assert vocab.size() == 3
        assert vocab.total_frequency() == 3
        assert vocab.max_word_length() == 0  # sentinels don't count
        assert tuple(vocab.words) == SENTINEL_WORDS

    def test_bare_vocabulary_is_empty(self):
        vocab = Vocabulary(sentinels=False)
        assert vocab.size() == 0
        assert len(vocab) == 0
        assert vocab.total_frequency() == 0

    def test_add_and_lookup(self):
        """Mirror of the basic add/lookup walkthrough."""
        vocab = Vocabulary()
        assert vocab.word_frequency("hello") == 0
        assert vocab.id_frequency(3) == 0

        word_id = vocab.add("hello")
        assert word_id == 3
        assert vocab.words == ["", "-UNKNOWN-", "-ROOT-", "hello"]
        assert vocab.ids == {"": 0, "-UNKNOWN-": 1, "-ROOT-": 2, "hello": 3}
        assert vocab.size() == 4

        assert vocab.get_id("hello") == (3, True)
        assert vocab.get_word(3) == ("hello", True)

        assert vocab.add("hello") == 3
        assert vocab.word_frequency("hello") == 2
        assert vocab.id_frequency(3) == 2
        assert vocab.total_frequency() == 5
        assert vocab.max_word_length() == 5

        prob, ok = vocab.word_probability("hello")
        assert ok
        assert prob == pytest.approx(0.4)

    def test_add_is_stable_per_word(self):
        vocab = Vocabulary()
        ids = [vocab.add("cat") for _ in range(4)]
        assert len(set(ids)) == 1
        assert vocab.word_frequency("cat") == 4
        assert vocab.size() == 4

    def test_ids_are_dense_in_insertion_order(self):
        vocab = Vocabulary(sentinels=False)
        for w in ["b", "a", "c", "a"]:
            vocab.add(w)
        assert vocab.words == ["b", "a", "c"]
        assert [vocab.get_id(w)[0] for w in vocab.words] == [0, 1, 2]
        assert vocab.max_id == len(vocab.words) == len(vocab.frequencies)

    def test_add_then_lookup_round_trip(self):
        vocab = Vocabulary()
        for w in ["alpha", "beta", "gamma", "beta"]:
            word_id = vocab.add(w)
            assert vocab.get_id(w) == (word_id, True)
            assert vocab.get_word(word_id) == (w, True)

    def test_max_word_length_counts_codepoints(self):
        vocab = Vocabulary()
        vocab.add("café")
        vocab.add("中文")
        assert vocab.max_word_length() == 4

    def test_missing_lookups(self):
        vocab = Vocabulary()
        assert vocab.get_id("nope") == (0, False)
        assert vocab.get_word(3) == ("", False)
        assert vocab.get_word(100) == ("", False)
        assert vocab.get_word(-1) == ("", False)
        assert vocab.id_frequency(-1) == 0
        assert vocab.id_frequency(100) == 0
        assert vocab.word_probability("nope") == (0.0, False)

    def test_word_probability_zero_mass(self):
        vocab = Vocabulary(sentinels=False)
        vocab.add("x")
        vocab.frequencies[0] = 0
        vocab.total_word_freq = 0
        assert vocab.word_probability("x") == (0.0, False)

    def test_contains_len_and_repr(self):
        vocab = Vocabulary()
        vocab.add("hello")
        assert "hello" in vocab
        assert "bye" not in vocab
        assert len(vocab) == 4
        assert "size=4" in repr(vocab)

    def test_equality(self):
        a = Vocabulary()
        b = Vocabulary()
        a.add("x")
        assert a != b
        b.add("x")
        assert a == b
        assert a != "not a vocabulary"


class TestVocabularyMerge:
    """Test merging of frequency tables."""

    def test_merge_sums_frequencies(self):
        vocab = Vocabulary()
        word_id = vocab.add("hello")
        vocab.frequencies[word_id] += 4  # "hello" seen 5 times
        vocab.total_word_freq += 4

        other = Vocabulary()
        word_id = other.add("hello")
        other.frequencies[word_id] += 2  # "hello" seen 3 times
        other.total_word_freq += 2
        word_id = other.add("world")
        other.frequencies[word_id] += 1  # "world" seen 2 times
        other.total_word_freq += 1

        vocab.merge(other)

        assert vocab.word_frequency("hello") == 8
        assert vocab.word_frequency("world") == 2

    def test_merge_keeps_total_consistent(self):
        a = Vocabulary(sentinels=False)
        for w in ["x", "y", "y"]:
            a.add(w)
        b = Vocabulary(sentinels=False)
        for w in ["z", "y", "z", "z"]:
            b.add(w)

        a.merge(b)

        assert a.word_frequency("y") == 3
        assert a.word_frequency("z") == 3
        assert a.total_frequency() == 7
        assert a.total_frequency() == sum(a.frequencies)

    def test_merge_assigns_local_ids(self):
        a = Vocabulary(sentinels=False)
        a.add("x")
        b = Vocabulary(sentinels=False)
        b.add("q")
        b.add("x")

        a.merge(b)

        # "q" has ID 0 in b but lands after "x" in a
        assert a.get_id("q") == (1, True)
        assert a.get_id("x") == (0, True)
        assert a.size() == 2

    def test_merge_sentinel_tables(self):
        a = Vocabulary()
        b = Vocabulary()
        a.merge(b)
        assert a.size() == 3
        assert a.frequencies == [2, 2, 2]
        assert a.total_frequency() == 6


class TestVocabularyReplace:
    """Test renames and the aliases they leave."""

    def test_replace(self):
        vocab = Vocabulary()
        vocab.add("Hello")
        vocab.replace("Hello", "Bye")

        hello_id, ok = vocab.get_id("Hello")
        assert ok, "Hello should still have an ID"
        bye_id, ok = vocab.get_id("Bye")
        assert ok, "Bye should have an ID"
        assert hello_id == bye_id
        assert vocab.get_word(bye_id) == ("Bye", True)
        assert vocab.size() == 4

        with pytest.raises(WordExistsError, match="exists"):
            vocab.replace("Hello", "Bye")

        with pytest.raises(WordNotFoundError, match="not found"):
            vocab.replace("Foo", "bar")

    def test_replace_word(self):
        vocab = Vocabulary()
        hello_id = vocab.add("Hello")
        vocab.replace_word(hello_id, "Bye")

        assert vocab.get_id("Hello") == (hello_id, True)
        assert vocab.get_id("Bye") == (hello_id, True)

        with pytest.raises(WordExistsError):
            vocab.replace_word(hello_id, "Bye")

        with pytest.raises(WordNotFoundError, match="out of bounds"):
            vocab.replace_word(100, "bar")

        with pytest.raises(WordNotFoundError):
            vocab.replace_word(-1, "bar")

    def test_replace_keeps_frequency(self):
        vocab = Vocabulary()
        vocab.add("colour")
        vocab.add("colour")
        vocab.replace("colour", "color")
        assert vocab.word_frequency("color") == 2
        assert vocab.word_frequency("colour") == 2

    def test_replace_errors_are_catchable_as_builtin_kinds(self):
        vocab = Vocabulary()
        vocab.add("a")
        vocab.add("b")
        with pytest.raises(LookupError):
            vocab.replace("missing", "c")
        with pytest.raises(ValueError):
            vocab.replace("a", "b")
