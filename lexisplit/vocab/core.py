"""
Core vocabulary table for word segmentation.

The table is a bidirectional word <-> ID mapping with a frequency count per
ID. IDs are dense and handed out in insertion order, so the table doubles as
the lookup structure models need (they work on IDs, not strings) and as the
unigram probability model used by `viterbi_split`.
"""

import logging
from typing import Dict, List, Tuple

from .errors import WordExistsError, WordNotFoundError

# Module-level logger
logger = logging.getLogger(__name__)

NULL_WORD = ""
UNKNOWN_WORD = "-UNKNOWN-"
ROOT_WORD = "-ROOT-"
SENTINEL_WORDS = (NULL_WORD, UNKNOWN_WORD, ROOT_WORD)


class Vocabulary:
    """
    Bidirectional vocabulary with per-word frequency statistics.

    Fields:
        words: surface string per ID (index = ID)
        frequencies: observed count per ID
        ids: word -> ID; may hold more keys than `words` after `replace`
        max_id: next ID to hand out, always equal to len(words)
        total_word_freq: sum of every frequency increment ever applied
        max_word_len: longest word added so far, in codepoints

    A table is safe for a single writer. Callers that mutate it from several
    threads must serialize writes themselves (e.g. behind a threading.Lock):
    `add` touches `ids`, `words`, `frequencies` and the counters in sequence.
    """

    def __init__(self, sentinels: bool = True):
        self.words: List[str] = []
        self.frequencies: List[int] = []
        self.ids: Dict[str, int] = {}
        self.max_id = 0
        self.total_word_freq = 0
        self.max_word_len = 0

        if sentinels:
            for word in SENTINEL_WORDS:
                self.add(word)
            # sentinels don't count towards the longest word
            self.max_word_len = 0

    def add(self, word: str) -> int:
        """
        Add a word and return its ID.

        A known word only has its frequency bumped by one. An unknown word is
        appended with frequency 1 under the next free ID.
        """
        word_id = self.ids.get(word)
        if word_id is not None:
            self.frequencies[word_id] += 1
            self.total_word_freq += 1
            return word_id

        word_id = self.max_id
        self.max_id += 1
        self.ids[word] = word_id
        self.words.append(word)
        self.frequencies.append(1)
        self.total_word_freq += 1

        if len(word) > self.max_word_len:
            self.max_word_len = len(word)

        return word_id

    def get_id(self, word: str) -> Tuple[int, bool]:
        """Return (ID, found) for an exact word; no normalization is applied."""
        word_id = self.ids.get(word)
        if word_id is None:
            return 0, False
        return word_id, True

    def get_word(self, word_id: int) -> Tuple[str, bool]:
        """Return (word, found) for an ID."""
        if word_id < 0 or word_id >= self.max_id:
            return "", False
        return self.words[word_id], True

    def size(self) -> int:
        return self.max_id

    def word_frequency(self, word: str) -> int:
        """Frequency of a word, 0 if it is not in the table."""
        word_id = self.ids.get(word)
        if word_id is None:
            return 0
        return self.frequencies[word_id]

    def id_frequency(self, word_id: int) -> int:
        """Frequency of the word behind an ID, 0 if the ID is out of range."""
        if word_id < 0 or word_id >= self.max_id:
            return 0
        return self.frequencies[word_id]

    def total_frequency(self) -> int:
        """Total number of words ever counted, repeats included."""
        return self.total_word_freq

    def max_word_length(self) -> int:
        return self.max_word_len

    def word_probability(self, word: str) -> Tuple[float, bool]:
        """
        Unigram probability of a word: freq(word) / total frequency.

        Returns (0.0, False) for unknown words and for a table without any
        frequency mass.
        """
        word_id = self.ids.get(word)
        if word_id is None or self.total_word_freq <= 0:
            return 0.0, False
        return self.frequencies[word_id] / self.total_word_freq, True

    def merge(self, other: "Vocabulary") -> None:
        """
        Absorb the counts of another table into this one.

        Frequencies of shared words are summed; words new to this table get
        fresh local IDs. IDs of `other` are not preserved, so IDs of the two
        tables cannot be compared after a merge unless both were built with
        identical ID assignment beforehand.
        """
        added = 0
        for word, freq in zip(other.words, other.frequencies):
            word_id = self.ids.get(word)
            if word_id is not None:
                self.frequencies[word_id] += freq
                self.total_word_freq += freq
            else:
                word_id = self.add(word)
                self.frequencies[word_id] += freq - 1
                self.total_word_freq += freq - 1
                added += 1
        logger.debug(f"Merged {other.size()} words ({added} new), size is now {self.size()}")

    def replace(self, old: str, new: str) -> None:
        """
        Rename a word in place, keeping its ID.

        The old key stays in `ids` and keeps resolving to the same ID, so
        references held under the old name remain valid. A rename only ever
        adds an alias; it never removes one.

        Raises:
            WordNotFoundError: If `old` is not a key of the table
            WordExistsError: If `new` is already a key of the table
        """
        word_id = self.ids.get(old)
        if word_id is None:
            raise WordNotFoundError(f"Cannot replace {old!r} with {new!r}: {old!r} is not found")
        if new in self.ids:
            raise WordExistsError(f"Cannot replace {old!r} with {new!r}: {new!r} exists in the vocabulary")
        self.words[word_id] = new
        self.ids[new] = word_id
        logger.debug(f"Replaced {old!r} with {new!r} (ID {word_id})")

    def replace_word(self, word_id: int, new: str) -> None:
        """
        Rename the word stored under an ID. The previous name stays resolvable.

        Raises:
            WordNotFoundError: If the ID is out of range
            WordExistsError: If `new` is already a key of the table
        """
        if word_id < 0 or word_id >= len(self.words):
            raise WordNotFoundError(f"Cannot replace word with ID {word_id}: out of bounds")
        if new in self.ids:
            raise WordExistsError(f"Cannot replace word with ID {word_id} with {new!r}: {new!r} exists in the vocabulary")
        self.words[word_id] = new
        self.ids[new] = word_id

    def __len__(self) -> int:
        return self.max_id

    def __contains__(self, word: object) -> bool:
        return word in self.ids

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vocabulary):
            return NotImplemented
        return (
            self.words == other.words
            and self.ids == other.ids
            and self.frequencies == other.frequencies
            and self.max_id == other.max_id
            and self.total_word_freq == other.total_word_freq
            and self.max_word_len == other.max_word_len
        )

    def __repr__(self) -> str:
        return (
            f"Vocabulary(size={self.max_id}, total_frequency={self.total_word_freq}, "
            f"max_word_length={self.max_word_len})"
        )
