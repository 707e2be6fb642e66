"""
Alternate ways of populating a Vocabulary in one shot.

None of these add the sentinel words; a table built here holds exactly the
words it was given.
"""

from typing import Dict, Iterable, List, Mapping, NamedTuple, Sequence, Tuple

from .core import Vocabulary
from .errors import CorruptMappingError


class IdFreq(NamedTuple):
    """ID and frequency of a word, as exported by `to_dict_with_freq`."""
    id: int
    freq: int


def from_words(words: Iterable[str]) -> Vocabulary:
    """
    Build a vocabulary from a word list that may contain repeats.

    Distinct words get IDs in sorted string order; frequencies are then
    accumulated by replaying the original list.

    Args:
        words: Word list, repeats allowed

    Returns:
        Vocabulary with sorted IDs and per-word counts
    """
    words = list(words)
    vocab = Vocabulary(sentinels=False)

    for i, w in enumerate(sorted(set(words))):
        vocab.words.append(w)
        vocab.ids[w] = i
        vocab.max_word_len = max(vocab.max_word_len, len(w))

    vocab.frequencies = [0] * len(vocab.words)
    for w in words:
        vocab.frequencies[vocab.ids[w]] += 1

    vocab.max_id = len(vocab.words)
    vocab.total_word_freq = len(words)
    return vocab


def from_ordered_words(words: Sequence[str]) -> Vocabulary:
    """
    Build a vocabulary whose IDs follow the given order.

    Every entry gets its own slot with frequency 1, duplicates included; the
    word->ID mapping of a duplicated word points at its last position.
    """
    vocab = Vocabulary(sentinels=False)
    vocab.words = list(words)
    vocab.frequencies = [1] * len(vocab.words)
    for i, w in enumerate(vocab.words):
        vocab.ids[w] = i
        vocab.max_word_len = max(vocab.max_word_len, len(w))

    vocab.max_id = len(vocab.words)
    vocab.total_word_freq = len(vocab.words)
    return vocab


def _from_sorted_entries(entries: List[Tuple[str, int, int]]) -> Vocabulary:
    entries.sort(key=lambda e: e[1])

    vocab = Vocabulary(sentinels=False)
    for i, (word, word_id, freq) in enumerate(entries):
        if word_id != i:
            raise CorruptMappingError(
                f"Expected ID {i} at position {i} after sorting, got {word_id} for {word!r}"
            )
        vocab.words.append(word)
        vocab.frequencies.append(freq)
        vocab.ids[word] = i
        vocab.total_word_freq += freq
        vocab.max_word_len = max(vocab.max_word_len, len(word))

    vocab.max_id = len(vocab.words)
    return vocab


def from_dict(d: Mapping[str, int]) -> Vocabulary:
    """
    Build a vocabulary from an externally supplied word -> ID mapping.

    IDs must be exactly 0..len(d)-1. Every frequency is reset to 1, so the
    total frequency equals the vocabulary size.

    Raises:
        CorruptMappingError: If the IDs have gaps, duplicates or do not start at 0
    """
    return _from_sorted_entries([(word, word_id, 1) for word, word_id in d.items()])


def from_dict_with_freq(d: Mapping[str, Tuple[int, int]]) -> Vocabulary:
    """
    Build a vocabulary from a word -> (ID, frequency) mapping.

    This is the lossless counterpart of `to_dict_with_freq`.

    Raises:
        CorruptMappingError: If the IDs have gaps, duplicates or do not start at 0
    """
    entries = []
    for word, (word_id, freq) in d.items():
        entries.append((word, word_id, freq))
    return _from_sorted_entries(entries)


def to_dict(vocab: Vocabulary) -> Dict[str, int]:
    """Copy of the word -> ID mapping, aliases left by `replace` included."""
    return dict(vocab.ids)


def to_dict_with_freq(vocab: Vocabulary) -> Dict[str, IdFreq]:
    """Snapshot of every stored word with its ID and frequency."""
    return {w: IdFreq(i, vocab.frequencies[i]) for i, w in enumerate(vocab.words)}
