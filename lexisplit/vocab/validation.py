"""
Validation functions for vocabulary tables and segmentations.

These checks guard data that crosses a process boundary (decoded binary
tables, JSONL exports) and the outputs of the word splitter.
"""

from typing import Dict, List, Union

from .core import Vocabulary
from .errors import CorruptMappingError
from .segment import viterbi_split


def validate_vocabulary_structure(vocab: Vocabulary) -> Dict[str, Union[int, float]]:
    """
    Validate the internal consistency of a vocabulary table.

    `ids` may legitimately hold more keys than `words` (aliases left by
    `replace`), but every stored word must be a key, every ID must point
    inside the table, and every stored word must map back to the slot that
    holds it. The one exception is an earlier copy of a word given to
    `from_ordered_words` more than once: it maps to the last copy, which
    may have been renamed since.

    Args:
        vocab: Vocabulary to check

    Returns:
        Dictionary with vocabulary statistics

    Raises:
        CorruptMappingError: If words, frequencies, IDs and counters disagree
    """
    if len(vocab.words) != len(vocab.frequencies):
        raise CorruptMappingError(
            f"Vocabulary has {len(vocab.words)} words but {len(vocab.frequencies)} frequencies"
        )
    if vocab.max_id != len(vocab.words):
        raise CorruptMappingError(f"Vocabulary max ID {vocab.max_id} does not match {len(vocab.words)} words")

    for word, word_id in vocab.ids.items():
        if word_id < 0 or word_id >= vocab.max_id:
            raise CorruptMappingError(f"ID {word_id} of {word!r} is out of range [0, {vocab.max_id})")

    missing = [w for w in vocab.words if w not in vocab.ids]
    if missing:
        raise CorruptMappingError(f"Vocabulary words missing from the ID mapping: {missing[:10]}")

    for i, word in enumerate(vocab.words):
        word_id = vocab.ids[word]
        if vocab.words[word_id] == word:
            continue
        # An earlier copy of an ordered duplicate whose last copy was renamed
        if word_id > i and vocab.ids.get(vocab.words[word_id]) == word_id:
            continue
        raise CorruptMappingError(
            f"Word {word!r} at ID {i} maps to ID {word_id}, which holds {vocab.words[word_id]!r}"
        )

    return {
        "size": vocab.max_id,
        "aliases": len(vocab.ids) - len(set(vocab.words)),
        "total_frequency": vocab.total_word_freq,
        "avg_length": sum(len(w) for w in vocab.words) / len(vocab.words) if vocab.words else 0.0,
    }


def validate_segmentation_consistency(texts: List[str], vocab: Vocabulary) -> Dict[str, int]:
    """
    Check that every segmentation concatenates back to the lowercased input.

    Args:
        texts: Strings to segment
        vocab: Vocabulary used as the probability model

    Returns:
        Dictionary with validation statistics

    Raises:
        ValueError: If a segmentation does not reconstruct its input
    """
    stats = {
        "total_segments": len(texts),
        "total_words": 0,
        "known_words": 0,
    }

    for i, x in enumerate(texts):
        words = viterbi_split(x, vocab)
        reconstructed = "".join(words)
        if reconstructed != x.lower():
            raise ValueError(f"Segmentation failed to reconstruct string at index {i}: {x!r} != {reconstructed!r}")
        stats["total_words"] += len(words)
        stats["known_words"] += sum(1 for w in words if w in vocab)

    return stats
