"""
Maximum-likelihood word splitting over a vocabulary table.

`viterbi_split` turns an unbroken string such as "whiterabbit" into its most
probable sequence of words, scoring each candidate word with its unigram
probability from a `Vocabulary` and each unknown span with a length-penalized
smoothing score.
"""

import logging
import math
from typing import Iterable, List

from .core import Vocabulary
from .errors import DegenerateModelError

# Module-level logger
logger = logging.getLogger(__name__)

# Smallest positive subnormal double; the running best starts just below zero.
_SMALLEST_NONZERO = 5e-324


def unknown_word_score(vocab: Vocabulary, length_term: int) -> float:
    """
    Smoothing score for a span that is not in the vocabulary.

        score = (ln(1 / total_frequency) - max_word_length - 1) * length_term

    This is not a probability: it is zero for single codepoints and grows
    more negative with span length, so long unknown spans lose against
    known words.

    Raises:
        DegenerateModelError: If the vocabulary has no frequency mass
    """
    total = vocab.total_frequency()
    if total <= 0:
        raise DegenerateModelError(f"Cannot score unknown words: total frequency is {total}")
    return (math.log(1.0 / total) - vocab.max_word_length() - 1) * length_term


def viterbi_split(text: str, vocab: Vocabulary) -> List[str]:
    """
    Split a string into its most probable sequence of words.

    The input is lowercased first. best[e] holds the best joint score of the
    prefix ending at codepoint boundary e (best[0] = 1); for each e every
    start r < e is tried, with no window on the span length. Candidate score
    is best[r] times the word probability of text[r:e], or times the
    smoothing score when the span is unknown. Only a strictly greater score
    replaces the current best, so among ties the leftmost start wins.

    Args:
        text: Input string, e.g. "TheBestWayToExplainIt"
        vocab: Vocabulary used as the unigram probability model

    Returns:
        Lowercased pieces whose concatenation is text.lower()

    Raises:
        DegenerateModelError: If the vocabulary has no frequency mass
    """
    total = vocab.total_frequency()
    if total <= 0:
        raise DegenerateModelError(f"Cannot split {text!r}: vocabulary total frequency is {total}")

    s = text.lower()
    n = len(s)
    unknown_base = unknown_word_score(vocab, 1)

    best = [1.0]
    back = [0]

    for end in range(1, n + 1):
        best_score = -_SMALLEST_NONZERO
        best_start = None
        last = end - 1
        for start in range(end):
            p, ok = vocab.word_probability(s[start:end])
            if not ok:
                p = unknown_base * (last - start)
            score = best[start] * p
            if score > best_score:
                best_score = score
                best_start = start
        best.append(best_score)
        back.append(best_start)

    words = []
    i = n
    while i > 0:
        start = back[i]
        words.append(s[start:i])
        i = start
    words.reverse()
    return words


def split_corpus(texts: Iterable[str], vocab: Vocabulary) -> List[List[str]]:
    """
    Split every string of a corpus.

    Args:
        texts: Strings to split
        vocab: Vocabulary used as the unigram probability model

    Returns:
        One word list per input string
    """
    texts = list(texts)
    logger.info(f"Splitting {len(texts):,} strings against {vocab.size():,} words")

    results = []
    progress_interval = max(1, len(texts) // 20)  # Log every 5% of progress
    for i, x in enumerate(texts):
        if i % progress_interval == 0 or i == len(texts) - 1:
            progress_pct = (i + 1) / len(texts) * 100
            logger.info(f"  Split progress: {i+1:,}/{len(texts):,} strings ({progress_pct:.1f}%)")
        results.append(viterbi_split(x, vocab))

    total_words = sum(len(words) for words in results)
    logger.info(f"Split complete: {total_words:,} words from {len(texts):,} strings")
    return results
