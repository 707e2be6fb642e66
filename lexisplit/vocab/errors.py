"""
Exception types raised by the vocabulary table, its builders and loaders,
and the word splitter.

Lookups (`get_id`, `get_word`, `word_probability`, ...) never raise: they
report misses with a found flag. Everything here is a recoverable condition.
"""


class VocabularyError(Exception):
    """Base class for all lexisplit vocabulary errors."""


class WordNotFoundError(VocabularyError, LookupError):
    """A replacement source (word or ID) does not exist in the table."""


class WordExistsError(VocabularyError, ValueError):
    """A replacement target is already a key of the table."""


class CorruptMappingError(VocabularyError, ValueError):
    """A word->ID mapping is not dense and contiguous, or disagrees with the word list."""


class OneGramParseError(VocabularyError, ValueError):
    """A line of a one-gram frequency file could not be parsed."""

    def __init__(self, line_no: int, line: str, reason: str):
        self.line_no = line_no
        self.line = line
        self.reason = reason
        super().__init__(f"Line {line_no}: {reason} in {line!r}")


class SerializationError(VocabularyError, ValueError):
    """Binary vocabulary data is truncated or has an unknown header."""


class DegenerateModelError(VocabularyError, ValueError):
    """The table has no frequency mass, so no probabilities can be derived."""
