"""
lexisplit vocabulary package

This package contains the vocabulary table used as a unigram word model and
the Viterbi word splitter that consumes it.

Key modules:
- core: The Vocabulary table (word <-> ID, frequencies, merge, rename)
- builders: One-shot construction from word lists and ID dictionaries
- io: Binary format, one-gram files, free-text corpora, JSONL export
- segment: Viterbi word splitting
- validation: Consistency checks for tables and segmentations
"""

from .core import (
    Vocabulary,
    NULL_WORD,
    UNKNOWN_WORD,
    ROOT_WORD,
    SENTINEL_WORDS
)

from .builders import (
    IdFreq,
    from_words,
    from_ordered_words,
    from_dict,
    from_dict_with_freq,
    to_dict,
    to_dict_with_freq
)

from .segment import (
    viterbi_split,
    unknown_word_score,
    split_corpus
)

from .io import (
    encode_vocabulary,
    decode_vocabulary,
    save_vocabulary,
    load_vocabulary,
    load_one_gram,
    from_one_gram,
    from_text_corpus,
    whitespace_tokenizer,
    write_vocab_jsonl,
    read_vocab_jsonl
)

from .validation import (
    validate_vocabulary_structure,
    validate_segmentation_consistency
)

from .errors import (
    VocabularyError,
    WordNotFoundError,
    WordExistsError,
    CorruptMappingError,
    OneGramParseError,
    SerializationError,
    DegenerateModelError
)

__all__ = [
    # Table
    "Vocabulary",
    "NULL_WORD",
    "UNKNOWN_WORD",
    "ROOT_WORD",
    "SENTINEL_WORDS",

    # Builders
    "IdFreq",
    "from_words",
    "from_ordered_words",
    "from_dict",
    "from_dict_with_freq",
    "to_dict",
    "to_dict_with_freq",

    # Splitting
    "viterbi_split",
    "unknown_word_score",
    "split_corpus",

    # I/O
    "encode_vocabulary",
    "decode_vocabulary",
    "save_vocabulary",
    "load_vocabulary",
    "load_one_gram",
    "from_one_gram",
    "from_text_corpus",
    "whitespace_tokenizer",
    "write_vocab_jsonl",
    "read_vocab_jsonl",

    # Validation
    "validate_vocabulary_structure",
    "validate_segmentation_consistency",

    # Errors
    "VocabularyError",
    "WordNotFoundError",
    "WordExistsError",
    "CorruptMappingError",
    "OneGramParseError",
    "SerializationError",
    "DegenerateModelError"
]
