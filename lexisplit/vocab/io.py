"""
Loading and saving vocabulary tables.

Covers the binary table format, one-gram frequency files (word<TAB>count),
free-text corpora with pluggable tokenization, and the schema-backed JSONL
export.

Binary layout (little-endian), fields in this order:

    magic b"LXSV", uint32 version
    words        uint32 count, then per word: uint32 byte length + UTF-8
    ids          uint32 count, then per entry: string (as above) + int64 ID
    frequencies  uint32 count, then int64 per entry
    max_id, total_frequency, max_word_length   int64 each
"""

import json
import logging
import re
import struct
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple, Union

from pydantic import ValidationError

from lexisplit.schema.vocab import VocabEntry
from .builders import from_dict_with_freq, from_words
from .core import Vocabulary
from .errors import OneGramParseError, SerializationError
from .validation import validate_vocabulary_structure

# Module-level logger
logger = logging.getLogger(__name__)

MAGIC = b"LXSV"
VERSION = 1

_U32 = struct.Struct("<I")
_I64 = struct.Struct("<q")
_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1

_COUNT_RE = re.compile(r"[+-]?[0-9]+")


def whitespace_tokenizer(line: str) -> List[str]:
    """Default tokenizer: trim line-end characters and split on whitespace."""
    return line.strip("\r\n").split()


def _identity(token: str) -> str:
    return token


def _pack_str(buf: bytearray, s: str) -> None:
    data = s.encode("utf-8")
    buf += _U32.pack(len(data))
    buf += data


def _pack_int(buf: bytearray, st: struct.Struct, value: int, field: str) -> None:
    try:
        buf += st.pack(value)
    except struct.error as e:
        raise SerializationError(f"Cannot encode {field} {value!r}: {e}") from e


def encode_vocabulary(vocab: Vocabulary) -> bytes:
    """
    Encode a vocabulary table into its binary form.

    Raises:
        SerializationError: If a count, ID or frequency does not fit its field
    """
    buf = bytearray(MAGIC)
    buf += _U32.pack(VERSION)

    _pack_int(buf, _U32, len(vocab.words), "word count")
    for w in vocab.words:
        _pack_str(buf, w)

    _pack_int(buf, _U32, len(vocab.ids), "ID mapping size")
    for w, word_id in vocab.ids.items():
        _pack_str(buf, w)
        _pack_int(buf, _I64, word_id, f"ID of {w!r}")

    _pack_int(buf, _U32, len(vocab.frequencies), "frequency count")
    for word_id, freq in enumerate(vocab.frequencies):
        _pack_int(buf, _I64, freq, f"frequency of ID {word_id}")

    _pack_int(buf, _I64, vocab.max_id, "max ID")
    _pack_int(buf, _I64, vocab.total_word_freq, "total frequency")
    _pack_int(buf, _I64, vocab.max_word_len, "max word length")
    return bytes(buf)


class _Reader:
    def __init__(self, data: bytes):
        self.data = data
        self.pos = 0

    def unpack(self, st: struct.Struct) -> int:
        end = self.pos + st.size
        if end > len(self.data):
            raise SerializationError(f"Truncated vocabulary data at byte {self.pos}")
        (value,) = st.unpack_from(self.data, self.pos)
        self.pos = end
        return value

    def read_str(self) -> str:
        length = self.unpack(_U32)
        end = self.pos + length
        if end > len(self.data):
            raise SerializationError(f"Truncated string of {length} bytes at byte {self.pos}")
        try:
            s = self.data[self.pos:end].decode("utf-8")
        except UnicodeDecodeError as e:
            raise SerializationError(f"Invalid UTF-8 in string at byte {self.pos}: {e}") from e
        self.pos = end
        return s


def decode_vocabulary(data: bytes) -> Vocabulary:
    """
    Decode a vocabulary table from its binary form.

    `ids` is read as stored, never re-derived from `words`; the two are then
    checked against each other by `validate_vocabulary_structure`.

    Raises:
        SerializationError: If the header is wrong or the data is truncated
        CorruptMappingError: If the decoded fields disagree
    """
    if data[:len(MAGIC)] != MAGIC:
        raise SerializationError(f"Bad magic {bytes(data[:len(MAGIC)])!r}, expected {MAGIC!r}")
    r = _Reader(data)
    r.pos = len(MAGIC)
    version = r.unpack(_U32)
    if version != VERSION:
        raise SerializationError(f"Unsupported vocabulary format version {version}")

    vocab = Vocabulary(sentinels=False)
    vocab.words = [r.read_str() for _ in range(r.unpack(_U32))]
    for _ in range(r.unpack(_U32)):
        w = r.read_str()
        vocab.ids[w] = r.unpack(_I64)
    vocab.frequencies = [r.unpack(_I64) for _ in range(r.unpack(_U32))]
    vocab.max_id = r.unpack(_I64)
    vocab.total_word_freq = r.unpack(_I64)
    vocab.max_word_len = r.unpack(_I64)

    if r.pos != len(data):
        raise SerializationError(f"{len(data) - r.pos} trailing bytes after vocabulary data")

    validate_vocabulary_structure(vocab)
    return vocab


def save_vocabulary(vocab: Vocabulary, path: Union[str, Path]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(encode_vocabulary(vocab))
    logger.debug(f"Saved vocabulary of {vocab.size():,} words to {path}")


def load_vocabulary(path: Union[str, Path]) -> Vocabulary:
    vocab = decode_vocabulary(Path(path).read_bytes())
    logger.debug(f"Loaded vocabulary of {vocab.size():,} words from {path}")
    return vocab


def _parse_one_gram(lines: Iterable[str]) -> List[Tuple[str, int]]:
    records = []
    for line_no, raw in enumerate(lines, 1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        fields = line.split("\t")
        if len(fields) < 2:
            raise OneGramParseError(line_no, line, "missing count field")
        # int() alone would also take "1_000", padded and non-ASCII digits
        if not _COUNT_RE.fullmatch(fields[1]):
            raise OneGramParseError(line_no, line, f"invalid count {fields[1]!r}")
        count = int(fields[1])
        if not _I64_MIN <= count <= _I64_MAX:
            raise OneGramParseError(line_no, line, f"count {fields[1]!r} out of range")
        records.append((fields[0], count))
    return records


def load_one_gram(vocab: Vocabulary, lines: Iterable[str]) -> int:
    """
    Load a one-gram frequency file (word<TAB>count per line) into a table.

    Each record is added, then its frequency is overwritten with the given
    count and the total frequency adjusted to match. Every line is parsed
    before the table is touched, so a malformed line aborts the whole load.

    Example lines:
        the	23135851162
        of	13151942776

    Args:
        vocab: Table to load into
        lines: Lines of the file (an open text file works)

    Returns:
        Number of records loaded

    Raises:
        OneGramParseError: If a line has no count field, or a count that is not
            an ASCII decimal integer within the int64 range
    """
    records = _parse_one_gram(lines)
    for word, count in records:
        word_id = vocab.add(word)
        vocab.frequencies[word_id] = count
        vocab.total_word_freq += count - 1
    logger.debug(f"Loaded {len(records):,} one-gram records, vocabulary size {vocab.size():,}")
    return len(records)


def from_one_gram(path: Union[str, Path], sentinels: bool = True) -> Vocabulary:
    """Build a table from a one-gram file, starting with or without sentinels."""
    vocab = Vocabulary(sentinels=sentinels)
    with open(path, "r", encoding="utf-8") as f:
        load_one_gram(vocab, f)
    return vocab


def from_text_corpus(
    lines: Iterable[str],
    tokenizer: Optional[Callable[[str], List[str]]] = None,
    normalizer: Optional[Callable[[str], str]] = None,
) -> Vocabulary:
    """
    Build a vocabulary from line-oriented free text.

    Args:
        lines: Text lines (an open text file works)
        tokenizer: Called with each line, returns its tokens
            (default: `whitespace_tokenizer`)
        normalizer: Called with each token (default: identity)

    Returns:
        Vocabulary built with `from_words` over every normalized token
    """
    tokenizer = tokenizer or whitespace_tokenizer
    normalizer = normalizer or _identity

    words = []
    for line in lines:
        words.extend(normalizer(tok) for tok in tokenizer(line))
    return from_words(words)


def write_vocab_jsonl(vocab: Vocabulary, path: Union[str, Path], min_frequency: int = 1) -> int:
    """
    Write every stored word as a VocabEntry line, in ID order.

    Words below `min_frequency` are left out; such a file no longer reloads
    with `read_vocab_jsonl` because its IDs have gaps.

    Returns:
        Number of entries written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    written = 0
    with open(path, "w", encoding="utf-8") as f:
        for i, w in enumerate(vocab.words):
            freq = vocab.frequencies[i]
            if freq < min_frequency:
                continue
            rec = VocabEntry(word=w, id=i, freq=freq)
            f.write(rec.model_dump_json() + "\n")
            written += 1
    return written


def read_vocab_jsonl(path: Union[str, Path]) -> Vocabulary:
    """
    Rebuild a vocabulary from a vocab.jsonl export.

    Raises:
        ValueError: If a line is not a valid VocabEntry
        CorruptMappingError: If the IDs are not dense and contiguous
    """
    d = {}
    with open(path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, 1):
            if not line.strip():
                continue
            try:
                entry = VocabEntry.model_validate(json.loads(line))
            except (json.JSONDecodeError, ValidationError) as e:
                raise ValueError(f"{path}:{line_no}: invalid vocabulary entry: {e}") from e
            d[entry.word] = (entry.id, entry.freq)
    return from_dict_with_freq(d)
