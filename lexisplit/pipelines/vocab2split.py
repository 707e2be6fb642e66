#!/usr/bin/env python3
"""
vocab2split.py

Split every line of an input text file into its most likely words using a
vocabulary built by text2vocab, and write one SplitRecord per line to
--out as JSONL.
"""
import argparse
import logging
import time
from pathlib import Path
from typing import List, Optional

from lexisplit.schema.vocab import SplitRecord
from lexisplit.vocab import (
    Vocabulary,
    load_vocabulary,
    read_vocab_jsonl,
    split_corpus
)
from lexisplit.vocab.vocab_logging import setup_vocab_logging, get_vocab_logger

# Module-level logger that gets configured in main()
logger = None


def get_logger() -> logging.Logger:
    """Get the module logger, creating a basic one if none exists."""
    global logger
    if logger is None:
        logger = get_vocab_logger('vocab2split')
    return logger


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(
        prog="vocab2split",
        description="Split concatenated words using a lexisplit vocabulary"
    )
    p.add_argument(
        "-v", "--vocab",
        dest="vocab", type=Path, required=True,
        help="vocab.bin or vocab.jsonl produced by text2vocab"
    )
    p.add_argument(
        "-i", "--in",
        dest="infile", type=Path, required=True,
        help="Text file, one string to split per line"
    )
    p.add_argument(
        "-o", "--out",
        dest="outdir", type=Path, required=True,
        help="Output directory for splits.jsonl"
    )
    return p.parse_args(argv)


def load_any_vocabulary(path: Path) -> Vocabulary:
    """Load a vocabulary from vocab.jsonl or the binary format."""
    logger = get_logger()
    if not path.exists():
        logger.error(f"Vocabulary not found: {path}")
        raise FileNotFoundError(path)

    if path.suffix == ".jsonl":
        vocab = read_vocab_jsonl(path)
    else:
        vocab = load_vocabulary(path)
    logger.info(f"Loaded vocabulary: {vocab.size():,} words, total frequency {vocab.total_frequency():,}")
    return vocab


def read_inputs(path: Path) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def write_splits(texts: List[str], splits: List[List[str]], path: Path) -> int:
    """Write one SplitRecord per input, checking each split rebuilds its input."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for text, words in zip(texts, splits):
            if "".join(words) != text.lower():
                raise ValueError(f"Split {words!r} does not reconstruct {text!r}")
            f.write(SplitRecord(text=text, words=words).model_dump_json() + "\n")
    return len(texts)


def run(vocab_path: Path, infile: Path, out: Path) -> Path:
    vocab = load_any_vocabulary(vocab_path)
    texts = read_inputs(infile)
    splits = split_corpus(texts, vocab)
    out_path = out / "splits.jsonl"
    n = write_splits(texts, splits, out_path)
    get_logger().info(f"Wrote {n:,} split records to: {out_path}")
    return out_path


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)

    global logger
    logger = setup_vocab_logging(args.outdir, 'vocab2split', log_name='split.log')

    start = time.time()
    out_path = run(args.vocab, args.infile, args.outdir)
    logger.info(f"[bold green]✅ Splitting complete! → {out_path}[/bold green]")
    logger.info(f"[dim]Completed in {time.time() - start:.1f}s[/dim]")


if __name__ == "__main__":
    main()
