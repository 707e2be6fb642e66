#!/usr/bin/env python3
"""
text2vocab.py

Build a word vocabulary from plain-text corpora or one-gram frequency files
under --in, and emit vocab.bin, vocab.jsonl and vocab_stats.json under --out.

Text corpora are tokenized line by line, one table per file, and the per-file
tables are merged. One-gram files (word<TAB>count) are loaded into a single
table.
"""
import argparse
import logging
import re
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

import yaml

from lexisplit.schema.vocab import VocabStats
from lexisplit.vocab import (
    Vocabulary,
    from_text_corpus,
    load_one_gram,
    save_vocabulary,
    validate_vocabulary_structure,
    whitespace_tokenizer,
    write_vocab_jsonl
)
from lexisplit.vocab.vocab_logging import setup_vocab_logging, get_vocab_logger

# Module-level logger that gets configured in main()
logger = None

DEFAULT_HPARAMS = {
    "input_format": "text",
    "glob": "*.txt",
    "lowercase": True,
    "tokenizer": "whitespace",
    "token_pattern": r"[^\W\d_]+|\d+|[^\w\s]+",
    "sentinels": True,
    "min_frequency": 1,
}


def get_logger() -> logging.Logger:
    """Get the module logger, creating a basic one if none exists."""
    global logger
    if logger is None:
        logger = get_vocab_logger('text2vocab')
    return logger


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(
        prog="text2vocab",
        description="Build a word vocabulary from text corpora or one-gram files"
    )
    p.add_argument(
        "-i", "--in",
        dest="inpath", type=Path, required=True,
        help="Input file, or directory searched recursively"
    )
    p.add_argument(
        "-o", "--out",
        dest="outdir", type=Path, required=True,
        help="Output directory for vocab.bin, vocab.jsonl and vocab_stats.json"
    )
    p.add_argument(
        "-c", "--config",
        dest="config", type=Path,
        default=Path("config/pipelines/text2vocab.yaml"),
        help="Path to YAML hyperparams (default: config/pipelines/text2vocab.yaml)"
    )
    return p.parse_args(argv)


def load_hparams(path: Path) -> dict:
    """Load hyperparameters from a YAML file on top of the defaults."""
    logger = get_logger()
    logger.info(f"Loading hyperparameters from: {path}")
    if not path.exists():
        logger.error(f"Config not found: {path}")
        raise FileNotFoundError(path)

    with open(path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}

    hparams = dict(DEFAULT_HPARAMS)
    hparams.update(loaded)

    if hparams["input_format"] not in ("text", "one_gram"):
        raise ValueError(f"Unknown input_format: {hparams['input_format']!r}")
    if hparams["tokenizer"] not in ("whitespace", "regex"):
        raise ValueError(f"Unknown tokenizer: {hparams['tokenizer']!r}")

    logger.info("Loaded hyperparameters:")
    for key, value in hparams.items():
        logger.info(f"  {key}: {value}")

    return hparams


def find_input_files(inpath: Path, pattern: str) -> List[Path]:
    """Resolve the input path to a sorted list of files."""
    logger = get_logger()
    if not inpath.exists():
        logger.error(f"Input path does not exist: {inpath}")
        raise FileNotFoundError(f"Input path not found: {inpath}")

    if inpath.is_file():
        return [inpath]

    files = sorted(inpath.rglob(pattern))
    if not files:
        logger.error(f"No files matching {pattern!r} under: {inpath}")
        raise SystemExit(1)

    logger.info(f"Found {len(files)} input files:")
    for i, f in enumerate(files, 1):
        logger.debug(f"  {i:3d}. {f}")
    return files


def make_tokenizer(hparams: dict) -> Callable[[str], List[str]]:
    if hparams["tokenizer"] == "whitespace":
        return whitespace_tokenizer
    pattern = re.compile(hparams["token_pattern"])
    return lambda line: pattern.findall(line)


def make_normalizer(hparams: dict) -> Optional[Callable[[str], str]]:
    return str.lower if hparams["lowercase"] else None


def build_from_text(files: List[Path], hparams: dict) -> Vocabulary:
    """Build one table per text file and merge them into the first."""
    logger = get_logger()
    logger.info("=" * 50)
    logger.info("STAGE 1: TEXT CORPUS LOADING")
    logger.info("=" * 50)

    tokenizer = make_tokenizer(hparams)
    normalizer = make_normalizer(hparams)

    vocab = None
    for f in files:
        logger.info(f"Processing file: {f}")
        with open(f, "r", encoding="utf-8") as fh:
            file_vocab = from_text_corpus(fh, tokenizer, normalizer)
        logger.info(f"  File summary: {file_vocab.size():,} words, {file_vocab.total_frequency():,} tokens")

        if vocab is None:
            vocab = file_vocab
        else:
            vocab.merge(file_vocab)

    return vocab


def build_from_one_gram(files: List[Path], hparams: dict) -> Vocabulary:
    """Load every one-gram file into a single table."""
    logger = get_logger()
    logger.info("=" * 50)
    logger.info("STAGE 1: ONE-GRAM LOADING")
    logger.info("=" * 50)

    vocab = Vocabulary(sentinels=hparams["sentinels"])
    for f in files:
        logger.info(f"Processing file: {f}")
        with open(f, "r", encoding="utf-8") as fh:
            n = load_one_gram(vocab, fh)
        logger.info(f"  File summary: {n:,} records")

    return vocab


def save_outputs(vocab: Vocabulary, out: Path, hparams: dict) -> VocabStats:
    """Write vocab.bin, vocab.jsonl and vocab_stats.json."""
    logger = get_logger()
    logger.info("=" * 50)
    logger.info("STAGE 2: VOCABULARY SERIALIZATION")
    logger.info("=" * 50)

    validate_vocabulary_structure(vocab)

    save_vocabulary(vocab, out / "vocab.bin")
    logger.info(f"Saved binary vocabulary: {out / 'vocab.bin'}")

    written = write_vocab_jsonl(vocab, out / "vocab.jsonl", hparams["min_frequency"])
    logger.info(f"Saved {written:,} of {vocab.size():,} words to: {out / 'vocab.jsonl'}")

    ranked = sorted(range(vocab.size()), key=lambda i: vocab.frequencies[i], reverse=True)
    logger.info("Top 10 most frequent words:")
    for rank, i in enumerate(ranked[:10], 1):
        logger.info(f"  {rank:2d}. {vocab.words[i]!r:<20} (freq: {vocab.frequencies[i]:,})")

    stats = VocabStats.from_vocabulary(vocab)
    with open(out / "vocab_stats.json", "w", encoding="utf-8") as f:
        f.write(stats.model_dump_json(indent=2))

    logger.info("-" * 50)
    for line in stats.summary().splitlines():
        logger.info(line)
    logger.info("-" * 50)
    return stats


def run(inpath: Path, out: Path, hparams: dict) -> VocabStats:
    files = find_input_files(inpath, hparams["glob"])
    if hparams["input_format"] == "one_gram":
        vocab = build_from_one_gram(files, hparams)
    else:
        vocab = build_from_text(files, hparams)
    return save_outputs(vocab, out, hparams)


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)

    global logger
    logger = setup_vocab_logging(args.outdir, 'text2vocab')

    logger.info("COMMAND LINE ARGUMENTS:")
    logger.info(f"  Input path: {args.inpath}")
    logger.info(f"  Output directory: {args.outdir}")
    logger.info(f"  Config file: {args.config}")
    logger.info("-" * 80)

    h = load_hparams(args.config)

    start = time.time()
    stats = run(args.inpath, args.outdir, h)
    elapsed = time.time() - start

    logger.info("=" * 80)
    logger.info(f"Pipeline completed at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    logger.info(f"Total execution time: {elapsed:.2f} seconds")
    logger.info("=" * 80)
    logger.info(f"[bold green]✅ Vocabulary built! → {args.outdir / 'vocab.bin'}[/bold green]")
    logger.info(f"[dim]Vocabulary size: {stats.size:,} words[/dim]")
    logger.info(f"[green]📋 Detailed logs available at: {args.outdir / 'vocab.log'}[/green]")


if __name__ == "__main__":
    main()
