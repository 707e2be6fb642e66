#!/usr/bin/env python3
"""
vocab_logging.py

Logging setup shared by the lexisplit pipelines: Rich output on the console
and a plain, detailed log file next to the pipeline outputs. Library modules
only ever call logging.getLogger(__name__) and inherit whatever is set here.
"""
import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)-24s | %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'


def setup_vocab_logging(
    out_dir: Path,
    logger_name: str = 'text2vocab',
    log_name: str = 'vocab.log',
    console_level: int = logging.INFO,
) -> logging.Logger:
    """
    Route all logging of a pipeline run to the console and to a log file.

    Any handlers already on the root logger are removed first, so calling
    this twice in one process does not duplicate output.

    Args:
        out_dir: Directory that receives the log file (created if needed)
        logger_name: Name of the pipeline logger to return
        log_name: File name of the log inside out_dir
        console_level: Minimum level shown on the console; the file gets DEBUG

    Returns:
        The pipeline logger
    """
    out_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    log_file = out_dir / log_name
    file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))

    # RichHandler formats its own records
    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=True
    )
    console_handler.setLevel(console_level)

    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.DEBUG)
    logger.propagate = True

    logger.info("=" * 80)
    logger.info(f"LEXISPLIT {logger_name.upper()} PIPELINE")
    logger.info("=" * 80)
    logger.info(f"Pipeline started at: {datetime.now().strftime(LOG_DATEFMT)}")
    logger.info(f"Log file: {log_file}")
    logger.info("-" * 80)

    return logger


def get_vocab_logger(logger_name: str = 'text2vocab') -> logging.Logger:
    """
    Return a pipeline logger without configuring the whole process.

    When neither the logger nor the root has handlers (library use, tests),
    a WARNING-level Rich handler is attached so problems still surface.
    """
    logger = logging.getLogger(logger_name)
    if logger.handlers or logging.getLogger().handlers:
        return logger

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setLevel(logging.WARNING)
    logger.addHandler(handler)
    logger.setLevel(logging.WARNING)
    return logger
