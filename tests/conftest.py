import pytest
from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent / "data"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "corpus: mark test as reading the bundled English corpus"
    )


@pytest.fixture
def corpus_path() -> Path:
    """Path to the small English corpus used by the splitting tests."""
    return DATA_DIR / "corpus_en.txt"


@pytest.fixture
def corpus_vocab(corpus_path):
    """Lowercased vocabulary built from the bundled corpus."""
    from lexisplit.vocab import from_text_corpus

    with open(corpus_path, "r", encoding="utf-8") as f:
        return from_text_corpus(f, normalizer=str.lower)
