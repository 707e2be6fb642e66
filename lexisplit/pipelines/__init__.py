"""Command-line pipelines: text2vocab and vocab2split."""
