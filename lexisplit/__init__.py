"""lexisplit: word vocabularies and maximum-likelihood word splitting."""

__version__ = "0.1.0"
