# lexisplit/schema/__init__.py
from .vocab import VocabEntry, VocabStats, SplitRecord
