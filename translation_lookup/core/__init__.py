"""Core import and search functionality."""

from .engine import SearchEngine, SearchOutcome
from .fuzzy_matcher import FuzzyIndex
from .normalizer import RecordNormalizer
from .index import RecordStore
from .debounce import Debouncer
from .session import LookupSession
from .tabular import read_tabular

__all__ = [
    "SearchEngine",
    "SearchOutcome",
    "FuzzyIndex",
    "RecordNormalizer",
    "RecordStore",
    "Debouncer",
    "LookupSession",
    "read_tabular",
]
