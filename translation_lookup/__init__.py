"""
Translation Lookup - import spreadsheet translation tables and search them.

Rows from every sheet are normalized into flat records which can then be
searched by exact or whole-word match on key and source text, and by
weighted fuzzy similarity.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine, SearchOutcome
from .core.session import LookupSession
from .models.record import TranslationRecord, ImportSummary

__all__ = [
    "SearchEngine",
    "SearchOutcome",
    "LookupSession",
    "TranslationRecord",
    "ImportSummary",
]
