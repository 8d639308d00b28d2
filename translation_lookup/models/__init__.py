"""Data models for the translation lookup service."""

from .record import TranslationRecord, ImportSummary
from .response import (
    SearchResponse,
    ImportResponse,
    RecordPage,
    StatsResponse,
    ErrorResponse,
    HealthResponse,
    MetricsResponse,
)
from .request import SearchRequest

__all__ = [
    "TranslationRecord",
    "ImportSummary",
    "SearchResponse",
    "ImportResponse",
    "RecordPage",
    "StatsResponse",
    "ErrorResponse",
    "HealthResponse",
    "MetricsResponse",
    "SearchRequest",
]
