"""Response models for API endpoints."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .record import ImportSummary, TranslationRecord


class SearchResponse(BaseModel):
    """Response for search queries."""

    query: str = Field(..., description="Trimmed search query")
    browse_mode: bool = Field(..., description="True when the query was empty")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    total_exact: int = Field(..., description="Number of exact matches")
    total_fuzzy: int = Field(..., description="Number of fuzzy matches")
    exact_matches: List[TranslationRecord] = Field(..., description="Exact and whole-word matches")
    fuzzy_matches: List[TranslationRecord] = Field(..., description="Ranked approximate matches")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class ImportResponse(BaseModel):
    """Response for a completed import."""

    summary: ImportSummary = Field(..., description="Statistics for the imported batch")
    total_records: int = Field(..., description="Records held after the import")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class RecordPage(BaseModel):
    """A slice of the accumulated record set."""

    offset: int = Field(..., description="Index of the first record in the page")
    limit: int = Field(..., description="Requested page size")
    total: int = Field(..., description="Total number of records held")
    records: List[TranslationRecord] = Field(..., description="Records in accumulation order")


class StatsResponse(BaseModel):
    """Current session statistics."""

    total_records: int = Field(..., description="Records held")
    group_names: List[str] = Field(..., description="Distinct group names in first-seen order")
    last_import: Optional[ImportSummary] = Field(None, description="Summary of the latest import")
    current_query: str = Field(..., description="Most recent live query")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")


class MetricsResponse(BaseModel):
    """Performance metrics response."""

    total_queries: int = Field(..., description="Total queries processed")
    average_response_time_ms: float = Field(..., description="Average response time")
    exact_match_rate: float = Field(..., description="Share of queries with exact matches")
    fuzzy_match_rate: float = Field(..., description="Share of queries with only fuzzy matches")
    no_match_rate: float = Field(..., description="Share of queries with no matches")
    total_records: int = Field(..., description="Records held")
    total_groups: int = Field(..., description="Distinct group names held")
    memory_usage_mb: float = Field(..., description="Memory usage in MB")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Metrics timestamp")
