"""Request models for API endpoints."""

from pydantic import BaseModel, Field, field_validator


class SearchRequest(BaseModel):
    """Request model for search queries."""

    query: str = Field(
        default="", max_length=200, description="Search query; empty means browse all records"
    )

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Strip surrounding whitespace from the query."""
        return v.strip()
