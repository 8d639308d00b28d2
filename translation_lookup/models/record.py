"""Domain models for imported translation rows."""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class TranslationRecord(BaseModel):
    """A single normalized spreadsheet row."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique identifier, stable for the session lifetime")
    group_name: str = Field(..., description="Sheet (or file) the row came from")
    original_ordinal: str = Field(default="", description="First-column value, display only")
    key: str = Field(default="", description="Short identifier from the second column")
    source_text: str = Field(default="", description="Free text from the third column")
    notes: Dict[str, str] = Field(
        default_factory=dict, description="Extra non-empty columns keyed by position label"
    )


class ImportSummary(BaseModel):
    """Informational statistics about one import batch."""

    total_files: int = Field(..., ge=0, description="Number of files in the batch")
    total_sheets: int = Field(..., ge=0, description="Distinct group names among new records")
    total_records: int = Field(..., ge=0, description="Number of newly added records")
    parse_time_ms: int = Field(..., ge=0, description="Processing time in milliseconds")
