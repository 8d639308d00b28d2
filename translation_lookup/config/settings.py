"""Application settings and configuration management."""

from functools import lru_cache
from typing import List

from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    app_name: str = Field(default="Translation Lookup")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Import Configuration
    allowed_extensions: List[str] = Field(default=[".xlsx", ".xls", ".csv"])
    header_scan_rows: int = Field(default=5)

    # Search Configuration
    fuzzy_threshold: float = Field(default=0.3)  # normalized edit distance budget
    key_weight: float = Field(default=1.0)
    source_text_weight: float = Field(default=0.8)
    group_name_weight: float = Field(default=0.3)
    search_debounce_ms: int = Field(default=150)
    max_query_length: int = Field(default=200)

    # Paging
    default_page_size: int = Field(default=50)
    max_page_size: int = Field(default=500)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173", "http://localhost:8000"]
    )

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )

    @property
    def field_weights(self) -> dict:
        """Fuzzy ranking weight per record field."""
        return {
            "key": self.key_weight,
            "source_text": self.source_text_weight,
            "group_name": self.group_name_weight,
        }


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
