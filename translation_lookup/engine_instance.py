"""Global lookup session instance to avoid circular imports."""

from .core.session import LookupSession
from .config import get_settings

# Global lookup session instance
settings = get_settings()
session = LookupSession(
    fuzzy_threshold=settings.fuzzy_threshold,
    weights=settings.field_weights,
    header_scan_rows=settings.header_scan_rows,
    debounce_ms=settings.search_debounce_ms,
    allowed_extensions=settings.allowed_extensions,
)
