"""Exception classes for the translation lookup service."""

from typing import Any, Dict, Optional


class TranslationLookupError(Exception):
    """
    Base exception for all service errors.

    Attributes:
        code: Error code (e.g., "IMPORT_FAILED")
        message: Human-readable message
        details: Additional context
    """

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class TabularReadError(TranslationLookupError):
    """A single file could not be turned into rows."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(
            code="TABULAR_READ_FAILED",
            message=f"Could not read '{filename}': {reason}",
            details={"filename": filename, "reason": reason},
        )
        self.filename = filename


class ImportFailedError(TranslationLookupError):
    """An import call failed as a whole; nothing from it was committed."""

    def __init__(self, cause: TabularReadError, total_files: int) -> None:
        super().__init__(
            code="IMPORT_FAILED",
            message="Failed to parse some files. Please ensure they are valid spreadsheet files.",
            details={
                "filename": cause.filename,
                "reason": cause.details.get("reason"),
                "total_files": total_files,
            },
        )
        self.cause = cause


class ImportInProgressError(TranslationLookupError):
    """Another import is still running."""

    def __init__(self) -> None:
        super().__init__(
            code="IMPORT_IN_PROGRESS",
            message="An import is already in progress",
        )
