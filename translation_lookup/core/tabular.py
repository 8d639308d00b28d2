"""
Spreadsheet reading for uploaded translation files.

Turns one uploaded file into ``(sheet name, rows)`` pairs. Every row is kept,
header rows included; deciding which rows are data is the normalizer's job.

Supported containers:
- .xlsx via pandas with openpyxl
- .xls via pandas with xlrd
- .csv via the csv module (one group named after the file)
"""

import csv
import io
from pathlib import PurePath
from typing import Any, List, Optional, Sequence, Tuple

import pandas as pd
import structlog

from ..exceptions import TabularReadError

logger = structlog.get_logger(__name__)

Row = List[Any]
Sheet = Tuple[str, List[Row]]

EXCEL_ENGINES = {
    ".xlsx": "openpyxl",
    ".xls": "xlrd",
}

DEFAULT_EXTENSIONS = (".xlsx", ".xls", ".csv")


def file_extension(filename: str) -> str:
    """Lower-cased extension including the dot, or an empty string."""
    return PurePath(filename).suffix.lower()


def is_supported(filename: str, allowed_extensions: Optional[Sequence[str]] = None) -> bool:
    """Check a filename against the extension allow-list."""
    allowed = allowed_extensions or DEFAULT_EXTENSIONS
    return file_extension(filename) in {ext.lower() for ext in allowed}


def read_tabular(
    filename: str,
    content: bytes,
    allowed_extensions: Optional[Sequence[str]] = None
) -> List[Sheet]:
    """
    Read an uploaded file into sheets of rows.

    Args:
        filename: Original filename, used to pick the reader
        content: Raw file bytes
        allowed_extensions: Extension allow-list (defaults to .xlsx, .xls, .csv)

    Returns:
        List of (sheet_name, rows) in workbook order

    Raises:
        TabularReadError: If the file type is not allowed or cannot be read
    """
    if not is_supported(filename, allowed_extensions):
        raise TabularReadError(filename, "unsupported file type")

    extension = file_extension(filename)
    logger.debug("reading_tabular_file", filename=filename, extension=extension, size=len(content))

    if extension == ".csv":
        return [(PurePath(filename).stem, _read_csv(filename, content))]

    return _read_workbook(filename, content, extension)


def _read_workbook(filename: str, content: bytes, extension: str) -> List[Sheet]:
    """Read every sheet of an Excel workbook."""
    engine = EXCEL_ENGINES.get(extension)
    try:
        frames = pd.read_excel(
            io.BytesIO(content),
            sheet_name=None,
            header=None,
            dtype=object,
            na_filter=False,
            engine=engine,
        )
    except Exception as e:
        logger.error("excel_read_failed", filename=filename, error=str(e))
        raise TabularReadError(filename, str(e)) from e

    sheets = []
    for sheet_name, df in frames.items():
        rows = df.values.tolist()
        sheets.append((str(sheet_name), rows))
        logger.debug("sheet_read", filename=filename, sheet=sheet_name, rows=len(rows))

    return sheets


def _read_csv(filename: str, content: bytes) -> List[Row]:
    """Read a CSV file; rows may have differing lengths."""
    try:
        text = content.decode("utf-8-sig")
        return [list(row) for row in csv.reader(io.StringIO(text))]
    except (UnicodeDecodeError, csv.Error) as e:
        logger.error("csv_read_failed", filename=filename, error=str(e))
        raise TabularReadError(filename, str(e)) from e
