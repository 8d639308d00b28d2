"""Shared fixtures for building spreadsheet uploads."""

import io

import pytest
from openpyxl import Workbook


def make_workbook_bytes(sheets):
    """Serialize {sheet_name: rows} into .xlsx bytes, keeping sheet order."""
    workbook = Workbook()
    workbook.remove(workbook.active)
    for name, rows in sheets.items():
        worksheet = workbook.create_sheet(name)
        for row in rows:
            worksheet.append(row)
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def make_csv_bytes(rows):
    """Serialize rows into UTF-8 CSV bytes."""
    return "\n".join(",".join(str(cell) for cell in row) for row in rows).encode("utf-8")


@pytest.fixture
def sheet1_rows():
    """The greeting/farewell sheet used across tests."""
    return [
        ["1", "greeting", "Hello World"],
        ["2", "farewell", "Goodbye"],
    ]


@pytest.fixture
def sample_workbook():
    """A two-sheet workbook with a header row on each sheet."""
    return make_workbook_bytes({
        "Menu": [
            ["#", "Key", "Source"],
            [1, "menu.file", "File"],
            [2, "menu.save", "Save", "Toolbar label"],
            [3, "menu.save_as", "Save As..."],
        ],
        "Dialogs": [
            ["#", "ID", "Source Text", "Comment"],
            [1, "dialog.confirm", "Are you sure?", "Shown before delete"],
            [2, "dialog.cancel", "Cancel"],
            [3, None, None],
        ],
    })


@pytest.fixture
def workbook_bytes():
    """Factory turning {sheet_name: rows} into .xlsx bytes."""
    return make_workbook_bytes


@pytest.fixture
def csv_bytes():
    """Factory turning rows into CSV bytes."""
    return make_csv_bytes
