"""Import API endpoints."""

from typing import List

from fastapi import APIRouter, File, HTTPException, UploadFile
import structlog

from ..core.tabular import is_supported
from ..exceptions import ImportFailedError, ImportInProgressError
from ..models.response import ImportResponse
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["import"])
settings = get_settings()
logger = structlog.get_logger(__name__)

# Import the global session instance
from ..engine_instance import session


@router.post(
    "/import",
    response_model=ImportResponse,
    summary="Import spreadsheet files",
    description="Append the rows of one or more .xlsx/.xls/.csv files to the record set"
)
async def import_files(files: List[UploadFile] = File(...)) -> ImportResponse:
    """
    Import one or more spreadsheet files.

    Every sheet becomes a group of records. The whole call fails if any file
    cannot be read, and nothing from it is kept.
    """
    if session.importing:
        raise HTTPException(status_code=409, detail=ImportInProgressError().message)

    uploads = []
    for f in files:
        if not f.filename:
            raise HTTPException(status_code=400, detail="Missing filename")
        if not is_supported(f.filename, settings.allowed_extensions):
            raise HTTPException(
                status_code=422,
                detail=(
                    f"Unsupported file '{f.filename}'. "
                    f"Allowed types: {', '.join(settings.allowed_extensions)}"
                )
            )
        uploads.append((f.filename, await f.read()))

    try:
        summary = await session.import_files(uploads)
    except ImportInProgressError as e:
        raise HTTPException(status_code=409, detail=e.message)
    except ImportFailedError as e:
        raise HTTPException(status_code=422, detail=e.message)

    return ImportResponse(summary=summary, total_records=session.total_records)
