"""Record browsing and session management endpoints."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Path, Query
from fastapi.responses import JSONResponse

from ..models.record import TranslationRecord
from ..models.response import RecordPage, StatsResponse
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["records"])
settings = get_settings()

# Import the global session instance
from ..engine_instance import session


@router.get(
    "/records",
    response_model=RecordPage,
    summary="Browse records",
    description="Get a page of the accumulated records by offset"
)
async def get_records(
    offset: int = Query(0, ge=0, description="Index of the first record"),
    limit: Optional[int] = Query(None, ge=1, description="Page size")
) -> RecordPage:
    """
    Get a slice of the record set in import order.

    Pages are addressed by offset so a client can render only the visible
    window of a long list.
    """
    limit = min(limit or settings.default_page_size, settings.max_page_size)
    return RecordPage(
        offset=offset,
        limit=limit,
        total=session.total_records,
        records=session.get_page(offset, limit),
    )


@router.get(
    "/records/{record_id}",
    response_model=TranslationRecord,
    summary="Get a record",
    description="Get a single record by id"
)
async def get_record(
    record_id: str = Path(..., description="The record identifier")
) -> TranslationRecord:
    record = session.get_record(record_id)
    if record is None:
        raise HTTPException(
            status_code=404,
            detail=f"Record '{record_id}' not found"
        )
    return record


@router.delete(
    "/records",
    summary="Reset session",
    description="Remove every record and clear the current query"
)
async def reset_records() -> JSONResponse:
    """Clear the record set, the fuzzy index and the current query."""
    removed = session.total_records
    session.reset()
    return JSONResponse(
        status_code=200,
        content={"message": "Session reset", "removed_records": removed}
    )


@router.get(
    "/stats",
    response_model=StatsResponse,
    summary="Session statistics",
    description="Get the latest import summary and record counts"
)
async def get_stats() -> StatsResponse:
    return StatsResponse(
        total_records=session.total_records,
        group_names=session.group_names(),
        last_import=session.last_import,
        current_query=session.current_query,
    )
