"""Search API endpoints."""

from fastapi import APIRouter, HTTPException, Query, WebSocket, WebSocketDisconnect
import structlog

from ..core.engine import SearchOutcome
from ..models.response import SearchResponse
from ..models.request import SearchRequest
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()
logger = structlog.get_logger(__name__)

# Import the global session instance
from ..engine_instance import session


def to_response(outcome: SearchOutcome) -> SearchResponse:
    """Convert a search outcome into its API representation."""
    return SearchResponse(
        query=outcome.query,
        browse_mode=outcome.browse_mode,
        execution_time_ms=outcome.execution_time_ms,
        total_exact=len(outcome.exact_matches),
        total_fuzzy=len(outcome.fuzzy_matches),
        exact_matches=outcome.exact_matches,
        fuzzy_matches=outcome.fuzzy_matches,
    )


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search records",
    description="Split records into exact/whole-word matches and ranked fuzzy matches"
)
async def search_records(
    q: str = Query("", description="Search query; empty returns every record")
) -> SearchResponse:
    """
    Search the imported records.

    An empty query is browse mode: every record comes back in the fuzzy
    list in import order and the exact list is empty.
    """
    if len(q) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )

    try:
        return to_response(session.search(q))
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Search records using a structured request body"
)
async def search_with_body(request: SearchRequest) -> SearchResponse:
    """Search the imported records using a JSON request body."""
    try:
        return to_response(session.search(request.query))
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.websocket("/ws/search")
async def live_search(websocket: WebSocket) -> None:
    """
    Live search over a WebSocket.

    The client sends the query text on every change; results are pushed only
    once the query has been stable for the debounce period.
    """
    await websocket.accept()

    async def push(outcome: SearchOutcome) -> None:
        await websocket.send_text(to_response(outcome).model_dump_json())

    session.add_listener(push)
    logger.info("live_search_connected")
    try:
        while True:
            query = await websocket.receive_text()
            session.set_query(query[:settings.max_query_length])
    except WebSocketDisconnect:
        logger.info("live_search_disconnected")
    finally:
        session.remove_listener(push)
