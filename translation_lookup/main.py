"""FastAPI application serving spreadsheet import and translation search."""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
import structlog

from .api import search_router, import_router, records_router, monitoring_router
from .config import get_settings
from .engine_instance import session
from .exceptions import ImportInProgressError, TranslationLookupError
from .log import configure_logging
from .models.response import ErrorResponse

settings = get_settings()
configure_logging(settings)

logger = structlog.get_logger()

DESCRIPTION = "Import spreadsheet translation tables and search them by exact and fuzzy match"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info(
        "service_starting",
        version=settings.app_version,
        fuzzy_threshold=settings.fuzzy_threshold,
        weights=settings.field_weights,
        debounce_ms=settings.search_debounce_ms
    )

    yield

    # A live query may still be waiting out its quiet period
    session.debouncer.cancel()
    logger.info("service_stopped", total_records=session.total_records)


app = FastAPI(
    title=settings.app_name,
    description=DESCRIPTION,
    version=settings.app_version,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Browse-mode responses carry every record
app.add_middleware(GZipMiddleware, minimum_size=1000)


@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    start_time = time.time()
    response = await call_next(request)

    logger.info(
        "request_handled",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        process_time_ms=round((time.time() - start_time) * 1000, 2)
    )
    return response


@app.exception_handler(TranslationLookupError)
async def lookup_exception_handler(request: Request, exc: TranslationLookupError) -> JSONResponse:
    """Map service errors that escaped a router onto HTTP status codes."""
    status_code = 409 if isinstance(exc, ImportInProgressError) else 422
    logger.warning("lookup_error", path=request.url.path, code=exc.code, error=exc.message)

    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error=exc.code,
            message=exc.message,
            details=exc.details
        ).model_dump(mode="json")
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=True)

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal Server Error",
            message="An unexpected error occurred",
            details={"exception": str(exc)} if settings.debug else None
        ).model_dump(mode="json")
    )


app.include_router(search_router)
app.include_router(import_router)
app.include_router(records_router)
app.include_router(monitoring_router)


@app.get("/", summary="Service status")
async def root() -> dict:
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": DESCRIPTION,
        "total_records": session.total_records,
        "status": "running"
    }


@app.get("/api", summary="API information", description="Endpoints and active search settings")
async def api_info() -> dict:
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "endpoints": {
            "import": "POST /api/v1/import",
            "search": "GET /api/v1/search?q={query}",
            "live_search": "WS /api/v1/ws/search",
            "records": "GET /api/v1/records?offset=0&limit=50",
            "record": "GET /api/v1/records/{record_id}",
            "reset": "DELETE /api/v1/records",
            "stats": "GET /api/v1/stats",
            "health": "GET /api/v1/health",
            "metrics": "GET /api/v1/metrics"
        },
        "features": [
            "Excel (.xlsx, .xls) and CSV import",
            "Header row suppression",
            "Exact and whole-word matching on key and source text",
            "Weighted fuzzy matching across key, source text and sheet name",
            "Debounced live search over WebSocket",
            "Offset paging for large record sets"
        ],
        "search": {
            "fuzzy_threshold": settings.fuzzy_threshold,
            "weights": settings.field_weights,
            "debounce_ms": settings.search_debounce_ms,
            "allowed_extensions": settings.allowed_extensions
        }
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "translation_lookup.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1,  # session state lives in process memory
        log_level=settings.log_level.lower()
    )
