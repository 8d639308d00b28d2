"""Liveness, readiness and query metrics for the lookup session."""

import time
from datetime import datetime

import psutil
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..models.response import HealthResponse, MetricsResponse
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["monitoring"])
settings = get_settings()

# Import the global session instance
from ..engine_instance import session

started_at = time.time()


def component_status() -> dict:
    """
    Inspect the session's moving parts.

    The fuzzy index is rebuilt after every batch, so an index whose size
    differs from the record store means a rebuild was interrupted.
    """
    indexed = len(session.engine.fuzzy_index)
    stored = session.total_records

    return {
        "record_store": "healthy",
        "fuzzy_index": "healthy" if indexed == stored else "unhealthy",
        "importer": "busy" if session.importing else "healthy",
    }


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Report whether the record store and fuzzy index agree"
)
async def health_check() -> HealthResponse:
    dependencies = component_status()

    if "unhealthy" in dependencies.values():
        status = "unhealthy"
    elif session.importing:
        status = "degraded"
    else:
        status = "healthy"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        uptime=time.time() - started_at,
        dependencies=dependencies
    )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Ready unless an import is still being parsed"
)
async def readiness_check() -> JSONResponse:
    """Searches during an import see the previous record set; report that as not ready."""
    stats = session.engine.get_stats()
    ready = not session.importing

    return JSONResponse(
        status_code=200 if ready else 503,
        content={
            "status": "ready" if ready else "importing",
            "timestamp": datetime.utcnow().isoformat(),
            "store_stats": {
                "total_records": stats["store_stats"]["total_records"],
                "total_batches": stats["store_stats"]["total_batches"],
            },
            "indexed_records": stats["indexed_records"]
        }
    )


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Query metrics",
    description="Match-rate counters for non-empty queries and process memory"
)
async def get_metrics() -> MetricsResponse:
    stats = session.engine.get_stats()

    return MetricsResponse(
        total_queries=stats["total_queries"],
        average_response_time_ms=stats["average_execution_time_ms"],
        exact_match_rate=stats["exact_match_rate"],
        fuzzy_match_rate=stats["fuzzy_match_rate"],
        no_match_rate=stats["no_match_rate"],
        total_records=session.total_records,
        total_groups=len(session.group_names()),
        memory_usage_mb=psutil.Process().memory_info().rss / (1024 * 1024)
    )
