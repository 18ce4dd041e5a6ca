"""Health check endpoints for the Pantry API.

This module provides endpoints for monitoring application health
and readiness.
"""

from enum import Enum

import structlog
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from pantry_api.dependencies import GraphConnectionDep, SettingsDep

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/health", tags=["Health"])


class HealthStatus(str, Enum):
    """Health check status values."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


class HealthResponse(BaseModel):
    """Response model for the basic health check."""

    status: HealthStatus = Field(..., description="Health status")
    message: str | None = Field(None, description="Optional status message")


class ReadinessResponse(BaseModel):
    """Response model for readiness check.

    Attributes:
        status: Overall readiness status.
        checks: Individual service check results.
    """

    status: HealthStatus = Field(..., description="Overall readiness status")
    checks: dict[str, dict[str, str]] = Field(
        default_factory=dict,
        description="Individual service check results",
    )


@router.get(
    "",
    response_model=HealthResponse,
    summary="Basic health check",
    description="Returns basic health status of the API.",
)
async def health_check() -> HealthResponse:
    """Report that the process is up without touching Neo4j."""
    return HealthResponse(
        status=HealthStatus.HEALTHY,
        message="Pantry API is running",
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness check",
    description="Checks that Neo4j is reachable.",
    responses={
        status.HTTP_200_OK: {"description": "Application is ready"},
        status.HTTP_503_SERVICE_UNAVAILABLE: {"description": "Application is not ready"},
    },
)
async def readiness_check(
    settings: SettingsDep,
    graph_connection: GraphConnectionDep,
) -> JSONResponse:
    """Readiness check endpoint.

    Args:
        settings: Application settings.
        graph_connection: Neo4j connection for health check.

    Returns:
        ReadinessResponse payload, with 503 when Neo4j is unhealthy.
    """
    neo4j_health = await graph_connection.health_check()

    if neo4j_health.get("status") == "healthy":
        checks = {"neo4j": {"status": "healthy", "uri": settings.neo4j_uri}}
        overall = HealthStatus.HEALTHY
    else:
        message = neo4j_health.get("message", "Unknown error")
        logger.warning("Neo4j health check failed", message=message)
        checks = {"neo4j": {"status": "unhealthy", "message": message}}
        overall = HealthStatus.UNHEALTHY

    body = ReadinessResponse(status=overall, checks=checks)
    return JSONResponse(
        status_code=status.HTTP_200_OK if overall is HealthStatus.HEALTHY else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(mode="json"),
    )
