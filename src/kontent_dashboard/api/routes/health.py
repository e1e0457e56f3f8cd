from fastapi import APIRouter, Depends, Response, status

from kontent_dashboard.api.dependencies import get_context
from kontent_dashboard.api.schemas import HealthResponse, ReadinessResponse
from kontent_dashboard.context import DashboardContext

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()


@router.get("/healthz/live", response_model=HealthResponse)
async def liveness() -> HealthResponse:
    """Liveness probe: is the process alive?"""
    return HealthResponse()


@router.get("/healthz/ready", response_model=ReadinessResponse)
async def readiness(
    response: Response,
    ctx: DashboardContext = Depends(get_context),
) -> ReadinessResponse:
    """Readiness probe: the Management API answers.

    Also reports the cached language codename (``null`` until first resolved)
    and whether user management is configured.
    """
    language = ctx.locale.cached
    subscription = ctx.subscription is not None
    if await ctx.management.ping():
        return ReadinessResponse(status="ok", cms="up", language=language, subscription=subscription)
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(status="degraded", cms="down", language=language, subscription=subscription)
