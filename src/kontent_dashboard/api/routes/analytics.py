from fastapi import APIRouter, Depends

from kontent_dashboard.api.dependencies import get_context
from kontent_dashboard.context import DashboardContext
from kontent_dashboard.core.analytics import load_overview
from kontent_dashboard.models import AnalyticsOverview

router = APIRouter(tags=["analytics"])


@router.get("/analytics", response_model=AnalyticsOverview)
async def analytics(ctx: DashboardContext = Depends(get_context)) -> AnalyticsOverview:
    """Aggregate counts, monthly creation and content type breakdown."""
    return await load_overview(ctx.management, ctx.subscription, await ctx.locale.resolve())
