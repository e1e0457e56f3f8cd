from fastapi import APIRouter, Depends, Query

from kontent_dashboard.api.dependencies import get_context
from kontent_dashboard.context import DashboardContext
from kontent_dashboard.core.content import (
    attach_assignees,
    filter_items,
    get_content_item,
    list_content_items,
)
from kontent_dashboard.models import ContentItem

router = APIRouter(prefix="/items", tags=["items"])


@router.get("", response_model=list[ContentItem])
async def items(
    search: str = Query(""),
    status: str = Query("all"),
    limit: int | None = Query(None, ge=1),
    assignees: bool = Query(False),
    ctx: DashboardContext = Depends(get_context),
) -> list[ContentItem]:
    rows = await list_content_items(ctx.management, limit)
    if assignees:
        rows = await attach_assignees(ctx.management, rows, await ctx.locale.resolve())
    return filter_items(rows, search, status)


@router.get("/{item_id}", response_model=ContentItem)
async def item(item_id: str, ctx: DashboardContext = Depends(get_context)) -> ContentItem:
    return await get_content_item(ctx.management, item_id)
