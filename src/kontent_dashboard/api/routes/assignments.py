from fastapi import APIRouter, Depends, Query

from kontent_dashboard.api.dependencies import get_context
from kontent_dashboard.api.schemas import AssignRequest, BulkAssignRequest, BulkAssignResponse
from kontent_dashboard.context import DashboardContext
from kontent_dashboard.core.assignment import summarize
from kontent_dashboard.models import AssignmentResult, VariantAssignments

router = APIRouter(tags=["assignments"])


@router.get("/items/{item_id}/assignments", response_model=VariantAssignments)
async def get_assignments(
    item_id: str,
    language: str | None = Query(None),
    ctx: DashboardContext = Depends(get_context),
) -> VariantAssignments:
    return await ctx.reconciler.get_assignments(item_id, language)


@router.post("/items/{item_id}/assignments", response_model=AssignmentResult)
async def assign(
    item_id: str,
    body: AssignRequest,
    ctx: DashboardContext = Depends(get_context),
) -> AssignmentResult:
    return await ctx.reconciler.assign(item_id, body.user_id, body.language, body.options())


@router.delete("/items/{item_id}/assignments/{user_id}", response_model=AssignmentResult)
async def remove_assignment(
    item_id: str,
    user_id: str,
    language: str | None = Query(None),
    ctx: DashboardContext = Depends(get_context),
) -> AssignmentResult:
    return await ctx.reconciler.remove_assignment(item_id, user_id, language)


@router.post("/assignments/bulk", response_model=BulkAssignResponse)
async def bulk_assign(
    body: BulkAssignRequest,
    ctx: DashboardContext = Depends(get_context),
) -> BulkAssignResponse:
    """Assign every item in order; per-item failures are reported, not raised."""
    results = await ctx.reconciler.bulk_assign(body.item_ids, body.user_id, body.language, body.options())
    summary = summarize(results)
    return BulkAssignResponse(
        message=summary.message, succeeded=summary.succeeded, total=summary.total, results=results
    )
