from fastapi import APIRouter, Depends

from kontent_dashboard.api.dependencies import get_context
from kontent_dashboard.api.schemas import LanguageOverride, LanguageResponse
from kontent_dashboard.context import DashboardContext
from kontent_dashboard.models import Language

router = APIRouter(prefix="/languages", tags=["languages"])


@router.get("", response_model=list[Language])
async def languages(ctx: DashboardContext = Depends(get_context)) -> list[Language]:
    return await ctx.management.list_languages()


@router.get("/resolved", response_model=LanguageResponse)
async def resolved(ctx: DashboardContext = Depends(get_context)) -> LanguageResponse:
    return LanguageResponse(codename=await ctx.locale.resolve())


@router.put("/resolved", response_model=LanguageResponse)
async def override(body: LanguageOverride, ctx: DashboardContext = Depends(get_context)) -> LanguageResponse:
    """Replace the cached codename; ``null`` clears it and triggers detection again."""
    ctx.locale.override(body.codename)
    return LanguageResponse(codename=await ctx.locale.resolve())
