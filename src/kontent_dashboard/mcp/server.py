"""FastMCP server exposing content assignment tools."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP

from kontent_dashboard.context import DashboardContext
from kontent_dashboard.core.assignment import summarize
from kontent_dashboard.core.content import list_content_items
from kontent_dashboard.errors import KontentError
from kontent_dashboard.models import AssignmentOptions


def create_mcp_server(ctx: DashboardContext) -> FastMCP:
    """Create a FastMCP server wired to the given dashboard context."""

    mcp = FastMCP("kontent-dashboard", instructions="Browse Kontent.ai content items and manage assignments.")

    @mcp.tool()
    async def list_items(limit: int = 50) -> list[dict[str, Any]] | str:
        """List content items."""
        try:
            items = await list_content_items(ctx.management, limit)
        except KontentError as exc:
            return f"Error: {exc}"
        return [item.model_dump(mode="json") for item in items]

    @mcp.tool()
    async def assign(item_id: str, user_id: str, language: str | None = None, role: str | None = None) -> str:
        """Add a user as contributor of a content item."""
        try:
            await ctx.reconciler.assign(item_id, user_id, language, AssignmentOptions(role=role))
        except KontentError as exc:
            return f"Error: {exc}"
        return f"Assigned {user_id} to {item_id}"

    @mcp.tool()
    async def bulk_assign(item_ids: list[str], user_id: str, language: str | None = None) -> dict[str, Any]:
        """Assign several content items to a user, one after another."""
        try:
            results = await ctx.reconciler.bulk_assign(item_ids, user_id, language)
        except KontentError as exc:
            return {"message": f"Error: {exc}", "failures": {}}
        summary = summarize(results)
        return {"message": summary.message, "failures": summary.failures}

    @mcp.tool()
    async def get_assignments(item_id: str, language: str | None = None) -> dict[str, Any] | str:
        """Show contributors of a content item's variant."""
        try:
            result = await ctx.reconciler.get_assignments(item_id, language)
        except KontentError as exc:
            return f"Error: {exc}"
        return {
            "item_id": result.item_id,
            "language": result.language_codename,
            "contributors": [c.model_dump() for c in result.contributors],
        }

    @mcp.tool()
    async def remove_assignment(item_id: str, user_id: str, language: str | None = None) -> str:
        """Remove a user from the contributors of a content item."""
        try:
            await ctx.reconciler.remove_assignment(item_id, user_id, language)
        except KontentError as exc:
            return f"Error: {exc}"
        return f"Removed {user_id} from {item_id}"

    return mcp
