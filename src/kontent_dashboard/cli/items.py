from typing import Annotated

import typer

from kontent_dashboard.cli import common
from kontent_dashboard.context import DashboardContext
from kontent_dashboard.core.content import attach_assignees, filter_items, list_content_items
from kontent_dashboard.models import ContentItem

items_app = typer.Typer(help="Browse content items.")


@items_app.command("list")
def list_items(
    search: Annotated[str, typer.Option(help="Match against item name or type.")] = "",
    status: Annotated[str, typer.Option(help="Workflow step codename, or 'all'.")] = "all",
    limit: Annotated[int | None, typer.Option(help="Max items to fetch.")] = None,
    assignees: Annotated[bool, typer.Option(help="Look up each item's assignee.")] = False,
) -> None:
    """List content items."""

    async def _run(ctx: DashboardContext) -> list[ContentItem]:
        items = await list_content_items(ctx.management, limit)
        if assignees:
            items = await attach_assignees(ctx.management, items, await ctx.locale.resolve())
        return filter_items(items, search, status)

    items = common.run(_run)
    common.render_table(
        ["id", "name", "type", "status", "assigned_to", "last_modified"],
        [(i.id, i.name, i.type, i.status, i.assigned_to, i.last_modified) for i in items],
    )
