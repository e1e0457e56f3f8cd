from typing import Annotated

import typer

from kontent_dashboard.cli import common
from kontent_dashboard.context import DashboardContext
from kontent_dashboard.core.assignment import BulkSummary, summarize
from kontent_dashboard.models import AssignmentOptions, AssignmentResult, VariantAssignments

LanguageOption = Annotated[
    str | None, typer.Option("--language", "-l", help="Language codename; resolved automatically if omitted.")
]


def _report(summary: BulkSummary) -> None:
    colour = "green" if not summary.failures else "yellow"
    common.console.print(f"[{colour}]{summary.message}[/{colour}]")
    for item_id, error in summary.failures.items():
        common.console.print(f"  [red]{item_id}[/red]: {error}")
    if summary.failures:
        raise typer.Exit(1)


def assign(
    user_id: Annotated[str, typer.Argument(help="User id to add as contributor.")],
    item_ids: Annotated[list[str], typer.Argument(help="Content item ids.")],
    language: LanguageOption = None,
    role: Annotated[str | None, typer.Option(help="Contributor role (default: contributor).")] = None,
    notes: Annotated[str | None, typer.Option(help="Informational note, not stored.")] = None,
    due_date: Annotated[str | None, typer.Option(help="Informational due date, not stored.")] = None,
) -> None:
    """Assign content items to a user."""
    options = AssignmentOptions(role=role, notes=notes, due_date=due_date)

    async def _run(ctx: DashboardContext) -> list[AssignmentResult]:
        return await ctx.reconciler.bulk_assign(item_ids, user_id, language, options)

    _report(summarize(common.run(_run)))


def unassign(
    user_id: Annotated[str, typer.Argument(help="User id to remove.")],
    item_ids: Annotated[list[str], typer.Argument(help="Content item ids.")],
    language: LanguageOption = None,
) -> None:
    """Remove a user from the contributors of content items."""

    async def _run(ctx: DashboardContext) -> list[AssignmentResult]:
        return await ctx.reconciler.bulk_remove(item_ids, user_id, language)

    _report(summarize(common.run(_run), "unassigned"))


def assignments(
    item_id: Annotated[str, typer.Argument(help="Content item id.")],
    language: LanguageOption = None,
) -> None:
    """Show the contributors of an item's variant."""

    async def _run(ctx: DashboardContext) -> VariantAssignments:
        return await ctx.reconciler.get_assignments(item_id, language)

    result = common.run(_run)
    common.console.print(f"Item {result.item_id} ({result.language_codename}), {len(result.elements)} elements")
    common.render_table(["id", "role"], [(c.id, c.role) for c in result.contributors])
