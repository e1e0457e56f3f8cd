from typing import Annotated

import typer

from kontent_dashboard.cli import common
from kontent_dashboard.context import DashboardContext
from kontent_dashboard.models import Language

languages_app = typer.Typer(help="Inspect environment languages.")


@languages_app.command("list")
def list_languages() -> None:
    """List configured languages."""

    async def _run(ctx: DashboardContext) -> list[Language]:
        return await ctx.management.list_languages()

    rows = common.run(_run)
    common.render_table(
        ["id", "codename", "name", "active", "default"],
        [(lang.id, lang.codename, lang.name, lang.is_active, lang.is_default) for lang in rows],
    )


@languages_app.command("resolve")
def resolve(
    override: Annotated[str | None, typer.Option(help="Use this codename instead of detecting one.")] = None,
) -> None:
    """Show the language codename assignment commands will use."""

    async def _run(ctx: DashboardContext) -> str:
        if override:
            ctx.locale.override(override)
        return await ctx.locale.resolve()

    common.console.print(f"[green]{common.run(_run)}[/green]")
