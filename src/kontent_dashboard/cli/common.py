import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar

import typer
from rich.console import Console
from rich.table import Table

from kontent_dashboard.context import DashboardContext
from kontent_dashboard.errors import KontentError

console = Console()

T = TypeVar("T")


def render_table(headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    table = Table(show_lines=False)
    for h in headers:
        table.add_column(h)
    for row in rows:
        table.add_row(*("" if v is None else str(v) for v in row))
    console.print(table)
    console.print(f"({len(rows)} rows)")


def get_context() -> DashboardContext:
    from kontent_dashboard.client import get_config

    return DashboardContext.from_config(get_config())


def run(fn: Callable[[DashboardContext], Awaitable[T]]) -> T:
    """Run ``fn`` against a fresh context, turning API errors into exit code 1."""
    ctx = get_context()

    async def _run() -> T:
        try:
            return await fn(ctx)
        finally:
            await ctx.dispose()

    try:
        return asyncio.run(_run())
    except KontentError as exc:
        console.print(f"[red]{type(exc).__name__}:[/red] {exc}")
        raise typer.Exit(1) from exc
