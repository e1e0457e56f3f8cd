from kontent_dashboard.cli import common
from kontent_dashboard.context import DashboardContext
from kontent_dashboard.core.analytics import load_overview
from kontent_dashboard.models import AnalyticsOverview


def analytics() -> None:
    """Summarise content, assignment and completion counts."""

    async def _run(ctx: DashboardContext) -> AnalyticsOverview:
        return await load_overview(ctx.management, ctx.subscription, await ctx.locale.resolve())

    overview = common.run(_run)
    common.console.print(
        f"Content: {overview.total_content}  Users: {overview.total_users}  "
        f"Assigned: {overview.assigned_content}  Completed: {overview.completed_content} "
        f"({overview.completion_rate}%)"
    )
    common.render_table(["month", "created"], [(m.month, m.created) for m in overview.monthly_stats])
    common.render_table(
        ["type", "count", "percentage"], [(t.type, t.count, f"{t.percentage}%") for t in overview.content_types]
    )
