from __future__ import annotations

from collections.abc import AsyncIterator

from kontent_dashboard.client import get_config
from kontent_dashboard.context import DashboardContext

_ctx: DashboardContext | None = None


async def get_context() -> AsyncIterator[DashboardContext]:
    """Yield the process-wide ``DashboardContext``, creating it lazily on first call."""
    global _ctx  # noqa: PLW0603
    if _ctx is None:
        _ctx = DashboardContext.from_config(get_config())
    yield _ctx


async def shutdown_context() -> None:
    global _ctx  # noqa: PLW0603
    if _ctx is not None:
        await _ctx.dispose()
        _ctx = None
