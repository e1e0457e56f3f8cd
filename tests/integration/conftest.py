"""Fixtures for tests against a live Kontent.ai environment."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio

from kontent_dashboard.config import KontentConfig
from kontent_dashboard.context import DashboardContext


@pytest.fixture(scope="session")
def live_config() -> KontentConfig:
    """Environment settings; the live suite is skipped without a real management key."""
    config = KontentConfig.from_env()
    if config.demo_mode or not config.environment_id:
        pytest.skip("KONTENT_ENVIRONMENT_ID and KONTENT_MANAGEMENT_API_KEY are not set")
    return config


@pytest_asyncio.fixture
async def live_context(live_config: KontentConfig) -> AsyncGenerator[DashboardContext, None]:
    """Per-test context so each event loop gets its own HTTP connection pool."""
    ctx = DashboardContext.from_config(live_config)
    yield ctx
    await ctx.dispose()
