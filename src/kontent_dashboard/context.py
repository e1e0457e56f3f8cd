from __future__ import annotations

from dataclasses import dataclass

from kontent_dashboard.client import build_management_api, build_subscription_api
from kontent_dashboard.config import KontentConfig
from kontent_dashboard.core.assignment import AssignmentReconciler
from kontent_dashboard.core.locale import LocaleResolver
from kontent_dashboard.core.ports.management import ManagementApi
from kontent_dashboard.core.ports.subscription import SubscriptionApi
from kontent_dashboard.core.session import Session


@dataclass
class DashboardContext:
    """Adapters and session state shared by one CLI run, API process or MCP server."""

    management: ManagementApi
    subscription: SubscriptionApi | None
    session: Session
    locale: LocaleResolver
    reconciler: AssignmentReconciler

    @classmethod
    def from_apis(
        cls,
        management: ManagementApi,
        subscription: SubscriptionApi | None = None,
        language: str | None = None,
    ) -> DashboardContext:
        session = Session(language_codename=language)
        locale = LocaleResolver(management, session)
        return cls(
            management=management,
            subscription=subscription,
            session=session,
            locale=locale,
            reconciler=AssignmentReconciler(management, locale),
        )

    @classmethod
    def from_config(cls, config: KontentConfig) -> DashboardContext:
        return cls.from_apis(build_management_api(config), build_subscription_api(config), config.language)

    async def dispose(self) -> None:
        await self.management.dispose()
        if self.subscription is not None:
            await self.subscription.dispose()
