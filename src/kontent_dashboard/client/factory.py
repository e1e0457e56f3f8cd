import logging

from kontent_dashboard.client.demo import demo_management_api, demo_subscription_api
from kontent_dashboard.client.http import HttpManagementApi, HttpSubscriptionApi
from kontent_dashboard.config import KontentConfig
from kontent_dashboard.core.ports.management import ManagementApi
from kontent_dashboard.core.ports.subscription import SubscriptionApi

logger = logging.getLogger(__name__)


def get_config() -> KontentConfig:
    return KontentConfig.from_env()


def build_management_api(config: KontentConfig) -> ManagementApi:
    if config.demo_mode:
        logger.info("No management API key configured; serving demo data")
        return demo_management_api()
    return HttpManagementApi(config)


def build_subscription_api(config: KontentConfig) -> SubscriptionApi | None:
    if config.demo_mode:
        return demo_subscription_api()
    if not config.has_subscription_access:
        logger.warning("Subscription API not configured; user features are disabled")
        return None
    return HttpSubscriptionApi(config)
