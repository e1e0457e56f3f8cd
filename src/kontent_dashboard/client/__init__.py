from kontent_dashboard.client.factory import build_management_api, build_subscription_api, get_config
from kontent_dashboard.client.http import SDK_ID, HttpManagementApi, HttpSubscriptionApi
from kontent_dashboard.client.memory import (
    InMemoryManagementApi,
    InMemorySubscriptionApi,
    InMemoryWrite,
)

__all__ = [
    "SDK_ID",
    "HttpManagementApi",
    "HttpSubscriptionApi",
    "InMemoryManagementApi",
    "InMemorySubscriptionApi",
    "InMemoryWrite",
    "build_management_api",
    "build_subscription_api",
    "get_config",
]
