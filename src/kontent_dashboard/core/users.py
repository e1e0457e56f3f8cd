import logging
from typing import Any

from kontent_dashboard.core.ports.subscription import SubscriptionApi
from kontent_dashboard.errors import SubscriptionNotConfiguredError
from kontent_dashboard.models import SubscriptionUser

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = ("first_name", "last_name", "email", "status")


def _require(api: SubscriptionApi | None) -> SubscriptionApi:
    if api is None:
        raise SubscriptionNotConfiguredError("Subscription API key or subscription id not configured")
    return api


def _clean(data: dict[str, Any]) -> dict[str, Any]:
    return {key: data[key] for key in _EDITABLE_FIELDS if data.get(key) is not None}


async def list_users(api: SubscriptionApi | None) -> list[SubscriptionUser]:
    users = await _require(api).list_users()
    logger.info("Fetched %d subscription users", len(users))
    return users


async def get_user(api: SubscriptionApi | None, user_id: str) -> SubscriptionUser:
    return await _require(api).get_user(user_id)


async def invite_user(api: SubscriptionApi | None, data: dict[str, Any]) -> SubscriptionUser:
    payload = _clean(data)
    if not payload.get("email"):
        raise ValueError("An email address is required to invite a user.")
    user = await _require(api).create_user(payload)
    logger.info("Invited subscription user %s", user.id)
    return user


async def update_user(api: SubscriptionApi | None, user_id: str, data: dict[str, Any]) -> SubscriptionUser:
    user = await _require(api).update_user(user_id, _clean(data))
    logger.info("Updated subscription user %s", user_id)
    return user
