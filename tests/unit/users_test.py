"""Tests for subscription user operations."""

from __future__ import annotations

import pytest

from kontent_dashboard.client.memory import InMemorySubscriptionApi
from kontent_dashboard.core.users import get_user, invite_user, list_users, update_user
from kontent_dashboard.errors import NotFoundError, SubscriptionNotConfiguredError


@pytest.mark.asyncio
async def test_list_users(subscription_api: InMemorySubscriptionApi) -> None:
    users = await list_users(subscription_api)
    assert [u.id for u in users] == ["u1"]


@pytest.mark.asyncio
async def test_get_unknown_user(subscription_api: InMemorySubscriptionApi) -> None:
    with pytest.raises(NotFoundError):
        await get_user(subscription_api, "nobody")


@pytest.mark.asyncio
async def test_invite_drops_unknown_and_empty_fields(subscription_api: InMemorySubscriptionApi) -> None:
    user = await invite_user(
        subscription_api, {"email": "grace@example.com", "first_name": "Grace", "last_name": None, "id": "forged"}
    )

    assert user.id != "forged"
    assert user.email == "grace@example.com"
    assert user.first_name == "Grace"
    assert user.id in subscription_api.users


@pytest.mark.asyncio
async def test_invite_requires_email(subscription_api: InMemorySubscriptionApi) -> None:
    with pytest.raises(ValueError):
        await invite_user(subscription_api, {"first_name": "Nobody"})


@pytest.mark.asyncio
async def test_update_user(subscription_api: InMemorySubscriptionApi) -> None:
    user = await update_user(subscription_api, "u1", {"status": "inactive", "email": None})

    assert user.status == "inactive"
    assert user.email == "ada@example.com"


@pytest.mark.asyncio
async def test_missing_subscription_api() -> None:
    with pytest.raises(SubscriptionNotConfiguredError):
        await list_users(None)
