"""Seed data served when no management API key is configured."""

from datetime import datetime, timezone

from kontent_dashboard.client.memory import InMemoryManagementApi, InMemorySubscriptionApi
from kontent_dashboard.models import Contributor, Language, SubscriptionUser

DEMO_LANGUAGE = "en-US"


def _body(text: str) -> list[dict[str, object]]:
    return [{"element": {"codename": "body"}, "value": f"<p>{text}</p>"}]


def demo_management_api() -> InMemoryManagementApi:
    api = InMemoryManagementApi(
        languages=[
            Language(id="00000000-0000-0000-0000-000000000000", name="English (United States)", codename="en-US"),
            Language(id="7d1c6ba4-8e3f-4a53-b1f4-3a0d2f9a5c10", name="Spanish", codename="es-ES"),
        ]
    )
    api.add_item(
        "item-1",
        "Welcome to Kontent.ai",
        "article",
        created=datetime(2024, 1, 15, tzinfo=timezone.utc),
        variants={DEMO_LANGUAGE: _body("Welcome")},
        contributors=[Contributor(id="user-1")],
    )
    api.add_item(
        "item-2",
        "Getting Started Guide",
        "article",
        created=datetime(2024, 1, 10, tzinfo=timezone.utc),
        variants={DEMO_LANGUAGE: _body("Getting started")},
        contributors=[Contributor(id="user-2")],
        published=True,
    )
    api.add_item(
        "item-3",
        "Product Overview",
        "product",
        created=datetime(2024, 1, 12, tzinfo=timezone.utc),
        variants={DEMO_LANGUAGE: _body("Overview")},
    )
    return api


def demo_subscription_api() -> InMemorySubscriptionApi:
    users = [
        SubscriptionUser(id="user-1", first_name="John", last_name="Doe", email="john.doe@example.com"),
        SubscriptionUser(id="user-2", first_name="Jane", last_name="Smith", email="jane.smith@example.com"),
        SubscriptionUser(id="user-3", first_name="Mike", last_name="Johnson", email="mike.johnson@example.com"),
    ]
    return InMemorySubscriptionApi(users={user.id: user for user in users})
