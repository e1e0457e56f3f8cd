"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from kontent_dashboard.client.memory import InMemoryManagementApi, InMemorySubscriptionApi
from kontent_dashboard.context import DashboardContext
from kontent_dashboard.core.assignment import AssignmentReconciler
from kontent_dashboard.core.locale import LocaleResolver
from kontent_dashboard.core.session import Session
from kontent_dashboard.models import Contributor, Language, SubscriptionUser

_TESTS_ROOT = Path(__file__).parent

ELEMENTS = [
    {"element": {"id": "5f1c0a7e-title"}, "value": "Hello"},
    {"element": {"id": "9b2d4e11-body"}, "value": "<p>Body with <strong>markup</strong></p>"},
    {"element": {"id": "c0ffee00-tags"}, "value": [{"id": "tag-1"}, {"id": "tag-2"}]},
]


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        rel = Path(str(item.fspath)).relative_to(_TESTS_ROOT)
        if rel.parts and rel.parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def management_api() -> InMemoryManagementApi:
    api = InMemoryManagementApi(
        languages=[
            Language(id="lang-fr", name="French", codename="fr-FR"),
            Language(id="lang-en", name="English", codename="en-US"),
        ]
    )
    api.add_item("a", "Article A", variants={"en-US": ELEMENTS})
    api.add_item("c", "Article C", variants={"en-US": ELEMENTS}, contributors=[Contributor(id="u1", role="editor")])
    api.add_item("p", "Published P", variants={"en-US": ELEMENTS}, published=True)
    return api


@pytest.fixture
def subscription_api() -> InMemorySubscriptionApi:
    user = SubscriptionUser(id="u1", first_name="Ada", last_name="Lovelace", email="ada@example.com")
    return InMemorySubscriptionApi(users={user.id: user})


@pytest.fixture
def session() -> Session:
    return Session()


@pytest.fixture
def resolver(management_api: InMemoryManagementApi, session: Session) -> LocaleResolver:
    return LocaleResolver(management_api, session)


@pytest.fixture
def reconciler(management_api: InMemoryManagementApi, resolver: LocaleResolver) -> AssignmentReconciler:
    return AssignmentReconciler(management_api, resolver)


@pytest.fixture
def context(
    management_api: InMemoryManagementApi, subscription_api: InMemorySubscriptionApi
) -> DashboardContext:
    return DashboardContext.from_apis(management_api, subscription_api)


@pytest.fixture
def elements() -> list[dict[str, object]]:
    return ELEMENTS
