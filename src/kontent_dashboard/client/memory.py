import copy
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from kontent_dashboard.errors import KontentError, NotFoundError, PublishedConflictError
from kontent_dashboard.models import Contributor, Language, LanguageVariant, SubscriptionUser

PUBLISHED_BODY = "The language variant is published and cannot be updated. Create a new version first."


@dataclass(frozen=True)
class InMemoryWrite:
    item_id: str
    codename: str
    payload: dict[str, Any]


@dataclass
class InMemoryManagementApi:
    languages: list[Language] = field(default_factory=list)
    items: dict[str, dict[str, Any]] = field(default_factory=dict)
    variants: dict[tuple[str, str], LanguageVariant] = field(default_factory=dict)
    published: set[tuple[str, str]] = field(default_factory=set)
    languages_error: KontentError | None = None
    calls: list[tuple[str, ...]] = field(default_factory=list)
    writes: list[InMemoryWrite] = field(default_factory=list)

    def add_item(
        self,
        item_id: str,
        name: str,
        item_type: str = "article",
        *,
        codename: str | None = None,
        created: datetime | None = None,
        variants: dict[str, list[dict[str, Any]]] | None = None,
        contributors: list[Contributor] | None = None,
        published: bool = False,
    ) -> None:
        """Register an item and one variant per language codename in ``variants``."""
        self.items[item_id] = {
            "id": item_id,
            "name": name,
            "codename": codename or name.lower().replace(" ", "_"),
            "type": {"codename": item_type},
            "created": (created or datetime.now(timezone.utc)).isoformat(),
            "last_modified": datetime.now(timezone.utc).isoformat(),
        }
        for language, elements in (variants or {}).items():
            self.variants[(item_id, language)] = LanguageVariant(
                item_id=item_id,
                language_codename=language,
                elements=copy.deepcopy(elements),
                contributors=list(contributors or []),
                workflow_step="published" if published else "draft",
            )
            if published:
                self.published.add((item_id, language))

    async def list_languages(self) -> list[Language]:
        self.calls.append(("list_languages",))
        if self.languages_error is not None:
            raise self.languages_error
        return list(self.languages)

    async def list_items(self, limit: int | None = None) -> list[dict[str, Any]]:
        self.calls.append(("list_items",))
        rows = [copy.deepcopy(item) for item in self.items.values()]
        return rows if limit is None else rows[:limit]

    async def get_item(self, item_id: str) -> dict[str, Any]:
        self.calls.append(("get_item", item_id))
        if item_id not in self.items:
            raise NotFoundError(f"Item {item_id} not found", 404)
        return copy.deepcopy(self.items[item_id])

    async def list_variants(self, item_id: str) -> list[LanguageVariant]:
        self.calls.append(("list_variants", item_id))
        if item_id not in self.items:
            raise NotFoundError(f"Variants of item {item_id} not found", 404)
        return [v.model_copy(deep=True) for (iid, _), v in self.variants.items() if iid == item_id]

    async def get_variant(self, item_id: str, codename: str) -> LanguageVariant:
        self.calls.append(("get_variant", item_id, codename))
        variant = self.variants.get((item_id, codename))
        if variant is None:
            raise NotFoundError(f"Variant {codename} of item {item_id} not found", 404)
        return variant.model_copy(deep=True)

    async def upsert_variant(self, item_id: str, codename: str, payload: dict[str, Any]) -> dict[str, Any]:
        self.calls.append(("upsert_variant", item_id, codename))
        key = (item_id, codename)
        if item_id not in self.items:
            raise NotFoundError(f"Variant {codename} of item {item_id} not found", 404)
        if key in self.published:
            raise PublishedConflictError(
                f"Variant {codename} of item {item_id}: variant is published and cannot be updated",
                400,
                PUBLISHED_BODY,
            )
        self.writes.append(InMemoryWrite(item_id, codename, copy.deepcopy(payload)))
        variant = LanguageVariant(
            item_id=item_id,
            language_codename=codename,
            elements=copy.deepcopy(payload.get("elements") or []),
            contributors=[Contributor.model_validate(c) for c in payload.get("contributors") or []],
            workflow_step="draft",
            last_modified=datetime.now(timezone.utc),
        )
        self.variants[key] = variant
        return variant.model_dump(mode="json")

    async def unpublish_variant(self, item_id: str, codename: str) -> None:
        self.calls.append(("unpublish_variant", item_id, codename))
        key = (item_id, codename)
        if key not in self.variants:
            raise NotFoundError(f"Variant {codename} of item {item_id} not found", 404)
        self.published.discard(key)
        self.variants[key].workflow_step = "draft"

    async def ping(self) -> bool:
        return True

    async def dispose(self) -> None:
        pass

    def count(self, name: str) -> int:
        return sum(1 for call in self.calls if call[0] == name)


@dataclass
class InMemorySubscriptionApi:
    users: dict[str, SubscriptionUser] = field(default_factory=dict)

    async def list_users(self) -> list[SubscriptionUser]:
        return list(self.users.values())

    async def get_user(self, user_id: str) -> SubscriptionUser:
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found", 404)
        return user

    async def create_user(self, data: dict[str, Any]) -> SubscriptionUser:
        user = SubscriptionUser(id=str(uuid.uuid4()), created_at=datetime.now(timezone.utc), **data)
        self.users[user.id] = user
        return user

    async def update_user(self, user_id: str, data: dict[str, Any]) -> SubscriptionUser:
        user = await self.get_user(user_id)
        updated = user.model_copy(update=data)
        self.users[user_id] = updated
        return updated

    async def dispose(self) -> None:
        pass
