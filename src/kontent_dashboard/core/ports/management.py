from typing import Any, Protocol

from kontent_dashboard.models import Language, LanguageVariant


class ManagementApi(Protocol):
    async def list_languages(self) -> list[Language]: ...

    async def list_items(self, limit: int | None = None) -> list[dict[str, Any]]: ...

    async def get_item(self, item_id: str) -> dict[str, Any]: ...

    async def list_variants(self, item_id: str) -> list[LanguageVariant]: ...

    async def get_variant(self, item_id: str, codename: str) -> LanguageVariant: ...

    async def upsert_variant(self, item_id: str, codename: str, payload: dict[str, Any]) -> dict[str, Any]: ...

    async def unpublish_variant(self, item_id: str, codename: str) -> None: ...

    async def ping(self) -> bool: ...

    async def dispose(self) -> None: ...
