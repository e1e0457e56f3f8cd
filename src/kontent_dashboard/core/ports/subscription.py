from typing import Any, Protocol

from kontent_dashboard.models import SubscriptionUser


class SubscriptionApi(Protocol):
    async def list_users(self) -> list[SubscriptionUser]: ...

    async def get_user(self, user_id: str) -> SubscriptionUser: ...

    async def create_user(self, data: dict[str, Any]) -> SubscriptionUser: ...

    async def update_user(self, user_id: str, data: dict[str, Any]) -> SubscriptionUser: ...

    async def dispose(self) -> None: ...
