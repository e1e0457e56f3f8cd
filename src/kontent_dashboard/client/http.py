"""httpx adapters for the Kontent.ai Management and Subscription APIs."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import httpx
from pydantic import ValidationError

from kontent_dashboard.config import KontentConfig
from kontent_dashboard.errors import TransportError, raise_for_response
from kontent_dashboard.models import Language, LanguageVariant, SubscriptionUser

logger = logging.getLogger(__name__)

SDK_ID = "pypi;kontent-dashboard;0.1.0"
_CONTINUATION_HEADER = "x-continuation"


@contextmanager
def _parsing(context: str, body: Any) -> Iterator[None]:
    """Report a 2xx body that does not have the expected shape as a transport failure."""
    try:
        yield
    except (ValidationError, AttributeError) as exc:
        raise TransportError(f"{context}: unexpected response body: {exc}", None, str(body)) from exc


def _headers(api_key: str) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
        "X-KC-SDKID": SDK_ID,
    }


class _JsonClient:
    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=_headers(api_key),
            timeout=timeout,
            transport=transport,
        )

    async def _request(self, method: str, path: str, context: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise TransportError(f"{context}: {exc}") from exc
        logger.debug("%s %s -> %d", method, path, response.status_code)
        raise_for_response(response, context)
        return response

    async def _json(self, method: str, path: str, context: str, **kwargs: Any) -> Any:
        response = await self._request(method, path, context, **kwargs)
        if response.status_code == httpx.codes.NO_CONTENT or not response.content:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(f"{context}: invalid JSON body", response.status_code, response.text) from exc

    async def dispose(self) -> None:
        await self._client.aclose()


class HttpManagementApi(_JsonClient):
    def __init__(self, config: KontentConfig, transport: httpx.AsyncBaseTransport | None = None) -> None:
        super().__init__(config.environment_url, config.management_api_key, config.timeout, transport)

    async def _paged(self, path: str, key: str, context: str, limit: int | None = None) -> list[dict[str, Any]]:
        rows: list[dict[str, Any]] = []
        token: str | None = None
        while True:
            headers = {_CONTINUATION_HEADER: token} if token else None
            body = await self._json("GET", path, context, headers=headers)
            if not isinstance(body, dict):
                raise TransportError(f"{context}: unexpected response body", None, str(body))
            rows.extend(body.get(key) or [])
            if limit is not None and len(rows) >= limit:
                return rows[:limit]
            token = (body.get("pagination") or {}).get("continuation_token")
            if not token:
                return rows

    async def list_languages(self) -> list[Language]:
        rows = await self._paged("/languages", "languages", "Languages")
        with _parsing("Languages", rows):
            languages = [Language.model_validate(row) for row in rows]
        return languages

    async def list_items(self, limit: int | None = None) -> list[dict[str, Any]]:
        return await self._paged("/items", "items", "Content items", limit)

    async def get_item(self, item_id: str) -> dict[str, Any]:
        result: dict[str, Any] = await self._json("GET", f"/items/{item_id}", f"Item {item_id}")
        return result

    async def list_variants(self, item_id: str) -> list[LanguageVariant]:
        context = f"Variants of item {item_id}"
        body = await self._json("GET", f"/items/{item_id}/variants", context)
        with _parsing(context, body):
            rows = body if isinstance(body, list) else body.get("variants") or []
            variants = [LanguageVariant.from_api(row) for row in rows]
        return variants

    async def get_variant(self, item_id: str, codename: str) -> LanguageVariant:
        context = f"Variant {codename} of item {item_id}"
        body = await self._json("GET", f"/items/{item_id}/variants/codename/{codename}", context)
        with _parsing(context, body):
            variant = LanguageVariant.from_api(body, codename)
        if not variant.item_id:
            variant.item_id = item_id
        return variant

    async def upsert_variant(self, item_id: str, codename: str, payload: dict[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = await self._json(
            "PUT",
            f"/items/{item_id}/variants/codename/{codename}",
            f"Variant {codename} of item {item_id}",
            json=payload,
        )
        return result

    async def unpublish_variant(self, item_id: str, codename: str) -> None:
        await self._request(
            "PUT",
            f"/items/{item_id}/variants/codename/{codename}/unpublish",
            f"Unpublish of variant {codename} of item {item_id}",
        )
        logger.info("Unpublished variant %s of item %s", codename, item_id)

    async def ping(self) -> bool:
        try:
            response = await self._client.get("/languages")
        except httpx.HTTPError:
            return False
        return response.is_success


class HttpSubscriptionApi(_JsonClient):
    def __init__(self, config: KontentConfig, transport: httpx.AsyncBaseTransport | None = None) -> None:
        if not config.subscription_url or not config.subscription_api_key:
            raise ValueError("Subscription id and API key are required.")
        super().__init__(config.subscription_url, config.subscription_api_key, config.timeout, transport)

    async def list_users(self) -> list[SubscriptionUser]:
        body = await self._json("GET", "/users", "Subscription users")
        with _parsing("Subscription users", body):
            rows = body if isinstance(body, list) else body.get("users") or []
            users = [SubscriptionUser.model_validate(row) for row in rows]
        return users

    async def get_user(self, user_id: str) -> SubscriptionUser:
        body = await self._json("GET", f"/users/{user_id}", f"User {user_id}")
        with _parsing("Subscription user", body):
            user = SubscriptionUser.model_validate(body)
        return user

    async def create_user(self, data: dict[str, Any]) -> SubscriptionUser:
        body = await self._json("POST", "/users", "User invitation", json=data)
        with _parsing("Subscription user", body):
            user = SubscriptionUser.model_validate(body)
        return user

    async def update_user(self, user_id: str, data: dict[str, Any]) -> SubscriptionUser:
        body = await self._json("PUT", f"/users/{user_id}", f"User {user_id}", json=data)
        with _parsing("Subscription user", body):
            user = SubscriptionUser.model_validate(body)
        return user
