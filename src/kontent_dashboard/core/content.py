import logging

from kontent_dashboard.core.ports.management import ManagementApi
from kontent_dashboard.errors import NotFoundError
from kontent_dashboard.models import ContentItem

logger = logging.getLogger(__name__)


async def list_content_items(api: ManagementApi, limit: int | None = None) -> list[ContentItem]:
    rows = await api.list_items(limit=limit)
    items = [ContentItem.from_api(row) for row in rows]
    logger.info("Fetched %d content items", len(items))
    return items


async def attach_assignees(api: ManagementApi, items: list[ContentItem], codename: str) -> list[ContentItem]:
    """Fill ``assigned_to`` from the first contributor of each item's variant.

    Items without a variant in ``codename`` are left unassigned.
    """
    enriched: list[ContentItem] = []
    for item in items:
        try:
            variant = await api.get_variant(item.id, codename)
        except NotFoundError:
            enriched.append(item.model_copy(update={"assigned_to": None}))
            continue
        assignee = variant.contributors[0].id if variant.contributors else None
        updates: dict[str, object] = {"assigned_to": assignee}
        if variant.workflow_step:
            updates["status"] = variant.workflow_step
        enriched.append(item.model_copy(update=updates))
    return enriched


def filter_items(items: list[ContentItem], search: str = "", status: str = "all") -> list[ContentItem]:
    """Case-insensitive name/type search plus an exact status filter (``all`` disables it)."""
    needle = search.lower()
    return [
        item
        for item in items
        if (needle in item.name.lower() or needle in item.type.lower()) and (status == "all" or item.status == status)
    ]


async def get_content_item(api: ManagementApi, item_id: str) -> ContentItem:
    return ContentItem.from_api(await api.get_item(item_id))
