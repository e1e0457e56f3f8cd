from collections import Counter
from datetime import date

from kontent_dashboard.core.content import attach_assignees, list_content_items
from kontent_dashboard.core.ports.management import ManagementApi
from kontent_dashboard.core.ports.subscription import SubscriptionApi
from kontent_dashboard.core.users import list_users
from kontent_dashboard.models import (
    AnalyticsOverview,
    ContentItem,
    ContentTypeShare,
    MonthlyStat,
    SubscriptionUser,
)

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_PUBLISHED = "published"
_MONTH_WINDOW = 6
_TOP_TYPES = 6


def _percent(part: int, whole: int) -> int:
    return round(part * 100 / whole) if whole else 0


def monthly_created(items: list[ContentItem], today: date, months: int = _MONTH_WINDOW) -> list[MonthlyStat]:
    """Items created per calendar month, oldest month first, ending with ``today``'s month."""
    counts: Counter[tuple[int, int]] = Counter(
        (item.created.year, item.created.month) for item in items if item.created is not None
    )
    stats: list[MonthlyStat] = []
    for offset in range(months - 1, -1, -1):
        year, month0 = divmod(today.year * 12 + today.month - 1 - offset, 12)
        stats.append(MonthlyStat(month=_MONTHS[month0], created=counts[(year, month0 + 1)]))
    return stats


def content_type_distribution(items: list[ContentItem], top: int = _TOP_TYPES) -> list[ContentTypeShare]:
    counts = Counter(item.type or "unknown" for item in items)
    return [
        ContentTypeShare(type=type_.capitalize(), count=count, percentage=_percent(count, len(items)))
        for type_, count in counts.most_common(top)
    ]


def compute_overview(
    items: list[ContentItem], users: list[SubscriptionUser], today: date | None = None
) -> AnalyticsOverview:
    today = today or date.today()
    completed = sum(1 for item in items if item.status == _PUBLISHED)
    return AnalyticsOverview(
        total_content=len(items),
        total_users=sum(1 for user in users if user.status == "active"),
        assigned_content=sum(1 for item in items if item.assigned_to),
        completed_content=completed,
        completion_rate=_percent(completed, len(items)),
        monthly_stats=monthly_created(items, today),
        content_types=content_type_distribution(items),
    )


async def load_overview(
    management: ManagementApi,
    subscription: SubscriptionApi | None,
    codename: str,
    today: date | None = None,
) -> AnalyticsOverview:
    """Fetch items (with assignees) and users, then compute the overview."""
    items = await attach_assignees(management, await list_content_items(management), codename)
    users = await list_users(subscription) if subscription is not None else []
    return compute_overview(items, users, today)
