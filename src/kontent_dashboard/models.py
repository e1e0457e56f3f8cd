from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

DEFAULT_ROLE = "contributor"


class Contributor(BaseModel):
    id: str
    role: str = DEFAULT_ROLE


class Language(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str = ""
    codename: str
    is_active: bool = True
    is_default: bool = False


class LanguageVariant(BaseModel):
    """Locale-specific body of a content item.

    ``elements`` are kept exactly as the Management API returned them; writes
    send them back untouched.
    """

    item_id: str
    language_codename: str | None = None
    language_id: str | None = None
    elements: list[dict[str, Any]] = Field(default_factory=list)
    contributors: list[Contributor] = Field(default_factory=list)
    workflow_step: str | None = None
    last_modified: datetime | None = None

    @classmethod
    def from_api(cls, payload: dict[str, Any], codename: str | None = None) -> LanguageVariant:
        item = payload.get("item") or {}
        language = payload.get("language") or {}
        step = payload.get("workflow_step") or {}
        return cls(
            item_id=str(item.get("id", "")),
            language_codename=language.get("codename") or codename,
            language_id=language.get("id"),
            elements=list(payload.get("elements") or []),
            contributors=[Contributor.model_validate(c) for c in payload.get("contributors") or []],
            workflow_step=step.get("codename") or step.get("id"),
            last_modified=payload.get("last_modified"),
        )

    def to_upsert_payload(self) -> dict[str, Any]:
        return {
            "elements": self.elements,
            "contributors": [c.model_dump() for c in self.contributors],
        }


class ContentItem(BaseModel):
    id: str
    name: str
    codename: str = ""
    type: str = "unknown"
    status: str = "draft"
    created: datetime | None = None
    last_modified: datetime | None = None
    assigned_to: str | None = None

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> ContentItem:
        item_type = payload.get("type") or {}
        step = payload.get("workflow_step") or {}
        return cls(
            id=str(payload["id"]),
            name=payload.get("name", ""),
            codename=payload.get("codename", ""),
            type=item_type.get("codename") or item_type.get("id") or "unknown",
            status=step.get("codename") or "draft",
            created=payload.get("created"),
            last_modified=payload.get("last_modified"),
        )


class AssignmentOptions(BaseModel):
    """Per-call assignment options.

    ``notes`` and ``due_date`` are informational; no CMS field backs them.
    """

    role: str | None = None
    notes: str | None = None
    due_date: str | None = None


class AssignmentResult(BaseModel):
    item_id: str
    success: bool
    data: dict[str, Any] | None = None
    error: str | None = None


class VariantAssignments(BaseModel):
    item_id: str
    language_codename: str
    contributors: list[Contributor] = Field(default_factory=list)
    elements: list[dict[str, Any]] = Field(default_factory=list)


class SubscriptionUser(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    status: str = "active"
    created_at: datetime | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def initials(self) -> str:
        return f"{self.first_name[:1]}{self.last_name[:1]}"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class MonthlyStat(BaseModel):
    month: str
    created: int


class ContentTypeShare(BaseModel):
    type: str
    count: int
    percentage: int


class AnalyticsOverview(BaseModel):
    total_content: int
    total_users: int
    assigned_content: int
    completed_content: int
    completion_rate: int
    monthly_stats: list[MonthlyStat] = Field(default_factory=list)
    content_types: list[ContentTypeShare] = Field(default_factory=list)
