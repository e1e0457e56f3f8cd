from __future__ import annotations

from pydantic import BaseModel, Field

from kontent_dashboard.models import AssignmentOptions, AssignmentResult


class HealthResponse(BaseModel):
    status: str = "ok"


class ReadinessResponse(BaseModel):
    status: str = "ok"
    cms: str = "up"
    language: str | None = None
    subscription: bool = False


class AssignRequest(BaseModel):
    user_id: str
    language: str | None = None
    role: str | None = None
    notes: str | None = None
    due_date: str | None = None

    def options(self) -> AssignmentOptions:
        return AssignmentOptions(role=self.role, notes=self.notes, due_date=self.due_date)


class BulkAssignRequest(AssignRequest):
    item_ids: list[str] = Field(min_length=1)


class BulkAssignResponse(BaseModel):
    """Per-item outcomes of POST /assignments/bulk plus the aggregate message."""

    message: str
    succeeded: int
    total: int
    results: list[AssignmentResult]


class LanguageResponse(BaseModel):
    codename: str


class LanguageOverride(BaseModel):
    codename: str | None = None


class UserInvite(BaseModel):
    email: str
    first_name: str | None = None
    last_name: str | None = None


class UserUpdate(BaseModel):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    status: str | None = None
