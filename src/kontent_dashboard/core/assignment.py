"""Content assignment through language-variant contributor lists.

Every write is fetch-merge-write: the variant is read, its elements are sent
back untouched and only the contributor list changes. Bulk operations walk
their items one at a time so that two read-modify-write cycles never overlap
on the same variant.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from kontent_dashboard.core.locale import LocaleResolver
from kontent_dashboard.core.ports.management import ManagementApi
from kontent_dashboard.errors import KontentError, NotFoundError, PublishedConflictError
from kontent_dashboard.models import (
    DEFAULT_ROLE,
    AssignmentOptions,
    AssignmentResult,
    Contributor,
    VariantAssignments,
)

logger = logging.getLogger(__name__)


def merge_contributor(contributors: list[Contributor], user_id: str, role: str | None = None) -> list[Contributor]:
    """Return a new contributor list with ``user_id`` present exactly once.

    An existing entry keeps its position; its role changes only when ``role`` is given.
    """
    merged: list[Contributor] = []
    found = False
    for contributor in contributors:
        if contributor.id == user_id:
            if found:
                continue
            found = True
            merged.append(Contributor(id=user_id, role=role or contributor.role))
        else:
            merged.append(contributor.model_copy())
    if not found:
        merged.append(Contributor(id=user_id, role=role or DEFAULT_ROLE))
    return merged


def drop_contributor(contributors: list[Contributor], user_id: str) -> list[Contributor]:
    return [c.model_copy() for c in contributors if c.id != user_id]


async def write_variant(
    api: ManagementApi, item_id: str, codename: str, payload: dict[str, Any]
) -> dict[str, Any]:
    """Upsert a variant, unpublishing and retrying once if it is published."""
    try:
        return await api.upsert_variant(item_id, codename, payload)
    except PublishedConflictError:
        logger.info("Variant %s/%s is published; unpublishing before retry", item_id, codename)
    await api.unpublish_variant(item_id, codename)
    return await api.upsert_variant(item_id, codename, payload)


@dataclass
class BulkSummary:
    verb: str
    total: int
    succeeded: int
    failures: dict[str, str] = field(default_factory=dict)

    @property
    def message(self) -> str:
        return f"{self.verb.capitalize()} {self.succeeded} of {self.total}"


def summarize(results: list[AssignmentResult], verb: str = "assigned") -> BulkSummary:
    failures = {r.item_id: r.error or "unknown error" for r in results if not r.success}
    return BulkSummary(verb=verb, total=len(results), succeeded=len(results) - len(failures), failures=failures)


class AssignmentReconciler:
    def __init__(self, api: ManagementApi, locale: LocaleResolver) -> None:
        self._api = api
        self._locale = locale

    async def _codename(self, language_codename: str | None) -> str:
        return language_codename or await self._locale.resolve()

    async def assign(
        self,
        item_id: str,
        user_id: str,
        language_codename: str | None = None,
        options: AssignmentOptions | None = None,
    ) -> AssignmentResult:
        options = options or AssignmentOptions()
        codename = await self._codename(language_codename)
        variant = await self._api.get_variant(item_id, codename)
        contributors = merge_contributor(variant.contributors, user_id, options.role)
        if options.notes or options.due_date:
            logger.debug("Assignment notes/due date for %s are not persisted", item_id)
        payload = {
            "elements": variant.elements,
            "contributors": [c.model_dump() for c in contributors],
        }
        data = await write_variant(self._api, item_id, codename, payload)
        logger.info("Assigned %s to item %s (%s)", user_id, item_id, codename)
        return AssignmentResult(item_id=item_id, success=True, data=data)

    async def remove_assignment(
        self, item_id: str, user_id: str, language_codename: str | None = None
    ) -> AssignmentResult:
        codename = await self._codename(language_codename)
        variant = await self._api.get_variant(item_id, codename)
        if all(c.id != user_id for c in variant.contributors):
            logger.info("User %s is not a contributor of %s (%s); nothing to remove", user_id, item_id, codename)
            return AssignmentResult(item_id=item_id, success=True, data=variant.to_upsert_payload())
        payload = {
            "elements": variant.elements,
            "contributors": [c.model_dump() for c in drop_contributor(variant.contributors, user_id)],
        }
        data = await write_variant(self._api, item_id, codename, payload)
        logger.info("Removed %s from item %s (%s)", user_id, item_id, codename)
        return AssignmentResult(item_id=item_id, success=True, data=data)

    async def get_assignments(self, item_id: str, language_codename: str | None = None) -> VariantAssignments:
        codename = await self._codename(language_codename)
        try:
            variant = await self._api.get_variant(item_id, codename)
        except NotFoundError:
            return VariantAssignments(item_id=item_id, language_codename=codename)
        return VariantAssignments(
            item_id=item_id,
            language_codename=codename,
            contributors=variant.contributors,
            elements=variant.elements,
        )

    async def bulk_assign(
        self,
        item_ids: Iterable[str],
        user_id: str,
        language_codename: str | None = None,
        options: AssignmentOptions | None = None,
    ) -> list[AssignmentResult]:
        codename = await self._codename(language_codename)
        results: list[AssignmentResult] = []
        for item_id in item_ids:
            try:
                results.append(await self.assign(item_id, user_id, codename, options))
            except KontentError as exc:
                logger.warning("Assigning %s to %s failed: %s", user_id, item_id, exc)
                results.append(AssignmentResult(item_id=item_id, success=False, error=str(exc)))
        logger.info(summarize(results).message)
        return results

    async def bulk_remove(
        self, item_ids: Iterable[str], user_id: str, language_codename: str | None = None
    ) -> list[AssignmentResult]:
        codename = await self._codename(language_codename)
        results: list[AssignmentResult] = []
        for item_id in item_ids:
            try:
                results.append(await self.remove_assignment(item_id, user_id, codename))
            except KontentError as exc:
                logger.warning("Removing %s from %s failed: %s", user_id, item_id, exc)
                results.append(AssignmentResult(item_id=item_id, success=False, error=str(exc)))
        logger.info(summarize(results, "unassigned").message)
        return results
