"""Unit tests for the assignment reconciler."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from kontent_dashboard.client.memory import InMemoryManagementApi
from kontent_dashboard.core.assignment import (
    AssignmentReconciler,
    drop_contributor,
    merge_contributor,
    summarize,
    write_variant,
)
from kontent_dashboard.core.locale import LocaleResolver
from kontent_dashboard.core.session import Session
from kontent_dashboard.errors import (
    LocaleResolutionError,
    NotFoundError,
    PublishedConflictError,
    TransportError,
)
from kontent_dashboard.models import AssignmentOptions, AssignmentResult, Contributor, LanguageVariant


class TestMergeContributor:
    def test_appends_new_user_with_default_role(self) -> None:
        merged = merge_contributor([Contributor(id="u1")], "u2")
        assert [(c.id, c.role) for c in merged] == [("u1", "contributor"), ("u2", "contributor")]

    def test_updates_role_in_place(self) -> None:
        merged = merge_contributor([Contributor(id="u1"), Contributor(id="u2")], "u1", "reviewer")
        assert [(c.id, c.role) for c in merged] == [("u1", "reviewer"), ("u2", "contributor")]

    def test_keeps_role_when_none_given(self) -> None:
        merged = merge_contributor([Contributor(id="u1", role="editor")], "u1")
        assert merged == [Contributor(id="u1", role="editor")]

    def test_collapses_duplicate_ids(self) -> None:
        merged = merge_contributor([Contributor(id="u1"), Contributor(id="u1", role="editor")], "u1")
        assert len(merged) == 1

    def test_does_not_mutate_input(self) -> None:
        original = [Contributor(id="u1")]
        merge_contributor(original, "u1", "owner")
        assert original[0].role == "contributor"

    def test_drop_contributor(self) -> None:
        assert drop_contributor([Contributor(id="u1"), Contributor(id="u2")], "u1") == [Contributor(id="u2")]


class TestAssign:
    @pytest.mark.asyncio
    async def test_echoes_elements_verbatim(
        self,
        reconciler: AssignmentReconciler,
        management_api: InMemoryManagementApi,
        elements: list[dict[str, object]],
    ) -> None:
        result = await reconciler.assign("a", "u9")

        assert result.success is True
        assert len(management_api.writes) == 1
        write = management_api.writes[0]
        assert write.codename == "en-US"
        assert write.payload["elements"] == elements
        assert write.payload["contributors"] == [{"id": "u9", "role": "contributor"}]

    @pytest.mark.asyncio
    async def test_fetches_before_writing(
        self, reconciler: AssignmentReconciler, management_api: InMemoryManagementApi
    ) -> None:
        await reconciler.assign("a", "u9", "en-US")

        names = [call[0] for call in management_api.calls]
        assert names == ["get_variant", "upsert_variant"]

    @pytest.mark.asyncio
    async def test_assigning_twice_is_idempotent_and_last_role_wins(
        self, reconciler: AssignmentReconciler, management_api: InMemoryManagementApi
    ) -> None:
        await reconciler.assign("a", "u9", options=AssignmentOptions(role="contributor"))
        await reconciler.assign("a", "u9", options=AssignmentOptions(role="reviewer"))

        contributors = management_api.variants[("a", "en-US")].contributors
        assert contributors == [Contributor(id="u9", role="reviewer")]

    @pytest.mark.asyncio
    async def test_keeps_existing_contributors(
        self, reconciler: AssignmentReconciler, management_api: InMemoryManagementApi
    ) -> None:
        await reconciler.assign("c", "u2")

        ids = [c.id for c in management_api.variants[("c", "en-US")].contributors]
        assert ids == ["u1", "u2"]

    @pytest.mark.asyncio
    async def test_notes_and_due_date_are_not_written(
        self, reconciler: AssignmentReconciler, management_api: InMemoryManagementApi
    ) -> None:
        await reconciler.assign("a", "u9", options=AssignmentOptions(notes="by Friday", due_date="2024-02-01"))

        assert set(management_api.writes[0].payload) == {"elements", "contributors"}

    @pytest.mark.asyncio
    async def test_published_variant_is_unpublished_then_retried_once(
        self,
        reconciler: AssignmentReconciler,
        management_api: InMemoryManagementApi,
        elements: list[dict[str, object]],
    ) -> None:
        result = await reconciler.assign("p", "u9")

        assert result.success is True
        assert management_api.count("unpublish_variant") == 1
        assert management_api.count("upsert_variant") == 2
        assert management_api.writes[0].payload["elements"] == elements

    @pytest.mark.asyncio
    async def test_missing_item_raises_not_found(self, reconciler: AssignmentReconciler) -> None:
        with pytest.raises(NotFoundError, match="not found"):
            await reconciler.assign("missing", "u9")


class TestWriteVariant:
    @pytest.mark.asyncio
    async def test_failed_retry_is_surfaced(self) -> None:
        api = AsyncMock()
        api.upsert_variant.side_effect = [
            PublishedConflictError("published", 400, "published and cannot be updated"),
            TransportError("boom", 500, "boom"),
        ]

        with pytest.raises(TransportError):
            await write_variant(api, "p", "en-US", {"elements": [], "contributors": []})

        assert api.unpublish_variant.await_count == 1
        assert api.upsert_variant.await_count == 2

    @pytest.mark.asyncio
    async def test_second_conflict_is_not_retried_again(self, elements: list[dict[str, object]]) -> None:
        api = AsyncMock()
        conflict = PublishedConflictError("published", 400, "published and cannot be updated")
        api.get_variant.return_value = LanguageVariant(item_id="p", language_codename="en-US", elements=elements)
        api.upsert_variant.side_effect = [conflict, conflict]
        reconciler = AssignmentReconciler(api, LocaleResolver(api, Session()))

        with pytest.raises(PublishedConflictError):
            await reconciler.assign("p", "u9", "en-US")

        assert api.unpublish_variant.await_count == 1
        assert api.upsert_variant.await_count == 2

    @pytest.mark.asyncio
    async def test_other_errors_do_not_unpublish(self) -> None:
        api = AsyncMock()
        api.upsert_variant.side_effect = TransportError("bad gateway", 502, "")

        with pytest.raises(TransportError):
            await write_variant(api, "a", "en-US", {"elements": [], "contributors": []})

        api.unpublish_variant.assert_not_awaited()


class TestRemoveAssignment:
    @pytest.mark.asyncio
    async def test_removes_contributor(
        self,
        reconciler: AssignmentReconciler,
        management_api: InMemoryManagementApi,
        elements: list[dict[str, object]],
    ) -> None:
        result = await reconciler.remove_assignment("c", "u1")

        assert result.success is True
        assert management_api.writes[0].payload == {"elements": elements, "contributors": []}

    @pytest.mark.asyncio
    async def test_absent_contributor_is_a_successful_no_op(
        self, reconciler: AssignmentReconciler, management_api: InMemoryManagementApi
    ) -> None:
        result = await reconciler.remove_assignment("c", "nobody")

        assert result.success is True
        assert management_api.writes == []
        assert management_api.variants[("c", "en-US")].contributors == [Contributor(id="u1", role="editor")]


class TestGetAssignments:
    @pytest.mark.asyncio
    async def test_returns_contributors_and_elements(
        self, reconciler: AssignmentReconciler, elements: list[dict[str, object]]
    ) -> None:
        result = await reconciler.get_assignments("c")

        assert result.language_codename == "en-US"
        assert result.contributors == [Contributor(id="u1", role="editor")]
        assert result.elements == elements

    @pytest.mark.asyncio
    async def test_missing_variant_means_no_assignment(self, reconciler: AssignmentReconciler) -> None:
        result = await reconciler.get_assignments("missing")

        assert result.contributors == []
        assert result.elements == []


class TestBulkAssign:
    @pytest.mark.asyncio
    async def test_collects_per_item_results_in_order(self, reconciler: AssignmentReconciler) -> None:
        results = await reconciler.bulk_assign(["a", "b"], "u9")

        assert [r.item_id for r in results] == ["a", "b"]
        assert results[0].success is True
        assert results[1].success is False
        assert results[1].error is not None and "not found" in results[1].error

    @pytest.mark.asyncio
    async def test_failure_does_not_stop_later_items(
        self, reconciler: AssignmentReconciler, management_api: InMemoryManagementApi
    ) -> None:
        results = await reconciler.bulk_assign(["missing", "a", "p"], "u9")

        assert [r.success for r in results] == [False, True, True]
        assert management_api.variants[("p", "en-US")].contributors == [Contributor(id="u9")]

    @pytest.mark.asyncio
    async def test_resolves_language_once(
        self, reconciler: AssignmentReconciler, management_api: InMemoryManagementApi
    ) -> None:
        await reconciler.bulk_assign(["a", "c"], "u9")

        assert management_api.count("list_languages") == 1

    @pytest.mark.asyncio
    async def test_locale_failure_is_raised(self) -> None:
        api = InMemoryManagementApi(languages_error=TransportError("offline"))
        reconciler = AssignmentReconciler(api, LocaleResolver(api, Session()))

        with pytest.raises(LocaleResolutionError):
            await reconciler.bulk_assign(["a"], "u9")

    @pytest.mark.asyncio
    async def test_bulk_remove(self, reconciler: AssignmentReconciler) -> None:
        results = await reconciler.bulk_remove(["c", "a"], "u1")

        assert [r.success for r in results] == [True, True]


def test_summarize_counts_failures() -> None:
    summary = summarize(
        [
            AssignmentResult(item_id="a", success=True),
            AssignmentResult(item_id="b", success=False, error="Variant en-US of item b not found"),
        ]
    )
    assert summary.message == "Assigned 1 of 2"
    assert summary.failures == {"b": "Variant en-US of item b not found"}
