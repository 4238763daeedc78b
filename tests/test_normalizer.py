"""Tests for the response normalizer."""

from __future__ import annotations

import math

import pytest

from syncdash.models.agents import OperationKind
from syncdash.models.views import (
    CodeReviewView,
    Contributor,
    ContributorsView,
    ProgressView,
    SyncView,
    TaskItem,
    UpcomingTask,
)
from syncdash.services.normalizer import (
    normalize,
    normalize_progress,
    normalize_review,
    normalize_sync,
)
from syncdash.services.sample_backend import SAMPLE_PROGRESS, SAMPLE_REVIEW, SAMPLE_SYNC


class TestNormalizeSync:
    def test_partial_payload_fills_defaults(self) -> None:
        raw = {"project_summary": {"completion_percentage": 68}, "task_list": {"todo": []}}
        view = normalize_sync(raw)
        assert view.task_list.todo == []
        assert view.task_list.in_progress == []
        assert view.task_list.done == []
        assert view.project_summary.blockers == "No blockers reported."
        assert view.project_summary.highlights == "No highlights available."
        assert view.project_summary.completion_percentage == 68
        assert view.project_summary.project_name == "Project"
        assert view.project_summary.last_synced == "N/A"
        assert view.project_summary.health_status == "Unknown"

    @pytest.mark.parametrize("raw", [None, {}, "not json", 42, ["a", "b"]])
    def test_total_on_garbage(self, raw: object) -> None:
        view = normalize_sync(raw)
        assert view == SyncView()
        assert view.sync_report.github_status == "Unknown"
        assert view.sync_report.sync_timestamp == "N/A"
        assert view.sync_report.items_synced == 0
        assert view.active_contributors.contributors == []

    def test_task_elements_take_defaults(self) -> None:
        raw = {"task_list": {"todo": [{"title": "Ship it"}, "junk", None]}}
        todo = normalize_sync(raw).task_list.todo
        assert len(todo) == 3
        assert todo[0] == TaskItem(title="Ship it")
        assert todo[0].priority == "medium"
        assert todo[0].assignee == "Unassigned"
        assert todo[1] == TaskItem()
        assert todo[2].title == "Untitled"
        assert todo[2].type == "task"

    def test_wrong_container_types_become_empty(self) -> None:
        raw = {
            "task_list": {"todo": "oops", "in_progress": {"a": 1}},
            "active_contributors": {"name": "x"},
        }
        view = normalize_sync(raw)
        assert view.task_list.todo == []
        assert view.task_list.in_progress == []
        assert view.active_contributors.contributors == []

    def test_order_and_length_preserved(self) -> None:
        view = normalize_sync(SAMPLE_SYNC)
        names = [c.name for c in view.active_contributors.contributors]
        assert names == ["sarah-chen", "mike-ross", "alex-kim", "lisa-park", "jamie-lee"]
        assert len(view.task_list.in_progress) == 2
        assert view.sync_report.github_connected is True

    def test_idempotent(self) -> None:
        view = normalize_sync(SAMPLE_SYNC)
        assert normalize_sync(view) is view
        assert normalize_sync(normalize_sync({})) == normalize_sync({})

    def test_dumped_view_round_trips(self) -> None:
        view = normalize_sync(SAMPLE_SYNC)
        again = normalize_sync(view.model_dump())
        assert again == view
        assert len(again.active_contributors.contributors) == 5
        assert normalize_sync(view.model_dump(mode="json")) == view


class TestNormalizeReview:
    def test_defaults(self) -> None:
        view = normalize_review(None)
        assert view.pr_number == 0
        assert view.overall_score == 0
        assert view.recommendation == "pending"
        assert view.repository == ""
        assert view.quality_metrics.security == 0
        assert view.bugs_found == []
        assert view.improvements == []
        assert view.best_practices == []

    def test_bug_severity_default(self) -> None:
        view = normalize_review({"bugs_found": [{"description": "off by one"}]})
        assert view.bugs_found[0].severity == "unknown"
        assert view.bugs_found[0].file == ""

    def test_sample_payload(self) -> None:
        view = normalize_review(SAMPLE_REVIEW)
        assert view.pr_number == 142
        assert view.recommendation_label == "APPROVE"
        assert [p.status for p in view.best_practices] == [
            "pass", "pass", "pass", "partial", "fail"
        ]
        assert normalize_review(view.model_dump()) == view

    def test_numeric_coercion(self) -> None:
        view = normalize_review(
            {
                "pr_number": "17",
                "overall_score": "7.5",
                "quality_metrics": {
                    "readability": True,
                    "maintainability": float("nan"),
                    "performance": "fast",
                    "security": [8],
                },
            }
        )
        assert view.pr_number == 17
        assert view.overall_score == 7.5
        metrics = view.quality_metrics
        assert metrics.readability == 1
        assert metrics.maintainability == 0
        assert not math.isnan(metrics.maintainability)
        assert metrics.performance == 0
        assert metrics.security == 0

    def test_present_non_string_is_stringified(self) -> None:
        view = normalize_review({"repository": 123, "recommendation": None})
        assert view.repository == "123"
        assert view.recommendation == "pending"


class TestNormalizeProgress:
    def test_defaults(self) -> None:
        view = normalize_progress({})
        assert view == ProgressView()
        assert view.reminder_posted is False
        assert view.message == ""
        assert view.progress_summary.completion_rate == 0

    def test_upcoming_urgency(self) -> None:
        view = normalize_progress(
            {"upcoming_tasks": [{"days_remaining": 2}, {"days_remaining": 3}, {}]}
        )
        assert [t.is_urgent for t in view.upcoming_tasks] == [True, False, True]
        assert view.upcoming_tasks[2] == UpcomingTask()

    def test_reminder_posted_flag(self) -> None:
        assert normalize_progress({"reminder_posted": True}).reminder_posted is True
        assert normalize_progress({"reminder_posted": "yes"}).reminder_posted is True
        assert normalize_progress({"reminder_posted": 0}).reminder_posted is False

    def test_dumped_view_round_trips(self) -> None:
        view = normalize_progress(SAMPLE_PROGRESS)
        assert normalize_progress(view.model_dump()) == view


def test_normalize_dispatches_by_kind() -> None:
    assert isinstance(normalize(OperationKind.SYNC, None), SyncView)
    assert isinstance(normalize(OperationKind.REVIEW, None), CodeReviewView)
    assert isinstance(normalize(OperationKind.PROGRESS, None), ProgressView)
    assert normalize(OperationKind.SYNC, None).kind == "sync"


def test_contributor_share_is_relative_to_top() -> None:
    contributors = ContributorsView(
        contributors=[
            Contributor(name="a", contributions=40),
            Contributor(name="b", contributions=10),
        ]
    )
    assert contributors.max_contributions == 40
    assert contributors.share(contributors.contributors[1]) == 25.0
    assert ContributorsView().max_contributions == 1
    zero = Contributor(name="z", contributions=0)
    assert ContributorsView(contributors=[zero]).share(zero) == 0.0
