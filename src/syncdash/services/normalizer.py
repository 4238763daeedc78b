"""Response normalizer — raw agent results into fully-defaulted view models.

Agents return loosely structured JSON: any field may be missing, null, or of
the wrong type. The functions here never raise on such input; missing numbers
become 0, missing text takes a placeholder, and anything that is not a list
where a list is expected becomes an empty list. A view passed back in is
returned unchanged.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from syncdash.models.agents import OperationKind
from syncdash.models.views import (
    BestPracticeItem,
    BugItem,
    CodeReviewView,
    Contributor,
    ContributorsView,
    FocusArea,
    ImprovementItem,
    NormalizedView,
    OverdueItem,
    ProgressSummary,
    ProgressView,
    ProjectSummaryView,
    QualityMetrics,
    SyncReportView,
    SyncView,
    TaskBoardView,
    TaskItem,
    UpcomingTask,
)
from syncdash.services._coerce import (
    as_mapping,
    field_bool,
    field_list,
    field_number,
    field_str,
)


def normalize_sync(raw: object) -> SyncView:
    """Normalize a project sync manager result."""
    if isinstance(raw, SyncView):
        return raw
    r = as_mapping(raw)
    summary = as_mapping(r.get("project_summary"))
    tasks = as_mapping(r.get("task_list"))
    report = as_mapping(r.get("sync_report"))
    contributors = r.get("active_contributors")
    if isinstance(contributors, Mapping):
        # Already-dumped ContributorsView
        r = {**r, "active_contributors": contributors.get("contributors")}
    return SyncView(
        project_summary=ProjectSummaryView(
            project_name=field_str(summary, "project_name", "Project"),
            last_synced=field_str(summary, "last_synced", "N/A"),
            health_status=field_str(summary, "health_status", "Unknown"),
            completion_percentage=field_number(summary, "completion_percentage"),
            total_tasks=field_number(summary, "total_tasks"),
            highlights=field_str(summary, "highlights", "No highlights available."),
            blockers=field_str(summary, "blockers", "No blockers reported."),
        ),
        task_list=TaskBoardView(
            todo=_items(tasks, "todo", _task_item),
            in_progress=_items(tasks, "in_progress", _task_item),
            done=_items(tasks, "done", _task_item),
        ),
        sync_report=SyncReportView(
            github_status=field_str(report, "github_status", "Unknown"),
            notion_status=field_str(report, "notion_status", "Unknown"),
            items_synced=field_number(report, "items_synced"),
            sync_timestamp=field_str(report, "sync_timestamp", "N/A"),
        ),
        active_contributors=ContributorsView(
            contributors=_items(r, "active_contributors", _contributor),
        ),
    )


def normalize_review(raw: object) -> CodeReviewView:
    """Normalize a code review agent result."""
    if isinstance(raw, CodeReviewView):
        return raw
    r = as_mapping(raw)
    metrics = as_mapping(r.get("quality_metrics"))
    return CodeReviewView(
        pr_number=field_number(r, "pr_number"),
        repository=field_str(r, "repository"),
        overall_score=field_number(r, "overall_score"),
        recommendation=field_str(r, "recommendation", "pending"),
        summary=field_str(r, "summary"),
        quality_metrics=QualityMetrics(
            readability=field_number(metrics, "readability"),
            maintainability=field_number(metrics, "maintainability"),
            performance=field_number(metrics, "performance"),
            security=field_number(metrics, "security"),
        ),
        bugs_found=_items(r, "bugs_found", _bug),
        improvements=_items(r, "improvements", _improvement),
        best_practices=_items(r, "best_practices", _best_practice),
    )


def normalize_progress(raw: object) -> ProgressView:
    """Normalize a progress reminder agent result."""
    if isinstance(raw, ProgressView):
        return raw
    r = as_mapping(raw)
    summary = as_mapping(r.get("progress_summary"))
    return ProgressView(
        report_date=field_str(r, "report_date"),
        progress_summary=ProgressSummary(
            tasks_completed=field_number(summary, "tasks_completed"),
            tasks_in_progress=field_number(summary, "tasks_in_progress"),
            tasks_overdue=field_number(summary, "tasks_overdue"),
            upcoming_deadlines=field_number(summary, "upcoming_deadlines"),
            completion_rate=field_number(summary, "completion_rate"),
        ),
        overdue_items=_items(r, "overdue_items", _overdue_item),
        upcoming_tasks=_items(r, "upcoming_tasks", _upcoming_task),
        focus_areas=_items(r, "focus_areas", _focus_area),
        message=field_str(r, "message"),
        reminder_posted=field_bool(r, "reminder_posted"),
    )


NORMALIZERS: dict[OperationKind, Callable[[object], NormalizedView]] = {
    OperationKind.SYNC: normalize_sync,
    OperationKind.REVIEW: normalize_review,
    OperationKind.PROGRESS: normalize_progress,
}


def normalize(kind: OperationKind, raw: object) -> NormalizedView:
    """Normalize ``raw`` into the view model for ``kind``."""
    return NORMALIZERS[kind](raw)


# ── Element helpers ──


def _items[T](
    data: Mapping[str, Any], key: str, build: Callable[[Mapping[str, Any]], T]
) -> list[T]:
    return [build(as_mapping(element)) for element in field_list(data, key)]


def _task_item(r: Mapping[str, Any]) -> TaskItem:
    return TaskItem(
        title=field_str(r, "title", "Untitled"),
        type=field_str(r, "type", "task"),
        priority=field_str(r, "priority", "medium"),
        assignee=field_str(r, "assignee", "Unassigned"),
        source=field_str(r, "source"),
    )


def _contributor(r: Mapping[str, Any]) -> Contributor:
    return Contributor(
        name=field_str(r, "name", "Unknown"),
        contributions=field_number(r, "contributions"),
    )


def _bug(r: Mapping[str, Any]) -> BugItem:
    return BugItem(
        severity=field_str(r, "severity", "unknown"),
        description=field_str(r, "description"),
        file=field_str(r, "file"),
        suggestion=field_str(r, "suggestion"),
    )


def _improvement(r: Mapping[str, Any]) -> ImprovementItem:
    return ImprovementItem(
        category=field_str(r, "category"),
        description=field_str(r, "description"),
        priority=field_str(r, "priority"),
    )


def _best_practice(r: Mapping[str, Any]) -> BestPracticeItem:
    return BestPracticeItem(
        practice=field_str(r, "practice"),
        status=field_str(r, "status"),
        note=field_str(r, "note"),
    )


def _overdue_item(r: Mapping[str, Any]) -> OverdueItem:
    return OverdueItem(
        title=field_str(r, "title"),
        due_date=field_str(r, "due_date"),
        days_overdue=field_number(r, "days_overdue"),
        assignee=field_str(r, "assignee"),
    )


def _upcoming_task(r: Mapping[str, Any]) -> UpcomingTask:
    return UpcomingTask(
        title=field_str(r, "title"),
        due_date=field_str(r, "due_date"),
        days_remaining=field_number(r, "days_remaining"),
        assignee=field_str(r, "assignee"),
    )


def _focus_area(r: Mapping[str, Any]) -> FocusArea:
    return FocusArea(
        area=field_str(r, "area"),
        reason=field_str(r, "reason"),
        priority=field_str(r, "priority"),
    )
