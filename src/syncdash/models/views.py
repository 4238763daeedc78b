"""Normalized view models for the three agent operations.

Every field carries a default so a view can always be rendered, whatever the
agent actually returned. Instances are produced by
``syncdash.services.normalizer`` and never mutated afterwards.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

Number = int | float


class _View(BaseModel):
    model_config = ConfigDict(frozen=True)


# ── Project sync ──


class TaskItem(_View):
    """A task card on the sync board."""

    title: str = "Untitled"
    type: str = "task"
    priority: str = "medium"
    assignee: str = "Unassigned"
    source: str = ""


class ProjectSummaryView(_View):
    project_name: str = "Project"
    last_synced: str = "N/A"
    health_status: str = "Unknown"
    completion_percentage: Number = 0
    total_tasks: Number = 0
    highlights: str = "No highlights available."
    blockers: str = "No blockers reported."


class TaskBoardView(_View):
    todo: list[TaskItem] = Field(default_factory=list)
    in_progress: list[TaskItem] = Field(default_factory=list)
    done: list[TaskItem] = Field(default_factory=list)


class SyncReportView(_View):
    github_status: str = "Unknown"
    notion_status: str = "Unknown"
    items_synced: Number = 0
    sync_timestamp: str = "N/A"

    @property
    def github_connected(self) -> bool:
        return self.github_status.lower() == "connected"

    @property
    def notion_connected(self) -> bool:
        return self.notion_status.lower() == "connected"


class Contributor(_View):
    name: str = "Unknown"
    contributions: Number = 0


class ContributorsView(_View):
    contributors: list[Contributor] = Field(default_factory=list)

    @property
    def max_contributions(self) -> Number:
        """Largest contribution count, never below 1 so shares stay finite."""
        return max([c.contributions for c in self.contributors] + [1])

    def share(self, contributor: Contributor) -> float:
        """Contribution bar width in percent relative to the top contributor."""
        return contributor.contributions / self.max_contributions * 100


class SyncView(_View):
    """Result of the project sync manager."""

    kind: Literal["sync"] = "sync"
    project_summary: ProjectSummaryView = Field(default_factory=ProjectSummaryView)
    task_list: TaskBoardView = Field(default_factory=TaskBoardView)
    sync_report: SyncReportView = Field(default_factory=SyncReportView)
    active_contributors: ContributorsView = Field(default_factory=ContributorsView)


# ── Code review ──


class QualityMetrics(_View):
    readability: Number = 0
    maintainability: Number = 0
    performance: Number = 0
    security: Number = 0


class BugItem(_View):
    severity: str = "unknown"
    description: str = ""
    file: str = ""
    suggestion: str = ""


class ImprovementItem(_View):
    category: str = ""
    description: str = ""
    priority: str = ""


class BestPracticeItem(_View):
    practice: str = ""
    status: str = ""
    note: str = ""


class CodeReviewView(_View):
    """Result of the code review agent."""

    kind: Literal["review"] = "review"
    pr_number: Number = 0
    repository: str = ""
    overall_score: Number = 0
    recommendation: str = "pending"
    summary: str = ""
    quality_metrics: QualityMetrics = Field(default_factory=QualityMetrics)
    bugs_found: list[BugItem] = Field(default_factory=list)
    improvements: list[ImprovementItem] = Field(default_factory=list)
    best_practices: list[BestPracticeItem] = Field(default_factory=list)

    @property
    def recommendation_label(self) -> str:
        return self.recommendation.replace("_", " ").upper()


# ── Progress ──


class ProgressSummary(_View):
    tasks_completed: Number = 0
    tasks_in_progress: Number = 0
    tasks_overdue: Number = 0
    upcoming_deadlines: Number = 0
    completion_rate: Number = 0


class OverdueItem(_View):
    title: str = ""
    due_date: str = ""
    days_overdue: Number = 0
    assignee: str = ""


class UpcomingTask(_View):
    title: str = ""
    due_date: str = ""
    days_remaining: Number = 0
    assignee: str = ""

    @property
    def is_urgent(self) -> bool:
        return self.days_remaining <= 2


class FocusArea(_View):
    area: str = ""
    reason: str = ""
    priority: str = ""


class ProgressView(_View):
    """Result of the progress reminder agent."""

    kind: Literal["progress"] = "progress"
    report_date: str = ""
    progress_summary: ProgressSummary = Field(default_factory=ProgressSummary)
    overdue_items: list[OverdueItem] = Field(default_factory=list)
    upcoming_tasks: list[UpcomingTask] = Field(default_factory=list)
    focus_areas: list[FocusArea] = Field(default_factory=list)
    message: str = ""
    reminder_posted: bool = False


NormalizedView = Annotated[
    SyncView | CodeReviewView | ProgressView, Field(discriminator="kind")
]
