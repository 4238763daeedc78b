"""Pydantic models for SyncDash."""

from syncdash.models.agents import AGENTS, OPERATION_AGENTS, AgentId, AgentInfo, OperationKind
from syncdash.models.markup import Block, Heading, ListItem, Paragraph, Spacer, Span
from syncdash.models.operations import OperationPhase, OperationState
from syncdash.models.responses import (
    AgentCallResult,
    AgentResponse,
    ScheduleActionResult,
    ScheduleListResult,
    ScheduleLogsResult,
)
from syncdash.models.schedules import (
    ExecutionLogEntry,
    Schedule,
    SchedulePhase,
    ScheduleState,
    ScheduleSummary,
)
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

__all__ = [
    "AGENTS",
    "OPERATION_AGENTS",
    "AgentCallResult",
    "AgentId",
    "AgentInfo",
    "AgentResponse",
    "BestPracticeItem",
    "Block",
    "BugItem",
    "CodeReviewView",
    "Contributor",
    "ContributorsView",
    "ExecutionLogEntry",
    "FocusArea",
    "Heading",
    "ImprovementItem",
    "ListItem",
    "NormalizedView",
    "OperationKind",
    "OperationPhase",
    "OperationState",
    "OverdueItem",
    "Paragraph",
    "ProgressSummary",
    "ProgressView",
    "ProjectSummaryView",
    "QualityMetrics",
    "Schedule",
    "ScheduleActionResult",
    "ScheduleListResult",
    "ScheduleLogsResult",
    "SchedulePhase",
    "ScheduleState",
    "ScheduleSummary",
    "Spacer",
    "Span",
    "SyncReportView",
    "SyncView",
    "TaskBoardView",
    "TaskItem",
    "UpcomingTask",
]
