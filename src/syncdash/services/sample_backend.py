"""Sample payloads and in-memory collaborators.

Used by sample mode and whenever the dashboard runs without the hosted agent
and scheduling backends. The payloads are raw agent-shaped dicts so they go
through the same normalizer as live results.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from datetime import UTC, datetime
from typing import Any

from syncdash.models.agents import AgentId, OperationKind
from syncdash.models.responses import (
    AgentCallResult,
    AgentResponse,
    ScheduleActionResult,
    ScheduleListResult,
    ScheduleLogsResult,
)
from syncdash.models.schedules import ExecutionLogEntry, Schedule
from syncdash.models.views import NormalizedView
from syncdash.services.normalizer import normalize

logger = logging.getLogger(__name__)

MAX_RETAINED_EXECUTIONS = 100

SAMPLE_SYNC: dict[str, Any] = {
    "project_summary": {
        "project_name": "acme-corp/web-platform",
        "last_synced": "2026-02-26T09:15:00Z",
        "health_status": "Good",
        "completion_percentage": 68,
        "total_tasks": 42,
        "highlights": (
            "Authentication module completed ahead of schedule. API v2 endpoints passing "
            "all integration tests. New dashboard design approved by stakeholders."
        ),
        "blockers": (
            "Database migration script failing on production replica. Waiting on "
            "third-party API credentials for payment integration."
        ),
    },
    "task_list": {
        "todo": [
            {"title": "Implement payment gateway integration", "type": "feature",
             "priority": "high", "assignee": "sarah-chen", "source": "GitHub"},
            {"title": "Write E2E tests for checkout flow", "type": "task",
             "priority": "medium", "assignee": "alex-kim", "source": "Notion"},
            {"title": "Update API documentation for v2", "type": "docs",
             "priority": "low", "assignee": "jamie-lee", "source": "GitHub"},
        ],
        "in_progress": [
            {"title": "Database migration to PostgreSQL 16", "type": "infrastructure",
             "priority": "critical", "assignee": "mike-ross", "source": "GitHub"},
            {"title": "Redesign user settings page", "type": "feature",
             "priority": "medium", "assignee": "lisa-park", "source": "Notion"},
        ],
        "done": [
            {"title": "OAuth2 authentication module", "type": "feature",
             "priority": "high", "assignee": "sarah-chen", "source": "GitHub"},
            {"title": "API v2 endpoint refactoring", "type": "refactor",
             "priority": "high", "assignee": "mike-ross", "source": "GitHub"},
            {"title": "CI/CD pipeline optimization", "type": "infrastructure",
             "priority": "medium", "assignee": "alex-kim", "source": "Notion"},
        ],
    },
    "sync_report": {
        "github_status": "Connected",
        "notion_status": "Connected",
        "items_synced": 42,
        "sync_timestamp": "2026-02-26T09:15:00Z",
    },
    "active_contributors": [
        {"name": "sarah-chen", "contributions": 47},
        {"name": "mike-ross", "contributions": 38},
        {"name": "alex-kim", "contributions": 29},
        {"name": "lisa-park", "contributions": 22},
        {"name": "jamie-lee", "contributions": 15},
    ],
}

SAMPLE_REVIEW: dict[str, Any] = {
    "pr_number": 142,
    "repository": "acme-corp/web-platform",
    "overall_score": 7,
    "recommendation": "approve",
    "summary": (
        "This PR implements the user authentication middleware with JWT token validation. "
        "The code is well-structured with proper error handling. Minor improvements "
        "suggested for logging and input validation edge cases."
    ),
    "quality_metrics": {"readability": 8, "maintainability": 7, "performance": 6, "security": 8},
    "bugs_found": [
        {"severity": "medium",
         "description": "Token expiry check does not account for clock skew between servers",
         "file": "src/middleware/auth.ts",
         "suggestion": "Add a configurable clock tolerance (e.g., 30 seconds) when "
                       "validating token expiry timestamps."},
        {"severity": "low",
         "description": "Missing null check on optional user profile fields",
         "file": "src/utils/userProfile.ts",
         "suggestion": "Use optional chaining when accessing nested profile properties."},
    ],
    "improvements": [
        {"category": "Logging", "priority": "medium",
         "description": "Add structured logging with correlation IDs for authentication attempts"},
        {"category": "Performance", "priority": "low",
         "description": "Cache decoded JWT tokens for repeated requests within the same session"},
        {"category": "Security", "priority": "high",
         "description": "Implement rate limiting on the token refresh endpoint"},
    ],
    "best_practices": [
        {"practice": "Input Validation", "status": "pass",
         "note": "All inputs are validated using Zod schemas"},
        {"practice": "Error Handling", "status": "pass",
         "note": "Consistent error response format across all endpoints"},
        {"practice": "Type Safety", "status": "pass",
         "note": "Full TypeScript coverage with strict mode enabled"},
        {"practice": "Test Coverage", "status": "partial",
         "note": "Unit tests present but missing integration tests for edge cases"},
        {"practice": "Documentation", "status": "fail",
         "note": "JSDoc comments missing on exported functions"},
    ],
}

SAMPLE_PROGRESS: dict[str, Any] = {
    "report_date": "2026-02-26",
    "progress_summary": {
        "tasks_completed": 12,
        "tasks_in_progress": 8,
        "tasks_overdue": 3,
        "upcoming_deadlines": 5,
        "completion_rate": 68,
    },
    "overdue_items": [
        {"title": "Database migration script", "due_date": "2026-02-22",
         "days_overdue": 4, "assignee": "mike-ross"},
        {"title": "Payment API integration spec", "due_date": "2026-02-24",
         "days_overdue": 2, "assignee": "sarah-chen"},
        {"title": "Security audit report", "due_date": "2026-02-25",
         "days_overdue": 1, "assignee": "alex-kim"},
    ],
    "upcoming_tasks": [
        {"title": "E2E test suite for auth flow", "due_date": "2026-02-28",
         "days_remaining": 2, "assignee": "alex-kim"},
        {"title": "API v2 documentation update", "due_date": "2026-03-01",
         "days_remaining": 3, "assignee": "jamie-lee"},
        {"title": "Dashboard redesign review", "due_date": "2026-03-03",
         "days_remaining": 5, "assignee": "lisa-park"},
    ],
    "focus_areas": [
        {"area": "Database Migration", "priority": "critical",
         "reason": "4 days overdue - blocking deployment pipeline"},
        {"area": "Test Coverage", "priority": "high",
         "reason": "Auth module lacks integration tests before release"},
        {"area": "Documentation", "priority": "medium",
         "reason": "API v2 docs needed before partner onboarding"},
    ],
    "message": (
        "Daily progress check complete. 3 overdue items require immediate attention. "
        "Database migration is the top priority blocker."
    ),
    "reminder_posted": True,
}

SAMPLE_PAYLOADS: dict[OperationKind, dict[str, Any]] = {
    OperationKind.SYNC: SAMPLE_SYNC,
    OperationKind.REVIEW: SAMPLE_REVIEW,
    OperationKind.PROGRESS: SAMPLE_PROGRESS,
}

_AGENT_PAYLOADS: dict[AgentId, dict[str, Any]] = {
    AgentId.PROJECT_SYNC_MANAGER: SAMPLE_SYNC,
    AgentId.CODE_REVIEW: SAMPLE_REVIEW,
    AgentId.PROGRESS_REMINDER: SAMPLE_PROGRESS,
}


def sample_view(kind: OperationKind) -> NormalizedView:
    """The built-in sample view shown while sample mode is on."""
    return normalize(kind, SAMPLE_PAYLOADS[kind])


class SampleAgentClient:
    """Agent client that answers every call with the matching sample payload."""

    def __init__(self, latency: float = 0.0) -> None:
        self._latency = latency
        self.calls: list[tuple[str, AgentId]] = []

    async def call(self, task: str, agent_id: AgentId) -> AgentCallResult:
        self.calls.append((task, agent_id))
        logger.debug("Sample call to %s: %s", agent_id, task)
        if self._latency:
            await asyncio.sleep(self._latency)
        payload = _AGENT_PAYLOADS.get(agent_id)
        if payload is None:
            return AgentCallResult(success=False, error=f"No sample data for agent {agent_id}")
        return AgentCallResult(success=True, response=AgentResponse(result=payload))


class InMemoryScheduler:
    """Scheduling backend holding schedules and their history in memory."""

    def __init__(self, schedules: list[Schedule] | None = None) -> None:
        if schedules is None:
            schedules = [
                Schedule(
                    id="sched-progress-daily",
                    agent_id=AgentId.PROGRESS_REMINDER,
                    is_active=True,
                    cron_expression="0 9 * * 1-5",
                    timezone="UTC",
                )
            ]
        self._schedules = {s.id: s for s in schedules}
        self._logs: dict[str, list[ExecutionLogEntry]] = {s.id: [] for s in schedules}
        self._ids = itertools.count(1)

    async def list_schedules(self) -> ScheduleListResult:
        return ScheduleListResult(success=True, schedules=list(self._schedules.values()))

    async def get_logs(self, schedule_id: str, *, limit: int) -> ScheduleLogsResult:
        if schedule_id not in self._schedules:
            return ScheduleLogsResult(success=False, error=f"Unknown schedule {schedule_id}")
        return ScheduleLogsResult(success=True, executions=self._logs[schedule_id][:limit])

    async def pause(self, schedule_id: str) -> ScheduleActionResult:
        return self._set_active(schedule_id, False)

    async def resume(self, schedule_id: str) -> ScheduleActionResult:
        return self._set_active(schedule_id, True)

    async def trigger_now(self, schedule_id: str) -> ScheduleActionResult:
        schedule = self._schedules.get(schedule_id)
        if schedule is None:
            return ScheduleActionResult(success=False, error=f"Unknown schedule {schedule_id}")
        now = datetime.now(tz=UTC).isoformat(timespec="seconds")
        entry = ExecutionLogEntry(
            id=f"exec-{next(self._ids)}",
            executed_at=now,
            success=True,
            attempt=1,
            max_attempts=3,
        )
        history = self._logs[schedule_id]
        history.insert(0, entry)
        del history[MAX_RETAINED_EXECUTIONS:]
        self._schedules[schedule_id] = schedule.model_copy(update={"last_run_at": now})
        return ScheduleActionResult(success=True)

    def _set_active(self, schedule_id: str, active: bool) -> ScheduleActionResult:
        schedule = self._schedules.get(schedule_id)
        if schedule is None:
            return ScheduleActionResult(success=False, error=f"Unknown schedule {schedule_id}")
        self._schedules[schedule_id] = schedule.model_copy(update={"is_active": active})
        return ScheduleActionResult(success=True)


# ── Cron humanizer ──

_DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
_DAY_RANGES = {"1-5": "Weekdays", "0,6": "Weekends", "6,0": "Weekends", "*": "Every day"}


def cron_to_human(expression: str) -> str:
    """Describe a five-field cron expression; unknown shapes are returned as-is."""
    fields = expression.split()
    if len(fields) != 5:
        return expression
    minute, hour, day_of_month, month, day_of_week = fields
    if not minute.isdecimal() or int(minute) > 59 or day_of_month != "*" or month != "*":
        return expression
    if hour == "*":
        if day_of_week == "*":
            return f"Every hour at minute {int(minute)}"
        return expression
    if not hour.isdecimal() or int(hour) > 23:
        return expression
    at = _format_time(int(hour), int(minute))
    if day_of_week in _DAY_RANGES:
        return f"{_DAY_RANGES[day_of_week]} at {at}"
    if day_of_week.isdecimal() and int(day_of_week) <= 7:
        return f"Every {_DAY_NAMES[int(day_of_week) % 7]} at {at}"
    return expression


def _format_time(hour: int, minute: int) -> str:
    suffix = "AM" if hour < 12 else "PM"
    display = hour % 12 or 12
    return f"{display}:{minute:02d} {suffix}"
