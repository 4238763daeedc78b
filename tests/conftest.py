"""Shared fixtures for SyncDash tests."""

from __future__ import annotations

import asyncio
import os
from collections.abc import Callable
from typing import Any

import pytest
from PySide6.QtWidgets import QApplication

from syncdash.models.agents import AgentId
from syncdash.models.responses import (
    AgentCallResult,
    AgentResponse,
    ScheduleActionResult,
    ScheduleListResult,
    ScheduleLogsResult,
)
from syncdash.models.schedules import ExecutionLogEntry, Schedule
from syncdash.services.coordinator import ActiveAgentCoordinator


class FakeAgentClient:
    """Agent client returning a scripted outcome; can be held open with ``gate``."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, AgentId]] = []
        self.outcome: AgentCallResult = AgentCallResult(success=True, response=AgentResponse())
        self.error: Exception | None = None
        self.gate: asyncio.Event | None = None

    def succeed_with(self, result: Any) -> None:
        self.outcome = AgentCallResult(success=True, response=AgentResponse(result=result))

    async def call(self, task: str, agent_id: AgentId) -> AgentCallResult:
        self.calls.append((task, agent_id))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.outcome


class FakeScheduler:
    """Scheduling backend whose every endpoint result can be scripted."""

    def __init__(self, schedules: list[Schedule] | None = None) -> None:
        self.listing = ScheduleListResult(success=True, schedules=schedules or [])
        self.logs = ScheduleLogsResult(success=True)
        self.action = ScheduleActionResult(success=True)
        self.list_error: Exception | None = None
        self.logs_error: Exception | None = None
        self.action_error: Exception | None = None
        self.calls: list[tuple[str, str]] = []
        self.log_limits: list[int] = []

    async def list_schedules(self) -> ScheduleListResult:
        self.calls.append(("list", ""))
        if self.list_error is not None:
            raise self.list_error
        return self.listing

    async def get_logs(self, schedule_id: str, *, limit: int) -> ScheduleLogsResult:
        self.calls.append(("logs", schedule_id))
        self.log_limits.append(limit)
        if self.logs_error is not None:
            raise self.logs_error
        return self.logs

    async def pause(self, schedule_id: str) -> ScheduleActionResult:
        return await self._act("pause", schedule_id)

    async def resume(self, schedule_id: str) -> ScheduleActionResult:
        return await self._act("resume", schedule_id)

    async def trigger_now(self, schedule_id: str) -> ScheduleActionResult:
        return await self._act("trigger", schedule_id)

    async def _act(self, name: str, schedule_id: str) -> ScheduleActionResult:
        self.calls.append((name, schedule_id))
        if self.action_error is not None:
            raise self.action_error
        return self.action


def make_schedule(**overrides: Any) -> Schedule:
    fields: dict[str, Any] = {
        "id": "s1",
        "agent_id": AgentId.PROGRESS_REMINDER,
        "is_active": True,
        "cron_expression": "0 9 * * *",
        "timezone": "UTC",
    }
    fields.update(overrides)
    return Schedule(**fields)


def make_logs(count: int, *, prefix: str = "e") -> list[ExecutionLogEntry]:
    return [
        ExecutionLogEntry(
            id=f"{prefix}{i}",
            executed_at=f"2026-02-{i + 1:02d}T09:00:00Z",
            success=i % 2 == 0,
            attempt=1,
            max_attempts=3,
        )
        for i in range(count)
    ]


@pytest.fixture
def agent_client() -> FakeAgentClient:
    return FakeAgentClient()


@pytest.fixture
def coordinator() -> ActiveAgentCoordinator:
    return ActiveAgentCoordinator()


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler([make_schedule()])


@pytest.fixture
def agent_client_factory() -> type[FakeAgentClient]:
    return FakeAgentClient


@pytest.fixture
def schedule_factory() -> Callable[..., Schedule]:
    return make_schedule


@pytest.fixture
def logs_factory() -> Callable[..., list[ExecutionLogEntry]]:
    return make_logs


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    """A headless QApplication shared by widget tests."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app  # type: ignore[return-value]
