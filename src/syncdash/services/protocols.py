"""Protocol definitions for the external collaborators."""

from __future__ import annotations

from typing import Protocol

from syncdash.models.agents import AgentId
from syncdash.models.responses import (
    AgentCallResult,
    ScheduleActionResult,
    ScheduleListResult,
    ScheduleLogsResult,
)


class AgentClientProtocol(Protocol):
    """Invokes a remote agent with a natural-language task description."""

    async def call(self, task: str, agent_id: AgentId) -> AgentCallResult: ...


class SchedulerProtocol(Protocol):
    """Directory, history and mutation endpoints of the scheduling backend."""

    async def list_schedules(self) -> ScheduleListResult: ...

    async def get_logs(self, schedule_id: str, *, limit: int) -> ScheduleLogsResult: ...

    async def pause(self, schedule_id: str) -> ScheduleActionResult: ...

    async def resume(self, schedule_id: str) -> ScheduleActionResult: ...

    async def trigger_now(self, schedule_id: str) -> ScheduleActionResult: ...


class CronHumanizer(Protocol):
    """Pure conversion of a cron expression into readable text."""

    def __call__(self, expression: str) -> str: ...
