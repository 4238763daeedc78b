"""Response envelopes returned by the external collaborators."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from syncdash.models.schedules import ExecutionLogEntry, Schedule


class AgentResponse(BaseModel):
    """Payload of an agent call; ``result`` is whatever the agent produced."""

    result: Any = None
    message: str | None = None


class AgentCallResult(BaseModel):
    success: bool
    response: AgentResponse | None = None
    error: str | None = None


class ScheduleListResult(BaseModel):
    success: bool
    schedules: list[Schedule] = Field(default_factory=list)
    error: str | None = None


class ScheduleLogsResult(BaseModel):
    success: bool
    executions: list[ExecutionLogEntry] = Field(default_factory=list)
    error: str | None = None


class ScheduleActionResult(BaseModel):
    success: bool
    error: str | None = None
