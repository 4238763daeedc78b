"""Schedule models — the progress agent's recurring run and its history."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Schedule(BaseModel):
    """A recurring agent invocation as reported by the scheduling backend."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    agent_id: str = ""
    is_active: bool = False
    cron_expression: str = ""
    timezone: str = ""
    next_run_time: str | None = None
    last_run_at: str | None = None


class ExecutionLogEntry(BaseModel):
    """One historical firing of a schedule."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    executed_at: str = ""
    success: bool = False
    attempt: int = 0
    max_attempts: int = 0

    @property
    def status_label(self) -> str:
        return "Success" if self.success else "Failed"

    @property
    def attempts_label(self) -> str:
        return f"{self.attempt}/{self.max_attempts}"


class SchedulePhase(StrEnum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    LOADED = "loaded"
    LOAD_ERROR = "load_error"


class ScheduleState(BaseModel):
    """Snapshot owned by the schedule controller; replaced on every transition.

    ``logs`` always belong to ``logs_schedule_id``, which is the id of the
    schedule they were fetched for.
    """

    model_config = ConfigDict(frozen=True)

    phase: SchedulePhase = SchedulePhase.UNINITIALIZED
    schedule: Schedule | None = None
    logs: list[ExecutionLogEntry] = Field(default_factory=list)
    logs_schedule_id: str = ""
    error: str | None = None
    action_message: str | None = None

    @property
    def loading(self) -> bool:
        return self.phase is SchedulePhase.LOADING


class ScheduleSummary(BaseModel):
    """Display strings for the schedule card."""

    model_config = ConfigDict(frozen=True)

    status: str
    cadence: str
    timezone: str
    next_run: str
    last_run: str
