"""Schedule controller — the progress agent's recurring run and its history.

Tracks at most one schedule: the first one owned by the progress reminder
agent. Pause, resume and trigger always end with a refresh, so the snapshot
shown afterwards is what the backend reports rather than a local guess.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from result import Err, Ok, Result

from syncdash.models.agents import AgentId
from syncdash.models.responses import ScheduleActionResult
from syncdash.models.schedules import (
    ExecutionLogEntry,
    Schedule,
    SchedulePhase,
    ScheduleState,
    ScheduleSummary,
)
from syncdash.services.protocols import CronHumanizer, SchedulerProtocol

logger = logging.getLogger(__name__)

DEFAULT_LOG_LIMIT = 10

type ScheduleListener = Callable[[ScheduleState], None]
type ScheduleAction = Callable[[str], Awaitable[ScheduleActionResult]]


class ScheduleController:
    """Load, pause/resume and trigger the tracked schedule."""

    def __init__(
        self,
        scheduler: SchedulerProtocol,
        *,
        agent_id: AgentId = AgentId.PROGRESS_REMINDER,
        log_limit: int = DEFAULT_LOG_LIMIT,
    ) -> None:
        self._scheduler = scheduler
        self._agent_id = agent_id
        self._log_limit = log_limit
        self._state = ScheduleState()
        self._listeners: list[ScheduleListener] = []

    @property
    def state(self) -> ScheduleState:
        return self._state

    def subscribe(self, listener: ScheduleListener) -> None:
        self._listeners.append(listener)

    async def refresh(self) -> None:
        """Reload the schedule and its execution history."""
        self._update(phase=SchedulePhase.LOADING, error=None)
        await self._reload()

    async def toggle(self) -> None:
        """Pause an active schedule, or resume a paused one."""
        schedule = self._state.schedule
        if schedule is None or not schedule.id:
            return
        if schedule.is_active:
            await self._mutate(
                self._scheduler.pause,
                schedule.id,
                success="Schedule paused successfully",
                failure="Failed to pause schedule",
                crash="Failed to toggle schedule",
            )
        else:
            await self._mutate(
                self._scheduler.resume,
                schedule.id,
                success="Schedule activated successfully",
                failure="Failed to activate schedule",
                crash="Failed to toggle schedule",
            )

    async def trigger_now(self) -> None:
        """Request an immediate out-of-band run."""
        schedule = self._state.schedule
        if schedule is None or not schedule.id:
            return
        await self._mutate(
            self._scheduler.trigger_now,
            schedule.id,
            success="Schedule triggered. Execution will start shortly.",
            failure="Failed to trigger schedule",
            crash="Failed to trigger schedule",
        )

    async def _mutate(
        self,
        action: ScheduleAction,
        schedule_id: str,
        *,
        success: str,
        failure: str,
        crash: str,
    ) -> None:
        self._update(phase=SchedulePhase.LOADING, error=None, action_message=None)
        try:
            outcome = await action(schedule_id)
        except Exception:
            logger.exception("Schedule action on %s failed", schedule_id)
            self._update(error=crash)
        else:
            if outcome.success:
                self._update(action_message=success)
            else:
                self._update(error=outcome.error or failure)
        await self._reload()

    async def _reload(self) -> None:
        # A failed mutation's error survives a successful reload.
        match await self._find_schedule():
            case Err(message):
                self._update(phase=SchedulePhase.LOAD_ERROR, error=message)
            case Ok(None):
                self._update(
                    phase=SchedulePhase.LOADED, schedule=None, logs=[], logs_schedule_id=""
                )
            case Ok(schedule):
                logs, logs_schedule_id = await self._load_logs(schedule)
                self._update(
                    phase=SchedulePhase.LOADED,
                    schedule=schedule,
                    logs=logs,
                    logs_schedule_id=logs_schedule_id,
                )

    async def _find_schedule(self) -> Result[Schedule | None, str]:
        try:
            listing = await self._scheduler.list_schedules()
        except Exception:
            logger.exception("Listing schedules failed")
            return Err("Failed to load schedule data")
        if not listing.success:
            return Err(listing.error or "Failed to load schedules")
        found = next((s for s in listing.schedules if s.agent_id == self._agent_id), None)
        return Ok(found)

    async def _load_logs(self, schedule: Schedule) -> tuple[list[ExecutionLogEntry], str]:
        if not schedule.id:
            return [], ""
        try:
            history = await self._scheduler.get_logs(schedule.id, limit=self._log_limit)
        except Exception:
            logger.warning("Loading execution logs for %s failed", schedule.id, exc_info=True)
            history = None
        if history is not None and history.success:
            return list(history.executions[: self._log_limit]), schedule.id
        if self._state.logs_schedule_id == schedule.id:
            return self._state.logs, schedule.id
        return [], ""

    def _update(self, **changes: Any) -> None:
        self._state = self._state.model_copy(update=changes)
        for listener in list(self._listeners):
            listener(self._state)


def describe_schedule(schedule: Schedule, humanize: CronHumanizer) -> ScheduleSummary:
    """Display strings for the schedule card."""
    return ScheduleSummary(
        status="Active" if schedule.is_active else "Paused",
        cadence=humanize(schedule.cron_expression) if schedule.cron_expression else "N/A",
        timezone=schedule.timezone or "N/A",
        next_run=schedule.next_run_time or "Not scheduled",
        last_run=schedule.last_run_at or "Never",
    )
