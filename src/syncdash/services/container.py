"""Service container with DI wiring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from syncdash.services.coordinator import ActiveAgentCoordinator
from syncdash.services.operations import ProgressOperation, ReviewOperation, SyncOperation
from syncdash.services.protocols import AgentClientProtocol, CronHumanizer, SchedulerProtocol
from syncdash.services.sample_backend import InMemoryScheduler, SampleAgentClient, cron_to_human
from syncdash.services.schedule_service import ScheduleController

if TYPE_CHECKING:
    from syncdash.config import Config


@dataclass
class ServiceContainer:
    """Holds the controllers for one dashboard session. Built once at startup."""

    coordinator: ActiveAgentCoordinator
    sync: SyncOperation
    review: ReviewOperation
    progress: ProgressOperation
    schedules: ScheduleController
    humanize_cron: CronHumanizer

    @classmethod
    async def create(
        cls,
        config: Config,
        *,
        agent_client: AgentClientProtocol | None = None,
        scheduler: SchedulerProtocol | None = None,
        humanize_cron: CronHumanizer | None = None,
    ) -> ServiceContainer:
        """Async factory; collaborators default to the in-memory implementations."""
        client = agent_client or SampleAgentClient(latency=config.sample_latency)
        coordinator = ActiveAgentCoordinator()
        return cls(
            coordinator=coordinator,
            sync=SyncOperation(client, coordinator),
            review=ReviewOperation(client, coordinator),
            progress=ProgressOperation(client, coordinator),
            schedules=ScheduleController(
                scheduler or InMemoryScheduler(),
                log_limit=config.schedule_log_limit,
            ),
            humanize_cron=humanize_cron or cron_to_human,
        )
