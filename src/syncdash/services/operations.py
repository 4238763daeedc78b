"""Operation lifecycle controllers for the sync, review and progress agents.

Each controller owns one ``OperationState`` and moves it through
IDLE/LOADED → LOADING → LOADED/FAILED around a single agent call. Failures of
any kind end up in the state; nothing is raised to the caller. Overlapping
runs of the same operation are allowed and the last one to finish wins.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from result import Err, Ok, Result

from syncdash.models.agents import OPERATION_AGENTS, AgentId, OperationKind
from syncdash.models.operations import OperationState
from syncdash.models.responses import AgentCallResult
from syncdash.models.views import CodeReviewView, ProgressView, SyncView
from syncdash.services.coordinator import ActiveAgentCoordinator
from syncdash.services.normalizer import normalize_progress, normalize_review, normalize_sync
from syncdash.services.protocols import AgentClientProtocol

logger = logging.getLogger(__name__)

type StateListener[V] = Callable[[OperationState[V]], None]


class AgentOperation[V]:
    """Request/loading/result/error lifecycle shared by all agent operations."""

    kind: OperationKind
    failure_message: str
    network_message: str

    def __init__(
        self,
        client: AgentClientProtocol,
        coordinator: ActiveAgentCoordinator,
        normalize: Callable[[object], V],
    ) -> None:
        self._client = client
        self._coordinator = coordinator
        self._normalize = normalize
        self._state: OperationState[V] = OperationState()
        self._listeners: list[StateListener[V]] = []

    @property
    def agent_id(self) -> AgentId:
        return OPERATION_AGENTS[self.kind]

    @property
    def state(self) -> OperationState[V]:
        return self._state

    def subscribe(self, listener: StateListener[V]) -> None:
        self._listeners.append(listener)

    async def _execute(self, task: str) -> None:
        self._set_state(self._state.begin())
        token = self._coordinator.acquire(self.agent_id)
        try:
            outcome = await self._invoke(task)
        except asyncio.CancelledError:
            self._coordinator.release(token)
            self._set_state(self._state.settle())
            raise
        self._coordinator.release(token)
        match outcome:
            case Ok(view):
                self._set_state(self._state.succeed(view))
            case Err(message):
                self._set_state(self._state.fail(message))

    async def _invoke(self, task: str) -> Result[V, str]:
        """Issue the agent call and fold its outcome into a Result."""
        try:
            response = await self._client.call(task, self.agent_id)
        except Exception:
            logger.exception("%s agent call failed", self.kind)
            return Err(self.network_message)
        if response.success:
            raw = response.response.result if response.response is not None else None
            return Ok(self._normalize(raw))
        return Err(self._failure_text(response))

    def _failure_text(self, response: AgentCallResult) -> str:
        message = response.response.message if response.response is not None else None
        return response.error or message or self.failure_message

    def _set_state(self, state: OperationState[V]) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)


class SyncOperation(AgentOperation[SyncView]):
    """Syncs GitHub and Notion for one repository and summarizes the project."""

    kind = OperationKind.SYNC
    failure_message = "Sync failed"
    network_message = "Network error during sync"

    def __init__(self, client: AgentClientProtocol, coordinator: ActiveAgentCoordinator) -> None:
        super().__init__(client, coordinator, normalize_sync)

    async def run(self, owner: str, repo: str) -> None:
        if not owner.strip() or not repo.strip():
            return
        await self._execute(
            f"Sync and summarize the project for repository {owner}/{repo}. "
            "Fetch all GitHub issues, PRs, and commit statuses, then sync them to Notion, "
            "and provide an organized task list with project summary."
        )


class ReviewOperation(AgentOperation[CodeReviewView]):
    """Reviews one pull request."""

    kind = OperationKind.REVIEW
    failure_message = "Review failed"
    network_message = "Network error during review"

    def __init__(self, client: AgentClientProtocol, coordinator: ActiveAgentCoordinator) -> None:
        super().__init__(client, coordinator, normalize_review)

    async def run(self, pr_number: str, owner: str = "", repo: str = "") -> None:
        if not pr_number.strip():
            return
        await self._execute(
            f"Review the pull request #{pr_number} in repository "
            f"{owner or 'owner'}/{repo or 'repo'}. Analyze the code changes, evaluate "
            "quality, identify bugs, suggest improvements, and check best practices. "
            "Provide a detailed structured review."
        )


class ProgressOperation(AgentOperation[ProgressView]):
    """Compiles progress metrics, overdue items and focus areas."""

    kind = OperationKind.PROGRESS
    failure_message = "Progress check failed"
    network_message = "Network error during progress check"

    def __init__(self, client: AgentClientProtocol, coordinator: ActiveAgentCoordinator) -> None:
        super().__init__(client, coordinator, normalize_progress)

    async def run(self, notion_db_id: str = "", owner: str = "", repo: str = "") -> None:
        await self._execute(
            f"Check project progress for Notion database {notion_db_id or 'default'} "
            f"and GitHub repository {owner or 'owner'}/{repo or 'repo'}. Compile progress "
            "metrics, identify overdue items, upcoming deadlines, and generate focus areas."
        )
