"""Tests for the operation lifecycle controllers and the active-agent coordinator."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import pytest

from syncdash.models.agents import AgentId
from syncdash.models.operations import OperationPhase, OperationState
from syncdash.models.responses import AgentCallResult, AgentResponse
from syncdash.models.views import CodeReviewView, SyncView
from syncdash.services.coordinator import ActiveAgentCoordinator
from syncdash.services.operations import ProgressOperation, ReviewOperation, SyncOperation

if TYPE_CHECKING:
    from conftest import FakeAgentClient


class TestOperationState:
    def test_error_only_in_failed_phase(self) -> None:
        with pytest.raises(ValueError):
            OperationState(OperationPhase.LOADING, None, "boom")
        with pytest.raises(ValueError):
            OperationState(OperationPhase.FAILED, None, None)

    def test_transitions_keep_previous_result(self) -> None:
        state: OperationState[str] = OperationState().succeed("first")
        loading = state.begin()
        assert loading.loading
        assert loading.result == "first"
        failed = loading.fail("nope")
        assert failed.phase is OperationPhase.FAILED
        assert failed.result == "first"
        assert failed.begin().error is None

    def test_settle(self) -> None:
        assert OperationState().begin().settle().phase is OperationPhase.IDLE
        settled = OperationState().succeed(1).begin().settle()
        assert settled.phase is OperationPhase.LOADED
        assert settled.result == 1


class TestCoordinator:
    def test_acquire_and_release(self) -> None:
        coordinator = ActiveAgentCoordinator()
        seen: list[AgentId | None] = []
        coordinator.subscribe(seen.append)
        token = coordinator.acquire(AgentId.CODE_REVIEW)
        assert coordinator.active is AgentId.CODE_REVIEW
        coordinator.release(token)
        assert coordinator.active is None
        assert seen == [AgentId.CODE_REVIEW, None]

    def test_stale_release_keeps_newer_holder(self) -> None:
        coordinator = ActiveAgentCoordinator()
        first = coordinator.acquire(AgentId.PROJECT_SYNC_MANAGER)
        second = coordinator.acquire(AgentId.PROGRESS_REMINDER)
        coordinator.release(first)
        assert coordinator.active is AgentId.PROGRESS_REMINDER
        coordinator.release(second)
        assert coordinator.active is None


class TestSyncOperation:
    @pytest.mark.asyncio
    async def test_blank_inputs_issue_no_call(
        self, agent_client: FakeAgentClient, coordinator: ActiveAgentCoordinator
    ) -> None:
        op = SyncOperation(agent_client, coordinator)
        seen: list[OperationState[SyncView]] = []
        op.subscribe(seen.append)
        await op.run("", "repo")
        await op.run("owner", "   ")
        assert agent_client.calls == []
        assert seen == []
        assert op.state.phase is OperationPhase.IDLE

    @pytest.mark.asyncio
    async def test_success_normalizes_result(
        self, agent_client: FakeAgentClient, coordinator: ActiveAgentCoordinator
    ) -> None:
        agent_client.succeed_with({"project_summary": {"project_name": "acme/web"}})
        op = SyncOperation(agent_client, coordinator)
        seen: list[OperationState[SyncView]] = []
        op.subscribe(seen.append)

        await op.run("acme", "web")

        task, agent_id = agent_client.calls[0]
        assert agent_id is AgentId.PROJECT_SYNC_MANAGER
        assert task.startswith("Sync and summarize the project for repository acme/web. ")
        assert [s.phase for s in seen] == [OperationPhase.LOADING, OperationPhase.LOADED]
        assert all(s.error is None for s in seen if s.loading)
        assert op.state.result is not None
        assert op.state.result.project_summary.project_name == "acme/web"
        assert op.state.result.project_summary.health_status == "Unknown"
        assert coordinator.active is None

    @pytest.mark.asyncio
    async def test_failure_message_precedence(
        self, agent_client: FakeAgentClient, coordinator: ActiveAgentCoordinator
    ) -> None:
        op = SyncOperation(agent_client, coordinator)

        agent_client.outcome = AgentCallResult(
            success=False, response=AgentResponse(message="agent said no"), error="rate limited"
        )
        await op.run("acme", "web")
        assert op.state.error == "rate limited"

        agent_client.outcome = AgentCallResult(
            success=False, response=AgentResponse(message="agent said no")
        )
        await op.run("acme", "web")
        assert op.state.error == "agent said no"

        agent_client.outcome = AgentCallResult(success=False)
        await op.run("acme", "web")
        assert op.state.error == "Sync failed"
        assert op.state.phase is OperationPhase.FAILED

    @pytest.mark.asyncio
    async def test_transport_exception_becomes_network_error(
        self, agent_client: FakeAgentClient, coordinator: ActiveAgentCoordinator
    ) -> None:
        agent_client.error = ConnectionError("reset by peer")
        op = SyncOperation(agent_client, coordinator)
        await op.run("acme", "web")
        assert op.state.error == "Network error during sync"
        assert op.state.phase is OperationPhase.FAILED
        assert coordinator.active is None

    @pytest.mark.asyncio
    async def test_failure_keeps_previous_result(
        self, agent_client: FakeAgentClient, coordinator: ActiveAgentCoordinator
    ) -> None:
        op = SyncOperation(agent_client, coordinator)
        agent_client.succeed_with({"project_summary": {"total_tasks": 5}})
        await op.run("acme", "web")
        previous = op.state.result

        agent_client.outcome = AgentCallResult(success=False, error="down")
        await op.run("acme", "web")
        assert op.state.result is previous
        assert op.state.error == "down"

        agent_client.succeed_with({})
        await op.run("acme", "web")
        assert op.state.error is None
        assert op.state.phase is OperationPhase.LOADED


class TestReviewOperation:
    @pytest.mark.asyncio
    async def test_empty_pr_number_is_noop(
        self, agent_client: FakeAgentClient, coordinator: ActiveAgentCoordinator
    ) -> None:
        op = ReviewOperation(agent_client, coordinator)
        await op.run("")
        assert agent_client.calls == []
        assert op.state.loading is False

    @pytest.mark.asyncio
    async def test_task_text_substitutes_placeholders(
        self, agent_client: FakeAgentClient, coordinator: ActiveAgentCoordinator
    ) -> None:
        agent_client.succeed_with({"pr_number": 142, "overall_score": 7})
        op = ReviewOperation(agent_client, coordinator)
        await op.run("142")
        task, agent_id = agent_client.calls[0]
        assert agent_id is AgentId.CODE_REVIEW
        assert task.startswith("Review the pull request #142 in repository owner/repo. ")
        assert isinstance(op.state.result, CodeReviewView)
        assert op.state.result.overall_score == 7

    @pytest.mark.asyncio
    async def test_failure_fallbacks(
        self, agent_client: FakeAgentClient, coordinator: ActiveAgentCoordinator
    ) -> None:
        op = ReviewOperation(agent_client, coordinator)
        agent_client.outcome = AgentCallResult(success=False)
        await op.run("7", "acme", "web")
        assert op.state.error == "Review failed"
        agent_client.error = TimeoutError()
        await op.run("7", "acme", "web")
        assert op.state.error == "Network error during review"


class TestProgressOperation:
    @pytest.mark.asyncio
    async def test_runs_without_inputs(
        self, agent_client: FakeAgentClient, coordinator: ActiveAgentCoordinator
    ) -> None:
        op = ProgressOperation(agent_client, coordinator)
        await op.run()
        task, agent_id = agent_client.calls[0]
        assert agent_id is AgentId.PROGRESS_REMINDER
        assert task.startswith(
            "Check project progress for Notion database default "
            "and GitHub repository owner/repo. "
        )
        assert op.state.phase is OperationPhase.LOADED

    @pytest.mark.asyncio
    async def test_failure_fallbacks(
        self, agent_client: FakeAgentClient, coordinator: ActiveAgentCoordinator
    ) -> None:
        op = ProgressOperation(agent_client, coordinator)
        agent_client.outcome = AgentCallResult(success=False)
        await op.run("db1")
        assert op.state.error == "Progress check failed"
        agent_client.error = OSError("unreachable")
        await op.run("db1")
        assert op.state.error == "Network error during progress check"


@pytest.mark.asyncio
async def test_indicator_tracks_in_flight_call(
    agent_client: FakeAgentClient, coordinator: ActiveAgentCoordinator
) -> None:
    agent_client.gate = asyncio.Event()
    op = SyncOperation(agent_client, coordinator)
    task = asyncio.create_task(op.run("acme", "web"))
    await asyncio.sleep(0)
    assert op.state.loading
    assert coordinator.active is AgentId.PROJECT_SYNC_MANAGER
    agent_client.gate.set()
    await task
    assert coordinator.active is None


@pytest.mark.asyncio
async def test_independent_operations_share_one_indicator(
    coordinator: ActiveAgentCoordinator, agent_client_factory: type[FakeAgentClient]
) -> None:
    sync_client = agent_client_factory()
    sync_client.gate = asyncio.Event()
    review_client = agent_client_factory()
    review_client.gate = asyncio.Event()
    sync = SyncOperation(sync_client, coordinator)
    review = ReviewOperation(review_client, coordinator)

    sync_task = asyncio.create_task(sync.run("acme", "web"))
    await asyncio.sleep(0)
    review_task = asyncio.create_task(review.run("9"))
    await asyncio.sleep(0)
    assert sync.state.loading and review.state.loading
    assert coordinator.active is AgentId.CODE_REVIEW

    sync_client.gate.set()
    await sync_task
    assert coordinator.active is AgentId.CODE_REVIEW
    assert review.state.loading

    review_client.gate.set()
    await review_task
    assert coordinator.active is None


@pytest.mark.asyncio
async def test_overlapping_runs_last_to_finish_wins(
    coordinator: ActiveAgentCoordinator,
) -> None:
    class ScriptedClient:
        def __init__(self) -> None:
            self.gates = [asyncio.Event(), asyncio.Event()]
            self.names = ["first", "second"]
            self.count = 0

        async def call(self, task: str, agent_id: AgentId) -> AgentCallResult:
            index = self.count
            self.count += 1
            await self.gates[index].wait()
            result = {"project_summary": {"project_name": self.names[index]}}
            return AgentCallResult(success=True, response=AgentResponse(result=result))

    client = ScriptedClient()
    op = SyncOperation(client, coordinator)
    first = asyncio.create_task(op.run("acme", "web"))
    await asyncio.sleep(0)
    second = asyncio.create_task(op.run("acme", "web"))
    await asyncio.sleep(0)

    client.gates[1].set()
    await second
    client.gates[0].set()
    await first

    assert op.state.result is not None
    assert op.state.result.project_summary.project_name == "first"


@pytest.mark.asyncio
async def test_cancellation_settles_state_and_releases_indicator(
    agent_client: FakeAgentClient, coordinator: ActiveAgentCoordinator
) -> None:
    agent_client.gate = asyncio.Event()
    op = SyncOperation(agent_client, coordinator)
    task = asyncio.create_task(op.run("acme", "web"))
    await asyncio.sleep(0)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert op.state.phase is OperationPhase.IDLE
    assert op.state.error is None
    assert coordinator.active is None
