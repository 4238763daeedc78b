"""Agent identifiers and the roster shown in the status panel."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class AgentId(StrEnum):
    """Remote agent capabilities addressed by the dashboard."""

    PROJECT_SYNC_MANAGER = "699fec5197fc9c57f6999957"
    GITHUB_DATA = "699fec36903888ea805f4114"
    NOTION_SYNC = "699fec3710134bfe58ea5fef"
    CODE_REVIEW = "699fec3760c6ee660b2b0cd0"
    PROGRESS_REMINDER = "699fec3860c6ee660b2b0cd2"


class OperationKind(StrEnum):
    """The three user-triggered agent operations."""

    SYNC = "sync"
    REVIEW = "review"
    PROGRESS = "progress"


class AgentInfo(BaseModel):
    """Display metadata for one agent."""

    model_config = ConfigDict(frozen=True)

    id: AgentId
    name: str
    purpose: str


AGENTS: tuple[AgentInfo, ...] = (
    AgentInfo(
        id=AgentId.PROJECT_SYNC_MANAGER,
        name="Project Sync Manager",
        purpose="Coordinates GitHub + Notion sync and project summary",
    ),
    AgentInfo(
        id=AgentId.GITHUB_DATA,
        name="GitHub Data Agent",
        purpose="Fetches issues, PRs, commits from GitHub",
    ),
    AgentInfo(
        id=AgentId.NOTION_SYNC,
        name="Notion Sync Agent",
        purpose="Syncs tasks and data to Notion",
    ),
    AgentInfo(
        id=AgentId.CODE_REVIEW,
        name="Code Review Agent",
        purpose="Analyzes PRs for quality, bugs, best practices",
    ),
    AgentInfo(
        id=AgentId.PROGRESS_REMINDER,
        name="Progress Reminder Agent",
        purpose="Tracks progress, overdue tasks, generates reminders",
    ),
)

OPERATION_AGENTS: dict[OperationKind, AgentId] = {
    OperationKind.SYNC: AgentId.PROJECT_SYNC_MANAGER,
    OperationKind.REVIEW: AgentId.CODE_REVIEW,
    OperationKind.PROGRESS: AgentId.PROGRESS_REMINDER,
}
