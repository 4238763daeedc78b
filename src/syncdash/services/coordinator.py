"""Active-agent coordinator — owns the single "agent in flight" indicator."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from syncdash.models.agents import AgentId

logger = logging.getLogger(__name__)

type ActiveAgentListener = Callable[[AgentId | None], None]


@dataclass(frozen=True, eq=False)
class AgentToken:
    """Proof of holding the indicator; compared by identity."""

    agent_id: AgentId


class ActiveAgentCoordinator:
    """Hands out the indicator to whichever operation started last.

    Releasing a token that has since been superseded leaves the newer holder
    in place.
    """

    def __init__(self) -> None:
        self._holder: AgentToken | None = None
        self._listeners: list[ActiveAgentListener] = []

    @property
    def active(self) -> AgentId | None:
        return self._holder.agent_id if self._holder is not None else None

    def subscribe(self, listener: ActiveAgentListener) -> None:
        self._listeners.append(listener)

    def acquire(self, agent_id: AgentId) -> AgentToken:
        token = AgentToken(agent_id)
        if self._holder is not None:
            logger.debug("Agent %s supersedes %s", agent_id, self._holder.agent_id)
        self._holder = token
        self._notify()
        return token

    def release(self, token: AgentToken) -> None:
        if self._holder is not token:
            return
        self._holder = None
        self._notify()

    def _notify(self) -> None:
        active = self.active
        for listener in list(self._listeners):
            listener(active)
