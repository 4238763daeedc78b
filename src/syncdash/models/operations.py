"""Per-operation request lifecycle state."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum


class OperationPhase(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class OperationState[V]:
    """Immutable lifecycle snapshot for one agent operation.

    ``result`` survives LOADING and FAILED so the last good data stays on
    screen. An error can only exist in the FAILED phase.
    """

    phase: OperationPhase = OperationPhase.IDLE
    result: V | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if self.phase is OperationPhase.FAILED:
            if not self.error:
                raise ValueError("FAILED state requires an error message")
        elif self.error is not None:
            raise ValueError(f"{self.phase} state cannot carry an error")

    @property
    def loading(self) -> bool:
        return self.phase is OperationPhase.LOADING

    def begin(self) -> OperationState[V]:
        return replace(self, phase=OperationPhase.LOADING, error=None)

    def succeed(self, result: V) -> OperationState[V]:
        return OperationState(OperationPhase.LOADED, result, None)

    def fail(self, error: str) -> OperationState[V]:
        return replace(self, phase=OperationPhase.FAILED, error=error)

    def settle(self) -> OperationState[V]:
        """Drop back to a resting phase without changing the result."""
        phase = OperationPhase.IDLE if self.result is None else OperationPhase.LOADED
        return OperationState(phase, self.result, None)
