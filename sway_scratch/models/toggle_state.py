"""Toggle state machine models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .command_plan import CommandBatch, CommandOutcome


class ToggleState(Enum):
    """States of one toggle invocation."""
    PLANNED = "planned"
    SUBMITTED = "submitted"
    RECOVERING_REPARENT = "recovering_reparent"
    RECOVERING_SPAWN = "recovering_spawn"
    SATISFIED = "satisfied"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (ToggleState.SATISFIED, ToggleState.FAILED)


class ToggleAction(Enum):
    """What finally satisfied the request."""
    TOGGLED = "toggled"  # batch target group succeeded
    REPARENTED = "reparented"  # window moved back into the scratchpad
    SPAWNED = "spawned"  # exec launched, window will appear later
    NONE = "none"


@dataclass(frozen=True)
class ToggleResult:
    """Outcome of one toggle invocation.

    Attributes:
        state: Terminal state reached
        action: Step that satisfied the request (NONE when FAILED)
        batch: Primary command batch that was submitted
        outcomes: Per-group results of the primary batch
        history: Every state visited, in order
        error: Fatal error that ended the invocation in FAILED
    """
    state: ToggleState
    action: ToggleAction
    batch: CommandBatch
    outcomes: list[CommandOutcome] = field(default_factory=list)
    history: tuple[ToggleState, ...] = ()
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.state == ToggleState.SATISFIED

    def raise_for_failure(self) -> None:
        """Re-raise the error that made the toggle fail."""
        if self.state == ToggleState.FAILED:
            if self.error is not None:
                raise self.error
            raise RuntimeError("scratchpad toggle failed")
