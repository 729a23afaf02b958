"""
Scratchpad toggle orchestration.

Runs one toggle as a small state machine:

    PLANNED -> SUBMITTED -> SATISFIED
                         -> RECOVERING_REPARENT -> SATISFIED
                                                -> RECOVERING_SPAWN -> SATISFIED
                                                                    -> FAILED

SUBMITTED sends the planned batch and looks at the target group's result.
When sway rejects it, the window either drifted out of the scratchpad
(`move scratchpad` puts it back) or does not exist yet (the --exec command
is launched). Every step is a sequential IPC round trip; nothing runs
concurrently and nothing is retried.
"""

import logging
from typing import Optional

from ..core.config import ToggleConfig
from ..core.errors import SpawnFailed
from ..core.sway_client import SwayClient
from ..models.command_plan import CommandOutcome, CommandType
from ..models.criteria import Criteria
from ..models.toggle_state import ToggleAction, ToggleResult, ToggleState
from .command_planner import TogglePlan, plan_toggle
from .process_launcher import Launcher, create_launcher


logger = logging.getLogger(__name__)


def next_state(state: ToggleState, succeeded: bool, config: Optional[ToggleConfig] = None) -> ToggleState:
    """Transition function of the toggle state machine.

    Args:
        state: Current, non-terminal state
        succeeded: Whether the step run in `state` succeeded
        config: Toggle policy (reparent step may be disabled)

    Returns:
        The state to move to

    Raises:
        ValueError: If called with a terminal state
    """
    config = config or ToggleConfig()

    if state == ToggleState.PLANNED:
        return ToggleState.SUBMITTED

    if state == ToggleState.SUBMITTED:
        if succeeded:
            return ToggleState.SATISFIED
        if config.reparent_on_failure:
            return ToggleState.RECOVERING_REPARENT
        return ToggleState.RECOVERING_SPAWN

    if state == ToggleState.RECOVERING_REPARENT:
        return ToggleState.SATISFIED if succeeded else ToggleState.RECOVERING_SPAWN

    if state == ToggleState.RECOVERING_SPAWN:
        return ToggleState.SATISFIED if succeeded else ToggleState.FAILED

    raise ValueError(f"No transition out of terminal state: {state}")


def _last_succeeded(outcomes: list[CommandOutcome]) -> bool:
    return bool(outcomes) and outcomes[-1].success


def _first_succeeded(outcomes: list[CommandOutcome]) -> bool:
    return bool(outcomes) and outcomes[0].success


class ToggleOrchestrator:
    """Drive one scratchpad toggle against a live sway session.

    Example:
        >>> orchestrator = ToggleOrchestrator(SwayClient())
        >>> result = await orchestrator.toggle(
        ...     Criteria.for_app_id("dropdown"),
        ...     exec_command="foot --app-id dropdown",
        ...     resize="set 90 ppt 90 ppt",
        ... )
        >>> result.action
        <ToggleAction.TOGGLED: 'toggled'>
    """

    def __init__(
        self,
        client: SwayClient,
        launcher: Optional[Launcher] = None,
        config: Optional[ToggleConfig] = None,
    ):
        self.client = client
        self.config = config or ToggleConfig()
        self.launcher = launcher or create_launcher(self.config, client)

    async def plan(self, criteria: Criteria, resize: Optional[str] = None) -> TogglePlan:
        """Fetch the tree and plan the toggle without sending anything."""
        tree = await self.client.get_tree()
        return plan_toggle(tree, criteria, resize, self.config)

    async def toggle(
        self,
        criteria: Criteria,
        exec_command: str,
        resize: Optional[str] = None,
    ) -> ToggleResult:
        """Show or hide the scratchpad selected by `criteria`.

        Raises:
            ScratchContainerNotFound: Scratch output/workspace missing from the tree
            FocusedWorkspaceNotFound: No focused workspace in the tree
            SwayConnectionError: IPC transport failure

        A failed launch is not raised; it is returned as a FAILED result
        carrying the SpawnFailed error.
        """
        plan = await self.plan(criteria, resize)
        return await self.execute(plan, exec_command)

    async def execute(self, plan: TogglePlan, exec_command: str) -> ToggleResult:
        """Run the state machine for an already computed plan."""
        criteria = plan.criteria
        state = ToggleState.PLANNED
        history = [state]
        action = ToggleAction.NONE
        outcomes: list[CommandOutcome] = []
        error: Optional[Exception] = None

        while not state.is_terminal:
            succeeded = True

            if state == ToggleState.SUBMITTED:
                outcomes = await self.client.command(plan.batch.to_command())
                succeeded = _last_succeeded(outcomes)
                if succeeded:
                    action = ToggleAction.TOGGLED
                else:
                    logger.info(f"Toggle of {criteria} rejected: {outcomes[-1].error if outcomes else 'no reply'}")

            elif state == ToggleState.RECOVERING_REPARENT:
                reparent = await self.client.command(
                    f"{criteria.bracketed()} {CommandType.MOVE_SCRATCHPAD.value}"
                )
                succeeded = _first_succeeded(reparent)
                if succeeded:
                    action = ToggleAction.REPARENTED
                    logger.info(f"Moved {criteria} back to the scratchpad")

            elif state == ToggleState.RECOVERING_SPAWN:
                logger.info(f"No window matches {criteria}, launching: {exec_command}")
                try:
                    await self.launcher.spawn(exec_command)
                    action = ToggleAction.SPAWNED
                except SpawnFailed as e:
                    succeeded = False
                    error = e

            state = next_state(state, succeeded, self.config)
            history.append(state)

        logger.debug(f"Toggle of {criteria}: {' -> '.join(s.value for s in history)}")

        return ToggleResult(
            state=state,
            action=action if state == ToggleState.SATISFIED else ToggleAction.NONE,
            batch=plan.batch,
            outcomes=outcomes,
            history=tuple(history),
            error=error,
        )
