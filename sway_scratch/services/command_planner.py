"""
Command planning for the scratchpad toggle.

Builds the single command message for one toggle: hide the conflicting
scratchpads on the focused workspace, then toggle the target, then resize
and center it when it is about to become visible.

Planning is pure: the same snapshot and options always give the same batch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..core.config import GeometryOrder, ToggleConfig
from ..models.command_plan import CommandBatch, CommandGroup, CommandType
from ..models.criteria import Criteria
from ..models.tree import SwayTree
from .conflict_classifier import Classification, classify_conflicts
from .scratch_locator import locate_scratch
from .visibility import find_focused_workspace, resolve_showing


logger = logging.getLogger(__name__)


def geometry_actions(resize: str, order: GeometryOrder) -> list[str]:
    """Actions that size and place a newly shown scratchpad."""
    resize_action = f"{CommandType.RESIZE.value} {resize}"
    center_action = CommandType.MOVE_POSITION_CENTER.value

    if order == GeometryOrder.CENTER_THEN_RESIZE:
        return [center_action, resize_action]
    if order == GeometryOrder.RESIZE_ONLY:
        return [resize_action]
    return [resize_action, center_action]


def build_command_batch(
    non_target_ids: Sequence[int],
    criteria: Criteria,
    target_showing_on_focused: bool,
    resize: Optional[str] = None,
    geometry_order: GeometryOrder = GeometryOrder.RESIZE_THEN_CENTER,
) -> CommandBatch:
    """Assemble the ordered command groups for one toggle.

    Args:
        non_target_ids: Conflicting scratchpads showing on the focused workspace
        criteria: Selects the requested scratchpad
        target_showing_on_focused: The toggle will hide the target
        resize: sway resize arguments, e.g. "set 90 ppt 90 ppt"
        geometry_order: Order of resize and centering actions

    Returns:
        Batch whose last group toggles the target
    """
    groups = [
        CommandGroup.for_container(con_id, CommandType.SCRATCHPAD_SHOW.value)
        for con_id in non_target_ids
    ]

    target = CommandGroup(
        selector=criteria.selector(),
        actions=[CommandType.SCRATCHPAD_SHOW.value],
    )
    # Resizing a window the toggle is about to hide would fail
    if not target_showing_on_focused and resize:
        target = target.extended(*geometry_actions(resize, geometry_order))

    groups.append(target)
    return CommandBatch(groups=groups)


@dataclass(frozen=True)
class TogglePlan:
    """Everything derived from one tree snapshot for one toggle."""
    criteria: Criteria
    batch: CommandBatch
    showing: frozenset[int] = frozenset()
    classification: Classification = field(default_factory=Classification)


def plan_toggle(
    tree: SwayTree,
    criteria: Criteria,
    resize: Optional[str] = None,
    config: Optional[ToggleConfig] = None,
) -> TogglePlan:
    """Derive the command batch for toggling `criteria` from a tree snapshot.

    Raises:
        ScratchContainerNotFound: If the scratch output or workspace is missing
        FocusedWorkspaceNotFound: If scratchpads are showing but no workspace is focused
    """
    config = config or ToggleConfig()
    scratch = locate_scratch(tree)
    showing = resolve_showing(scratch.workspace)

    classification = Classification()
    if showing:
        focused_workspace = find_focused_workspace(tree)
        classification = classify_conflicts(showing, focused_workspace, criteria)

    batch = build_command_batch(
        classification.non_target_ids,
        criteria,
        classification.target_showing_on_focused,
        resize,
        config.geometry_order,
    )
    logger.debug(f"Planned command: {batch.to_command()}")

    return TogglePlan(
        criteria=criteria,
        batch=batch,
        showing=showing,
        classification=classification,
    )
