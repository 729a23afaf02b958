"""Split the scratchpads showing on the focused workspace into target and conflicts."""

import logging
from dataclasses import dataclass
from typing import AbstractSet

from ..models.criteria import Criteria
from ..models.tree import TreeNode


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Classification:
    """Scratchpads showing on the focused workspace.

    Attributes:
        target_showing_on_focused: The requested scratchpad is visible here
        non_target_ids: Other visible scratchpads, in floating-node order
    """
    target_showing_on_focused: bool = False
    non_target_ids: tuple[int, ...] = ()


def classify_conflicts(
    showing: AbstractSet[int],
    focused_workspace: TreeNode,
    criteria: Criteria,
) -> Classification:
    """Classify every showing scratchpad floating on the focused workspace.

    Scratchpads showing on other workspaces are left out: only the focused
    workspace is cleared before the target is toggled.
    """
    target_showing = False
    non_target: list[int] = []

    for node in focused_workspace.floating_nodes:
        if node.id not in showing:
            continue
        if criteria.matches(node):
            target_showing = True
        else:
            non_target.append(node.id)

    if non_target:
        logger.info(f"Hiding {len(non_target)} scratchpad(s) on focused workspace: {non_target}")

    return Classification(
        target_showing_on_focused=target_showing,
        non_target_ids=tuple(non_target),
    )
