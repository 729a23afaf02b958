"""
Scratchpad visibility

The scratch workspace's focus list holds the id of every scratchpad window,
hidden or shown, while its floating_nodes only hold the hidden ones. The
difference is the set of scratchpads currently showing on some workspace.
"""

import logging

from ..core.errors import FocusedWorkspaceNotFound
from ..models.tree import SwayTree, TreeNode


logger = logging.getLogger(__name__)


def resolve_showing(scratch_workspace: TreeNode) -> frozenset[int]:
    """Return ids of scratchpads that are showing (parked but not hidden)."""
    hidden = scratch_workspace.floating_ids
    showing = frozenset(con_id for con_id in scratch_workspace.focus if con_id not in hidden)
    logger.debug(f"Showing scratchpads: {sorted(showing)}")
    return showing


def is_focused_workspace(workspace: TreeNode) -> bool:
    """A workspace is focused if it, or one of its direct children, holds focus."""
    return workspace.focused or workspace.has_focused_child()


def find_focused_workspace(tree: SwayTree) -> TreeNode:
    """Return the first focused workspace across all outputs.

    Raises:
        FocusedWorkspaceNotFound: If no workspace holds focus
    """
    searched = 0
    for workspace in tree.iter_workspaces():
        searched += 1
        if is_focused_workspace(workspace):
            logger.debug(f"Focused workspace: {workspace.name} ({workspace.id})")
            return workspace
    raise FocusedWorkspaceNotFound(searched)
