"""Locate sway's synthetic scratch output and scratch workspace."""

import logging
from dataclasses import dataclass

from ..core.errors import ScratchContainerNotFound
from ..models.tree import SCRATCH_OUTPUT_NAME, SCRATCH_WORKSPACE_NAME, SwayTree, TreeNode


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScratchContainers:
    """The reserved output and workspace holding every scratchpad window."""
    output: TreeNode
    workspace: TreeNode


def locate_scratch(tree: SwayTree) -> ScratchContainers:
    """Find the __i3 output and its __i3_scratch workspace.

    Raises:
        ScratchContainerNotFound: If either reserved container is missing
    """
    output = tree.root.find_child(SCRATCH_OUTPUT_NAME)
    if output is None:
        raise ScratchContainerNotFound(SCRATCH_OUTPUT_NAME)

    workspace = output.find_child(SCRATCH_WORKSPACE_NAME)
    if workspace is None:
        raise ScratchContainerNotFound(SCRATCH_WORKSPACE_NAME)

    logger.debug(
        f"Scratch workspace {workspace.id}: {len(workspace.focus)} parked, "
        f"{len(workspace.floating_nodes)} hidden"
    )
    return ScratchContainers(output=output, workspace=workspace)
