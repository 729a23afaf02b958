"""Pydantic models for the sway window tree and toggle planning."""

from .tree import SwayTree, TreeNode, WindowProperties, SCRATCH_OUTPUT_NAME, SCRATCH_WORKSPACE_NAME
from .criteria import Criteria, CriteriaField
from .command_plan import CommandBatch, CommandGroup, CommandOutcome
from .toggle_state import ToggleAction, ToggleResult, ToggleState

__all__ = [
    "SwayTree",
    "TreeNode",
    "WindowProperties",
    "SCRATCH_OUTPUT_NAME",
    "SCRATCH_WORKSPACE_NAME",
    "Criteria",
    "CriteriaField",
    "CommandBatch",
    "CommandGroup",
    "CommandOutcome",
    "ToggleAction",
    "ToggleResult",
    "ToggleState",
]
