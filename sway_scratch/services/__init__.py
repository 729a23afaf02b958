"""Toggle pipeline: locate, resolve visibility, classify, plan, orchestrate."""

from .command_planner import TogglePlan, build_command_batch, plan_toggle
from .conflict_classifier import Classification, classify_conflicts
from .process_launcher import ProcessLauncher, SwayExecLauncher, create_launcher
from .scratch_locator import ScratchContainers, locate_scratch
from .toggle_orchestrator import ToggleOrchestrator, next_state
from .visibility import find_focused_workspace, resolve_showing

__all__ = [
    "TogglePlan",
    "build_command_batch",
    "plan_toggle",
    "Classification",
    "classify_conflicts",
    "ProcessLauncher",
    "SwayExecLauncher",
    "create_launcher",
    "ScratchContainers",
    "locate_scratch",
    "ToggleOrchestrator",
    "next_state",
    "find_focused_workspace",
    "resolve_showing",
]
