"""Dry-run support for the show command.

Shows the command message a toggle would send, and the recovery chain it
would fall back to, without sending anything to sway.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.config import SpawnStrategy, ToggleConfig
from ..models.command_plan import CommandType
from ..services.command_planner import TogglePlan


@dataclass
class DryRunStep:
    """A single step the toggle would take.

    Attributes:
        stage: State machine stage the step belongs to
        command: Command message or command line
        condition: When the step runs
    """

    stage: str
    command: str
    condition: str = ""

    def __str__(self) -> str:
        suffix = f"  ({self.condition})" if self.condition else ""
        return f"  [{self.stage.upper()}] {self.command}{suffix}"

    def to_dict(self) -> Dict[str, Any]:
        result = {"stage": self.stage, "command": self.command}
        if self.condition:
            result["condition"] = self.condition
        return result


@dataclass
class DryRunResult:
    """Everything the toggle would do for one snapshot."""

    steps: List[DryRunStep] = field(default_factory=list)
    showing: List[int] = field(default_factory=list)
    hidden_conflicts: List[int] = field(default_factory=list)
    target_showing_on_focused: bool = False
    warnings: List[str] = field(default_factory=list)

    def format_text(self) -> str:
        lines = ["Dry run: no commands sent", ""]
        lines.append(f"Showing scratchpads: {self.showing or 'none'}")
        lines.append(f"Conflicts to hide: {self.hidden_conflicts or 'none'}")
        lines.append(
            "Target is showing on focused workspace (will hide)"
            if self.target_showing_on_focused
            else "Target is not showing on focused workspace (will show)"
        )
        lines.append("")
        lines.extend(str(step) for step in self.steps)
        for warning in self.warnings:
            lines.append(f"  warning: {warning}")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dry_run": True,
            "showing": self.showing,
            "hidden_conflicts": self.hidden_conflicts,
            "target_showing_on_focused": self.target_showing_on_focused,
            "steps": [step.to_dict() for step in self.steps],
            "warnings": self.warnings,
        }


def describe_plan(
    plan: TogglePlan,
    exec_command: str,
    config: ToggleConfig,
    resize: Optional[str] = None,
) -> DryRunResult:
    """Describe the state machine run for a plan without executing it."""
    result = DryRunResult(
        showing=sorted(plan.showing),
        hidden_conflicts=list(plan.classification.non_target_ids),
        target_showing_on_focused=plan.classification.target_showing_on_focused,
    )

    result.steps.append(DryRunStep("submit", plan.batch.to_command()))

    if config.reparent_on_failure:
        result.steps.append(DryRunStep(
            "reparent",
            f"{plan.criteria.bracketed()} {CommandType.MOVE_SCRATCHPAD.value}",
            "if the toggle is rejected",
        ))

    if config.spawn_strategy == SpawnStrategy.SWAY:
        spawn_command = f"{CommandType.EXEC.value} {exec_command}"
    else:
        spawn_command = f"{config.shell} -c {exec_command!r}"
    result.steps.append(DryRunStep("spawn", spawn_command, "if no window matches"))

    if resize and plan.classification.target_showing_on_focused:
        result.warnings.append("--resize ignored: the toggle hides the target")

    return result
