"""
Command plan models

Pydantic models for the command message sent to sway in one RUN_COMMAND
round trip. Each group shares one selector and chains its actions with
commas; groups are chained with semicolons. Sway answers with one result
per group, in submission order.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class CommandType(str, Enum):
    """Sway actions used by the scratchpad toggle."""

    SCRATCHPAD_SHOW = "scratchpad show"
    MOVE_SCRATCHPAD = "move scratchpad"
    RESIZE = "resize"
    MOVE_POSITION_CENTER = "move position center"
    EXEC = "exec"


class CommandGroup(BaseModel):
    """Ordered actions applied to the windows matched by one selector.

    Example:
        >>> group = CommandGroup(selector="con_id=42", actions=["scratchpad show"])
        >>> group.to_sway_command()
        '[con_id=42] scratchpad show'
    """

    selector: str = Field(..., min_length=1, description="Criteria without brackets")
    actions: list[str] = Field(..., min_length=1, description="Actions in execution order")

    class Config:
        """Pydantic model configuration."""
        frozen = True

    @classmethod
    def for_container(cls, con_id: int, *actions: str) -> CommandGroup:
        return cls(selector=f"con_id={con_id}", actions=list(actions))

    def extended(self, *actions: str) -> CommandGroup:
        """Return a copy of this group with extra trailing actions."""
        return CommandGroup(selector=self.selector, actions=[*self.actions, *actions])

    @property
    def fragments(self) -> list[str]:
        """Actions with the selector attached to the first one."""
        first, *rest = self.actions
        return [f"[{self.selector}] {first}", *rest]

    def to_sway_command(self) -> str:
        return ",".join(self.fragments)


class CommandBatch(BaseModel):
    """Ordered command groups sent as a single message.

    Hide groups for conflicting scratchpads come first; the group toggling
    the requested scratchpad is always last.

    Example:
        >>> batch = CommandBatch(groups=[
        ...     CommandGroup.for_container(7, "scratchpad show"),
        ...     CommandGroup(selector="app_id=term", actions=["scratchpad show"]),
        ... ])
        >>> batch.to_command()
        '[con_id=7] scratchpad show;[app_id=term] scratchpad show'
    """

    groups: list[CommandGroup] = Field(..., min_length=1)

    class Config:
        """Pydantic model configuration."""
        frozen = True

    @property
    def target(self) -> CommandGroup:
        return self.groups[-1]

    @property
    def hide_groups(self) -> list[CommandGroup]:
        return self.groups[:-1]

    def to_command(self) -> str:
        return ";".join(group.to_sway_command() for group in self.groups)

    def __len__(self) -> int:
        return len(self.groups)


class CommandOutcome(BaseModel):
    """Result of one command group as reported by sway."""

    success: bool
    error: Optional[str] = None

    class Config:
        """Pydantic model configuration."""
        frozen = True

    @classmethod
    def from_reply(cls, reply: Any) -> CommandOutcome:
        """Normalize an i3ipc CommandReply (or its raw dict)."""
        if isinstance(reply, dict):
            return cls(success=bool(reply.get("success")), error=reply.get("error"))
        error = getattr(reply, "error", None)
        return cls(
            success=bool(getattr(reply, "success", False)),
            error=error if isinstance(error, str) else None,
        )
