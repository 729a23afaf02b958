"""
Scratchpad criteria

A scratchpad is identified by exactly one window attribute: the Wayland
app_id or the X11 window class. The same criteria is used to match tree
nodes and to build the bracketed selector of sway commands.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .tree import TreeNode


# Characters that would end or split a bare criteria value in a command
_NEEDS_QUOTING = re.compile(r'[\s\]\[",;]')


class CriteriaField(str, Enum):
    """Window attribute a scratchpad is selected by."""

    APP_ID = "app_id"
    CLASS = "class"


class Criteria(BaseModel):
    """Tagged choice of a single selector attribute and its value.

    Example:
        >>> criteria = Criteria.for_app_id("dropdown-terminal")
        >>> criteria.selector()
        'app_id=dropdown-terminal'
        >>> criteria.bracketed()
        '[app_id=dropdown-terminal]'
    """

    kind: CriteriaField = Field(..., description="Attribute to match on")
    value: str = Field(..., min_length=1, description="Exact attribute value")

    class Config:
        """Pydantic configuration."""
        frozen = True

    @classmethod
    def for_app_id(cls, app_id: str) -> Criteria:
        return cls(kind=CriteriaField.APP_ID, value=app_id)

    @classmethod
    def for_class(cls, window_class: str) -> Criteria:
        return cls(kind=CriteriaField.CLASS, value=window_class)

    @classmethod
    def from_options(
        cls,
        app_id: Optional[str] = None,
        window_class: Optional[str] = None,
    ) -> Criteria:
        """Build criteria from mutually exclusive CLI options.

        Raises:
            ValueError: If both or neither option is given
        """
        if app_id is not None and window_class is not None:
            raise ValueError("--app-id and --class are mutually exclusive")
        if app_id is not None:
            return cls.for_app_id(app_id)
        if window_class is not None:
            return cls.for_class(window_class)
        raise ValueError("one of --app-id or --class is required")

    def matches(self, node: TreeNode) -> bool:
        """True if the node carries exactly this attribute value."""
        if self.kind == CriteriaField.APP_ID:
            return node.app_id is not None and node.app_id == self.value
        return node.window_class is not None and node.window_class == self.value

    def selector(self) -> str:
        """Criteria fragment in sway's selector grammar, without brackets."""
        value = self.value
        if _NEEDS_QUOTING.search(value):
            escaped = value.replace("\\", "\\\\").replace('"', '\\"')
            value = f'"{escaped}"'
        return f"{self.kind.value}={value}"

    def bracketed(self) -> str:
        return f"[{self.selector()}]"

    def __str__(self) -> str:
        return self.selector()
