"""
Window tree models

Pydantic models for the GET_TREE reply. Only the fields the scratchpad
toggle reads are declared; everything else in the reply is ignored.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

from pydantic import BaseModel, Field


SCRATCH_OUTPUT_NAME = "__i3"
SCRATCH_WORKSPACE_NAME = "__i3_scratch"


class WindowProperties(BaseModel):
    """X11 window properties (only present for Xwayland / i3 windows)."""

    window_class: Optional[str] = Field(
        None,
        alias="class",
        description="WM_CLASS class part",
    )
    instance: Optional[str] = Field(None, description="WM_CLASS instance part")
    title: Optional[str] = Field(None, description="X11 window title")

    class Config:
        """Pydantic configuration."""
        frozen = True
        extra = "ignore"
        populate_by_name = True


class TreeNode(BaseModel):
    """Single container in the sway tree (root, output, workspace or window).

    Attributes:
        id: Container id (con_id), stable for the node's lifetime
        name: Output/workspace name or window title
        app_id: Wayland application id
        window_properties: X11 properties, None for native Wayland windows
        focused: Whether this exact container holds focus
        nodes: Tiled children in layout order
        floating_nodes: Floating children in stacking order
        focus: Child container ids in focus (visit) order
    """

    id: int = Field(..., description="Sway container id")
    name: Optional[str] = None
    type: Optional[str] = None
    app_id: Optional[str] = None
    window_properties: Optional[WindowProperties] = None
    focused: bool = False
    nodes: list[TreeNode] = Field(default_factory=list)
    floating_nodes: list[TreeNode] = Field(default_factory=list)
    focus: list[int] = Field(default_factory=list)

    class Config:
        """Pydantic configuration."""
        frozen = True
        extra = "ignore"

    @property
    def window_class(self) -> Optional[str]:
        """WM_CLASS class of the window, if it has X11 properties."""
        if self.window_properties is None:
            return None
        return self.window_properties.window_class

    @property
    def floating_ids(self) -> frozenset[int]:
        """Ids of the direct floating children."""
        return frozenset(node.id for node in self.floating_nodes)

    def has_focused_child(self) -> bool:
        """True if a direct tiled or floating child holds focus."""
        return any(node.focused for node in self.nodes) or any(
            node.focused for node in self.floating_nodes
        )

    def find_child(self, name: str) -> Optional[TreeNode]:
        """Return the first direct tiled child with the given name."""
        for node in self.nodes:
            if node.name == name:
                return node
        return None


class SwayTree(BaseModel):
    """Snapshot of the full window tree returned by one GET_TREE call."""

    root: TreeNode

    class Config:
        """Pydantic configuration."""
        frozen = True

    @classmethod
    def from_ipc(cls, data: dict[str, Any]) -> SwayTree:
        """Build a tree from the raw GET_TREE JSON object."""
        return cls(root=TreeNode.model_validate(data))

    @property
    def outputs(self) -> list[TreeNode]:
        """Outputs in manager order, including the synthetic scratch output."""
        return self.root.nodes

    def iter_workspaces(self) -> Iterator[TreeNode]:
        """Yield every workspace of every output, in output order."""
        for output in self.outputs:
            yield from output.nodes
