"""
Error taxonomy for sway-scratch.

Every fatal condition of a toggle invocation is raised as a ScratchError
subclass carrying a structured code, a message, and a remediation hint.
Command rejections reported by sway are not errors here: they drive the
recovery chain of the toggle orchestrator.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """
    Error codes for sway-scratch.

    - 1100-1199: Configuration errors
    - 1400-1499: Sway IPC errors
    - 1500-1599: Tree invariant violations
    - 1600-1699: Process spawn errors
    """

    # Configuration errors (1100-1199)
    CONFIG_LOAD_FAILED = 1100
    CONFIG_INVALID = 1101

    # Sway IPC errors (1400-1499)
    SWAY_NOT_RUNNING = 1400
    SWAY_IPC_FAILED = 1401

    # Tree invariant violations (1500-1599)
    SCRATCH_CONTAINER_NOT_FOUND = 1500
    FOCUSED_WORKSPACE_NOT_FOUND = 1501

    # Process spawn errors (1600-1699)
    SPAWN_FAILED = 1600


class ScratchError(Exception):
    """Base exception for sway-scratch failures."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize scratchpad error.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            suggestion: Suggested recovery action
            context: Additional context for debugging
        """
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to a dictionary for structured output."""
        result = {
            "code": self.code.value,
            "message": self.message
        }

        if self.suggestion:
            result["suggestion"] = self.suggestion

        if self.context:
            result["context"] = self.context

        return result


class ScratchContainerNotFound(ScratchError):
    """The synthetic scratch output or scratch workspace is missing from the tree."""

    def __init__(self, container_name: str):
        super().__init__(
            code=ErrorCode.SCRATCH_CONTAINER_NOT_FOUND,
            message=f"scratch container not found: {container_name}",
            suggestion="The window manager must expose the __i3 output and __i3_scratch workspace",
            context={"container": container_name}
        )


class FocusedWorkspaceNotFound(ScratchError):
    """No workspace in the tree holds focus."""

    def __init__(self, workspace_count: int = 0):
        super().__init__(
            code=ErrorCode.FOCUSED_WORKSPACE_NOT_FOUND,
            message="focused workspace not found",
            suggestion="The tree snapshot is inconsistent; retry the command",
            context={"workspaces_searched": workspace_count}
        )


class SwayConnectionError(ScratchError):
    """Sway IPC communication error."""

    def __init__(self, operation: str, reason: str, not_running: bool = False):
        """
        Initialize Sway IPC error.

        Args:
            operation: IPC operation that failed
            reason: Reason for failure
            not_running: True if the socket could not be reached at all
        """
        super().__init__(
            code=ErrorCode.SWAY_NOT_RUNNING if not_running else ErrorCode.SWAY_IPC_FAILED,
            message=f"Sway IPC {operation} failed: {reason}",
            suggestion="Ensure Sway is running and SWAYSOCK points to its IPC socket",
            context={"operation": operation, "reason": reason}
        )


class SpawnFailed(ScratchError):
    """The fallback command line could not be started."""

    def __init__(self, command_line: str, reason: str):
        super().__init__(
            code=ErrorCode.SPAWN_FAILED,
            message=f"failed to start '{command_line}': {reason}",
            suggestion="Check that the --exec command is installed and on PATH",
            context={"exec": command_line, "reason": reason}
        )


class ConfigError(ScratchError):
    """Configuration file could not be loaded or is invalid."""

    def __init__(self, file_path: str, reason: str, invalid: bool = False):
        super().__init__(
            code=ErrorCode.CONFIG_INVALID if invalid else ErrorCode.CONFIG_LOAD_FAILED,
            message=f"Failed to load configuration from {file_path}: {reason}",
            suggestion="Check file syntax and permissions",
            context={"file_path": file_path, "reason": reason}
        )
