"""
Fallback launchers for scratchpads that do not exist yet.

Launching is fire-and-forget: the only contract is whether the launch
attempt itself was accepted. The new window appears asynchronously and is
not toggled by the invocation that started it.
"""

import logging
import os
import subprocess
from typing import Optional, Protocol

from ..core.config import SpawnStrategy, ToggleConfig
from ..core.errors import SpawnFailed
from ..core.sway_client import SwayClient
from ..models.command_plan import CommandType


logger = logging.getLogger(__name__)


class Launcher(Protocol):
    """Starts the user's --exec command line."""

    async def spawn(self, command_line: str) -> None:
        ...


class ProcessLauncher:
    """Start `<shell> -c <command_line>` as a detached child process."""

    def __init__(self, shell: str = "sh"):
        self.shell = shell
        self.last_pid: Optional[int] = None

    async def spawn(self, command_line: str) -> None:
        """Launch the command in its own session without waiting for it.

        Raises:
            SpawnFailed: If the shell cannot be started
        """
        try:
            process = subprocess.Popen(
                [self.shell, "-c", command_line],
                env=dict(os.environ),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,  # Detach from parent
            )
        except OSError as e:
            logger.error(f"Failed to launch '{command_line}': {e}")
            raise SpawnFailed(command_line, str(e))

        self.last_pid = process.pid
        logger.info(f"Launched '{command_line}' (PID: {process.pid})")


class SwayExecLauncher:
    """Ask sway to run the command with `exec`, so the compositor owns the child."""

    def __init__(self, client: SwayClient):
        self.client = client

    async def spawn(self, command_line: str) -> None:
        """Send `exec <command_line>` over IPC.

        Raises:
            SpawnFailed: If sway rejects the exec command
        """
        outcomes = await self.client.command(f"{CommandType.EXEC.value} {command_line}")
        if not outcomes or not outcomes[0].success:
            reason = outcomes[0].error if outcomes and outcomes[0].error else "rejected by sway"
            raise SpawnFailed(command_line, reason)
        logger.info(f"Launched '{command_line}' via sway exec")


def create_launcher(config: ToggleConfig, client: SwayClient) -> Launcher:
    """Pick the launcher for the configured spawn strategy."""
    if config.spawn_strategy == SpawnStrategy.SWAY:
        return SwayExecLauncher(client)
    return ProcessLauncher(shell=config.shell)
