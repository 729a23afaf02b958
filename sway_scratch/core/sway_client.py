"""Sway IPC client for the scratchpad toggle.

Async wrapper around i3ipc.aio exposing the two queries the toggle needs:
- Window tree (GET_TREE), parsed into a SwayTree snapshot
- Sending commands (RUN_COMMAND), one CommandOutcome per command group

The IPC socket is discovered by i3ipc from SWAYSOCK / I3SOCK.
"""

import logging
from typing import List, Optional

import i3ipc.aio

from ..models.command_plan import CommandOutcome
from ..models.tree import SwayTree
from .errors import SwayConnectionError


logger = logging.getLogger(__name__)


class SwayClient:
    """Async wrapper for sway IPC queries.

    Connects lazily on first use; an already connected i3ipc connection can
    be injected instead.
    """

    def __init__(self, connection: Optional[i3ipc.aio.Connection] = None):
        """Initialize sway client.

        Args:
            connection: Existing i3ipc connection (default: connect on demand)
        """
        self._connection = connection

    async def connect(self) -> None:
        """Connect to the sway IPC socket.

        Raises:
            SwayConnectionError: If connection fails
        """
        try:
            logger.debug("Connecting to sway IPC socket")
            self._connection = await i3ipc.aio.Connection(auto_reconnect=False).connect()
            logger.debug("Connected to sway IPC")
        except Exception as e:
            logger.error(f"Failed to connect to sway IPC: {e}")
            raise SwayConnectionError("connect", str(e), not_running=True)

    async def close(self) -> None:
        """Drop the connection."""
        if self._connection:
            # i3ipc has no explicit close; the socket goes with the process
            self._connection = None

    async def get_tree(self) -> SwayTree:
        """Get the window tree (GET_TREE).

        Returns:
            Parsed snapshot of the full tree

        Raises:
            SwayConnectionError: If the query fails
        """
        if not self._connection:
            await self.connect()

        try:
            logger.debug("IPC query: GET_TREE")
            con = await self._connection.get_tree()
        except Exception as e:
            logger.error(f"GET_TREE failed: {e}")
            raise SwayConnectionError("GET_TREE", str(e))

        tree = SwayTree.from_ipc(con.ipc_data)
        logger.debug(f"GET_TREE returned {len(tree.outputs)} output(s)")
        return tree

    async def command(self, cmd: str) -> List[CommandOutcome]:
        """Send a command message to sway (RUN_COMMAND).

        Args:
            cmd: Sway command string, possibly chained with ',' and ';'

        Returns:
            One outcome per command group, in submission order

        Raises:
            SwayConnectionError: If the message cannot be delivered
        """
        if not self._connection:
            await self.connect()

        try:
            logger.debug(f"IPC command: {cmd}")
            replies = await self._connection.command(cmd)
        except Exception as e:
            logger.error(f"RUN_COMMAND failed: {e}")
            raise SwayConnectionError("RUN_COMMAND", str(e))

        outcomes = [CommandOutcome.from_reply(reply) for reply in replies]
        for outcome in outcomes:
            if not outcome.success:
                logger.debug(f"Command rejected: {outcome.error}")
        return outcomes
