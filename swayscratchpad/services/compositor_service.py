"""Scratchpad queries and commands over the sway/i3 IPC socket."""

import logging
from typing import Callable, List, Optional

import i3ipc

from swayscratchpad.domain.window import WindowNode
from swayscratchpad.errors import EnvironmentFatal

logger = logging.getLogger("SwayScratchpad.Compositor")

SCRATCHPAD_NAME = "__i3_scratch"


class CompositorService:
    """Opens a fresh IPC connection for every request."""

    def __init__(
        self,
        connection_factory: Optional[Callable[[], i3ipc.Connection]] = None,
    ):
        self._connection_factory = connection_factory or i3ipc.Connection

    def _connect(self) -> i3ipc.Connection:
        try:
            return self._connection_factory()
        except Exception as e:
            raise EnvironmentFatal(f"Could not connect to the compositor: {e}") from e

    def get_scratchpad_members(self) -> List[WindowNode]:
        """
        Fetch the floating windows parked in the scratchpad.

        Raises:
            EnvironmentFatal: No IPC connection, or no scratchpad container
        """
        conn = self._connect()
        try:
            tree = conn.get_tree()
        except Exception as e:
            raise EnvironmentFatal(f"get_tree() failed: {e}") from e

        scratchpad = next(
            (con for con in tree.descendants() if con.name == SCRATCHPAD_NAME),
            None,
        )
        if scratchpad is None:
            raise EnvironmentFatal("Could not find the scratchpad node")

        members = [
            WindowNode.from_ipc(con.ipc_data) for con in scratchpad.floating_nodes
        ]
        logger.debug(f"Found {len(members)} scratchpad windows")
        return members

    def show_member(self, node_id: int) -> None:
        command = f"[con_id={node_id}] scratchpad show"
        try:
            replies = self._connect().command(command)
        except Exception as e:
            logger.error(f"IPC error running '{command}': {e}")
            return

        for reply in replies:
            if not reply.success:
                logger.error(f"Compositor rejected '{command}': {reply.error}")
