"""Routes commands from separate invocations to the one running popup."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional

from swayscratchpad.core.protocols import HandlerBinder, PopupSurface
from swayscratchpad.domain.commands import Command
from swayscratchpad.errors import CommandInProgress, NotReady, ParseFailure

logger = logging.getLogger("SwayScratchpad.Controller")


class InstancePhase(Enum):
    UNINITIALIZED = auto()
    RUNNING = auto()
    READY = auto()


@dataclass
class InstanceState:
    started: bool = False
    current_handler: Optional[Any] = None


class InstanceController:
    """
    Owns the process-wide instance state.

    Exactly one command handler is armed at a time. While a command is being
    dispatched the handler is detached, so a second delivery cannot re-enter
    the popup before the first one has finished.
    """

    def __init__(self, binder: HandlerBinder):
        self._binder = binder
        self._surface: Optional[PopupSurface] = None
        self._ever_armed = False
        self.state = InstanceState()

    @property
    def phase(self) -> InstancePhase:
        if self.state.started:
            return InstancePhase.READY
        if self._ever_armed:
            return InstancePhase.RUNNING
        return InstancePhase.UNINITIALIZED

    @property
    def is_ready(self) -> bool:
        return self.phase is InstancePhase.READY

    @property
    def surface(self) -> Optional[PopupSurface]:
        return self._surface

    def arm(self) -> None:
        """Arm the command handler if none is armed yet."""
        if self.state.current_handler is None:
            self._rearm()

    def mark_ready(self, surface: PopupSurface) -> bool:
        """
        Record that the UI has been realized.

        Returns:
            True on the first call, False if the UI already existed
        """
        if self.state.started:
            return False
        self._surface = surface
        self.state.started = True
        logger.info("Popup ready")
        return True

    def submit(self, command: Command) -> None:
        """
        Apply one command to the popup.

        Raises:
            NotReady: The popup has not been created yet
            CommandInProgress: No handler is armed
            ParseFailure: The command is Command.NONE
        """
        if not self.state.started or self._surface is None:
            raise NotReady()

        token = self.state.current_handler
        if token is None:
            raise CommandInProgress()
        self.state.current_handler = None
        self._binder.disconnect(token)

        try:
            self._dispatch(command)
        finally:
            self._rearm()

    def _dispatch(self, command: Command) -> None:
        logger.debug(f"Dispatching {command.wire_name}")
        if command is Command.SHOW:
            self._surface.show()
        elif command is Command.HIDE:
            self._surface.hide()
        elif command is Command.TOGGLE:
            self._surface.toggle()
        else:
            raise ParseFailure(f"Failed to parse command: {command.wire_name}")

    def _rearm(self) -> None:
        self.state.current_handler = self._binder.connect()
        self._ever_armed = True
