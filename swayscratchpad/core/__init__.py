"""Core interfaces and command routing."""

from .instance_controller import InstanceController, InstancePhase, InstanceState
from .protocols import (
    CompositorPort,
    DesktopEntry,
    DesktopEntryPort,
    HandlerBinder,
    PopupSurface,
)

__all__ = [
    "InstanceController",
    "InstancePhase",
    "InstanceState",
    "CompositorPort",
    "DesktopEntry",
    "DesktopEntryPort",
    "HandlerBinder",
    "PopupSurface",
]
