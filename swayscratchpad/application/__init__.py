"""Application components."""

from .command_channel import ACTION_NAME, ActionHandlerBinder

__all__ = ["ACTION_NAME", "ActionHandlerBinder"]
