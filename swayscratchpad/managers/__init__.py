"""UI managers."""

from .scratchpad_list_manager import ScratchpadListManager

__all__ = ["ScratchpadListManager"]
