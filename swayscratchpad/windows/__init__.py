"""Windows."""

from .scratchpad_window import ScratchpadWindow

__all__ = ["ScratchpadWindow"]
