"""List rows."""

from .scratchpad_item_row import ScratchpadItemRow, ScratchpadPlaceholderRow

__all__ = ["ScratchpadItemRow", "ScratchpadPlaceholderRow"]
