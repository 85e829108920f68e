"""Protocol definitions for the collaborators of the core."""

from typing import Any, List, Optional, Protocol

from swayscratchpad.domain.window import WindowNode


class HandlerBinder(Protocol):
    def connect(self) -> Any: ...

    def disconnect(self, token: Any) -> None: ...


class PopupSurface(Protocol):
    def show(self) -> None: ...

    def hide(self) -> None: ...

    def toggle(self) -> None: ...

    def is_visible(self) -> bool: ...


class CompositorPort(Protocol):
    def get_scratchpad_members(self) -> List[WindowNode]: ...

    def show_member(self, node_id: int) -> None: ...


class DesktopEntry(Protocol):
    def keywords(self) -> List[str]: ...

    def icon(self) -> Any: ...

    def display_name(self) -> str: ...


class DesktopEntryPort(Protocol):
    def lookup_by_exact_name(self, name: str) -> Optional[DesktopEntry]: ...

    def lookup_by_id(self, desktop_id: str) -> Optional[DesktopEntry]: ...

    def search(self, query: str) -> List[List[str]]: ...
