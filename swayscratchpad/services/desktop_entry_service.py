"""Desktop entry lookups backed by Gio.DesktopAppInfo."""

import logging
from typing import List, Optional

import gi

gi.require_version("Gio", "2.0")
from gi.repository import Gio

logger = logging.getLogger("SwayScratchpad.DesktopEntries")


class DesktopEntry:
    def __init__(self, app_info: Gio.DesktopAppInfo):
        self.app_info = app_info

    @property
    def id(self) -> Optional[str]:
        return self.app_info.get_id()

    def keywords(self) -> List[str]:
        return list(self.app_info.get_keywords() or [])

    def icon(self) -> Optional[Gio.Icon]:
        return self.app_info.get_icon()

    def display_name(self) -> str:
        return self.app_info.get_display_name() or ""

    def __repr__(self) -> str:
        return f"DesktopEntry({self.id!r})"


class DesktopEntryService:
    def lookup_by_id(self, desktop_id: str) -> Optional[DesktopEntry]:
        try:
            app_info = Gio.DesktopAppInfo.new(desktop_id)
        except TypeError:
            # Raised by some PyGObject versions when the constructor returns NULL
            return None
        return DesktopEntry(app_info) if app_info else None

    def lookup_by_exact_name(self, name: str) -> Optional[DesktopEntry]:
        return self.lookup_by_id(f"{name}.desktop")

    def search(self, query: str) -> List[List[str]]:
        return [list(group) for group in Gio.DesktopAppInfo.search(query)]
