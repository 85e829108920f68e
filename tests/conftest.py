"""Pytest configuration and shared fixtures."""

from pathlib import Path
from types import SimpleNamespace
from typing import Dict, List, Optional

import pytest


class FakeBinder:
    """Hands out integer handler tokens and records connect/disconnect."""

    def __init__(self):
        self._next = 0
        self.connected: List[int] = []
        self.disconnected: List[int] = []

    def connect(self) -> int:
        self._next += 1
        self.connected.append(self._next)
        return self._next

    def disconnect(self, token: int) -> None:
        self.disconnected.append(token)

    @property
    def active(self) -> List[int]:
        return [t for t in self.connected if t not in self.disconnected]


class FakeSurface:
    def __init__(self, visible: bool = False):
        self.visible = visible
        self.calls: List[str] = []

    def show(self) -> None:
        self.calls.append("show")
        self.visible = True

    def hide(self) -> None:
        self.calls.append("hide")
        self.visible = False

    def toggle(self) -> None:
        self.calls.append("toggle")
        self.visible = not self.visible

    def is_visible(self) -> bool:
        return self.visible


class FakeDesktopEntry:
    def __init__(self, desktop_id: str, name: str, keywords=(), icon="icon"):
        self.id = desktop_id
        self._name = name
        self._keywords = list(keywords)
        self._icon = icon

    def keywords(self) -> List[str]:
        return list(self._keywords)

    def icon(self):
        return self._icon

    def display_name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"FakeDesktopEntry({self.id!r})"


class FakeDesktopEntries:
    def __init__(self, entries=(), search_results: Optional[Dict[str, List[List[str]]]] = None):
        self.entries = {entry.id: entry for entry in entries}
        self.search_results = search_results or {}
        self.exact_lookups: List[str] = []
        self.searches: List[str] = []

    def lookup_by_id(self, desktop_id: str) -> Optional[FakeDesktopEntry]:
        return self.entries.get(desktop_id)

    def lookup_by_exact_name(self, name: str) -> Optional[FakeDesktopEntry]:
        self.exact_lookups.append(name)
        return self.lookup_by_id(f"{name}.desktop")

    def search(self, query: str) -> List[List[str]]:
        self.searches.append(query)
        return self.search_results.get(query, [])


class FakeCompositor:
    def __init__(self, members=()):
        self.members = list(members)
        self.shown: List[int] = []
        self.queries = 0

    def get_scratchpad_members(self):
        self.queries += 1
        return list(self.members)

    def show_member(self, node_id: int) -> None:
        self.shown.append(node_id)


class FakeCon:
    """Mimics the parts of i3ipc.Con the compositor service touches."""

    def __init__(self, name=None, ipc_data=None, nodes=(), floating_nodes=()):
        self.name = name
        self.ipc_data = ipc_data or {"name": name}
        self.nodes = list(nodes)
        self.floating_nodes = list(floating_nodes)

    def descendants(self):
        found = []
        for child in self.nodes + self.floating_nodes:
            found.append(child)
            found.extend(child.descendants())
        return found


class FakeConnection:
    def __init__(self, tree: Optional[FakeCon] = None, replies=None, command_error=None):
        self.tree = tree
        self.replies = replies if replies is not None else [SimpleNamespace(success=True, error=None)]
        self.command_error = command_error
        self.commands: List[str] = []

    def get_tree(self):
        if self.tree is None:
            raise ConnectionError("tree unavailable")
        return self.tree

    def command(self, payload: str):
        self.commands.append(payload)
        if self.command_error is not None:
            raise self.command_error
        return self.replies


@pytest.fixture
def binder() -> FakeBinder:
    return FakeBinder()


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture
def controller(binder):
    from swayscratchpad.core.instance_controller import InstanceController

    ctrl = InstanceController(binder)
    ctrl.arm()
    return ctrl


@pytest.fixture
def ready_controller(controller, surface):
    controller.mark_ready(surface)
    return controller


@pytest.fixture
def firefox_entry() -> FakeDesktopEntry:
    return FakeDesktopEntry("firefox.desktop", "Firefox", keywords=["Internet", "WWW", "Browser", "Web"])


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"


@pytest.fixture
def exe_reader():
    """Resolves every pid to the same executable name."""
    def reader(pid: int) -> Optional[str]:
        return "firefox-bin"

    return reader


def require_gtk4():
    """Skip unless GTK 4 and libadwaita typelibs are installed."""
    gi = pytest.importorskip("gi")
    try:
        gi.require_version("Gtk", "4.0")
        gi.require_version("Adw", "1")
    except ValueError as e:
        pytest.skip(str(e))


def require_display():
    """Skip unless GTK 4 can open a display for real widgets."""
    require_gtk4()
    from gi.repository import Gtk

    if not Gtk.init_check():
        pytest.skip("No display available for GTK")
