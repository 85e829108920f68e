"""The scratchpad popup window."""

import logging
from typing import Callable, List, Optional

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Gdk", "4.0")

from gi.repository import Gdk, Gtk

try:
    gi.require_version("Gtk4LayerShell", "1.0")
    from gi.repository import Gtk4LayerShell
except (ValueError, ImportError):
    Gtk4LayerShell = None

from swayscratchpad.config.settings import AppSettings
from swayscratchpad.domain.window import ListEntry
from swayscratchpad.errors import EnvironmentFatal
from swayscratchpad.managers.scratchpad_list_manager import ScratchpadListManager
from swayscratchpad.rows.scratchpad_item_row import (
    ScratchpadItemRow,
    ScratchpadPlaceholderRow,
)

logger = logging.getLogger("SwayScratchpad.Window")

LAYER_NAMESPACE = "erikreider.swayscratchpad"
HIDE_KEYS = (Gdk.KEY_Escape, Gdk.KEY_Caps_Lock)


class ScratchpadWindow:
    """Owns the popup ApplicationWindow and exposes show/hide/toggle."""

    def __init__(
        self,
        application: Optional[Gtk.Application],
        settings: AppSettings,
        list_manager: ScratchpadListManager,
        on_fatal: Optional[Callable[[EnvironmentFatal], None]] = None,
    ):
        self.settings = settings
        self.list_manager = list_manager
        self.on_fatal = on_fatal
        self.entries: List[ListEntry] = []

        window_settings = settings.window
        self.window = Gtk.ApplicationWindow(application=application, title="Sway Scratchpad")
        self.window.set_default_size(window_settings.width, -1)
        self.window.set_size_request(window_settings.width, -1)
        self.window.set_hide_on_close(True)
        self._init_layer_shell()

        container = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=12)
        container.set_margin_top(window_settings.padding)
        container.set_margin_bottom(window_settings.padding)
        container.set_margin_start(window_settings.padding)
        container.set_margin_end(window_settings.padding)
        self.window.set_child(container)

        title = Gtk.Label(label=window_settings.title)
        title.add_css_class("title-2")
        container.append(title)

        scrolled = Gtk.ScrolledWindow()
        scrolled.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)
        scrolled.set_overlay_scrolling(False)
        scrolled.set_min_content_height(window_settings.height)
        scrolled.set_max_content_height(window_settings.width)
        scrolled.set_propagate_natural_height(True)
        container.append(scrolled)

        self.list_box = Gtk.ListBox()
        self.list_box.add_css_class("boxed-list")
        self.list_box.set_activate_on_single_click(True)
        self.list_box.set_selection_mode(Gtk.SelectionMode.SINGLE)
        self.list_box.connect("row-activated", self._on_row_activated)
        scrolled.set_child(self.list_box)

        key_controller = Gtk.EventControllerKey()
        key_controller.connect("key-released", self._on_key_released)
        self.window.add_controller(key_controller)

    def _init_layer_shell(self) -> None:
        if Gtk4LayerShell is None or not Gtk4LayerShell.is_supported():
            logger.info("Layer shell unavailable, using a regular window")
            return

        Gtk4LayerShell.init_for_window(self.window)
        Gtk4LayerShell.set_namespace(self.window, LAYER_NAMESPACE)
        Gtk4LayerShell.auto_exclusive_zone_enable(self.window)
        Gtk4LayerShell.set_keyboard_mode(
            self.window, Gtk4LayerShell.KeyboardMode.EXCLUSIVE
        )
        Gtk4LayerShell.set_layer(self.window, Gtk4LayerShell.Layer.OVERLAY)

    def is_visible(self) -> bool:
        return self.window.get_visible()

    def show(self) -> None:
        """Reload the scratchpad windows and show the popup."""
        if self.is_visible():
            return

        try:
            self.entries = self.list_manager.load()
        except EnvironmentFatal as e:
            if self.on_fatal is None:
                raise
            self.on_fatal(e)
            return

        self._populate()
        self.window.set_visible(True)
        self.list_box.grab_focus()

    def hide(self) -> None:
        self.window.set_visible(False)
        self._clear()

    def toggle(self) -> None:
        if self.is_visible():
            self.hide()
        else:
            self.show()

    def _populate(self) -> None:
        self._clear_rows()
        list_settings = self.settings.list
        for entry in self.entries:
            if entry.is_placeholder:
                row = ScratchpadPlaceholderRow(
                    entry,
                    list_settings,
                    width=self.settings.window.width,
                    height=self.settings.window.height,
                )
            else:
                row = ScratchpadItemRow(entry, list_settings)
            self.list_box.append(row)

    def _clear_rows(self) -> None:
        child = self.list_box.get_first_child()
        while child:
            self.list_box.remove(child)
            child = self.list_box.get_first_child()

    def _clear(self) -> None:
        self._clear_rows()
        self.entries = []

    def _on_row_activated(self, list_box: Gtk.ListBox, row: Gtk.ListBoxRow) -> None:
        index = row.get_index()
        if 0 <= index < len(self.entries):
            entry = self.entries[index]
            if getattr(row, "entry", None) is entry:
                self.list_manager.activate(entry)
            else:
                logger.error(f"Row {index} is not synced with its entry")
        else:
            logger.error(f"Row index {index} is out of range")
        self.hide()

    def _on_key_released(
        self,
        controller: Gtk.EventControllerKey,
        keyval: int,
        keycode: int,
        state: Gdk.ModifierType,
    ) -> None:
        if keyval in HIDE_KEYS:
            self.hide()
