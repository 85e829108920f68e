"""Rows of the scratchpad popup list."""

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Pango", "1.0")

from gi.repository import Gtk, Pango

from swayscratchpad.config.settings import ListSettings
from swayscratchpad.domain.window import FALLBACK_ICON_NAME, IconSource, ListEntry


def _image_for(icon_source: IconSource, size: int) -> Gtk.Image:
    image = Gtk.Image()
    image.set_pixel_size(size)
    image.set_size_request(size, size)

    gicon = icon_source.entry.icon() if icon_source.entry is not None else None
    if gicon is not None:
        image.set_from_gicon(gicon)
    else:
        image.set_from_icon_name(icon_source.icon_name or FALLBACK_ICON_NAME)
    return image


class ScratchpadItemRow(Gtk.ListBoxRow):
    """Icon plus wrapped label for one scratchpad window."""

    def __init__(self, entry: ListEntry, settings: ListSettings):
        super().__init__()
        self.entry = entry
        self.set_activatable(True)
        self.set_selectable(False)

        container = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=12)
        container.set_margin_top(settings.item_margin)
        container.set_margin_bottom(settings.item_margin)
        container.set_margin_start(settings.item_margin)
        container.set_margin_end(settings.item_margin)
        self.set_child(container)

        container.append(_image_for(entry.entity.icon_source, settings.icon_size))

        label = Gtk.Label(label=entry.entity.label, xalign=0)
        label.set_ellipsize(Pango.EllipsizeMode.END)
        label.set_justify(Gtk.Justification.LEFT)
        label.set_wrap(True)
        label.set_wrap_mode(Pango.WrapMode.WORD_CHAR)
        label.set_lines(3)
        container.append(label)


class ScratchpadPlaceholderRow(Gtk.ListBoxRow):
    """Shown instead of item rows when the scratchpad is empty."""

    def __init__(self, entry: ListEntry, settings: ListSettings, width: int, height: int):
        super().__init__()
        self.entry = entry
        self.set_size_request(width, height)

        box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=12)
        box.set_valign(Gtk.Align.CENTER)
        box.set_opacity(0.5)
        box.append(_image_for(entry.entity.icon_source, settings.placeholder_icon_size))
        box.append(Gtk.Label(label=entry.entity.label))
        self.set_child(box)
