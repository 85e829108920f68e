"""The single named action through which invocations reach the instance."""

from typing import Callable, Optional

import gi

gi.require_version("Gio", "2.0")
gi.require_version("GLib", "2.0")

from gi.repository import Gio, GLib

ACTION_NAME = "action"
ACTION_FORMAT = "s"


def create_command_action() -> Gio.SimpleAction:
    return Gio.SimpleAction.new(ACTION_NAME, GLib.VariantType.new(ACTION_FORMAT))


def command_variant(wire_name: str) -> GLib.Variant:
    return GLib.Variant(ACTION_FORMAT, wire_name)


def payload_of(parameter: Optional[GLib.Variant]) -> Optional[str]:
    if parameter is None:
        return None
    if not parameter.is_of_type(GLib.VariantType.new(ACTION_FORMAT)):
        return None
    return parameter.get_string()


class ActionHandlerBinder:
    """Connects and disconnects the activate handler of the command action."""

    def __init__(
        self,
        action: Gio.SimpleAction,
        callback: Callable[[Gio.SimpleAction, Optional[GLib.Variant]], None],
    ):
        self.action = action
        self.callback = callback

    def connect(self) -> int:
        return self.action.connect("activate", self.callback)

    def disconnect(self, token: int) -> None:
        self.action.disconnect(token)
