"""Main scratchpad popup application."""

import logging
import sys
from typing import Optional

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

from gi.repository import Adw, Gio, GLib

from swayscratchpad.application.command_channel import (
    ACTION_NAME,
    ActionHandlerBinder,
    command_variant,
    create_command_action,
    payload_of,
)
from swayscratchpad.core.di_container import AppContainer
from swayscratchpad.core.instance_controller import InstanceController
from swayscratchpad.domain.commands import ACTION_FLAGS, Command, parse_invocation
from swayscratchpad.errors import EnvironmentFatal, RoutingError
from swayscratchpad.windows.scratchpad_window import ScratchpadWindow

logger = logging.getLogger("SwayScratchpad.App")

APPLICATION_ID = "org.erikreider.swayscratchpad"

# handle-local-options: -1 continues default processing, >= 0 exits with it
CONTINUE = -1


class ScratchpadApp(Adw.Application):
    """Single-instance popup controlled through --show, --hide and --toggle."""

    def __init__(self, container: AppContainer):
        super().__init__(
            application_id=APPLICATION_ID,
            flags=Gio.ApplicationFlags.FLAGS_NONE,
        )
        self.container = container
        self.exit_status = 0
        self.popup: Optional[ScratchpadWindow] = None

        for flag in ACTION_FLAGS:
            self.add_main_option(
                flag,
                0,
                GLib.OptionFlags.NONE,
                GLib.OptionArg.NONE,
                f"{flag.capitalize()} the scratchpad popup",
                None,
            )
        self.connect("handle-local-options", self._on_handle_local_options)

        self.command_action = create_command_action()
        self.controller = InstanceController(
            ActionHandlerBinder(self.command_action, self._on_command_action)
        )
        self.controller.arm()
        self.add_action(self.command_action)

    def register_instance(self) -> None:
        """
        Register on the session bus so that action activations are routed
        to the primary instance.

        Raises:
            EnvironmentFatal: The application could not be registered
        """
        try:
            registered = self.register(None)
        except GLib.Error as e:
            raise EnvironmentFatal(
                f"Could not register application: {e.message}"
            ) from e
        if not registered:
            raise EnvironmentFatal("Could not register application")
        logger.debug(f"Registered, remote={self.get_is_remote()}")

    def _on_handle_local_options(
        self, app: Gio.Application, options: GLib.VariantDict
    ) -> int:
        try:
            command = parse_invocation(options.end().unpack())
        except RoutingError as e:
            print(f"{e}!...", file=sys.stderr)
            return 1

        if command is None:
            return CONTINUE

        if not (self.get_is_registered() and self.get_is_remote()):
            try:
                self.controller.submit(command)
            except RoutingError as e:
                print(f"{e}!...", file=sys.stderr)
                return 1
            return 0

        self.activate_action(ACTION_NAME, command_variant(command.wire_name))
        return 0

    def _on_command_action(
        self, action: Gio.SimpleAction, parameter: Optional[GLib.Variant]
    ) -> None:
        payload = payload_of(parameter)
        try:
            self.controller.submit(Command.parse(payload))
        except RoutingError as e:
            logger.error(f"{e} (payload: {payload!r})")

    def do_activate(self):
        if self.controller.is_ready:
            logger.debug("Already running, ignoring activation")
            return

        self.popup = ScratchpadWindow(
            application=self,
            settings=self.container.settings,
            list_manager=self.container.list_manager,
            on_fatal=self._on_fatal,
        )
        self.controller.mark_ready(self.popup)

    def _on_fatal(self, error: EnvironmentFatal) -> None:
        logger.critical(f"{error}")
        self.exit_status = 1
        self.quit()
