#!/usr/bin/env python3
"""
Sway scratchpad popup
Minimal entry point - classes are in separate modules.
"""

import ctypes
import logging
import signal
import sys

from swayscratchpad.core.di_container import AppContainer
from swayscratchpad.errors import EnvironmentFatal

logger = logging.getLogger("SwayScratchpad")

LAYER_SHELL_LIBRARY = "libgtk4-layer-shell.so"


def preload_layer_shell() -> bool:
    """
    Link gtk4-layer-shell before GTK pulls in libwayland-client.

    Must run before anything imports gi.repository.Gtk.

    Returns:
        True if the library was loaded
    """
    try:
        ctypes.CDLL(LAYER_SHELL_LIBRARY)
    except OSError as e:
        logger.debug(f"Layer shell not preloaded: {e}")
        return False
    return True


def main():
    """Entry point"""
    container = AppContainer.create()

    logging.basicConfig(
        level=container.settings.logging_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    preload_layer_shell()
    from swayscratchpad.application.scratchpad_app import ScratchpadApp

    def signal_handler(sig, frame):
        print("Shutting down scratchpad popup...")
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)

    app = ScratchpadApp(container)
    try:
        app.register_instance()
    except EnvironmentFatal as e:
        logger.critical(f"{e}")
        return 1

    status = app.run(sys.argv)
    return app.exit_status or status


if __name__ == "__main__":
    sys.exit(main())
