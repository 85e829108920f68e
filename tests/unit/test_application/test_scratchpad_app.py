"""Tests for the application's local option handling."""

import pytest

from conftest import require_gtk4


@pytest.fixture
def app(tmp_path):
    require_gtk4()
    from swayscratchpad.application.scratchpad_app import ScratchpadApp
    from swayscratchpad.config import AppPaths
    from swayscratchpad.core.di_container import AppContainer

    container = AppContainer.create(paths=AppPaths(config_path=tmp_path / "settings.yml"))
    return ScratchpadApp(container)


def options_for(*flags):
    from gi.repository import GLib

    options = GLib.VariantDict.new(None)
    for flag in flags:
        options.insert_value(flag, GLib.Variant("b", True))
    return options


def test_no_flags_continue_to_activation(app):
    assert app._on_handle_local_options(app, options_for()) == -1


def test_two_flags_exit_with_error(app, capsys):
    status = app._on_handle_local_options(app, options_for("show", "hide"))

    assert status == 1
    assert "Only run with one arg at once" in capsys.readouterr().err
    assert app.controller.state.started is False


def test_action_on_primary_instance_is_not_ready(app, capsys):
    status = app._on_handle_local_options(app, options_for("toggle"))

    assert status == 1
    assert "start the executable separately" in capsys.readouterr().err


def test_command_action_is_armed_at_construction(app):
    from swayscratchpad.core.instance_controller import InstancePhase

    assert app.controller.phase is InstancePhase.RUNNING
    assert app.lookup_action("action") is app.command_action


def test_unknown_payload_is_logged_and_handler_rearmed(app, caplog):
    from conftest import FakeSurface
    from swayscratchpad.application.command_channel import command_variant

    surface = FakeSurface()
    app.controller.mark_ready(surface)

    app.command_action.activate(command_variant("BOGUS"))
    app.command_action.activate(command_variant("SHOW"))

    assert "Failed to parse command" in caplog.text
    assert "BOGUS" in caplog.text
    assert surface.calls == ["show"]


def test_application_uses_plain_flags(app):
    from gi.repository import Gio

    assert app.get_flags() == Gio.ApplicationFlags.FLAGS_NONE
