"""Tests for the command action channel."""

import pytest


def test_action_takes_string_parameter():
    pytest.importorskip("gi.repository.Gio")
    from swayscratchpad.application.command_channel import ACTION_NAME, create_command_action

    action = create_command_action()

    assert action.get_name() == ACTION_NAME
    assert action.get_parameter_type().dup_string() == "s"


def test_payload_round_trips_through_variant():
    pytest.importorskip("gi.repository.GLib")
    from swayscratchpad.application.command_channel import command_variant, payload_of

    assert payload_of(command_variant("TOGGLE")) == "TOGGLE"


def test_payload_of_non_string_variant_is_none():
    pytest.importorskip("gi.repository.GLib")
    from gi.repository import GLib

    from swayscratchpad.application.command_channel import payload_of

    assert payload_of(None) is None
    assert payload_of(GLib.Variant("i", 3)) is None


def test_binder_rearms_the_activate_handler():
    pytest.importorskip("gi.repository.Gio")
    from conftest import FakeSurface
    from swayscratchpad.application.command_channel import (
        ActionHandlerBinder,
        command_variant,
        create_command_action,
        payload_of,
    )
    from swayscratchpad.core.instance_controller import InstanceController
    from swayscratchpad.domain.commands import Command

    action = create_command_action()
    received = []

    def on_activate(action, parameter):
        received.append(payload_of(parameter))
        controller.submit(Command.parse(payload_of(parameter)))

    controller = InstanceController(ActionHandlerBinder(action, on_activate))
    controller.arm()
    surface = FakeSurface()
    controller.mark_ready(surface)

    action.activate(command_variant("SHOW"))
    action.activate(command_variant("HIDE"))

    assert received == ["SHOW", "HIDE"]
    assert surface.calls == ["show", "hide"]
