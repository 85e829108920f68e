"""Commands accepted by the running instance."""
from enum import Enum
from typing import Any, Mapping, Optional

from swayscratchpad.errors import MalformedInput


class Command(Enum):
    """A request routed to the popup. NONE marks an unrecognized payload."""

    NONE = "NONE"
    SHOW = "SHOW"
    HIDE = "HIDE"
    TOGGLE = "TOGGLE"

    @property
    def wire_name(self) -> str:
        return self.value

    @property
    def flag(self) -> str:
        return self.value.lower()

    @classmethod
    def parse(cls, value: Optional[str]) -> "Command":
        """
        Decode a wire payload.

        Args:
            value: Upper-case command name as sent over the action channel

        Returns:
            The matching Command, or Command.NONE when unrecognized
        """
        for command in ACTION_COMMANDS:
            if value == command.wire_name:
                return command
        return cls.NONE


ACTION_COMMANDS = (Command.SHOW, Command.HIDE, Command.TOGGLE)
ACTION_FLAGS = tuple(command.flag for command in ACTION_COMMANDS)


def parse_invocation(options: Mapping[str, Any]) -> Optional[Command]:
    """
    Turn the parsed command-line options of one invocation into a Command.

    Args:
        options: Option name to value, as unpacked from the options dict

    Returns:
        None when no action was requested, otherwise the requested Command

    Raises:
        MalformedInput: More than one action, or an unknown option key
    """
    if len(options) > 1:
        raise MalformedInput("Only run with one arg at once")
    if not options:
        return None

    key = next(iter(options))
    if key not in ACTION_FLAGS:
        raise MalformedInput(f'Unknown option "{key}"')
    return Command[key.upper()]
