"""Error taxonomy for the scratchpad popup."""


class ScratchpadError(Exception):
    """Base class for all scratchpad popup errors."""


class EnvironmentFatal(ScratchpadError):
    """The host environment is unusable (no compositor, no scratchpad, no bus)."""


class RoutingError(ScratchpadError):
    """A command could not be routed to the running instance."""


class NotReady(RoutingError):
    def __init__(
        self,
        message: str = "Please start the executable separately before running with args",
    ):
        super().__init__(message)


class MalformedInput(RoutingError):
    pass


class ParseFailure(RoutingError):
    pass


class CommandInProgress(RoutingError):
    def __init__(self, message: str = "Another command is still being processed"):
        super().__init__(message)
