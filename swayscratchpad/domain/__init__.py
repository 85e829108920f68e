"""Domain models."""

from .commands import Command, parse_invocation
from .window import (
    FALLBACK_ICON_NAME,
    IconSource,
    ListEntry,
    ResolvedEntity,
    WindowNode,
    WindowProperties,
)

__all__ = [
    "Command",
    "parse_invocation",
    "FALLBACK_ICON_NAME",
    "IconSource",
    "ListEntry",
    "ResolvedEntity",
    "WindowNode",
    "WindowProperties",
]
