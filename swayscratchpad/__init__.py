"""Sway scratchpad popup."""

__version__ = "0.1.0"
