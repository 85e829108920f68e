"""Configuration management."""

from .paths import AppPaths
from .settings import AppSettings, ListSettings, WindowSettings

__all__ = ["AppSettings", "ListSettings", "WindowSettings", "AppPaths"]
