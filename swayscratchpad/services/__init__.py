"""Service layer."""

from .compositor_service import CompositorService
from .window_resolver import WindowResolver, read_executable_name

__all__ = ["CompositorService", "WindowResolver", "read_executable_name"]
