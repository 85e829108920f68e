"""Dependency injection container."""

from dataclasses import dataclass, field
from typing import Optional

from swayscratchpad.config import AppPaths, AppSettings
from swayscratchpad.managers.scratchpad_list_manager import ScratchpadListManager
from swayscratchpad.services.compositor_service import CompositorService
from swayscratchpad.services.window_resolver import WindowResolver


@dataclass
class AppContainer:
    settings: AppSettings
    paths: AppPaths

    _compositor: Optional[CompositorService] = field(
        default=None, init=False, repr=False
    )
    _desktop_entries: Optional[object] = field(
        default=None, init=False, repr=False
    )
    _resolver: Optional[WindowResolver] = field(
        default=None, init=False, repr=False
    )
    _list_manager: Optional[ScratchpadListManager] = field(
        default=None, init=False, repr=False
    )

    @property
    def compositor(self) -> CompositorService:
        if self._compositor is None:
            self._compositor = CompositorService()
        return self._compositor

    @property
    def desktop_entries(self):
        if self._desktop_entries is None:
            from swayscratchpad.services.desktop_entry_service import DesktopEntryService

            self._desktop_entries = DesktopEntryService()
        return self._desktop_entries

    @property
    def resolver(self) -> WindowResolver:
        if self._resolver is None:
            self._resolver = WindowResolver(self.desktop_entries)
        return self._resolver

    @property
    def list_manager(self) -> ScratchpadListManager:
        if self._list_manager is None:
            self._list_manager = ScratchpadListManager(self.compositor, self.resolver)
        return self._list_manager

    @classmethod
    def create(
        cls,
        settings: Optional[AppSettings] = None,
        paths: Optional[AppPaths] = None,
    ) -> "AppContainer":
        paths = paths or AppPaths.default()
        return cls(
            settings=settings or AppSettings.load(str(paths.config_path)),
            paths=paths,
        )
