"""Maps compositor windows to a display label and icon."""

import logging
import os
from pathlib import Path
from typing import Callable, List, Optional

from swayscratchpad.core.protocols import DesktopEntry, DesktopEntryPort
from swayscratchpad.domain.window import IconSource, ResolvedEntity, WindowNode

logger = logging.getLogger("SwayScratchpad.Resolver")


def read_executable_name(pid: int, proc_root: Path = Path("/proc")) -> Optional[str]:
    """Basename of the executable behind pid, or None if /proc does not tell."""
    path = proc_root / str(pid) / "exe"
    if not path.is_symlink():
        return None
    try:
        target = os.readlink(path)
    except OSError as e:
        logger.debug(f"Cannot read {path}: {e}")
        return None
    return os.path.basename(target) or None


class WindowResolver:
    """
    Resolves each window independently:

    1. candidate names, most authoritative first: app_id, class,
       executable basename, instance
    2. exact desktop id lookup per candidate
    3. index search per candidate, filtered by window role vs. entry keywords
    4. generic placeholder icon when nothing matched
    """

    def __init__(
        self,
        desktop_entries: DesktopEntryPort,
        exe_reader: Callable[[int], Optional[str]] = read_executable_name,
    ):
        self.desktop_entries = desktop_entries
        self.exe_reader = exe_reader

    def resolve(self, node: WindowNode) -> ResolvedEntity:
        entry = self.find_desktop_entry(node)
        label = self.label_for(node)

        if entry is not None:
            name = entry.display_name()
            if name.strip() and name.lower() != label.lower():
                label = f"{name} - {label}"
            if entry.icon() is not None:
                return ResolvedEntity(
                    label=label,
                    icon_source=IconSource.from_desktop_entry(entry),
                    entry=entry,
                )

        return ResolvedEntity(
            label=label, icon_source=IconSource.named_fallback(), entry=entry
        )

    @staticmethod
    def label_for(node: WindowNode) -> str:
        title = node.title
        if title is None:
            return f"Window ID: {node.id}"
        return title

    def candidate_names(self, node: WindowNode) -> Optional[List[Optional[str]]]:
        """Candidate list, or None when the process executable is unknown."""
        if node.pid is None:
            return None
        exe_name = self.exe_reader(node.pid)
        if exe_name is None:
            return None
        return [node.app_id, node.window_class, exe_name, node.instance]

    def find_desktop_entry(self, node: WindowNode) -> Optional[DesktopEntry]:
        candidates = self.candidate_names(node)
        if candidates is None:
            return None
        names = [name for name in candidates if name]

        entry = self._exact_match(names)
        if entry is None:
            entry = self._search_match(names, (node.role or "").lower())
        return entry

    def _exact_match(self, names: List[str]) -> Optional[DesktopEntry]:
        for name in names:
            entry = self.desktop_entries.lookup_by_exact_name(name)
            if entry is not None:
                return entry
        return None

    def _search_match(self, names: List[str], role: str) -> Optional[DesktopEntry]:
        for name in names:
            results = self.desktop_entries.search(name)
            if not results:
                continue
            for desktop_id in results[0]:
                entry = self.desktop_entries.lookup_by_id(desktop_id)
                if entry is None:
                    continue
                if role and role not in ";".join(entry.keywords()).lower():
                    continue
                return entry
        return None
