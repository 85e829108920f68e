"""Builds the popup rows from the current scratchpad contents."""

import logging
from typing import List

from swayscratchpad.core.protocols import CompositorPort
from swayscratchpad.domain.window import (
    IconSource,
    ListEntry,
    ResolvedEntity,
    WindowNode,
)
from swayscratchpad.services.window_resolver import WindowResolver

logger = logging.getLogger("SwayScratchpad.ListManager")


class ScratchpadListManager:
    def __init__(self, compositor: CompositorPort, resolver: WindowResolver):
        self.compositor = compositor
        self.resolver = resolver

    def load(self) -> List[ListEntry]:
        """Query the scratchpad and resolve every member. Never empty."""
        nodes = self.compositor.get_scratchpad_members()
        if not nodes:
            return [ListEntry.placeholder()]
        return [ListEntry(entity=self._resolve(node), node=node) for node in nodes]

    def _resolve(self, node: WindowNode) -> ResolvedEntity:
        try:
            return self.resolver.resolve(node)
        except Exception:
            logger.exception(f"Failed to resolve window {node.id}")
            return ResolvedEntity(
                label=WindowResolver.label_for(node),
                icon_source=IconSource.named_fallback(),
            )

    def activate(self, entry: ListEntry) -> None:
        if entry.is_placeholder:
            return
        logger.info(f"Showing scratchpad window {entry.node.id}")
        self.compositor.show_member(entry.node.id)
