"""Window nodes and their resolved display form."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

FALLBACK_ICON_NAME = "image-missing"
PLACEHOLDER_ICON_NAME = "application-x-executable-symbolic"
PLACEHOLDER_LABEL = "No windows in scratchpad..."


@dataclass(frozen=True)
class WindowProperties:
    window_class: Optional[str] = None
    instance: Optional[str] = None
    title: Optional[str] = None
    role: Optional[str] = None

    @classmethod
    def from_ipc(cls, data: Mapping[str, Any]) -> "WindowProperties":
        return cls(
            window_class=data.get("class"),
            instance=data.get("instance"),
            title=data.get("title"),
            role=data.get("window_role"),
        )


@dataclass(frozen=True)
class WindowNode:
    """Read-only snapshot of one compositor container."""

    id: int
    pid: Optional[int] = None
    app_id: Optional[str] = None
    window_properties: Optional[WindowProperties] = None
    name: Optional[str] = None

    @classmethod
    def from_ipc(cls, data: Mapping[str, Any]) -> "WindowNode":
        """Build a node from the raw IPC reply of a container."""
        props = data.get("window_properties")
        return cls(
            id=data["id"],
            pid=data.get("pid"),
            app_id=data.get("app_id"),
            window_properties=WindowProperties.from_ipc(props) if props else None,
            name=data.get("name"),
        )

    @property
    def window_class(self) -> Optional[str]:
        return self.window_properties.window_class if self.window_properties else None

    @property
    def instance(self) -> Optional[str]:
        return self.window_properties.instance if self.window_properties else None

    @property
    def role(self) -> Optional[str]:
        return self.window_properties.role if self.window_properties else None

    @property
    def title(self) -> Optional[str]:
        """Window title, falling back to the container name."""
        if self.window_properties and self.window_properties.title is not None:
            return self.window_properties.title
        return self.name


@dataclass(frozen=True)
class IconSource:
    """Either a matched desktop entry or a themed icon name."""

    entry: Any = None
    icon_name: Optional[str] = None

    @classmethod
    def from_desktop_entry(cls, entry: Any) -> "IconSource":
        return cls(entry=entry)

    @classmethod
    def named_fallback(cls, icon_name: str = FALLBACK_ICON_NAME) -> "IconSource":
        return cls(icon_name=icon_name)

    @property
    def is_fallback(self) -> bool:
        return self.entry is None


@dataclass(frozen=True)
class ResolvedEntity:
    label: str
    icon_source: IconSource
    entry: Any = None


@dataclass(frozen=True)
class ListEntry:
    """One row of the popup. The empty-scratchpad placeholder has no node."""

    entity: ResolvedEntity
    node: Optional[WindowNode] = None

    @property
    def is_placeholder(self) -> bool:
        return self.node is None

    @classmethod
    def placeholder(cls) -> "ListEntry":
        return cls(
            entity=ResolvedEntity(
                label=PLACEHOLDER_LABEL,
                icon_source=IconSource.named_fallback(PLACEHOLDER_ICON_NAME),
            )
        )
