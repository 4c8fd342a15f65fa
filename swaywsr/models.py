"""Common types from the sway IPC API."""

from dataclasses import dataclass, field
from enum import IntEnum, StrEnum
from typing import Any, Self

PlainTypes = float | str | bool | None | dict[str, "PlainTypes"] | list["PlainTypes"]
JSONResponse = dict[str, PlainTypes] | list[dict[str, PlainTypes]] | PlainTypes


class MessageType(IntEnum):
    """IPC message types (requests and events)."""

    RUN_COMMAND = 0
    SUBSCRIBE = 2
    GET_TREE = 4

    EVENT_WORKSPACE = 0x80000000
    EVENT_WINDOW = 0x80000003
    EVENT_SHUTDOWN = 0x80000006


class NodeType(StrEnum):
    """Scene tree node types."""

    ROOT = "root"
    OUTPUT = "output"
    WORKSPACE = "workspace"
    CON = "con"
    FLOATING_CON = "floating_con"


class WindowChange(StrEnum):
    """Kinds of window events."""

    NEW = "new"
    CLOSE = "close"
    FOCUS = "focus"
    TITLE = "title"
    FULLSCREEN_MODE = "fullscreen_mode"
    MOVE = "move"
    FLOATING = "floating"
    URGENT = "urgent"
    MARK = "mark"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> "WindowChange":
        return cls.UNKNOWN


class WorkspaceChange(StrEnum):
    """Kinds of workspace events."""

    INIT = "init"
    EMPTY = "empty"
    FOCUS = "focus"
    MOVE = "move"
    RENAME = "rename"
    URGENT = "urgent"
    RELOAD = "reload"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> "WorkspaceChange":
        return cls.UNKNOWN


@dataclass(frozen=True)
class WindowProperties:
    """X11 window properties (absent for native wayland clients)."""

    class_: str | None = None
    instance: str | None = None
    title: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Self:
        """Build from the `window_properties` object of a node."""
        return cls(class_=data.get("class"), instance=data.get("instance"), title=data.get("title"))


@dataclass(frozen=True)
class SceneNode:  # pylint: disable=too-many-instance-attributes
    """A node of the sway tree: root, output, workspace, container or window."""

    type: str = NodeType.CON
    id: int | None = None
    name: str | None = None
    app_id: str | None = None
    window_properties: WindowProperties | None = None
    window: int | None = None
    focused: bool = False
    visible: bool | None = None
    nodes: tuple["SceneNode", ...] = field(default_factory=tuple)
    floating_nodes: tuple["SceneNode", ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Self:
        """Recursively build a node (and its children) from a `get_tree` reply."""
        properties = data.get("window_properties")
        return cls(
            type=data.get("type", NodeType.CON),
            id=data.get("id"),
            name=data.get("name"),
            app_id=data.get("app_id"),
            window_properties=WindowProperties.from_json(properties) if properties is not None else None,
            window=data.get("window"),
            focused=bool(data.get("focused", False)),
            visible=data.get("visible"),
            nodes=tuple(cls.from_json(child) for child in data.get("nodes", [])),
            floating_nodes=tuple(cls.from_json(child) for child in data.get("floating_nodes", [])),
        )

    def describe(self) -> str:
        """Short human readable description, used in log messages."""
        return f"<{self.type} id={self.id} name={self.name!r}>"


@dataclass(frozen=True)
class WindowEvent:
    """A `window` event."""

    change: WindowChange
    container: SceneNode | None = None


@dataclass(frozen=True)
class WorkspaceEvent:
    """A `workspace` event."""

    change: WorkspaceChange
    current: SceneNode | None = None
    old: SceneNode | None = None


@dataclass(frozen=True)
class ShutdownEvent:
    """Sway is exiting or restarting."""

    change: str = "exit"


SwayEvent = WindowEvent | WorkspaceEvent | ShutdownEvent


class SwaywsrError(BaseException):
    """Used for errors which already triggered logging."""


class IpcError(Exception):
    """The sway IPC transport failed or answered with garbage."""


class NodeLookupError(Exception):
    """A node lacks information required to process it."""

    message = "Failed to process node"

    def __init__(self, node: SceneNode) -> None:
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"{self.message}: {self.node.describe()}"


class MissingInformation(NodeLookupError):
    """Window exposes neither an app_id nor a window class."""

    message = "Failed to get app_id or window_properties for node"


class MissingVisibility(NodeLookupError):
    """Window has no `visible` flag."""

    message = "Failed to get visibility for node"


class WorkspaceName(NodeLookupError):
    """Workspace has no name."""

    message = "Failed to get name for workspace"


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    USAGE_ERROR = 1
    CONFIG_ERROR = 2
    CONNECTION_ERROR = 3
    FAILURE = 4
