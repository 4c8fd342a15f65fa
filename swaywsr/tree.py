"""Walk the sway tree: workspaces, then the windows of each workspace."""

from collections.abc import Iterable, Iterator
from logging import Logger

from .config import Configuration
from .models import MissingVisibility, NodeLookupError, NodeType, SceneNode
from .resolver import get_class

__all__ = [
    "get_classes",
    "get_window_nodes",
    "get_workspaces",
    "is_hidden_by_focus_filter",
    "iter_window_nodes",
]


def get_workspaces(tree: SceneNode) -> list[SceneNode]:
    """Return the workspace nodes, in tree order.

    Workspaces sit exactly two levels below the root: root > output > workspace.
    """
    return [container for output in tree.nodes for container in output.nodes if container.type == NodeType.WORKSPACE]


def is_window(node: SceneNode) -> bool:
    """Return True for nodes holding an actual window (not a split container)."""
    return node.window is not None or node.app_id is not None


def iter_window_nodes(nodes: Iterable[SceneNode]) -> Iterator[SceneNode]:
    """Yield the window nodes of `nodes` and of all their descendants.

    The order is a pre-order depth-first walk: a node comes before its children,
    children in their listed order. Containers are walked into but not yielded.
    """
    for node in nodes:
        if is_window(node):
            yield node
        yield from iter_window_nodes(node.nodes)


def get_window_nodes(workspace: SceneNode) -> list[SceneNode]:
    """Return the windows of a workspace: tiled ones first, then floating ones."""
    return [*iter_window_nodes(workspace.nodes), *iter_window_nodes(workspace.floating_nodes)]


def is_hidden_by_focus_filter(node: SceneNode, config: Configuration) -> bool:
    """Tell if `focused_only` excludes this window.

    Only windows currently shown but not focused are excluded.

    Raises:
        MissingVisibility: the node has no visibility flag
    """
    if node.visible is None:
        raise MissingVisibility(node)
    if not config.get_option("focused_only"):
        return False
    return node.visible and not node.focused


def get_classes(workspace: SceneNode, config: Configuration, log: Logger) -> list[str]:
    """Return the display strings of the windows in `workspace`.

    Windows which can't be resolved are logged and skipped.
    """
    classes = []
    for node in get_window_nodes(workspace):
        try:
            if is_hidden_by_focus_filter(node, config):
                continue
            classes.append(get_class(node, config))
        except NodeLookupError as e:
            log.warning("get class error: %s", e)
    return classes
