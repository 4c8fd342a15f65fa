"""Recompute every workspace name and rename the ones which changed."""

from logging import Logger
from typing import Protocol

from .config import Configuration
from .label import compose_name
from .logging_setup import get_logger
from .models import SceneNode, WorkspaceName
from .tree import get_classes, get_workspaces

__all__ = ["Connection", "compute_workspace_name", "prepare_for_quotes", "rename_command", "update_tree"]


class Connection(Protocol):
    """What the updater needs from the IPC side."""

    async def get_tree(self) -> SceneNode: ...

    async def run_command(self, command: str) -> bool: ...


def prepare_for_quotes(text: str) -> str:
    """Escapes backslashes and double quotes in text."""
    return text.replace("\\", "\\\\").replace('"', '\\"')


def rename_command(old: str, new: str) -> str:
    """Return the command renaming workspace `old` to `new`."""
    return f'rename workspace "{prepare_for_quotes(old)}" to "{prepare_for_quotes(new)}"'


def compute_workspace_name(workspace: SceneNode, config: Configuration, log: Logger) -> tuple[str, str]:
    """Return (current name, computed name) for a workspace.

    Raises:
        WorkspaceName: the workspace has no name
    """
    if workspace.name is None:
        raise WorkspaceName(workspace)
    classes = get_classes(workspace, config, log)
    return workspace.name, compose_name(workspace.name, classes, config)


async def update_tree(connection: Connection, config: Configuration, log: Logger | None = None) -> int:
    """Update all workspace names in the tree.

    Transport errors are not handled here, they propagate to the caller.

    Returns:
        The number of rename commands sent
    """
    log = log or get_logger("updater")
    tree = await connection.get_tree()
    renamed = 0
    for workspace in get_workspaces(tree):
        try:
            old, new = compute_workspace_name(workspace, config, log)
        except WorkspaceName as e:
            log.error("%s", e)
            continue
        if old == new:
            continue
        log.debug("Renaming %r to %r", old, new)
        await connection.run_command(rename_command(old, new))
        renamed += 1
    return renamed
