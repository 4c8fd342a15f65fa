"""Decide which events require the workspace names to be recomputed."""

from logging import Logger

from .config import Configuration
from .models import ShutdownEvent, SwayEvent, WindowChange, WindowEvent, WorkspaceChange, WorkspaceEvent
from .updater import Connection, update_tree

__all__ = [
    "UPDATE_ON_WINDOW",
    "UPDATE_ON_WORKSPACE",
    "dispatch_event",
    "handle_window_event",
    "handle_workspace_event",
]

UPDATE_ON_WINDOW = frozenset({WindowChange.NEW, WindowChange.CLOSE, WindowChange.MOVE, WindowChange.FOCUS})
UPDATE_ON_WORKSPACE = frozenset({WorkspaceChange.EMPTY, WorkspaceChange.FOCUS})


async def handle_window_event(event: WindowEvent, connection: Connection, config: Configuration, log: Logger | None = None) -> bool:
    """Run a full update on window creation, closing, move or focus.

    Returns:
        True if an update was run
    """
    if event.change not in UPDATE_ON_WINDOW:
        return False
    await update_tree(connection, config, log)
    return True


async def handle_workspace_event(
    event: WorkspaceEvent, connection: Connection, config: Configuration, log: Logger | None = None
) -> bool:
    """Run a full update when a workspace gets empty or focused.

    Returns:
        True if an update was run
    """
    if event.change not in UPDATE_ON_WORKSPACE:
        return False
    await update_tree(connection, config, log)
    return True


async def dispatch_event(event: SwayEvent, connection: Connection, config: Configuration, log: Logger | None = None) -> bool:
    """Route an event to its handler. Returns True if an update was run."""
    if isinstance(event, WindowEvent):
        return await handle_window_event(event, connection, config, log)
    if isinstance(event, WorkspaceEvent):
        return await handle_workspace_event(event, connection, config, log)
    if isinstance(event, ShutdownEvent):
        return False
    msg = f"Unsupported event: {event!r}"
    raise TypeError(msg)
